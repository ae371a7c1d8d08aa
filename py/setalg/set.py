# © 2024 Intel Corporation
# SPDX-License-Identifier: MPL-2.0

from itertools import chain

from .messages import EARG, ENOTFOUND

__all__ = (
    'Set',
    'union',
    'intersection',
    'difference',
    'subset',
)

def check_operands(a, b):
    for (name, s) in (('a', a), ('b', b)):
        if s is None:
            raise EARG(None, name, 'missing set operand')
        if not isinstance(s, Set):
            raise EARG(None, name,
                       'expected a Set, got %s' % (type(s).__name__,))

class Set:
    '''Mathematical set where iteration preserves insertion order

    Members are kept as keys of a dict, so elements must be hashable.
    None and unhashable values are never members: adding them raises
    EARG, and removing an unhashable value raises ENOTFOUND.

    The binary operations are static methods that always return a new
    Set, with storage of its own.
    '''
    __slots__ = ['_d']
    def __init__(self, els=()):
        self._d = {}
        for e in els:
            self.add(e)

    @classmethod
    def _of(cls, els):
        # els must already be unique and not None
        s = cls()
        s._d = dict.fromkeys(els)
        return s

    def __repr__(self):
        if self._d:
            return f"Set([{', '.join(map(repr, self._d))}])"
        else:
            return 'Set()'

    def __str__(self):
        return self.__repr__()

    def __iter__(self):
        return iter(self._d)

    def __contains__(self, x):
        return x in self._d

    def __len__(self):
        return len(self._d)

    @property
    def count(self):
        return len(self._d)

    def __eq__(self, other):
        if isinstance(other, Set):
            return self._d.keys() == other._d.keys()
        return self._d.keys() == other

    __hash__ = None

    def add(self, item):
        if item is None:
            raise EARG(None, 'item', 'None cannot be a member')
        try:
            self._d.setdefault(item, None)
        except TypeError:
            raise EARG(None, 'item', 'unhashable %s cannot be a member'
                       % (type(item).__name__,)) from None

    def remove(self, item):
        if item is None:
            raise EARG(None, 'item', 'None cannot be a member')
        try:
            del self._d[item]
        except (KeyError, TypeError):
            # an unhashable item is never a member
            raise ENOTFOUND(None, item) from None

    @staticmethod
    def union(a, b):
        '''Elements of a or b, in order of first appearance in a then b'''
        check_operands(a, b)
        return Set._of(chain(a._d, b._d))

    @staticmethod
    def intersection(a, b):
        '''Elements of both a and b. The smaller set is scanned and
        looked up in the larger one; b is scanned on a tie.'''
        check_operands(a, b)
        (small, large) = (a, b) if len(a) < len(b) else (b, a)
        return Set._of(x for x in small._d if x in large._d)

    @staticmethod
    def difference(a, b):
        '''Symmetric difference: elements of exactly one of a and b.'''
        check_operands(a, b)
        return Set._of(chain((x for x in a._d if x not in b._d),
                             (x for x in b._d if x not in a._d)))

    @staticmethod
    def subset(a, b):
        '''True if every element of a is in b'''
        check_operands(a, b)
        return all(x in b._d for x in a._d)

union = Set.union
intersection = Set.intersection
difference = Set.difference
subset = Set.subset
