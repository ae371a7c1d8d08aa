# © 2021 Intel Corporation
# SPDX-License-Identifier: MPL-2.0

from .logging import SetError, SetWarning

def truncate(s, maxlen):
    "Make sure that s is not longer than maxlen"
    if len(s) > maxlen:
        return s[:maxlen-3] + '...'
    return s

class EARG(SetError):
    """
    A set operation was given an invalid argument: `None` was passed
    as an element to `add` or `remove`, an unhashable element was
    passed to `add`, or an operand of `union`, `intersection`,
    `difference` or `subset` was missing or not a `Set`.
    """
    fmt = "invalid argument '%s': %s"

class ENOTFOUND(SetError):
    """
    `remove` was called with an element that is not a member of the set.
    """
    fmt = "element %s not found in set"
    def __init__(self, site, item):
        SetError.__init__(self, site, truncate(repr(item), 40))
        self.item = item

class ESYNTAX(SetError):
    """
    The input is malformed. Each input line must consist of integers
    separated by whitespace.
    """
    fmt = "syntax error%s%s"
    def __init__(self, site, tokenstr, reason):
        if tokenstr:
            assert isinstance(tokenstr, str)
            where = " at '%s'" % truncate(tokenstr, 20)
        else:
            where = ""
        if reason:
            reason = ": " + reason
        else:
            reason = ""
        SetError.__init__(self, site, where, reason)

class ERANGE(SetError):
    """
    An integer in the input does not fit in the configured integer
    width. The width is 32 bits unless changed with `--int-bits`.
    """
    fmt = "integer %s out of range for %d-bit signed integers"
    def __init__(self, site, tokenstr, bits):
        SetError.__init__(self, site, truncate(tokenstr, 20), bits)

class EMISSING(SetError):
    """
    The input ended before all three sets were read.
    """
    fmt = "expected %d input lines, found %d"

class EOPEN(SetError):
    """
    The input could not be read, or is not valid UTF-8 text.
    """
    fmt = "cannot read input: %s"

class EWRITE(SetError):
    """
    The output file given with `-o` could not be created.
    """
    fmt = "cannot write output: %s"

class WDUPELEM(SetWarning):
    """
    An input line lists the same element more than once. Only one copy
    is kept in the set.
    (This warning is disabled by default.)
    """
    fmt = "duplicate element %d in set %d ignored"

class WEXTRA(SetWarning):
    """
    The input continues after the third line. The remaining lines
    are ignored.
    """
    fmt = "ignoring input after line %d"

warnings = {name: cls for (name, cls) in globals().items()
            if isinstance(cls, type) and issubclass(cls, SetWarning)
            and cls is not SetWarning}
