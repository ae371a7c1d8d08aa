# © 2021 Intel Corporation
# SPDX-License-Identifier: MPL-2.0

# Build the demo sets from input text

import io

from ply import lex

import setalg.setlex
from .logging import report, FileInfo, DumpableSite, SimpleSite
from .messages import EMISSING, WDUPELEM, WEXTRA
from .set import Set

__all__ = (
    'get_lexer',
    'tokenize_lines',
    'read_sets',
)

lexer = None

def get_lexer():
    global lexer
    if lexer is None:
        lexer = lex.lex(module = setalg.setlex, optimize = 0)
    return lexer

def tokenize_lines(text, filename):
    '''Split text into lines of integer tokens. Return a pair
    (file_info, lines), where lines has one list of LexToken per
    line. A newline at the end of text does not start a new line.'''
    lexer = get_lexer()
    # StringIO splits on '\n' only, like the lexer does
    file_info = FileInfo(filename, content_lines=io.StringIO(text))
    lexer.file_info = file_info
    lexer.lineno = 1
    lexer.input(text)
    lines = [[]]
    for tok in lexer:
        if tok.type == 'NEWLINE':
            lines.append([])
        else:
            lines[-1].append(tok)
    if not text or text.endswith('\n'):
        lines.pop()
    return (file_info, lines)

def read_sets(text, filename, count=3):
    '''Parse count sets of integers from text, one set per line. Lines
    after the last set are ignored with a warning.'''
    (file_info, lines) = tokenize_lines(text, filename)
    if len(lines) < count:
        raise EMISSING(SimpleSite(filename), count, len(lines))
    extra = [toks for toks in lines[count:] if toks]
    if extra:
        report(WEXTRA(DumpableSite(file_info, extra[0][0].lexpos), count))
    sets = []
    for (index, toks) in enumerate(lines[:count], 1):
        s = Set()
        for tok in toks:
            if tok.value in s:
                report(WDUPELEM(DumpableSite(file_info, tok.lexpos),
                                tok.value, index))
            s.add(tok.value)
        sets.append(s)
    return sets
