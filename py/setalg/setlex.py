# © 2021 Intel Corporation
# SPDX-License-Identifier: MPL-2.0

# Lexer for the demo input: one line of integers per set

import re

import setalg.globals
from .logging import DumpableSite
from .messages import ESYNTAX, ERANGE

tokens = ('ICONST', 'NEWLINE')

# Completely ignored characters
t_ignore = ' \t\x0c'

# Each newline ends a set, so empty lines are empty sets
def t_NEWLINE(t):
    r'\r?\n'
    t.lexer.lineno += 1
    return t

def syntax_error(t, tokenstr, reason):
    raise ESYNTAX(DumpableSite(t.lexer.file_info, t.lexpos), tokenstr, reason)

def rangecheck_int(t, value):
    bits = setalg.globals.int_bits
    if bits and not -(1 << (bits - 1)) <= value < 1 << (bits - 1):
        raise ERANGE(DumpableSite(t.lexer.file_info, t.lexpos), t.value, bits)
    return value

int_re = re.compile(r'[-+]?[0-9]+')

# Anything up to the next blank must be an integer literal
def t_ICONST(t):
    r'[^ \t\x0c\r\n]+'
    if not int_re.fullmatch(t.value):
        syntax_error(t, t.value, "expected an integer")
    sign = t.value[0] if t.value[0] in '+-' else ''
    digits = t.value[len(sign):].lstrip('0') or '0'
    bits = setalg.globals.int_bits
    # log10(2) < 0.302, so longer literals cannot fit in bits
    if bits and len(digits) > bits * 302 // 1000 + 1:
        raise ERANGE(DumpableSite(t.lexer.file_info, t.lexpos), t.value, bits)
    try:
        value = int(sign + digits, 10)
    except ValueError:
        # exceeds sys.get_int_max_str_digits()
        syntax_error(t, t.value, "too large integer constant")
    t.value = rangecheck_int(t, value)
    return t

def t_error(t):
    syntax_error(t, t.value[0], "illegal character")
