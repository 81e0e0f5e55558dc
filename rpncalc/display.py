# coding= utf-8
"""
Renders a :class:`rpncalc.State` as two columns: the stack on the left (top
of stack first) and the variable bindings on the right.
"""
from itertools import zip_longest

from rpncalc.stack import format_cell, format_number

COLUMN_WIDTH = 24
EMPTY = '(empty)'


def stack_lines(stack):
    lines = [format_cell(cell) for cell in reversed(list(stack))]
    return lines or [EMPTY]


def variable_lines(variables):
    lines = ['%s = %s' % (name, format_number(value))
             for name, value in variables.items()]
    return lines or [EMPTY]


def render(state, width=COLUMN_WIDTH):
    rows = [('stack', 'variables'), ('-' * width, '-' * width)]
    rows.extend(zip_longest(stack_lines(state.stack),
                            variable_lines(state.variables), fillvalue=''))
    return '\n'.join(('%-*s | %s' % (width, left, right)).rstrip()
                     for left, right in rows)
