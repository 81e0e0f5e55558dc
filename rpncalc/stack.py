# coding= utf-8
"""
The value stack and the cells that live on it.

A cell is a (kind, value) pair: either a resolved NUMBER holding a float, or
a VARIABLE holding a name that is looked up only when something consumes the
cell. Cells are tuples, so they cannot change kind once made.
"""
from collections import namedtuple

from rpncalc.errors import StackUnderflow

NUMBER = 'NUMBER'
VARIABLE = 'VARIABLE'

Cell = namedtuple('Cell', ['kind', 'value'])


def number(value):
    return Cell(NUMBER, float(value))


def variable(name):
    return Cell(VARIABLE, name)


def format_number(value):
    return repr(float(value))


def format_cell(cell):
    """ Numbers show their value, variables their name (never the value). """
    if cell.kind == NUMBER:
        return format_number(cell.value)
    return cell.value


class ValueStack(object):
    """ Last in, first out. Iterates from the bottom up. """
    def __init__(self, cells=()):
        self._cells = list(cells)

    def push(self, cell):
        self._cells.append(cell)

    def push_all(self, cells):
        self._cells.extend(cells)

    def pop(self):
        if self._cells:
            return self._cells.pop()
        raise StackUnderflow(1, 0)

    def peek_len(self):
        return len(self._cells)

    def top(self):
        if self._cells:
            return self._cells[-1]
        raise StackUnderflow(1, 0)

    def clear(self):
        del self._cells[:]

    def __len__(self):
        return len(self._cells)

    def __iter__(self):
        return iter(self._cells)

    def __eq__(self, other):
        if isinstance(other, ValueStack):
            return self._cells == other._cells
        return self._cells == list(other)

    def __ne__(self, other):
        return not self == other

    def __repr__(self):
        return 'ValueStack(%r)' % self._cells
