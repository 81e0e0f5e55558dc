# coding= utf-8
"""
An interactive Reverse Polish Notation calculator.

A :class:`Machine` executes one line at a time against a :class:`State`,
which holds the value stack and the variables:

    >>> import rpncalc
    >>> m, s = rpncalc.Machine(), rpncalc.State()
    >>> s, running = m.process_line("5 x = x x * print", s)
    >>> m.messages
    ['25.0']

Numbers and variable names are pushed onto the stack; operators, keywords
(clear, reset, exit, print, dup, drop, swap) and folds (sum, prod) consume
it. The first error on a line is reported in ``m.messages`` and the rest of
the line is skipped; the state keeps whatever happened before the error.

The machine does no terminal I/O of its own: see :mod:`rpncalc_repl` for the
interactive session and :mod:`rpncalc.display` for rendering a state.
"""
from rpncalc.errors import *
from rpncalc.lexer import classify
from rpncalc.machine import Machine, State
from rpncalc.parser import Parser
from rpncalc.stack import Cell, ValueStack, number, variable
from rpncalc.environment import Environment
