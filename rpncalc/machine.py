# coding= utf-8
import functools
import inspect
import logging
import math
import operator

from rpncalc.environment import Environment
from rpncalc.errors import (CalcError, InvalidOperands, LexError,
                            StackUnderflow, UnassignedVariable,
                            UnknownKeyword, UnknownOperator)
from rpncalc import lexer
from rpncalc.parser import Parser
from rpncalc.stack import (NUMBER, VARIABLE, ValueStack, format_cell,
                           number, variable)

logger = logging.getLogger(__name__)

ERROR_FORMAT = '? %s'


def _word(name):
    """
    Creates a decorator that adds a .word member to its given func, which
    the :class:`Machine`'s __init__ method looks for when building its
    keyword table.
    """
    def decorator(func):
        func.word = name
        return func
    return decorator


def divide(a, b):
    """
    IEEE-754 division: dividing by zero gives a signed infinity, and 0/0
    gives nan, where plain Python would raise ZeroDivisionError.
    """
    try:
        return a / b
    except ZeroDivisionError:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)


class State(object):
    """ Everything a session remembers between lines: a stack and variables. """
    def __init__(self, stack=None, variables=None):
        self.stack = stack if stack is not None else ValueStack()
        self.variables = variables if variables is not None else Environment()

    def __repr__(self):
        return 'State(stack=%r, variables=%r)' % (self.stack, self.variables)


class Machine(object):
    """
    Executes lines of RPN against a :class:`State`.

    The machine itself holds no session data; it is handed a state for the
    duration of each :meth:`process_line` call. Anything the user should see
    (printed values and error reports) ends up in :attr:`messages`, in the
    order it was produced.
    """
    def __init__(self):
        self.state = None
        self.running = True
        self.messages = []
        self.keywords = {}
        self.operators = {}
        self.folds = {}

        # Add decorated member words
        for name, method in inspect.getmembers(self, inspect.ismethod):
            if hasattr(method, 'word'):
                self.keywords[method.word] = method

        self.add_operator('+', operator.add)
        self.add_operator('-', operator.sub)
        self.add_operator('*', operator.mul)
        self.add_operator('/', divide)

        self.add_fold('sum', operator.add, 0.0)
        self.add_fold('prod', operator.mul, 1.0)

    def process_line(self, line, state):
        """
        Runs every token of `line` against `state`, left to right.

        The first error stops the line: it is reported in :attr:`messages`
        and the remaining tokens are skipped, but whatever the earlier tokens
        did to the state stays done.

        Returns the (mutated) state and whether the session should keep
        running, which is False only after ``exit``.
        """
        self.state = state
        self.running = True
        self.messages = []
        try:
            for word in Parser(line).generate():
                self.interpret_one(lexer.classify(word), word)
                if not self.running:
                    break
        except CalcError as e:
            logger.debug('abandoning line %r: %s', line, e)
            self._emit(ERROR_FORMAT % e)
        finally:
            self.state = None

        return state, self.running

    def interpret_one(self, kind, token):
        logger.debug('%s %r', kind, token)
        if kind == lexer.NUMBER:
            self._push(number(lexer.parse_number(token)))
        elif kind == lexer.IDENTIFIER:
            self._push(variable(token))
        elif kind == lexer.ASSIGNMENT:
            self._assign()
        elif kind == lexer.BINARY_OPERATOR:
            if token not in self.operators:
                raise UnknownOperator('unknown operator: %s' % token)
            self.operators[token]()
        elif kind == lexer.KEYWORD:
            if token not in self.keywords:
                raise UnknownKeyword('unknown keyword: %s' % token)
            self.keywords[token]()
        elif kind == lexer.FOLD:
            if token not in self.folds:
                raise UnknownOperator('unknown fold: %s' % token)
            self.folds[token]()
        elif kind == lexer.INVALID:
            raise LexError(token)
        else:
            raise CalcError('unknown token type: %s' % kind)

    def _emit(self, message):
        self.messages.append(message)

    def _push(self, cell):
        self.state.stack.push(cell)

    def _push_all(self, cells):
        self.state.stack.push_all(cells)

    def _pop(self):
        return self.state.stack.pop()

    def _need(self, count, what):
        found = self.state.stack.peek_len()
        if found < count:
            raise StackUnderflow(count, found, what)

    def _is_resolvable(self, cell):
        return cell.kind == NUMBER or cell.value in self.state.variables

    def _resolve(self, cell):
        if cell.kind == NUMBER:
            return cell.value
        if cell.value not in self.state.variables:
            raise UnassignedVariable(cell.value)
        return self.state.variables.get(cell.value)

    def _assign(self):
        self._need(2, 'assignment')
        target = self._pop()
        value = self._pop()

        if target.kind != VARIABLE:
            self._push_all((value, target))
            raise InvalidOperands('cannot assign to %s' % format_cell(target))
        if not self._is_resolvable(value):
            self._push_all((value, target))
            raise InvalidOperands('cannot assign unassigned variable %s to %s'
                                  % (value.value, target.value))

        self.state.variables.set(target.value, self._resolve(value))

    def add_operator(self, symbol, func):
        """
        Turns a two-argument function into a binary operator.

        From the stack [a, b] the call is func(a, b), and the result goes
        back on the stack as a number. If either operand is a variable with
        no value yet, both are put back as they were so that the line can be
        tried again once the variable has been assigned.
        """
        def binary_operator():
            self._need(2, symbol)
            right = self._pop()
            left = self._pop()
            try:
                left_value = self._resolve(left)
                right_value = self._resolve(right)
            except UnassignedVariable:
                self._push_all((left, right))
                raise
            self._push(number(func(left_value, right_value)))
        self.operators[symbol] = binary_operator

    def add_fold(self, name, func, initial):
        """
        Turns a two-argument function into a fold over the whole stack,
        bottom to top, starting from `initial`. The stack is replaced by the
        single result; it is left alone if any cell cannot be resolved.
        """
        def fold():
            values = [self._resolve(cell) for cell in self.state.stack]
            self.state.stack.clear()
            self._push(number(functools.reduce(func, values, initial)))
        self.folds[name] = fold

    @_word('clear')
    def _clear_stack(self):
        self.state.stack.clear()

    @_word('reset')
    def _reset(self):
        self.state.stack.clear()
        self.state.variables.clear()

    @_word('exit')
    def _exit(self):
        self.running = False

    @_word('print')
    def _print_and_pop(self):
        self._need(1, 'print')
        self._emit(format_cell(self._pop()))

    @_word('drop')
    def _drop_top_of_stack(self):
        self._need(1, 'drop')
        self._pop()

    @_word('dup')
    def _dupe_top_of_stack(self):
        self._need(1, 'dup')
        cell = self._pop()
        self._push_all((cell, cell))

    @_word('swap')
    def _swap_top_of_stack(self):
        self._need(2, 'swap')
        last = self._pop()
        previous = self._pop()
        self._push_all((last, previous))
