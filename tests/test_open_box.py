# coding= utf-8
"""
Tests the rpncalc.Machine as an open box, i.e., with some knowledge of its
internals and the ability to dig into the state it leaves behind.

See :file:`test_black_box.py` for the more opaque tests.
"""
import math

import pytest

import rpncalc
from rpncalc import lexer
from rpncalc.stack import number, variable


def run(*lines):
    """ Runs each line in turn on a fresh machine and state. """
    m = rpncalc.Machine()
    state = rpncalc.State()
    running = True
    for line in lines:
        state, running = m.process_line(line, state)
    return m, state, running


def values(state):
    return [cell.value for cell in state.stack]


class TestOpenBoxCalc():
    def test_blank_line(self):
        m, state, running = run("\n")

        assert running
        assert m.messages == []
        assert state.stack == []

    def test_number_to_stack(self):
        m, state, running = run("42")

        assert state.stack == [number(42)]

    def test_negative_number(self):
        m, state, running = run('-12')

        assert state.stack == [number(-12)]

    def test_two_numbers(self):
        m, state, running = run('1 2')

        assert values(state) == [1.0, 2.0]

    def test_identifier_pushed_unresolved(self):
        m, state, running = run('x')

        assert m.messages == []
        assert state.stack == [variable('x')]
        assert 'x' not in state.variables

    def test_postfix_evaluation(self):
        m, state, running = run('2 3 / 1 + 3 *')
        assert values(state) == [pytest.approx(5.0)]

        m, state, running = run('1 200 + 10 /')
        assert values(state) == [pytest.approx(20.1)]

    def test_simple_math(self):
        for oper, expected in {'+': 24, '-': 16, '*': 80, '/': 5}.items():
            m, state, running = run('20 4 ' + oper)

            assert m.messages == []
            assert state.stack == [number(expected)]

    def test_division_by_zero(self):
        m, state, running = run('1 0 /')
        assert m.messages == []
        assert values(state) == [math.inf]

        m, state, running = run('-1 0 /')
        assert values(state) == [-math.inf]

        m, state, running = run('0 0 /')
        assert math.isnan(values(state)[0])

    def test_two_operand_underflow(self):
        for oper in ['+', '-', '*', '/', 'swap', '=']:
            m, state, running = run('1 ' + oper)

            assert len(m.messages) == 1
            assert 'insufficient values' in m.messages[0]
            assert state.stack == [number(1)]

    def test_one_operand_underflow(self):
        for word in ['print', 'dup', 'drop']:
            m, state, running = run(word)

            assert 'insufficient values for ' + word in m.messages[0]
            assert state.stack == []

    def test_assignment(self):
        m, state, running = run('5 x =')

        assert m.messages == []
        assert state.stack == []
        assert state.variables == {'x': 5.0}

    def test_assignment_then_use(self):
        m, state, running = run('5 x = x x *')

        assert state.stack == [number(25)]

    def test_assignment_copies_value(self):
        m, state, running = run('5 x = x y =', '7 x =')

        assert state.variables == {'x': 7.0, 'y': 5.0}

    def test_assignment_underflow(self):
        m, state, running = run('x =')

        assert 'insufficient values for assignment' in m.messages[0]
        assert state.stack == [variable('x')]

    def test_assign_to_number(self):
        m, state, running = run('5 6 = 7')

        assert 'cannot assign to 6.0' in m.messages[0]
        assert state.stack == [number(5), number(6)]
        assert state.variables == {}

    def test_assign_unassigned_variable(self):
        m, state, running = run('y x =')

        assert 'unassigned variable y' in m.messages[0]
        assert state.stack == [variable('y'), variable('x')]
        assert state.variables == {}

    def test_unassigned_variable_restored(self):
        m, state, running = run('3 x + 4')

        assert 'variable not yet assigned: x' in m.messages[0]
        assert state.stack == [number(3), variable('x')]

        m, state, running = run('x 3 -')
        assert state.stack == [variable('x'), number(3)]

    def test_retry_after_assignment(self):
        m = rpncalc.Machine()
        state = rpncalc.State()
        state, running = m.process_line('3 x +', state)
        state, running = m.process_line('drop 2 x = x +', state)

        # `drop` took the x back off, leaving 3; then 3 + 2.
        assert m.messages == []
        assert state.stack == [number(5)]

    def test_stack_pop(self):
        m, state, running = run('42 print')

        assert m.messages == ['42.0']
        assert state.stack == []

    def test_print_variable_shows_name(self):
        m, state, running = run('5 x = x print')

        assert m.messages == ['x']

    def test_dup(self):
        m, state, running = run('9 dup')
        assert state.stack == [number(9), number(9)]

        m, state, running = run('x dup')
        assert state.stack == [variable('x'), variable('x')]

    def test_dup_drop_restores(self):
        m, state, running = run('1 2 dup drop')

        assert state.stack == [number(1), number(2)]

    def test_drop(self):
        m, state, running = run('1 drop')

        assert m.messages == []
        assert state.stack == []

    def test_swap(self):
        m, state, running = run('5 12 swap')

        assert state.stack == [number(12), number(5)]

    def test_swap_twice(self):
        m, state, running = run('1 x 3 swap swap')

        assert state.stack == [number(1), variable('x'), number(3)]

    def test_clear_keeps_variables(self):
        m, state, running = run('5 x = 1 2 clear')

        assert state.stack == []
        assert state.variables == {'x': 5.0}

    def test_reset(self):
        m, state, running = run('5 x = 1 2 reset')

        assert state.stack == []
        assert state.variables == {}

    def test_sum_and_prod(self):
        m, state, running = run('2 3 4 sum')
        assert state.stack == [number(9)]

        m, state, running = run('2 3 4 prod')
        assert state.stack == [number(24)]

    def test_fold_resolves_variables(self):
        m, state, running = run('10 x = 1 x 2 sum')

        assert state.stack == [number(13)]

    def test_fold_unassigned(self):
        m, state, running = run('1 y 2 prod')

        assert 'variable not yet assigned: y' in m.messages[0]
        assert state.stack == [number(1), variable('y'), number(2)]

    def test_fold_empty_stack(self):
        m, state, running = run('sum')
        assert state.stack == [number(0)]

        m, state, running = run('prod')
        assert state.stack == [number(1)]

    def test_exit(self):
        m, state, running = run('1 exit 2')

        assert not running
        assert state.stack == [number(1)]

    def test_invalid_token(self):
        m, state, running = run('1 2 @@ 3')

        assert m.messages == ['? unrecognised token: @@']
        assert running
        assert state.stack == [number(1), number(2)]

    def test_error_keeps_stack(self):
        m = rpncalc.Machine()
        state = rpncalc.State()
        state, running = m.process_line('42', state)
        state, running = m.process_line('+', state)

        assert 'insufficient values' in m.messages[0]
        assert state.stack == [number(42)]

    def test_multi_line(self):
        m, state, running = run('12 34', '+')

        assert m.messages == []
        assert state.stack == [number(46)]

    def test_messages_reset_each_line(self):
        m, state, running = run('1 print', '2')

        assert m.messages == []

    def test_state_returned_is_state_given(self):
        m = rpncalc.Machine()
        state = rpncalc.State()
        returned, running = m.process_line('1', state)

        assert returned is state
        assert m.state is None

    def test_interpret_one(self):
        m = rpncalc.Machine()
        m.state = rpncalc.State()
        m.interpret_one(lexer.NUMBER, '42')
        m.interpret_one(lexer.IDENTIFIER, 'x')

        assert m.state.stack == [number(42), variable('x')]

    def test_unknown_token_type(self):
        m = rpncalc.Machine()
        m.state = rpncalc.State()
        with pytest.raises(rpncalc.CalcError) as excinfo:
            m.interpret_one('BAD-TOKEN', 'oops')

        assert 'unknown token' in str(excinfo.value)

    def test_unknown_keyword(self):
        m = rpncalc.Machine()
        m.state = rpncalc.State()
        with pytest.raises(rpncalc.UnknownKeyword):
            m.interpret_one(lexer.KEYWORD, 'frobnicate')

        with pytest.raises(rpncalc.UnknownOperator):
            m.interpret_one(lexer.BINARY_OPERATOR, '%')

    def test_every_lexer_word_has_a_handler(self):
        m = rpncalc.Machine()

        assert set(m.keywords) == set(lexer.KEYWORDS)
        assert set(m.operators) == set(lexer.BINARY_OPERATORS)
        assert set(m.folds) == set(lexer.FOLDS)
