'''
Stack machine tests
'''

import math

from minirepl.rpn.util import RPNError, format_number
from minirepl.rpn.lexer import Command
from minirepl.rpn.machine import Machine

from pytest import raises, fixture, mark


@fixture
def machine():
    return Machine()


def stack(machine):
    return list(machine.stack)


def test_push_then_add(machine):
    machine.feed(Command('push', 3))
    machine.feed(Command('push', 4))
    assert machine.feed(Command('add', None)) == '= 7'
    assert stack(machine) == [7.0]


@mark.parametrize('name, result', [
    ('add', 13.0),
    ('sub', 7.0),
    ('mul', 30.0),
    ('div', 10.0 / 3.0),
])
def test_second_op_top(machine, name, result):
    machine.pshstack(10, 3)
    machine.feed(Command(name, None))
    assert stack(machine) == [result]


@mark.parametrize('name', ['add', 'sub', 'mul', 'div'])
def test_binary_underflow_leaves_stack(machine, name):
    machine.pshstack(5)
    with raises(RPNError, match='Not enough values'):
        machine.feed(Command(name, None))
    assert stack(machine) == [5.0]


def test_division_by_zero_leaves_both_operands(machine):
    machine.pshstack(10, 0)
    with raises(RPNError, match='Division by zero'):
        machine.apply('div')
    assert stack(machine) == [10.0, 0.0]


def test_division_by_negative_zero(machine):
    machine.pshstack(1, -0.0)
    with raises(RPNError, match='Division by zero'):
        machine.apply('div')
    assert len(machine.stack) == 2


def test_pop_and_dup_on_empty_stack(machine):
    with raises(RPNError, match='Stack is empty'):
        machine.popstack()
    with raises(RPNError, match='Stack is empty'):
        machine.dupstack()
    assert stack(machine) == []


def test_pop_discards_top(machine):
    machine.pshstack(1, 2)
    assert machine.feed(Command('pop', None)) is None
    assert stack(machine) == [1.0]


def test_dup_copies_top(machine):
    machine.pshstack(1, 2)
    machine.feed(Command('dup', None))
    assert stack(machine) == [1.0, 2.0, 2.0]


def test_swap(machine):
    machine.pshstack(1, 2, 3)
    machine.feed(Command('swap', None))
    assert stack(machine) == [1.0, 3.0, 2.0]


def test_swap_needs_two(machine):
    machine.pshstack(1)
    with raises(RPNError, match='Need at least 2 values'):
        machine.swapstack()
    assert stack(machine) == [1.0]


def test_print_never_fails(machine):
    assert machine.feed(Command('print', None)) == 'Stack is empty'
    machine.pshstack(2.5)
    assert machine.feed(Command('print', None)) == '2.5'
    assert stack(machine) == [2.5]


def test_clear(machine):
    machine.pshstack(1, 2, 3)
    machine.feed(Command('clear', None))
    assert stack(machine) == []
    machine.feed(Command('clear', None))
    assert stack(machine) == []


def test_printstack(machine):
    assert machine.printstack() == 'Stack is empty'
    machine.pshstack(1, 0.5, -2)
    assert machine.printstack() == 'Stack: [1, 0.5, -2]'


def test_precision_only_affects_display():
    machine = Machine(precision=2)
    machine.pshstack(1, 3)
    assert machine.apply('div') == 1 / 3
    assert machine.printtop() == '0.33'
    assert stack(machine) == [1 / 3]


@mark.parametrize('value, text', [
    (7.0, '7'),
    (-0.0, '-0'),
    (0.1, '0.1'),
    (1e20, '100000000000000000000'),
    (math.inf, 'inf'),
    (-math.inf, '-inf'),
])
def test_format_number(value, text):
    assert format_number(value) == text
