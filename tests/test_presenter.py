'''
Outcome rendering tests
'''

from rpncalc.outcome import Outcome, Result
from rpncalc.presenter import Presenter

from pytest import mark


def test_stack_slots_count_down_to_top():
    text = Presenter().stack((0.0, 1.5, 2.0))
    assert text.splitlines() == [
        Presenter.STACK_HEADER,
        'Slot 3 -> 0.000000',
        'Slot 2 -> 1.500000',
        'Slot 1 -> 2.000000',
        Presenter.STACK_FOOTER,
    ]


@mark.parametrize('outcome, message', [
    (Outcome(Result.PARTIAL_RESULT, 7.0), 'Partial result: 7'),
    (Outcome(Result.PARTIAL_RESULT, 1 / 3), 'Partial result: 0.333333'),
    (Outcome(Result.TOP, 1e20), 'Top: 1e+20'),
    (Outcome(Result.CLEARED), 'Stack cleared'),
    (Outcome(Result.EMPTY_STACK), 'Empty stack'),
    (Outcome(Result.DIVISION_BY_ZERO), 'Error: division by zero'),
    (Outcome(Result.INSUFFICIENT_OPERANDS), 'Error: insufficient operands'),
    (Outcome(Result.INVALID_DOMAIN, 'negative square root'),
     'Error: negative square root'),
    (Outcome(Result.STACK_OVERFLOW, 3.0), 'Error: stack full, 3 not pushed'),
    (Outcome(Result.UNRECOGNIZED_TOKEN, 'foo'), 'Invalid input: foo'),
    (Outcome(Result.INVALID_LITERAL, '3.5x'), 'Invalid number: 3.5x'),
])
def test_message(outcome, message):
    assert Presenter().message(outcome) == message


@mark.parametrize('outcome', [
    Outcome(Result.VALUE, 1.0),
    Outcome(Result.QUIT),
])
def test_nothing_to_say(outcome):
    assert Presenter().message(outcome) is None


def test_help_lists_everything():
    text = Presenter().message(Outcome(Result.SHOW_HELP))
    for word in 'sqrt', 'sin', 'cos', 'tan', 'pow', 'DEGREES':
        assert word in text
