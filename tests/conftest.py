from pytest import fixture

from rpncalc.stack import BoundedStack
from rpncalc.machine import Machine


@fixture
def stack() -> BoundedStack:
    '''
    Fresh, empty, full sized stack.
    '''
    return BoundedStack()


@fixture
def machine(stack: BoundedStack) -> Machine:
    return Machine(stack)


@fixture
def run(machine: Machine):
    '''
    Feed a whole line to the machine, returning the last token's outcome.
    '''
    def feed_line(line: str):
        outcome = None
        for token in machine.lexer.tokens(line):
            outcome = machine.feed(token)
        return outcome
    return feed_line
