from collections import namedtuple
from enum import Enum


class Result(Enum):
    '''
    Tag of what feeding one token to the machine did.
    '''
    VALUE = 'value'
    PARTIAL_RESULT = 'partial result'
    QUIT = 'quit'
    SHOW_HELP = 'show help'
    SHOW_STACK = 'show stack'
    CLEARED = 'cleared'
    TOP = 'top'

    EMPTY_STACK = 'empty stack'
    INSUFFICIENT_OPERANDS = 'insufficient operands'
    DIVISION_BY_ZERO = 'division by zero'
    INVALID_DOMAIN = 'invalid domain'
    STACK_OVERFLOW = 'stack overflow'
    UNRECOGNIZED_TOKEN = 'unrecognized token'
    INVALID_LITERAL = 'invalid literal'


ERRORS = frozenset({
    Result.EMPTY_STACK,
    Result.INSUFFICIENT_OPERANDS,
    Result.DIVISION_BY_ZERO,
    Result.INVALID_DOMAIN,
    Result.STACK_OVERFLOW,
    Result.UNRECOGNIZED_TOKEN,
    Result.INVALID_LITERAL,
})


class Outcome(namedtuple('Outcome', 'tag value cause',
                         defaults=(None, None))):
    '''
    Tagged result of one token.

    :param tag: Result member.
    :param value: Number, snapshot, token or reason, depending on tag.
    :param cause: Host exception an error was converted from, if any.
    '''
    __slots__ = ()

    @property
    def iserror(self):
        '''
        Return True if the token failed.

        Peeking an empty stack counts, even though nothing went wrong.
        '''
        return self.tag in ERRORS
