from contextlib import contextmanager
from enum import Enum
import operator
import math

from .lexer import Lexer
from .outcome import Result, Outcome
from .stack import BoundedStack
from .util import (RPNError, StackOverflow, InsufficientOperands, EmptyStack,
                   DivisionByZero, DomainError, InvalidLiteral,
                   UnrecognizedToken, wrap_user_errors)


class Kind(Enum):
    '''
    What a token is, as far as the machine is concerned.
    '''
    COMMAND = 'command'
    UNARY = 'unary'
    POWER = 'power'
    BINARY = 'binary'
    LITERAL = 'literal'
    INVALID = 'invalid'


def _divide(a, b):
    if b == 0:
        raise DivisionByZero('Cannot divide {:g} by zero'.format(a))
    return a / b


def _sqrt(a):
    if a < 0:
        raise DomainError('Cannot take square root of {:g}'.format(a),
                          value='negative square root')
    return math.sqrt(a)


def _degrees(f):
    '''
    Make trigonometric function f take its argument in degrees.
    '''
    def wrapped(angle):
        return f(angle * math.pi / 180)
    wrapped.__doc__ = f.__doc__
    wrapped.__name__ = f.__name__
    return wrapped


def _trigonometric(f):
    fmt = 'Cannot take ' + f.__name__ + ' of {0:g} degrees: {reason}'
    return wrap_user_errors(fmt, DomainError)(_degrees(f))


# No domain checks of our own: whatever math.pow refuses, we refuse.
_pow = wrap_user_errors('Cannot raise {0:g} to {1:g}: {reason}',
                        DomainError)(math.pow)


class Machine:
    '''
    Arithmetic stack machine (RPN calculator).

    Takes tokens one at a time, runs them against the stack it was given, and
    returns an Outcome for each. Never prints; session commands (quit, help,
    show) come back as outcomes for the caller to act on.

    A failed token leaves the stack as it found it: whatever operands it
    consumed are pushed back, in their original order.
    '''

    # Number of slots in a stack snapshot.
    VIEW_SIZE = 8

    # Operators, all binary: a b op is a op b.
    BINARY = {
        '+': operator.__add__,
        '-': operator.__sub__,
        '*': operator.__mul__,
        '/': _divide,
    }

    # Functions of the top of the stack. Angles in degrees.
    UNARY = {
        'sqrt': _sqrt,
        'sin': _trigonometric(math.sin),
        'cos': _trigonometric(math.cos),
        'tan': _trigonometric(math.tan),
    }

    # base exp pow is base ** exp
    POWER = {
        'pow': _pow,
    }

    def __init__(self, stack=None):
        '''
        Create machine running on stack.

        :param stack: BoundedStack owned by the caller. A new empty one if
                      not given.
        '''
        self.stack = BoundedStack() if stack is None else stack
        self.lexer = Lexer()

    def feed(self, token):
        '''
        Classify and run token, returning its Outcome.

        User errors come back as error outcomes, never as exceptions.
        '''
        kind, payload = self.classify(token)
        try:
            return self._run(kind, payload)
        except RPNError as e:
            return e.outcome()

    def classify(self, token):
        '''
        Return (Kind, payload) for token. First match wins.

        The payload is the parsed number for literals, the token otherwise.
        '''
        cls = type(self)
        if token in cls.COMMANDS:
            return Kind.COMMAND, token
        elif token in cls.UNARY:
            return Kind.UNARY, token
        elif token in cls.POWER:
            return Kind.POWER, token
        elif len(token) == 1 and token in cls.BINARY:
            return Kind.BINARY, token
        number = self.lexer.parse(token)
        if number is not None:
            return Kind.LITERAL, number
        return Kind.INVALID, token

    def _run(self, kind, payload):
        if kind is Kind.COMMAND:
            return type(self).COMMANDS[payload](self)
        elif kind is Kind.UNARY:
            return self.unary(payload)
        elif kind is Kind.POWER:
            return self.power()
        elif kind is Kind.BINARY:
            return self.binary(payload)
        elif kind is Kind.LITERAL:
            return self.push(payload)
        elif self.lexer.isnumeric(payload):
            raise InvalidLiteral('Bad number {}'.format(payload),
                                 value=payload)
        raise UnrecognizedToken('Unknown token {}'.format(payload),
                                value=payload)

    @contextmanager
    def _operands(self, n):
        '''
        Pop n operands, deepest first, pushing them back if the body raises.

        Pops nothing at all unless all n are there.
        '''
        if len(self.stack) < n:
            if n == 1:
                raise EmptyStack('Empty stack')
            raise InsufficientOperands(
                'Less than {} element(s) on stack'.format(n))
        # If you don't reverse, you'll do 2**9 when you say 9 2 pow instead
        # of 9**2.
        operands = [self.stack.pop() for _ in range(n)]
        operands.reverse()
        try:
            yield operands
        except Exception:
            for operand in operands:
                self.stack.push(operand)
            raise

    def _result(self, value):
        '''
        Push computed value. Only call inside _operands, so that a refused
        push puts the operands back.
        '''
        if not self.stack.push(value):
            raise StackOverflow('Stack full', value=value)
        return Outcome(Result.PARTIAL_RESULT, value)

    def push(self, number):
        '''
        Push a literal onto the stack.
        '''
        if not self.stack.push(number):
            raise StackOverflow(
                'Stack full at {} element(s)'.format(self.stack.capacity),
                value=number)
        return Outcome(Result.VALUE, number)

    def binary(self, symbol):
        '''
        Pop b, then a, and push a symbol b.
        '''
        with self._operands(2) as (a, b):
            f = type(self).BINARY.get(symbol)
            if f is None:
                raise UnrecognizedToken('No such operator {}'.format(symbol),
                                        value=symbol)
            return self._result(f(a, b))

    def unary(self, name):
        '''
        Replace the top of the stack with function name of it.
        '''
        with self._operands(1) as (a,):
            f = type(self).UNARY.get(name)
            if f is None:
                raise UnrecognizedToken('No such function {}'.format(name),
                                        value=name)
            return self._result(f(a))

    def power(self):
        '''
        Pop exponent, then base, and push base raised to exponent.
        '''
        with self._operands(2) as (base, exp):
            return self._result(type(self).POWER['pow'](base, exp))

    def quit(self):
        return Outcome(Result.QUIT)

    def help(self):
        return Outcome(Result.SHOW_HELP)

    def clrstack(self):
        '''
        Clear everything from the stack.
        '''
        self.stack.clear()
        return Outcome(Result.CLEARED)

    def showstack(self):
        '''
        Report the topmost VIEW_SIZE elements, deepest first.
        '''
        return Outcome(Result.SHOW_STACK,
                       self.stack.snapshot(type(self).VIEW_SIZE))

    def printtop(self):
        '''
        Report the element on the top of the stack.
        '''
        top = self.stack.peek()
        if top is None:
            raise EmptyStack('Empty stack')
        return Outcome(Result.TOP, top)

    # One letter session commands. Case matters.
    COMMANDS = {
        'q': quit,
        'h': help,
        'c': clrstack,
        's': showstack,
        'p': printtop,
    }


def process_token(token, stack):
    '''
    Run token against stack and return its Outcome.
    '''
    return Machine(stack).feed(token)
