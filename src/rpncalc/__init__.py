'''
RPN calculator.

Plain old arithmetic, square roots, trigonometry in degrees and powers, on a
stack that holds at most 1024 numbers. Not intended to be Turing-complete!

A failed operation never eats your numbers: dividing by zero or taking the
square root of a negative puts the operands back where they were.

The machine itself does no I/O. Feed it tokens, get outcomes back, and render
them however you like; the CLI is one such caller.
'''

from .cli import CLI
from .lexer import Lexer
from .machine import Machine, Kind, process_token
from .outcome import Outcome, Result
from .stack import BoundedStack
from .util import RPNError


__all__ = ('Machine', 'Kind', 'process_token', 'Lexer', 'CLI',
           'BoundedStack', 'Outcome', 'Result', 'RPNError')
