from functools import wraps

from .outcome import Result, Outcome


class RPNError(Exception):
    '''
    User error while running a token.

    args[0] is the message, args[1], if any, the exception it was converted
    from.
    '''
    result = None

    def __init__(self, message, *args, value=None):
        super().__init__(message, *args)
        self.value = value

    @property
    def cause(self):
        return self.args[1] if len(self.args) > 1 else None

    def outcome(self):
        '''
        Return the Outcome reporting this error.
        '''
        return Outcome(type(self).result, self.value, self.cause)


class StackOverflow(RPNError):
    result = Result.STACK_OVERFLOW


class InsufficientOperands(RPNError):
    result = Result.INSUFFICIENT_OPERANDS


class EmptyStack(RPNError):
    result = Result.EMPTY_STACK


class DivisionByZero(RPNError):
    result = Result.DIVISION_BY_ZERO


class DomainError(RPNError):
    result = Result.INVALID_DOMAIN


class InvalidLiteral(RPNError):
    result = Result.INVALID_LITERAL


class UnrecognizedToken(RPNError):
    result = Result.UNRECOGNIZED_TOKEN


def wrap_user_errors(fmt, error=RPNError):
    '''
    Decorator that converts exceptions raised by f into error.

    Passes through RPNErrors. The formatted message doubles as the error's
    value, so it can be shown as the reason.
    '''
    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            try:
                return f(*args, **kwargs)
            except RPNError:
                raise
            except (ArithmeticError, ValueError) as e:
                message = fmt.format(*args, **kwargs, reason=e)
                raise error(message, e, value=message)
        return wrapper
    return decorator
