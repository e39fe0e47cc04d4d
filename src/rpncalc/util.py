# Signed 32-bit bounds for operands and results.
INT_MIN = -2 ** 31
INT_MAX = 2 ** 31 - 1


class RPNError(Exception):
    '''
    Error evaluating a formula.

    ``args[0]`` is the one line message shown to the user; ``pos`` is the
    1-based position of the offending token, if there is one.
    '''

    MESSAGE = 'error'

    def __init__(self, pos=None):
        self.pos = pos
        if pos is None:
            message = self.MESSAGE
        else:
            message = '{} at {}'.format(self.MESSAGE, pos)
        super().__init__(message)


class InvalidSyntax(RPNError):
    MESSAGE = 'invalid syntax'


class InvalidToken(RPNError):
    MESSAGE = 'invalid token'

    def __init__(self, pos, token):
        self.token = token
        super().__init__(pos)


class DivisionByZero(RPNError):
    MESSAGE = 'division by zero'


class Overflow(RPNError):
    MESSAGE = 'overflow'


def in_range(n):
    '''
    Return True if n fits in a signed 32-bit integer.
    '''
    return INT_MIN <= n <= INT_MAX
