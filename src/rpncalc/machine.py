import operator
import sys

from .lexer import Lexer
from .util import InvalidSyntax, InvalidToken, DivisionByZero, Overflow, \
                  in_range


def _truncdiv(left, right):
    '''
    Integer division rounding toward zero, unlike Python's floor division.
    '''
    quotient = abs(left) // abs(right)
    if (left < 0) != (right < 0):
        return -quotient
    return quotient


def _truncmod(left, right):
    '''
    Remainder of _truncdiv; takes the sign of the left operand.
    '''
    return left - right * _truncdiv(left, right)


class Machine:
    '''
    Integer stack machine (RPN calculator).

    Evaluates one formula at a time. Nothing but the verbosity survives from
    one formula to the next.
    '''

    # Binary operators on signed 32-bit integers.
    OPERATORS = {
        '+': operator.__add__,
        '-': operator.__sub__,
        '*': operator.__mul__,
        '/': _truncdiv,
        '%': _truncmod,
    }

    def __init__(self, verbose=False, file=None):
        '''
        Create stack machine.

        :param verbose: Trace remaining tokens and stack after every token.
        :param file: Where to write the trace. Defaults to stderr.
        '''
        self._verbose = bool(verbose)
        self.file = file
        self.lexer = Lexer()

    @property
    def verbose(self):
        return self._verbose

    def eval(self, formula):
        '''
        Evaluate formula and return its value.

        Raises an RPNError on a bad formula. The stack must hold exactly one
        value once all tokens have been consumed.
        '''
        lexemes = list(self.lexer.lex(formula))
        stack = []
        for pos, token, groups in lexemes:
            self.feed(stack, pos, groups)
            if self.verbose:
                self._trace([token for _, token, _ in lexemes[pos:]], stack)
        if len(stack) != 1:
            raise InvalidSyntax()
        return stack[0]

    def feed(self, stack, pos, groups):
        '''
        Push a number on stack, or run an operator on it.

        :param groups: lexeme group, as returned by Lexer.classify.
        '''
        if 'number' in groups:
            stack.append(groups['number'])
        else:
            stack.append(self._apply(stack, pos, groups['operator']))

    def arity(self, groups):
        '''
        Return number of values a lexeme pops, or None if it's no operator.
        '''
        if 'number' in groups:
            return 0
        elif groups['operator'] in type(self).OPERATORS:
            return 2
        return None

    def _apply(self, stack, pos, symbol):
        '''
        Pop both operands, run operator named by symbol and return result.

        Operands are popped before the symbol is looked up, so an unknown
        symbol on a short stack is a syntax error.
        '''
        # If you don't reverse, you'll do 3 - 2 when you say 2 3 -.
        right, left = self._popstack(stack, pos, n=2)
        try:
            f = type(self).OPERATORS[symbol]
        except KeyError:
            raise InvalidToken(pos, symbol) from None
        try:
            result = f(left, right)
        except ZeroDivisionError:
            raise DivisionByZero(pos) from None
        if not in_range(result):
            raise Overflow(pos)
        return result

    def _popstack(self, stack, pos, n=1):
        '''
        Pop n values from stack, topmost first.
        '''
        if len(stack) < n:
            raise InvalidSyntax(pos)
        return [stack.pop() for _ in range(n)]

    def _trace(self, remaining, stack):
        print(remaining, stack, file=self.file or sys.stderr)
