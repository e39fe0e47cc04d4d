from functools import reduce
import operator

import regex

from .util import in_range


class Lexer:
    '''
    Lexer for RPN formulas.

    Tokens are runs of anything but ASCII whitespace. A token is a number if
    it is a plain decimal integer that fits in 32 bits; anything else is an
    operator, whether or not the machine knows it.

    For consistency, for now, needs to be instantiated, despite holding no
    internal state.
    '''
    # Spelled out rather than \S, which would also split on Unicode spaces.
    TOKEN = r'''
             [^\x20\t\n\r\x0b\x0c]+
             '''
    # Optional minus, decimal digits only. No +5, 1_000 or 0x10.
    NUMBER = r'''
              -?
              [0-9]+
              '''
    # Default regex flags for matching lexemes
    FLAGS = reduce(operator.__or__,
                   {regex.VERSION1,
                    regex.VERBOSE},
                   0)

    def split(self, line):
        '''
        Take a line and return its tokens, left to right.

        Never returns empty tokens, however much whitespace there is.
        '''
        return [match.group(0)
                for match
                in regex.finditer(type(self).TOKEN, line,
                                  flags=type(self).FLAGS)]

    def classify(self, token):
        '''
        Return the lexeme group of a single token.

        {'number': int} for numbers in range, {'operator': str} otherwise.
        '''
        if regex.fullmatch(type(self).NUMBER, token,
                           flags=type(self).FLAGS):
            number = int(token)
            # 2147483648 is not a number. It's an (unknown) operator.
            if in_range(number):
                return {'number': number}
        return {'operator': token}

    def lex(self, line):
        '''
        Yield position (1-based), token, and group for every token in line.
        '''
        for pos, token in enumerate(self.split(line), start=1):
            yield pos, token, self.classify(token)
