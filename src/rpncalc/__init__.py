'''
Integer RPN calculator.

Reads formulas in Reverse Polish Notation, one per line, and prints each
one's value. Arithmetic is on signed 32-bit integers: + - * / %, division
rounding toward zero.

    $ echo '1 2 + 4 *' | rpncalc
    12
'''

__version__ = '1.0.0'

from .cli import CLI, run
from .lexer import Lexer
from .machine import Machine


__all__ = 'Machine', 'Lexer', 'CLI', 'run'
