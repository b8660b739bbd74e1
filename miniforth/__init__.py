"""
miniforth - a small Forth-like stack language

Usage:
    from miniforth import Forth
    forth = Forth()
    forth.execute(": square dup * ;")
    forth.execute("5 square .")
"""

from .core import (ForthError, StackUnderflow, DivisionByZero, UnknownWord,
                   MissingWordName, NestingTooDeep, Stack, Builtin, UserWord,
                   tokenize, parse_number)
from .compiler import NORMAL, Capturing
from .interpreter import Forth

__all__ = ['Forth', 'Stack', 'ForthError', 'StackUnderflow', 'DivisionByZero',
           'UnknownWord', 'MissingWordName', 'NestingTooDeep', 'Builtin',
           'UserWord', 'NORMAL', 'Capturing', 'tokenize', 'parse_number']
__version__ = '1.0.0'
