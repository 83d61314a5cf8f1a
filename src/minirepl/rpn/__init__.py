'''
RPN calculator.

Single stack of floats, one command per line: numbers are pushed, operators
and stack commands act on the top of the stack. Nothing is persisted.
'''

from .cli import CLI
from .lexer import Lexer, Command
from .machine import Machine
from .util import RPNError


__all__ = 'Machine', 'Lexer', 'Command', 'CLI', 'RPNError'
