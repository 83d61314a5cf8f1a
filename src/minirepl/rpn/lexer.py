from collections import namedtuple
from functools import reduce
import operator

import regex

from .util import RPNError


Command = namedtuple('Command', ['name', 'value'])


class Lexer:
    '''
    Lexer for single-token calculator commands.

    A line is either a number, pushed as is, or one of the operator aliases.
    For consistency, needs to be instantiated, despite holding no internal
    state.
    '''
    # Number, as a whole line. Sign, digits, optional fraction and exponent,
    # or the special values.
    NUMBER = r'''
              [+-]?
              (?:
                  # inf, infinity, nan, any case
                  (?:
                      inf(?:inity)?
                      |
                      nan
                  )
                  |
                  (?:
                      # 1, 1., 1.5 or .5
                      (?:
                          [0-9]+
                          (?:
                              \.
                              [0-9]*
                          )?
                      )|(?:
                          \.
                          [0-9]+
                      )
                  )
                  # 1e5, 1.5E-3
                  (?:
                      e
                      [+-]?
                      [0-9]+
                  )?
              )
              '''
    # Default regex flags for matching numbers
    FLAGS = reduce(operator.__or__,
                   {regex.IGNORECASE,
                    regex.VERSION1,
                    regex.VERBOSE},
                   0)

    # Lower-cased spelling to machine operation.
    ALIASES = {
        '+': 'add',
        'add': 'add',
        '-': 'sub',
        'sub': 'sub',
        '*': 'mul',
        'mul': 'mul',
        '/': 'div',
        'div': 'div',
        'pop': 'pop',
        'dup': 'dup',
        'swap': 'swap',
        'print': 'print',
        '.': 'print',
        'clear': 'clear',
        'cls': 'clear',
    }

    def isnumber(self, line):
        '''
        Return True if the whole line is a number literal.
        '''
        return regex.fullmatch(type(self).NUMBER, line,
                               flags=type(self).FLAGS) is not None

    def lex(self, line):
        '''
        Take a trimmed line and return its Command.

        Numbers take priority over aliases.
        '''
        if self.isnumber(line):
            return Command('push', float(line))
        name = type(self).ALIASES.get(line.lower())
        if name is None:
            raise RPNError("Unknown command: '{}'".format(line))
        return Command(name, None)
