from collections import deque
import logging
import operator

from .util import RPNError, wrap_user_errors, format_number


logger = logging.getLogger(__name__)


class Machine:
    '''
    Arithmetic stack machine (RPN calculator).

    Holds a single stack of floats, top of the stack last. Failing operations
    raise RPNError and leave the stack as it was.
    '''

    # Arithmetic operators, applied as `second op top`.
    BUILTINS = {
        'add': operator.__add__,
        'sub': operator.__sub__,
        'mul': operator.__mul__,
        'div': operator.__truediv__,
    }

    def __init__(self, precision=None):
        '''
        Create empty stack machine.

        :param precision: Round displayed values to this many decimals.
        '''
        self.stack = deque()
        self.precision = precision

    def feed(self, command):
        '''
        Run a lexed Command on the machine.

        Returns text to show the user, or None.
        '''
        logger.debug('feed %s', command)
        if command.name == 'push':
            self.pshstack(command.value)
            return None
        elif command.name in type(self).BUILTINS:
            return '= ' + self.format(self.apply(command.name))
        return type(self).FUNCTIONS[command.name](self)

    def apply(self, name):
        '''
        Pop two operands, push `a op b` where b was on top, return result.
        '''
        if len(self.stack) < 2:
            raise RPNError('Not enough values on stack')
        if name == 'div' and self.stack[-1] == 0:
            raise RPNError('Division by zero')
        b = self.stack.pop()
        a = self.stack.pop()
        res = type(self).BUILTINS[name](a, b)
        self.pshstack(res)
        return res

    def format(self, n):
        return format_number(n, self.precision)

    def pshstack(self, *new):
        '''
        Push all elements onto stack, leftmost at the bottom.
        '''
        self.stack.extend(float(n) for n in new)

    @wrap_user_errors('Stack is empty')
    def popstack(self):
        '''
        Discard element at top of stack.
        '''
        self.stack.pop()

    @wrap_user_errors('Stack is empty')
    def dupstack(self):
        '''
        Duplicate element at top of stack.
        '''
        self.stack.append(self.stack[-1])

    def swapstack(self):
        '''
        Swap two elements at top of stack.
        '''
        if len(self.stack) < 2:
            raise RPNError('Need at least 2 values to swap')
        self.stack[-1], self.stack[-2] = self.stack[-2], self.stack[-1]

    def clrstack(self):
        '''
        Clear everything from the stack.
        '''
        self.stack.clear()

    def printtop(self):
        '''
        Show the element on the top of the stack.
        '''
        if not self.stack:
            return 'Stack is empty'
        return self.format(self.stack[-1])

    def printstack(self):
        '''
        Show all elements on the stack, bottom first.
        '''
        if not self.stack:
            return 'Stack is empty'
        return 'Stack: [{}]'.format(', '.join(map(self.format, self.stack)))

    # Command names to stack operations.
    FUNCTIONS = {
        'pop': popstack,
        'dup': dupstack,
        'swap': swapstack,
        'clear': clrstack,
        'print': printtop,
    }
