'''
Persistent todo list.

Tasks live in a TodoList and are written to a flat text file after every
change.
'''

from .cli import CLI
from .models import Task
from .parser import Command, parse
from .store import TodoList
from .storage import TodoFile
from .util import TodoError, TaskNotFound, TaskAlreadyCompleted


__all__ = ('Task', 'TodoList', 'TodoFile', 'Command', 'parse', 'CLI',
           'TodoError', 'TaskNotFound', 'TaskAlreadyCompleted')
