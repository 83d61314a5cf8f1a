'''
Flat-file persistence for the todo list.

The file holds the next id on its first line, then one task per line as four
`|`-separated fields: id, description, completed (`true`/`false`) and the
creation label. Backslash, `|`, CR and LF inside a field are written as
`\\\\`, `\\|`, `\\r` and `\\n`. Older files whose fields hold no backslash
read the same as before; in those that do, a backslash followed by another
backslash, `|`, `n` or `r` is now read as an escape.
'''

import logging
import os
from pathlib import Path

import regex

from .models import Task
from .store import TodoList
from .util import parse_id


logger = logging.getLogger(__name__)

FILE_NAME = '.todos.txt'

# One escaped field: anything but a bare `|` or backslash, or an escape pair.
FIELD = r'(?:[^|\\]|\\.)*'
RECORD = regex.compile(r'''
                       (?<id>{FIELD})
                       \|
                       (?<description>{FIELD})
                       \|
                       (?<completed>{FIELD})
                       \|
                       (?<created_at>{FIELD})
                       '''.format(FIELD=FIELD),
                       flags=regex.VERBOSE | regex.DOTALL | regex.VERSION1)
ESCAPES = {'\\': '\\\\', '|': '\\|', '\n': '\\n', '\r': '\\r'}
UNESCAPES = {'\\': '\\', '|': '|', 'n': '\n', 'r': '\r'}


def default_path(environ=os.environ):
    '''
    `<home>/.todos.txt`, home being $HOME, $USERPROFILE or the current
    directory.
    '''
    home = environ.get('HOME') or environ.get('USERPROFILE') or '.'
    return Path(home) / FILE_NAME


def escape(field):
    return regex.sub(r'[\\|\n\r]', lambda m: ESCAPES[m.group(0)], field)


def unescape(field):
    # Unknown escapes are kept as written.
    return regex.sub(r'\\(.)',
                     lambda m: UNESCAPES.get(m.group(1), m.group(0)),
                     field,
                     flags=regex.DOTALL)


def dumps(todos):
    '''
    Serialize a TodoList to the file format.
    '''
    lines = [str(todos.next_id)]
    for task in todos:
        lines.append('|'.join([str(task.id),
                               escape(task.description),
                               'true' if task.completed else 'false',
                               escape(task.created_at)]))
    return ''.join(line + '\n' for line in lines)


def loads(text, **kwargs):
    '''
    Parse the file format into a TodoList.

    A bad counter line falls back to 1. Task lines without exactly four
    fields or with a non-numeric id are skipped.
    '''
    lines = text.strip().split('\n')
    next_id = parse_id(lines[0].strip())
    if next_id is None:
        next_id = 1
    tasks = []
    for lineno, line in enumerate(lines[1:], start=2):
        match = RECORD.fullmatch(line)
        task_id = parse_id(match['id']) if match else None
        if task_id is None:
            logger.debug('skipping malformed line %d', lineno)
            continue
        tasks.append(Task(id=task_id,
                          description=unescape(match['description']),
                          completed=match['completed'] == 'true',
                          created_at=unescape(match['created_at'])))
    return TodoList(tasks, next_id=next_id, **kwargs)


class TodoFile:
    '''
    The on-disk home of one TodoList.
    '''

    def __init__(self, path):
        self.path = Path(path)

    def load(self, **kwargs):
        '''
        Read the list back; a missing or unreadable file is an empty list.

        Extra keyword arguments go to TodoList.
        '''
        try:
            text = self.path.read_text(encoding='utf-8')
        except (OSError, UnicodeDecodeError) as e:
            logger.debug('starting empty, cannot read %s: %s', self.path, e)
            return TodoList(**kwargs)
        todos = loads(text, **kwargs)
        logger.debug('loaded %d task(s) from %s', len(todos), self.path)
        return todos

    def save(self, todos):
        '''
        Overwrite the file with the whole list.

        OSError propagates.
        '''
        self.path.write_text(dumps(todos), encoding='utf-8')
        logger.debug('saved %d task(s) to %s', len(todos), self.path)
