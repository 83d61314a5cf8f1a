from collections import namedtuple

from .models import MAX_DESCRIPTION
from .util import parse_id


Command = namedtuple('Command', ['name', 'arg'])

# Anything the parser cannot make sense of.
UNKNOWN = Command('unknown', None)

NO_ARGUMENT = frozenset({'list', 'help', 'exit'})
ID_ARGUMENT = frozenset({'done', 'delete'})


def parse(line):
    '''
    Map one input line to a Command.

    Keywords are case-sensitive. `add` needs a description of at most
    MAX_DESCRIPTION characters, `done` and `delete` need exactly one id,
    trailing words after the other keywords are ignored.
    '''
    tokens = line.split()
    if not tokens:
        return UNKNOWN
    keyword, args = tokens[0], tokens[1:]
    if keyword == 'add':
        description = ' '.join(args)
        if not args or len(description) > MAX_DESCRIPTION:
            return UNKNOWN
        return Command('add', description)
    elif keyword in ID_ARGUMENT:
        task_id = parse_id(args[0]) if len(args) == 1 else None
        if task_id is None:
            return UNKNOWN
        return Command(keyword, task_id)
    elif keyword in NO_ARGUMENT:
        return Command(keyword, None)
    return UNKNOWN
