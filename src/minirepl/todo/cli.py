'''
Command-line interface loop for the todo list.

Every successful add, done or delete rewrites the data file before the next
line is read.
'''
import sys
from argparse import ArgumentParser, REMAINDER, OPTIONAL
import logging

from ..interactive import DEFAULT_PROMPT, configure_logging, prompting_input
from .parser import parse
from .storage import TodoFile, default_path
from .util import TodoError


logger = logging.getLogger(__name__)

HELP = '''
Available Commands:
  add <description> - Add a new task
  list             - List all tasks
  done <id>        - Mark a task as completed
  delete <id>      - Delete a task
  help             - Show this help message
  exit             - Exit the application
'''


class CLI:
    '''
    Command line interface to one todo list and its file.
    '''

    def __init__(self):
        '''
        Create ready to run CLI.

        Does not run or parse command line arguments.
        '''
        self.argument_parser = ArgumentParser(description='Todo list')
        self.argument_parser.add_argument('-v', '--verbose',
                                          action='store_true')
        self.argument_parser.add_argument('-f', '--file',
                                          dest='path',
                                          help='data file (default: '
                                               '~/.todos.txt)')
        int_nonint_groups = self.argument_parser.add_mutually_exclusive_group()
        int_nonint_groups.add_argument('-e', '--expression',
                                       nargs=REMAINDER,
                                       dest='expressions')
        int_nonint_groups.add_argument('-p', '--prompt',
                                       nargs=OPTIONAL,
                                       const=DEFAULT_PROMPT)
        self.argument_parser.set_defaults(expressions=sys.stdin)

    def executor(self):
        '''
        Read, run and answer commands until `exit` or end of input.

        OSError from saving propagates.
        '''
        print("Welcome to Todo CLI!")
        print("Type 'help' for available commands.\n")
        for line in self.args.expressions:
            command = parse(line.strip())
            logger.debug('command %s', command)
            if command.name == 'exit':
                break
            handler = getattr(self, '_cmd_' + command.name)
            try:
                handler(command.arg)
            except TodoError as e:
                print('Error: {}'.format(e), file=sys.stderr)
        print("Goodbye!")
        return 0

    # -------------------- command dispatch --------------------
    def _cmd_add(self, description):
        task = self.todos.add(description)
        self.file.save(self.todos)
        print('Added task with ID: {}'.format(task.id))

    def _cmd_list(self, _):
        summary = self.todos.summary()
        if not summary.tasks:
            print("No tasks found. Add one with 'add <description>'")
            return
        print("\n=== TODO LIST ===")
        for task in summary.tasks:
            mark = '[✓]' if task.completed else '[ ]'
            print('{} {} {} ({})'.format(task.id, mark, task.description,
                                         task.created_at))
        print("================")
        print('Total: {} | Completed: {} | Pending: {}'.format(
            len(summary.tasks), summary.completed, summary.pending))
        print()

    def _cmd_done(self, task_id):
        self.todos.complete(task_id)
        self.file.save(self.todos)
        print('Task {} marked as completed!'.format(task_id))

    def _cmd_delete(self, task_id):
        self.todos.delete(task_id)
        self.file.save(self.todos)
        print('Task {} deleted!'.format(task_id))

    def _cmd_help(self, _):
        print(HELP)

    def _cmd_unknown(self, _):
        print("Unknown command. Type 'help' for usage.")

    def run(self, *, args=None, clock=None):
        '''
        Run CLI, given these args, or previously passed CLI args.

        :param clock: Replacement timestamp source for new tasks.
        '''
        self.args = self.argument_parser.parse_args(args)
        configure_logging(self.args.verbose)
        self.file = TodoFile(self.args.path or default_path())
        self.todos = self.file.load()
        if clock is not None:
            self.todos.clock = clock
        if self.args.expressions is sys.stdin:
            self.args.expressions = prompting_input(self.args.prompt)
        try:
            return self.executor()
        except KeyboardInterrupt:
            sys.exit(1)
        except OSError as e:
            logger.error('aborting, I/O error: %s', e)
            sys.exit(1)


def main(args=None):
    return CLI().run(args=args)
