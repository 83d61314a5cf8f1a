import sys
from argparse import ArgumentParser, REMAINDER, OPTIONAL
import logging

from ..interactive import DEFAULT_PROMPT, configure_logging, prompting_input
from .util import RPNError
from .machine import Machine
from .lexer import Lexer


logger = logging.getLogger(__name__)

HELP = '''\
Stack calculator (RPN). Enter one command per line.

  <number>        Push a number onto the stack
  + add           Add the top two values
  - sub           Subtract the top value from the one below it
  * mul           Multiply the top two values
  / div           Divide the second value by the top value
  pop             Discard the top value
  dup             Duplicate the top value
  swap            Swap the top two values
  print .         Show the top value
  clear cls       Empty the stack
  stack           Show the whole stack
  help            Show this help
  quit exit       Leave the calculator'''


class CLI:
    '''
    Command line interface to the stack calculator.
    '''

    QUIT = frozenset({'quit', 'exit'})

    def executor(self):
        '''
        Run machine (RPN calculator) over the input lines.
        '''
        machine = Machine(precision=self.args.precision)
        lexer = Lexer()
        print('Stack calculator. Type \'help\' for commands.')
        try:
            for line in self.args.expressions:
                line = line.strip()
                # Blank lines are not commands.
                if not line:
                    continue
                if line in type(self).QUIT:
                    break
                if line == 'help':
                    print(HELP)
                    continue
                if line == 'stack':
                    print(machine.printstack())
                    continue
                try:
                    shown = machine.feed(lexer.lex(line))
                except RPNError as e:
                    print('Error:', e.args[0], file=sys.stderr)
                    continue
                if shown is not None:
                    print(shown)
        # A broken input stream ends the session, not the process.
        except (OSError, UnicodeDecodeError) as e:
            print('Error reading input: {}'.format(e), file=sys.stderr)
        print('Goodbye!')
        return 0

    def __init__(self):
        '''
        Create ready to run CLI.

        Does not run or parse command line arguments.
        '''
        self.argument_parser = ArgumentParser(description='RPN calculator')
        self.argument_parser.add_argument('-v', '--verbose',
                                          action='store_true')
        self.argument_parser.add_argument('-k', '--precision',
                                          type=int,
                                          help='round displayed values')
        int_nonint_groups = self.argument_parser.add_mutually_exclusive_group()
        int_nonint_groups.add_argument('-e', '--expression',
                                       nargs=REMAINDER,
                                       dest='expressions')
        int_nonint_groups.add_argument('-p', '--prompt',
                                       nargs=OPTIONAL,
                                       const=DEFAULT_PROMPT)
        self.argument_parser.set_defaults(expressions=sys.stdin)

    def run(self, *, args=None):
        '''
        Run CLI, given these args, or previously passed CLI args.
        '''
        self.args = self.argument_parser.parse_args(args)
        configure_logging(self.args.verbose)
        if self.args.expressions is sys.stdin:
            self.args.expressions = prompting_input(self.args.prompt)
        logger.debug('reading from %r', self.args.expressions)
        try:
            return self.executor()
        except KeyboardInterrupt:
            sys.exit(1)


def main(args=None):
    return CLI().run(args=args)
