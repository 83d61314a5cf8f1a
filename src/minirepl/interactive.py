'''
Line sources shared by the todo and calculator loops.
'''

import logging
from os import isatty
import sys

from prompt_toolkit import PromptSession


DEFAULT_PROMPT = '> '
LOG_FORMAT = '%(levelname)s %(name)s: %(message)s'


class InteractiveInput:
    '''
    Iterable of lines typed at a prompt_toolkit prompt.

    Stops on end of input (Ctrl-D).
    '''

    def __init__(self, prompt):
        self.prompt = prompt

    def __iter__(self):
        try:
            session = PromptSession(message=self.prompt,
                                    enable_suspend=True,
                                    history=None,
                                    prompt_continuation=' ' * len(self.prompt),
                                    mouse_support=False,
                                    erase_when_done=False)
            while True:
                yield session.prompt()
        except EOFError:
            return


def prompting_input(prompt=None):
    '''
    Return where lines should be read from.

    A prompting session if either:
    - prompt explicitly specified.
    - both stdin/out are a tty

    Plain stdin otherwise.
    '''
    if prompt or isatty(sys.stdin.fileno()) and isatty(sys.stdout.fileno()):
        return InteractiveInput(prompt=prompt or DEFAULT_PROMPT)
    return sys.stdin


def configure_logging(verbose):
    '''
    Set up root logging once per process; debug records only when verbose.
    '''
    logging.basicConfig(format=LOG_FORMAT)
    logging.getLogger(__package__).setLevel(
        logging.DEBUG if verbose else logging.WARNING)
