from os import isatty
from sys import stdin, stdout, stderr, exit
from argparse import ArgumentParser, REMAINDER, OPTIONAL
import traceback

from prompt_toolkit import PromptSession

from .outcome import Result
from .machine import Machine
from .lexer import Lexer
from .presenter import Presenter
from .stack import BoundedStack


class InteractiveInput:
    def __init__(self, prompt):
        self.prompt = prompt

    def __iter__(self):
        try:
            session = PromptSession(message=self.prompt,
                                    vi_mode=False,
                                    enable_suspend=True,
                                    # Nothing persists between sessions.
                                    history=None,
                                    prompt_continuation=' ' * len(self.prompt),
                                    mouse_support=False,
                                    erase_when_done=False)
            while True:
                yield session.prompt()
        except EOFError:
            return


class CLI:
    '''
    Command line interface to the RPN calculator.
    '''

    DEFAULT_PROMPT = 'RPN >>> '

    def dumper(self):
        '''
        Dump every token with its classification, without running any.
        '''
        machine = Machine()
        lexer = Lexer()
        print('<token>\t<kind>\t<payload>')
        for line in self.args.expressions:
            for token in lexer.tokens(line):
                kind, payload = machine.classify(token)
                print(token, kind.value, repr(payload), sep='\t')

    def executor(self):
        '''
        Run machine (RPN calculator) until quit or end of input.
        '''
        machine = Machine(BoundedStack())
        lexer = Lexer()
        presenter = Presenter()
        if self._interactive():
            print(presenter.HELP)
        for line in self.args.expressions:
            for token in lexer.tokens(line):
                outcome = machine.feed(token)
                if outcome.tag is Result.QUIT:
                    # Rest of the line, if any, is dropped too.
                    return
                self._report(presenter, outcome)

    def _report(self, presenter, outcome):
        '''
        Print outcome: errors to stderr, the rest to stdout.
        '''
        message = presenter.message(outcome)
        if message is None:
            return
        if outcome.iserror:
            print(message, file=stderr)
            if self.args.verbose and outcome.cause is not None:
                traceback.print_exception(type(outcome.cause),
                                          outcome.cause,
                                          outcome.cause.__traceback__,
                                          file=stderr)
        else:
            print(message)

    def raw_grammar(self):
        '''
        Print the numeric literal grammar.
        '''
        lexer = Lexer()
        print(lexer.LITERAL)

    def _prompting_input(self):
        '''
        Return prompting stdin.__iter__ decorator...

        If either:
        - prompt explicitly specified.
        - both stdin/out are a tty
        '''
        if self.args.prompt or \
           isatty(stdin.fileno()) and isatty(stdout.fileno()):
            return InteractiveInput(prompt=self.args.prompt or
                                    self.DEFAULT_PROMPT)
        else:
            return stdin

    def __init__(self):
        '''
        Create ready to run CLI.

        Does not run or parse command line arguments.
        '''
        self.argument_parser = ArgumentParser(description='RPN calculator')
        self.argument_parser.add_argument('-v', '--verbose',
                                          action='store_true',
                                          help='show tracebacks of failed '
                                               'math functions')
        int_nonint_groups = self.argument_parser.add_mutually_exclusive_group()
        int_nonint_groups.add_argument('-e', '--expression',
                                       nargs=REMAINDER,
                                       dest='expressions',
                                       help='lines to run instead of stdin')
        int_nonint_groups.add_argument('-p', '--prompt',
                                       nargs=OPTIONAL,
                                       const=self.DEFAULT_PROMPT)
        main_groups = self.argument_parser.add_mutually_exclusive_group()
        for short_, long_, action in [('-G', '--raw-grammar',
                                       self.raw_grammar),
                                      ('-D', '--dump', self.dumper)]:
            main_groups.add_argument(short_, long_,
                                     action='store_const',
                                     const=action,
                                     dest='action')
        self.argument_parser.set_defaults(action=self.executor,
                                          expressions=stdin)

    def _interactive(self):
        return isinstance(self.args.expressions, InteractiveInput)

    def run(self, *, args=None):
        '''
        Run CLI, given these args, or previously passed CLI args.
        '''
        self.args = self.argument_parser.parse_args(args)
        if self.args.expressions is stdin:
            self.args.expressions = self._prompting_input()
        try:
            self.args.action()
        except KeyboardInterrupt:
            exit(1)


def main():
    CLI().run()
