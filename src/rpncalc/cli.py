import sys
from argparse import ArgumentParser, REMAINDER, OPTIONAL

from prompt_toolkit import PromptSession

from . import __version__
from .util import RPNError
from .machine import Machine
from .lexer import Lexer


def run(lines, verbose=False, *, out=None, err=None):
    '''
    Evaluate every line, printing results to out and errors to err.

    A bad formula doesn't stop the run. Errors reading lines do.
    '''
    err = err or sys.stderr
    machine = Machine(verbose=verbose, file=err)
    for line in lines:
        try:
            print(machine.eval(line.rstrip('\n')), file=out or sys.stdout)
        except RPNError as e:
            print(e.args[0], file=err)


class InteractiveInput:
    def __init__(self, prompt):
        self.prompt = prompt

    def __iter__(self):
        try:
            session = PromptSession(message=self.prompt,
                                    enable_suspend=True,
                                    prompt_continuation=' ' * len(self.prompt),
                                    # Certainly not! But be explicit.
                                    erase_when_done=False)
            while True:
                yield session.prompt()
        except EOFError:
            return


class CLI:
    '''
    Command line interface to RPN calculator.
    '''

    DEFAULT_PROMPT = '> '

    def dumper(self):
        '''
        Dump position, kind, text, and arity of every token.
        '''
        machine = Machine()
        lexer = Lexer()
        print('<pos>\t[kind]\t<repr(token)>\t<arity>')
        for line in self.args.expressions:
            for pos, token, groups in lexer.lex(line):
                print(pos,
                      *groups.keys(),
                      repr(token),
                      machine.arity(groups),
                      sep='\t')

    def executor(self):
        '''
        Run machine (RPN calculator).
        '''
        run(self.args.expressions, verbose=self.args.verbose)

    def _prompting_input(self):
        '''
        Return prompting input if either:
        - prompt explicitly specified.
        - both stdin/out are a tty

        Plain stdin otherwise.
        '''
        if self.args.prompt or \
           sys.stdin.isatty() and sys.stdout.isatty():
            return InteractiveInput(prompt=self.args.prompt or
                                    self.DEFAULT_PROMPT)
        else:
            # Only \n ends a line; a lone \r is whitespace within it.
            sys.stdin.reconfigure(encoding='utf-8', newline='\n')
            return sys.stdin

    def __init__(self):
        '''
        Create ready to run CLI.

        Does not run or parse command line arguments.
        '''
        self.argument_parser = ArgumentParser(
            prog='rpncalc',
            description='Integer RPN calculator, one formula per line')
        self.argument_parser.add_argument('-v', '--verbose',
                                          action='store_true',
                                          help='trace tokens and stack '
                                               'on stderr')
        self.argument_parser.add_argument('--version', action='version',
                                          version='%(prog)s ' + __version__)
        input_groups = self.argument_parser.add_mutually_exclusive_group()
        input_groups.add_argument('file', metavar='FILE', nargs=OPTIONAL,
                                  help='formulas, one per line '
                                       '(default: stdin)')
        input_groups.add_argument('-e', '--expression',
                                  nargs=REMAINDER,
                                  dest='expressions',
                                  help='formulas, one per argument')
        input_groups.add_argument('-p', '--prompt',
                                  nargs=OPTIONAL,
                                  const=self.DEFAULT_PROMPT,
                                  help='prompt for formulas interactively')
        self.argument_parser.add_argument('-D', '--dump',
                                          action='store_const',
                                          const=self.dumper,
                                          dest='action',
                                          help='dump tokens instead of '
                                               'evaluating')
        self.argument_parser.set_defaults(action=self.executor,
                                          expressions=None)

    def run(self, *, args=None):
        '''
        Run CLI, given these args, or the process' arguments.

        Returns exit status.
        '''
        self.args = self.argument_parser.parse_args(args)
        try:
            if self.args.file is not None:
                with open(self.args.file, encoding='utf-8',
                          newline='\n') as fp:
                    self.args.expressions = fp
                    self.args.action()
            else:
                if self.args.expressions is None:
                    self.args.expressions = self._prompting_input()
                self.args.action()
        except (OSError, UnicodeDecodeError) as e:
            print('{}: {}'.format(self.argument_parser.prog, e),
                  file=sys.stderr)
            return 1
        except KeyboardInterrupt:
            return 1
        return 0
