import argparse
import logging
import sys

import rpncalc
from rpncalc.display import render

logger = logging.getLogger(__name__)

PROMPT = '> '
BANNER = 'Type "exit" or input an end of file (Ctrl+D) to quit.'


class Session(object):
    """ Feeds lines to a :class:`rpncalc.Machine` and prints what comes back. """
    def __init__(self, quiet=False, out=None):
        self.machine = rpncalc.Machine()
        self.state = rpncalc.State()
        self.quiet = quiet
        self.out = out if out is not None else sys.stdout

    def _print(self, text):
        print(text, file=self.out)

    def feed(self, line):
        self.state, running = self.machine.process_line(line, self.state)
        for message in self.machine.messages:
            self._print(message)
        if running and not self.quiet:
            self._print(render(self.state))
        return running


def repl(session):
    import readline  # noqa: F401  line editing for input()

    print(BANNER)
    try:
        while session.feed(input(PROMPT)):
            pass
    except (EOFError, KeyboardInterrupt):
        print()  # perfectly acceptable
    logger.debug('session over')


def build_parser():
    parser = argparse.ArgumentParser(
        prog='rpncalc', description='Interactive Reverse Polish Notation calculator.')
    parser.add_argument('-e', '--eval', action='append', metavar='LINE', dest='lines',
                        help='process LINE and exit instead of prompting (repeatable)')
    parser.add_argument('-q', '--quiet', action='store_true',
                        help='do not show the stack and variables after each line')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='log every token at DEBUG level')
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    session = Session(quiet=args.quiet)
    if args.lines:
        for line in args.lines:
            if not session.feed(line):
                break
    else:
        repl(session)
    return 0


if __name__ == '__main__':
    sys.exit(main())
