# coding= utf-8
import re


class Parser(object):
    """
    Splits one line of calculator input into words.

    The parser is stateful: each instance is given the line to operate on,
    and calls to parse_whatever advance its position within that line, so
    the next call starts where the previous one left off.

    A word is any run of non-whitespace characters. The parser knows nothing
    about what a word means; classifying words is the job of
    :func:`rpncalc.lexer.classify`.

    The parse_* methods raise :exc:`StopIteration` once the line has been
    completely consumed. :meth:`generate` wraps this up as a plain generator
    that just ends at the end of the line.
    """
    def __init__(self, text):
        self.text = text
        self.pos = 0

    @property
    def is_finished(self):
        return self.pos >= len(self.text)

    def _consume(self, pattern):
        """
        Consume (advancing self.pos) some characters matching a regex at the
        current position. Returns the consumed text, or None if the regex
        does not match here.
        """
        if self.is_finished:
            raise StopIteration()
        found = re.compile(pattern).match(self.text, self.pos)
        if found is None:
            return None
        self.pos = found.end()
        return found.group()

    def parse_whitespace(self):
        return self._consume(r'\s*')

    def parse_word(self):
        return self._consume(r'\S+')

    def next_word(self):
        self.parse_whitespace()
        return self.parse_word()

    def generate(self):
        while True:
            try:
                yield self.next_word()
            except StopIteration:
                return
