# coding= utf-8
"""
Token classification.

:func:`classify` looks at a single word and says what kind of token it is.
It never fails: anything it cannot make sense of is INVALID, and it is up to
the :class:`rpncalc.Machine` to decide what that means.
"""
import re

NUMBER = 'NUMBER'
IDENTIFIER = 'IDENTIFIER'
BINARY_OPERATOR = 'BINARY_OPERATOR'
ASSIGNMENT = 'ASSIGNMENT'
KEYWORD = 'KEYWORD'
FOLD = 'FOLD'
INVALID = 'INVALID'

BINARY_OPERATORS = ('+', '-', '*', '/')
ASSIGNMENT_OPERATOR = '='
KEYWORDS = ('clear', 'reset', 'exit', 'print', 'dup', 'drop', 'swap')
FOLDS = ('sum', 'prod')

_LITERALS = {ASSIGNMENT_OPERATOR: ASSIGNMENT}
_LITERALS.update((op, BINARY_OPERATOR) for op in BINARY_OPERATORS)
_LITERALS.update((word, KEYWORD) for word in KEYWORDS)
_LITERALS.update((word, FOLD) for word in FOLDS)

# float() is more forgiving than a float literal ought to be (digit-group
# underscores, surrounding whitespace), so the shape is checked first.
_FLOAT_LITERAL = re.compile(r"""
    [+-]?
    (?:
        (?: \d+ \.? \d* | \. \d+ ) (?: [eE] [+-]? \d+ )?
      | inf(?:inity)?
      | nan
    )
    \Z
""", re.VERBOSE | re.IGNORECASE)


def is_number(token):
    return _FLOAT_LITERAL.match(token) is not None


def parse_number(token):
    """ Converts a token already classified as NUMBER to its value. """
    return float(token)


def classify(token):
    if token in _LITERALS:
        return _LITERALS[token]
    if is_number(token):
        return NUMBER
    if token.isalnum():
        return IDENTIFIER
    return INVALID


def tokenize(words):
    """ Pairs every word with its kind, as (kind, word) tuples. """
    return [(classify(word), word) for word in words]
