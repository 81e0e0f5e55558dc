# coding= utf-8
"""
Everything that can go wrong while processing a line.

All of these are recoverable: :meth:`rpncalc.Machine.process_line` catches
them, reports them and abandons the rest of the line.
"""


class CalcError(Exception): pass


class LexError(CalcError):
    def __init__(self, token):
        CalcError.__init__(self, 'unrecognised token: %s' % token)
        self.token = token


class StackUnderflow(CalcError):
    def __init__(self, needed, found, what=None):
        if what is None:
            message = 'stack underflow'
        else:
            message = 'insufficient values for %s' % what
        CalcError.__init__(self, '%s (need %d, have %d)' % (message, needed, found))
        self.needed = needed
        self.found = found


class UnassignedVariable(CalcError):
    def __init__(self, name):
        CalcError.__init__(self, 'variable not yet assigned: %s' % name)
        self.name = name


class InvalidOperands(CalcError): pass
class UnknownOperator(CalcError): pass
class UnknownKeyword(CalcError): pass
