# coding= utf-8


class Environment(object):
    """
    Variable bindings for a session: one flat namespace of name -> float.

    Bindings are only ever made by assignment and only removed all at once
    by :meth:`clear` (the ``reset`` keyword).
    """
    def __init__(self, bindings=None):
        self._values = dict(bindings or {})

    def get(self, name):
        return self._values.get(name)

    def set(self, name, value):
        self._values[name] = float(value)

    def clear(self):
        self._values.clear()

    def items(self):
        return sorted(self._values.items())

    def __contains__(self, name):
        return name in self._values

    def __len__(self):
        return len(self._values)

    def __eq__(self, other):
        if isinstance(other, Environment):
            return self._values == other._values
        return self._values == other

    def __ne__(self, other):
        return not self == other

    def __repr__(self):
        return 'Environment(%r)' % self._values
