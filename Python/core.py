from itertools import islice

import sympy as sy

variables = sy.symbols
Variable = sy.Symbol


def is_var(x):
    return isinstance(x, Variable)


def is_atom(x):
    return isinstance(x, (bool, int, str, frozenset, type(None), ReifiedVariable))


class Singleton:
    """Class with a single instance"""

    def __new__(cls):
        obj = object.__new__(cls)
        cls.__new__ = lambda _: obj
        return obj


class ReifiedVariable:
    def __init__(self, n):
        self.name = '_{}'.format(n)

    def __eq__(self, other):
        return self.name == str(other)

    def __hash__(self):
        return hash(self.name)

    def __repr__(self):
        return self.name


class InvalidSubstitution(Singleton):
    @staticmethod
    def is_valid():
        return False

    def extend(self, *_args):
        return self

    def unify(self, *_args):
        return self


class Substitution:
    """Persistent mapping of logic variables to values.

    Bindings form a chain of (variable, value, parent) frames. Extending a
    substitution pushes one frame and leaves the original untouched.
    """

    def __init__(self, bindings=()):
        self._frame = None
        for var, value in dict(bindings).items():
            self._frame = (var, value, self._frame)

    @classmethod
    def _push(cls, frame, var, value):
        s = cls.__new__(cls)
        s._frame = (var, value, frame)
        return s

    @staticmethod
    def is_valid():
        return True

    def __iter__(self):
        frame = self._frame
        while frame is not None:
            var, value, frame = frame
            yield var, value

    def __len__(self):
        return sum(1 for _ in self)

    def lookup(self, var):
        for bound, value in self:
            if bound == var:
                return value
        raise KeyError(var)

    def values(self):
        return {value for _, value in self}

    def walk(self, x):
        while is_var(x):
            try:
                x = self.lookup(x)
            except KeyError:
                return x
        return x

    def walk_deep(self, x):
        x = self.walk(x)
        if is_var(x) or is_atom(x):
            return x
        if isinstance(x, (list, tuple)):
            return type(x)(self.walk_deep(item) for item in x)
        raise NotImplementedError("walk_deep: {}".format(type(x)))

    def occurs(self, var, value):
        value = self.walk(value)
        if is_var(value):
            return var == value
        if isinstance(value, (list, tuple)):
            return any(self.occurs(var, v) for v in value)
        return False

    def extend(self, var, value):
        if self.occurs(var, value):
            return InvalidSubstitution()
        return self._push(self._frame, var, value)

    def unify(self, x, y):
        x = self.walk(x)
        y = self.walk(y)

        if is_var(x) and is_var(y) and x == y:
            return self
        if is_var(x):
            return self.extend(x, y)
        if is_var(y):
            return self.extend(y, x)
        if is_atom(x) or is_atom(y):
            return self if x == y else InvalidSubstitution()

        if type(x) != type(y) or len(x) != len(y):
            return InvalidSubstitution()

        s = self
        for xi, yi in zip(x, y):
            s = s.unify(xi, yi)
        return s

    def reify(self, v):
        v = self.walk_deep(v)
        return Substitution()._reify(v).walk_deep(v)

    def _reify(self, v):
        v = self.walk(v)
        if is_var(v):
            return self.extend(v, ReifiedVariable(len(self)))
        if is_atom(v):
            return self
        r = self
        for item in v:
            r = r._reify(item)
        return r

    def __eq__(self, other):
        return isinstance(other, Substitution) and dict(self) == dict(other)

    def __hash__(self):
        return hash(frozenset(self))

    def __repr__(self):
        return 'Substitution({' + ', '.join('{}: {}'.format(k, v) for k, v in self) + '})'


def reify(v):
    return lambda s: s.reify(v)


def run_goal(n_or_goal, goal=None):
    if goal is None:
        return n_or_goal(Substitution())
    return islice(goal(Substitution()), n_or_goal)
