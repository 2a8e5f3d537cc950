from itertools import chain

from core import reify, run_goal


def make_goal(func):
    """Decorator that turns a function of the form f(Substitution, ...) into
    a goal-creating function.

    For example:
        @make_goal
        def same(s, u, v):
            ...

    is equivalent to
        def same(u, v):
            def goal(s):
                ...
            return goal
    """

    def wrap(*args, **kwargs):
        def goal(s):
            return func(s, *args, **kwargs)

        return goal

    if func.__doc__ is not None:
        wrap.__doc__ = "produce a " + func.__doc__
    return wrap


@make_goal
def same(s, u, v):
    """goal that succeeds if u and v unify"""
    s = s.unify(u, v)
    if s.is_valid():
        yield s


def fail(s):
    """goal that never succeeds"""
    return iter(())


def succeed(s):
    """goal that always succeeds"""
    yield s


def append_map(goal, stream):
    for s in stream:
        yield from goal(s)


@make_goal
def disj(s, *subgoals):
    """goal that succeeds if any of its subgoals succeeds"""
    stream = fail(s)
    for g in subgoals:
        stream = chain(stream, g(s))
    yield from stream


@make_goal
def conj(s, *subgoals):
    """goal that succeeds if all of its subgoals succeed"""
    stream = succeed(s)
    for g in subgoals:
        stream = append_map(g, stream)
    yield from stream


@make_goal
def membero(s, item, candidates):
    """goal that succeeds once for every candidate that unifies with item"""
    yield from disj(*(same(item, x) for x in s.walk(candidates)))(s)


def run(*args):
    """Reified values of the query term for the solutions of all goals.

        run(query, *goals)
        run(n, query, *goals)
    """
    if isinstance(args[0], int):
        n, args = args[0], args[1:]
    else:
        n = None
    query, goals = args[0], args[1:]

    solutions = run_goal(conj(*goals)) if n is None else run_goal(n, conj(*goals))
    return map(reify(query), solutions)
