# Helpers for sequencing zipper moves. Every move returns a new Location
# or None, so a walk is a pipeline that stops at the first None.

from functools import reduce as ft_reduce


def compose(*fns):
    """
    Given a list of functions such as f, g, h, that each take a single value
    return a function that is equivalent of f(g(h(v)))
    """

    ordered = list(reversed(fns))
    reduce = ft_reduce

    def apply_(v, f):
        return f(v)

    def compose_(v):
        return reduce(apply_, ordered, v)
    return compose_


def call(name, *args, **kwargs):
    """
    Returns a function calling the method `name` on its argument.

    >>> call('upper')('blah')
    'BLAH'

    >>> call('split', ',')('a,b')
    ['a', 'b']
    """
    def call_(obj):
        return getattr(obj, name)(*args, **kwargs)
    return call_


def chain(value, *fns):
    """
    Thread value through fns left to right, short-circuiting to None as
    soon as one of them returns None.

    >>> chain(3, lambda v: v + 1, lambda v: v * 2)
    8

    >>> chain(3, lambda v: None, lambda v: v * 2) is None
    True
    """
    for f in fns:
        if value is None:
            return None
        value = f(value)
    return value


def walk(loc, *moves):
    """
    Apply zipper moves by name, e.g. walk(loc, 'go_down', 'go_right').
    A move may also be a (name, arg, ...) tuple for the edits that take
    arguments.
    """
    steps = []
    for move in moves:
        if isinstance(move, tuple):
            steps.append(call(*move))
        else:
            steps.append(call(move))
    return chain(loc, *steps)
