"""Lambda-encoded n-tuples and their projection functions."""

from __future__ import annotations

from lambda_calculus.term import Abs, App, Term, Var, abs_n


def make_tuple(first: Term, *args: Term) -> Term:
    """Encode ``first`` and ``args`` as a lambda tuple: λ 1 first args..."""
    if not args:
        raise TypeError("make_tuple() needs at least two terms")
    body: Term = App(Var(1), first)
    for arg in args:
        body = App(body, arg)
    return Abs(body)


def pi(i: int, n: int) -> Term:
    """Return the projection of the ``i``-th (one-indexed) element of an ``n``-tuple."""
    if not 1 <= i <= n:
        raise ValueError(f"cannot project element {i} of a {n}-tuple")
    return Abs(App(Var(1), abs_n(n, Var(n + 1 - i))))