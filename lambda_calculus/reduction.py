"""Beta-reduction of lambda terms under several evaluation orders."""

from __future__ import annotations

import enum
from collections.abc import Callable

from lambda_calculus.term import Abs, App, Term, TermError, Var


class Order(enum.Enum):
    """The evaluation order of beta-reductions.

    NOR, HNO, APP and HAP reduce to normal form (APP loops forever on terms
    such as the Y combinator); CBN reduces to weak head normal form, CBV to
    weak normal form and HSP to head normal form.
    """

    NOR = "normal"
    CBN = "call-by-name"
    HSP = "head spine"
    HNO = "hybrid normal"
    APP = "applicative"
    CBV = "call-by-value"
    HAP = "hybrid applicative"

    def __str__(self) -> str:
        return self.value


def apply(term: Term, rhs: Term) -> Term:
    """Apply ``rhs`` to the abstraction ``term`` by substitution.

    Raises TermError if ``term`` is not an abstraction.
    """
    if not isinstance(term, Abs):
        raise TermError("an abstraction")
    return _substitute(term.body, rhs, 1)


def _substitute(term: Term, rhs: Term, depth: int) -> Term:
    if isinstance(term, Var):
        if term.index == depth:
            return _shift_free(rhs, depth - 1, 0)
        if term.index > depth:
            return Var(term.index - 1)
        return term
    if isinstance(term, Abs):
        return Abs(_substitute(term.body, rhs, depth + 1))
    if isinstance(term, App):
        return App(_substitute(term.func, rhs, depth), _substitute(term.arg, rhs, depth))
    raise TypeError(f"not a term: {term!r}")


def _shift_free(term: Term, added: int, own_depth: int) -> Term:
    if isinstance(term, Var):
        return Var(term.index + added) if term.index > own_depth else term
    if isinstance(term, Abs):
        return Abs(_shift_free(term.body, added, own_depth + 1))
    if isinstance(term, App):
        return App(_shift_free(term.func, added, own_depth), _shift_free(term.arg, added, own_depth))
    raise TypeError(f"not a term: {term!r}")


class _Reducer:
    """Carries the reduction limit and the number of reductions done so far."""

    def __init__(self, limit: int) -> None:
        self.limit = limit
        self.count = 0

    def _exhausted(self) -> bool:
        return self.limit != 0 and self.count == self.limit

    def _reducible(self, term: Term) -> bool:
        return (
            isinstance(term, App)
            and isinstance(term.func, Abs)
            and (self.limit == 0 or self.count < self.limit)
        )

    def _eval(self, term: App) -> Term:
        self.count += 1
        return apply(term.func, term.arg)

    def cbn(self, term: Term) -> Term:
        while not self._exhausted() and isinstance(term, App):
            term = App(self.cbn(term.func), term.arg)
            if not self._reducible(term):
                break
            term = self._eval(term)
        return term

    def nor(self, term: Term) -> Term:
        while not self._exhausted():
            if isinstance(term, Abs):
                return Abs(self.nor(term.body))
            if not isinstance(term, App):
                return term
            term = App(self.cbn(term.func), term.arg)
            if self._reducible(term):
                term = self._eval(term)
                continue
            func = self.nor(term.func)
            arg = self.nor(term.arg)
            return App(func, arg)
        return term

    def cbv(self, term: Term) -> Term:
        while not self._exhausted() and isinstance(term, App):
            func = self.cbv(term.func)
            arg = self.cbv(term.arg)
            term = App(func, arg)
            if not self._reducible(term):
                break
            term = self._eval(term)
        return term

    def app(self, term: Term) -> Term:
        while not self._exhausted():
            if isinstance(term, Abs):
                return Abs(self.app(term.body))
            if not isinstance(term, App):
                return term
            func = self.app(term.func)
            arg = self.app(term.arg)
            term = App(func, arg)
            if not self._reducible(term):
                return term
            term = self._eval(term)
        return term

    def hap(self, term: Term) -> Term:
        while not self._exhausted():
            if isinstance(term, Abs):
                return Abs(self.hap(term.body))
            if not isinstance(term, App):
                return term
            func = self.cbv(term.func)
            arg = self.hap(term.arg)
            term = App(func, arg)
            if self._reducible(term):
                term = self._eval(term)
                continue
            return App(self.hap(term.func), term.arg)
        return term

    def hsp(self, term: Term) -> Term:
        while not self._exhausted():
            if isinstance(term, Abs):
                return Abs(self.hsp(term.body))
            if not isinstance(term, App):
                return term
            term = App(self.hsp(term.func), term.arg)
            if not self._reducible(term):
                return term
            term = self._eval(term)
        return term

    def hno(self, term: Term) -> Term:
        while not self._exhausted():
            if isinstance(term, Abs):
                return Abs(self.hno(term.body))
            if not isinstance(term, App):
                return term
            term = App(self.hsp(term.func), term.arg)
            if self._reducible(term):
                term = self._eval(term)
                continue
            func = self.hno(term.func)
            arg = self.hno(term.arg)
            return App(func, arg)
        return term

    def strategy(self, order: Order) -> Callable[[Term], Term]:
        return {
            Order.NOR: self.nor,
            Order.CBN: self.cbn,
            Order.HSP: self.hsp,
            Order.HNO: self.hno,
            Order.APP: self.app,
            Order.CBV: self.cbv,
            Order.HAP: self.hap,
        }[order]


def reduce(term: Term, order: Order, limit: int = 0) -> tuple[Term, int]:
    """Beta-reduce ``term`` in the given order, at most ``limit`` times (0 means
    no limit); return the reduced term and the number of reductions done."""
    if limit < 0:
        raise ValueError(f"the reduction limit must not be negative: {limit}")
    reducer = _Reducer(limit)
    reduced = reducer.strategy(Order(order))(term)
    return reduced, reducer.count


def beta(term: Term, order: Order, limit: int = 0) -> Term:
    """Beta-reduce ``term`` in the given order with an optional limit (0 means none)."""
    return reduce(term, order, limit)[0]