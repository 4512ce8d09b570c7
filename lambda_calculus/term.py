"""Lambda terms using De Bruijn indices, with classic and De Bruijn display."""

from __future__ import annotations

import enum
from dataclasses import dataclass

LAMBDA = "λ"


class Notation(enum.Enum):
    """The notation used for parsing and displaying terms."""

    CLASSIC = "classic"
    DEBRUIJN = "debruijn"


class TermError(ValueError):
    """Raised when an operation does not apply to the kind of term given."""

    def __init__(self, expected: str) -> None:
        super().__init__(f"the term is not {expected}")
        self.expected = expected


class Term:
    """A lambda term: a variable, an abstraction or an application."""

    __slots__ = ()

    def unvar(self) -> int:
        """Return a variable's De Bruijn index."""
        if isinstance(self, Var):
            return self.index
        raise TermError("a variable")

    def unabs(self) -> Term:
        """Return an abstraction's body."""
        if isinstance(self, Abs):
            return self.body
        raise TermError("an abstraction")

    def unapp(self) -> tuple[Term, Term]:
        """Return the two sides of an application."""
        if isinstance(self, App):
            return self.func, self.arg
        raise TermError("an application")

    def lhs(self) -> Term:
        """Return the left-hand side of an application."""
        return self.unapp()[0]

    def rhs(self) -> Term:
        """Return the right-hand side of an application."""
        return self.unapp()[1]

    def is_supercombinator(self) -> bool:
        """Return True if the term has no free variables."""
        stack: list[tuple[int, Term]] = [(0, self)]
        while stack:
            depth, term = stack.pop()
            if isinstance(term, Var):
                if term.index > depth:
                    return False
            elif isinstance(term, Abs):
                stack.append((depth + 1, term.body))
            elif isinstance(term, App):
                stack.append((depth, term.func))
                stack.append((depth, term.arg))
        return True

    def show(self, notation: Notation = Notation.CLASSIC) -> str:
        """Render the term in the given notation."""
        if notation is Notation.DEBRUIJN:
            return _show_dbr(self, 0)
        return _show_cla(self, 0, 0)

    def __str__(self) -> str:
        return self.show(Notation.CLASSIC)

    def __repr__(self) -> str:
        return self.show(Notation.DEBRUIJN)


@dataclass(frozen=True, eq=True, repr=False, slots=True)
class Var(Term):
    """A variable with a De Bruijn index; index 0 means undefined."""

    index: int

    def __post_init__(self) -> None:
        if not isinstance(self.index, int) or self.index < 0:
            raise ValueError(f"invalid De Bruijn index: {self.index!r}")


@dataclass(frozen=True, eq=True, repr=False, slots=True)
class Abs(Term):
    """An abstraction over a term."""

    body: Term


@dataclass(frozen=True, eq=True, repr=False, slots=True)
class App(Term):
    """An application of one term to another."""

    func: Term
    arg: Term


UD = Var(0)
"""An undefined term, displayed as ``undefined``."""


def abs_(term: Term) -> Term:
    """Wrap a term in an abstraction."""
    return Abs(term)


def abs_n(n: int, term: Term) -> Term:
    """Wrap a term in ``n`` abstractions."""
    for _ in range(n):
        term = Abs(term)
    return term


def app(first: Term, *args: Term) -> Term:
    """Apply ``first`` to each of ``args`` in turn, left-associatively."""
    if not args:
        raise TypeError("app() needs at least two terms")
    term = first
    for arg in args:
        term = App(term, arg)
    return term


def _parenthesize_if(text: str, condition: bool) -> str:
    return f"({text})" if condition else text


def _show_cla(term: Term, context: int, depth: int) -> str:
    if isinstance(term, Var):
        if term.index == 0:
            return "undefined"
        if depth >= term.index:
            return chr(depth + 97 - term.index)
        return chr(96 + term.index)
    if isinstance(term, Abs):
        text = f"{LAMBDA}{chr(depth + 97)}.{_show_cla(term.body, 0, depth + 1)}"
        return _parenthesize_if(text, context > 1)
    if isinstance(term, App):
        text = f"{_show_cla(term.func, 2, depth)} {_show_cla(term.arg, 3, depth)}"
        return _parenthesize_if(text, context == 3)
    raise TypeError(f"not a term: {term!r}")


def _show_dbr(term: Term, context: int) -> str:
    if isinstance(term, Var):
        if term.index == 0:
            return "undefined"
        return format(term.index, "X")
    if isinstance(term, Abs):
        text = f"{LAMBDA}{_show_dbr(term.body, 0)}"
        return _parenthesize_if(text, context > 1)
    if isinstance(term, App):
        text = f"{_show_dbr(term.func, 2)}{_show_dbr(term.arg, 3)}"
        return _parenthesize_if(text, context == 3)
    raise TypeError(f"not a term: {term!r}")