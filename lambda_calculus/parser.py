"""A parser for lambda expressions in classic or De Bruijn index notation."""

from __future__ import annotations

import enum
import string
from collections.abc import Iterator, Sequence as SequenceABC
from dataclasses import dataclass
from typing import Union

from lambda_calculus.term import Notation, Term, Var, abs_n, app

_LAMBDAS = frozenset("\\λ")


class ParseError(ValueError):
    """Raised when an expression cannot be parsed."""


class InvalidCharacter(ParseError):
    """A lexical error: the input holds a character that is not allowed."""

    def __init__(self, index: int, char: str) -> None:
        super().__init__(f"invalid character {char!r} at index {index}")
        self.index = index
        self.char = char


class InvalidExpression(ParseError):
    """A syntax error: the expression is invalid."""

    def __init__(self) -> None:
        super().__init__("the expression is invalid")


class EmptyExpression(ParseError):
    """A syntax error: the expression, or a part of it, is empty."""

    def __init__(self) -> None:
        super().__init__("the expression is empty")


class TokenKind(enum.Enum):
    """Kinds of token in De Bruijn notation."""

    LAMBDA = "lambda"
    LPAREN = "lparen"
    RPAREN = "rparen"
    NUMBER = "number"


@dataclass(frozen=True)
class Token:
    """A De Bruijn notation token; ``value`` holds a number's index."""

    kind: TokenKind
    value: int | None = None


class ClassicTokenKind(enum.Enum):
    """Kinds of token in classic notation."""

    LAMBDA = "lambda"
    LPAREN = "lparen"
    RPAREN = "rparen"
    NAME = "name"


@dataclass(frozen=True)
class ClassicToken:
    """A classic notation token; ``name`` holds a bound or used identifier."""

    kind: ClassicTokenKind
    name: str | None = None


@dataclass(frozen=True)
class Abstraction:
    """An abstraction marker in the syntax tree."""


@dataclass(frozen=True)
class Variable:
    """A variable with a De Bruijn index in the syntax tree."""

    index: int


@dataclass(frozen=True)
class Sequence:
    """A sequence of expressions in the syntax tree."""

    items: tuple[Expression, ...] = ()


Expression = Union[Abstraction, Sequence, Variable]


def tokenize_dbr(text: str) -> list[Token]:
    """Split De Bruijn notation into tokens; indices are hex digits."""
    tokens: list[Token] = []
    for index, char in enumerate(text):
        if char in _LAMBDAS:
            tokens.append(Token(TokenKind.LAMBDA))
        elif char == "(":
            tokens.append(Token(TokenKind.LPAREN))
        elif char == ")":
            tokens.append(Token(TokenKind.RPAREN))
        elif char in string.hexdigits:
            tokens.append(Token(TokenKind.NUMBER, int(char, 16)))
        elif not char.isspace():
            raise InvalidCharacter(index, char)
    return tokens


def tokenize_cla(text: str) -> list[ClassicToken]:
    """Split classic notation into tokens."""
    tokens: list[ClassicToken] = []
    chars = list(enumerate(text))
    pos = 0
    while pos < len(chars):
        index, char = chars[pos]
        pos += 1
        if char in _LAMBDAS:
            name = []
            while pos < len(chars):
                index, char = chars[pos]
                pos += 1
                if char == ".":
                    break
                if not char.isalpha():
                    raise InvalidCharacter(index, char)
                name.append(char)
            tokens.append(ClassicToken(ClassicTokenKind.LAMBDA, "".join(name)))
        elif char == "(":
            tokens.append(ClassicToken(ClassicTokenKind.LPAREN))
        elif char == ")":
            tokens.append(ClassicToken(ClassicTokenKind.RPAREN))
        elif char.isspace():
            continue
        elif char.isalpha():
            name = [char]
            while pos < len(chars):
                following = chars[pos][1]
                if following.isspace() or following in "()":
                    break
                name.append(following)
                pos += 1
            tokens.append(ClassicToken(ClassicTokenKind.NAME, "".join(name)))
        else:
            raise InvalidCharacter(index, char)
    return tokens


def convert_classic_tokens(tokens: SequenceABC[ClassicToken]) -> list[Token]:
    """Turn classic tokens into De Bruijn tokens, resolving names to indices."""
    return _convert(iter(tokens), [])


def _convert(tokens: Iterator[ClassicToken], stack: list[str]) -> list[Token]:
    output: list[Token] = []
    bound_here = 0
    for token in tokens:
        if token.kind is ClassicTokenKind.LAMBDA:
            output.append(Token(TokenKind.LAMBDA))
            stack.append(token.name or "")
            bound_here += 1
        elif token.kind is ClassicTokenKind.LPAREN:
            output.append(Token(TokenKind.LPAREN))
            output.extend(_convert(tokens, stack))
        elif token.kind is ClassicTokenKind.RPAREN:
            output.append(Token(TokenKind.RPAREN))
            del stack[len(stack) - bound_here :]
            return output
        else:
            position = next(
                (i for i, name in enumerate(reversed(stack)) if name == token.name),
                len(stack),
            )
            output.append(Token(TokenKind.NUMBER, position + 1))
    return output


def get_ast(tokens: SequenceABC[Token]) -> Sequence:
    """Build a syntax tree from De Bruijn tokens."""
    if not tokens:
        raise EmptyExpression()
    return _get_ast(iter(tokens))


def _get_ast(tokens: Iterator[Token]) -> Sequence:
    items: list[Expression] = []
    for token in tokens:
        if token.kind is TokenKind.LAMBDA:
            items.append(Abstraction())
        elif token.kind is TokenKind.NUMBER:
            items.append(Variable(token.value or 0))
        elif token.kind is TokenKind.LPAREN:
            items.append(_get_ast(tokens))
        else:
            break
    return Sequence(tuple(items))


def fold_exprs(exprs: SequenceABC[Expression]) -> Term:
    """Fold a sequence of syntax tree expressions into a term."""
    depth = 0
    terms: list[Term] = []
    for expr in exprs:
        if isinstance(expr, Abstraction):
            depth += 1
        elif isinstance(expr, Variable):
            terms.append(Var(expr.index))
        else:
            terms.append(fold_exprs(expr.items))
    return abs_n(depth, _fold_terms(terms))


def _fold_terms(terms: list[Term]) -> Term:
    if not terms:
        raise EmptyExpression()
    first, *rest = terms
    return app(first, *rest) if rest else first


def parse(text: str, notation: Notation) -> Term:
    """Parse ``text`` as a lambda term written in the given notation.

    Lambdas may be written as 'λ' or a backslash. Classic identifiers are
    alphabetic; De Bruijn indices start at 1 and are single hex digits.
    """
    if notation is Notation.DEBRUIJN:
        tokens = tokenize_dbr(text)
    else:
        tokens = convert_classic_tokens(tokenize_cla(text))
    ast = get_ast(tokens)
    if not isinstance(ast, Sequence):
        raise InvalidExpression()
    return fold_exprs(ast.items)