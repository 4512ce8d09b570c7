# lambda_calculus

A small implementation of the untyped lambda calculus. Terms use De Bruijn
indices that start at 1. You can parse terms from classic notation (`λx.x`)
or from De Bruijn notation (`λ1`). You can show terms in either notation and
beta-reduce them with one of several evaluation orders.

## Installation

```
pip install .
```

## Building terms

The module `lambda_calculus.term` defines the term classes `Var`, `Abs` and
`App`. Each of them is a subclass of `Term`, is frozen, and compares by value.

```python
from lambda_calculus.term import Var, abs_, abs_n, app, Notation

zero = abs_n(2, Var(1))
succ = abs_n(3, app(Var(2), app(Var(3), Var(2), Var(1))))

print(succ.show(Notation.CLASSIC))   # λa.λb.λc.b (a b c)
print(succ.show(Notation.DEBRUIJN))  # λλλ2(321)
print(str(succ))                     # classic notation
print(repr(succ))                    # De Bruijn notation
```

- `app(a, b, c)` applies the terms from left to right, so it is the same as
  `app(app(a, b), c)`. It needs at least two terms and raises `TypeError`
  otherwise.
- `abs_(t)` wraps `t` in one abstraction.
- `abs_n(n, t)` wraps `t` in `n` abstractions.
- `Var` rejects negative indices with `ValueError`.
- `Var(0)` is also available as `UD`, the undefined term, which is displayed
  as `undefined`.

The methods `Term.unvar`, `Term.unabs`, `Term.unapp`, `Term.lhs` and
`Term.rhs` take a term apart. Each of them raises `TermError`, a subclass of
`ValueError`, when the term has the wrong shape. `Term.is_supercombinator`
returns `True` when the term has no free variables.

In classic notation, bound variables are named `a`, `b`, `c` and so on,
according to the depth at which they are bound.

## Parsing

```python
from lambda_calculus.parser import parse
from lambda_calculus.term import Notation

y = parse("λf.(λx.f (x x)) (λx.f (x x))", Notation.CLASSIC)
s = parse(r"\\\3 1 (2 1)", Notation.DEBRUIJN)
```

Notation rules:

- A lambda is written as `λ` or as a backslash.
- Classic identifiers are made of alphabetic characters.
- In De Bruijn notation each index is a single hexadecimal digit, and
  whitespace is ignored.

When parsing fails, `parse` raises a subclass of `ParseError`, which is itself
a subclass of `ValueError`:

- `InvalidCharacter` carries the `index` and the `char` of the offending
  character.
- `InvalidExpression` means the expression is invalid.
- `EmptyExpression` means the expression, or a part of it, is empty.

The module also exposes its intermediate steps:

- `tokenize_dbr` and `tokenize_cla` split the text into tokens.
- `convert_classic_tokens` turns classic tokens into De Bruijn tokens.
- `get_ast` builds a tree of `Abstraction`, `Variable` and `Sequence` nodes.
- `fold_exprs` turns that tree into a term.

## Reduction

```python
from lambda_calculus.parser import parse
from lambda_calculus.reduction import beta, reduce, Order
from lambda_calculus.term import Notation

expr = parse("(λa.λb.λc.b (a b c)) (λa.λb.b)", Notation.CLASSIC)
result = beta(expr, Order.NOR, 0)
print(result.show(Notation.CLASSIC))  # λa.λb.a b

reduced, steps = reduce(expr, Order.NOR)
```

- `beta(term, order, limit=0)` returns the reduced term.
- `reduce(term, order, limit=0)` returns a pair: the reduced term and the
  number of reductions it performed.
- A `limit` of `0` means that there is no limit. A negative limit raises
  `ValueError`.
- Terms are immutable, so both functions return new terms.

The available orders are listed below. `str(order)` gives the name in the
Strategy column.

| Order | Strategy |
|-------|----------|
| `Order.NOR` | normal |
| `Order.CBN` | call-by-name |
| `Order.HSP` | head spine |
| `Order.HNO` | hybrid normal |
| `Order.APP` | applicative |
| `Order.CBV` | call-by-value |
| `Order.HAP` | hybrid applicative |

`NOR`, `HNO`, `APP` and `HAP` reduce to normal form. `APP` never terminates on
terms such as the Y combinator. `CBN` reduces to weak head normal form, `CBV`
to weak normal form and `HSP` to head normal form.

`apply(term, rhs)` substitutes `rhs` into the abstraction `term` and returns
the result. It raises `TermError` if `term` is not an abstraction.

## Tuples

```python
from lambda_calculus.tuples import make_tuple, pi
from lambda_calculus.reduction import beta, Order
from lambda_calculus.term import Var, abs_, abs_n, app

t = make_tuple(abs_(Var(1)), abs_n(2, Var(1)), abs_n(2, Var(2)))
second = beta(app(pi(2, 3), t), Order.NOR, 0)  # λλ1
```

- `make_tuple` encodes two or more terms as an n-tuple. It raises `TypeError`
  if it is given fewer than two terms.
- `pi(i, n)` is the projection that gives the `i`-th element of an `n`-tuple,
  counting from one. It raises `ValueError` if `i` is not between 1 and `n`.

## What it does not include

This package is a library only. It has no command-line tool and no
interactive interpreter. It also does not ship ready-made combinators or
data encodings such as booleans, numerals, pairs, options or lists. You build
those yourself from `Var`, `abs_n` and `app`, or you parse them.

## Running the tests

```
pip install .[test]
pytest
```