import pytest

from lambda_calculus.parser import parse
from lambda_calculus.reduction import Order, apply, beta, reduce
from lambda_calculus.term import Notation, TermError, Var, abs_, app


def identity():
    return abs_(Var(1))


def omega():
    return app(abs_(app(Var(1), Var(1))), abs_(app(Var(1), Var(1))))


def test_reduction_nor():
    reduces_instantly = parse("(λλ1)((λλλ((32)1))(λλ2))", Notation.DEBRUIJN)
    assert beta(reduces_instantly, Order.NOR, 0) == beta(reduces_instantly, Order.NOR, 1)

    should_reduce = parse("(λ2)((λ111)(λ111))", Notation.DEBRUIJN)
    assert beta(should_reduce, Order.NOR, 0) == Var(1)

    does_reduce = app(abs_(Var(2)), omega())
    assert beta(does_reduce, Order.NOR, 0) == Var(1)


def test_reduction_nor_counts_one_step():
    reduces_instantly = parse("(λλ1)((λλλ((32)1))(λλ2))", Notation.DEBRUIJN)
    _, count = reduce(reduces_instantly, Order.NOR, 0)
    assert count == 1


def test_reduction_cbn():
    i = identity()
    expr = app(abs_(app(i, Var(1))), app(i, i))
    expr, _ = reduce(expr, Order.CBN, 1)
    assert expr == app(i, app(i, i))
    expr, _ = reduce(expr, Order.CBN, 1)
    assert expr == app(i, i)
    expr, _ = reduce(expr, Order.CBN, 1)
    assert expr == i


def test_reduction_app():
    wont_reduce = app(abs_(Var(2)), omega())
    reduced, count = reduce(wont_reduce, Order.APP, 3)
    assert reduced == app(abs_(Var(2)), omega())
    assert count == 3


def test_reduction_cbv():
    i = identity()
    expr = app(abs_(app(i, Var(1))), app(i, i))
    expr, _ = reduce(expr, Order.CBV, 1)
    assert expr == app(abs_(app(i, Var(1))), i)
    expr, _ = reduce(expr, Order.CBV, 1)
    assert expr == app(i, i)
    expr, _ = reduce(expr, Order.CBV, 1)
    assert expr == i


def test_beta_classic_example():
    expr = parse("(λa.λb.λc.a (λd.λe.e (d b)) (λd.c) (λd.d)) (λa.λb.a b)", Notation.CLASSIC)
    reduced = parse("λa.λb.b", Notation.CLASSIC)
    assert beta(expr, Order.NOR, 0) == reduced


def test_reduce_classic_example():
    expr = parse("(λa.λb.λc.b (a b c)) (λa.λb.b)", Notation.CLASSIC)
    reduced, _ = reduce(expr, Order.NOR, 0)
    assert reduced == parse("λa.λb.a b", Notation.CLASSIC)


@pytest.mark.parametrize("order", [Order.NOR, Order.HNO, Order.HAP, Order.APP])
def test_normalizing_orders_agree(order):
    expr = parse("(λa.λb.λc.b (a b c)) (λa.λb.b)", Notation.CLASSIC)
    assert beta(expr, order) == parse("λa.λb.a b", Notation.CLASSIC)


def test_apply_example():
    term1 = parse("λλ42(λ13)", Notation.DEBRUIJN)
    term2 = parse("λ51", Notation.DEBRUIJN)
    result = parse("λ3(λ61)(λ1(λ71))", Notation.DEBRUIJN)
    assert apply(term1, term2) == result


def test_apply_requires_abstraction():
    with pytest.raises(TermError):
        apply(Var(1), Var(1))


def test_negative_limit_rejected():
    with pytest.raises(ValueError):
        reduce(identity(), Order.NOR, -1)


def test_normal_form_is_fixed_point():
    term = parse("λλ2(321)", Notation.DEBRUIJN)
    reduced, count = reduce(term, Order.NOR)
    assert reduced == term
    assert count == 0


@pytest.mark.parametrize(
    ("order", "name"),
    [
        (Order.NOR, "normal"),
        (Order.CBN, "call-by-name"),
        (Order.HSP, "head spine"),
        (Order.HNO, "hybrid normal"),
        (Order.APP, "applicative"),
        (Order.CBV, "call-by-value"),
        (Order.HAP, "hybrid applicative"),
    ],
)
def test_order_display(order, name):
    i = identity()
    reduced, count = reduce(app(i, i), order, 0)
    assert reduced == i
    assert count == 1
    assert str(order) == name