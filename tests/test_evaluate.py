"""
Evaluation tests: scalar values, IEEE-754 edge cases, vectorized evaluation,
closed-form polynomial nodes and parameter collection.
"""

import math

import numpy as np
import pytest

from fit_data import (
    parse, evaluate, evaluate_many, collect_parameter_names, Expression, Params,
    PolynomialNode, ExpSeriesNode, BinaryOpNode, VariableNode, ParameterNotBoundError
)


def test_variable():
    assert evaluate(parse("x"), 2.5) == 2.5


def test_mixed_expression():
    expr = parse("x + 2*a*(x+1)^2 - sin(x+1) + exp(3*x)/exp(x)")
    value = evaluate(expr, 1.0, Params.from_pairs([('a', 0.5)]))
    assert value == pytest.approx(11.479758672104968)


def test_plain_dict_params():
    assert evaluate(parse("a*x + b"), 2.0, {'a': 3.0, 'b': 1.0}) == pytest.approx(7.0)


def test_division_by_zero_gives_signed_infinity():
    assert evaluate(parse("1/x"), 0.0) == math.inf
    assert evaluate(parse("-1/x"), 0.0) == -math.inf


def test_invalid_domains_give_nan():
    assert math.isnan(evaluate(parse("ln(x)"), -1.0))
    assert math.isnan(evaluate(parse("sqrt(x)"), -4.0))
    assert evaluate(parse("ln(x)"), 0.0) == -math.inf
    assert math.isnan(evaluate(parse("x^0.5"), -2.0))


def test_power_follows_real_semantics():
    assert evaluate(parse("x^3"), -2.0) == pytest.approx(-8.0)
    assert evaluate(parse("x^x"), 0.0) == 1.0


def test_missing_parameter():
    with pytest.raises(ParameterNotBoundError) as excinfo:
        evaluate(parse("a + b"), 1.0, Params.from_pairs([('a', 1.0)]))
    assert excinfo.value.name == 'b'

    # Unbound lookups are KeyErrors, whatever mapping is used
    with pytest.raises(KeyError):
        evaluate(parse("a"), 1.0, {})
    with pytest.raises(ParameterNotBoundError):
        evaluate(parse("a"), 1.0)


def test_extra_parameters_are_ignored():
    params = Params.from_pairs([('a', 2.0), ('q', 100.0)])
    assert evaluate(parse("a*x"), 3.0, params) == pytest.approx(6.0)


def test_evaluate_many_matches_scalar():
    expr = parse("a*sin(x) + x^2/b")
    params = Params.from_pairs([('a', 1.5), ('b', 4.0)])
    xs = np.linspace(-3.0, 3.0, 25)
    values = evaluate_many(expr, xs, params)

    assert values.shape == xs.shape
    expected = [evaluate(expr, x, params) for x in xs]
    assert np.allclose(values, expected)


def test_evaluate_many_constant_expression():
    values = evaluate_many(parse("a + 1"), [0.0, 1.0, 2.0], {'a': 2.0})
    assert values.shape == (3,)
    assert np.all(values == 3.0)


def test_polynomial():
    params = Params.from_pairs([('a', 1.0), ('b', 2.0), ('c', 3.0)])
    poly = PolynomialNode(2)
    assert evaluate(poly, 2.0, params) == pytest.approx(1.0 + 4.0 + 12.0)
    assert evaluate(PolynomialNode(0), 5.0, params) == pytest.approx(1.0)


def test_exp_series():
    params = Params.from_pairs([('a', 1.0), ('b', 1.0), ('c', 1.0), ('d', 1.0), ('f', 1.0)])
    series = ExpSeriesNode(4)
    expected = 1.0 + 0.5 + 0.5 ** 2 / 2 + 0.5 ** 3 / 6 + 0.5 ** 4 / 24
    assert evaluate(series, 0.5, params) == pytest.approx(expected)


def test_polynomial_inside_tree_and_vectorized():
    params = Params.from_pairs([('a', 1.0), ('b', -1.0)])
    node = BinaryOpNode('*', VariableNode(), PolynomialNode(1))
    xs = np.array([0.0, 1.0, 2.0])
    assert np.allclose(evaluate_many(node, xs, params), xs * (1.0 - xs))


def test_polynomial_at_infinity():
    params = Params.from_pairs([('a', 1.0), ('b', 2.0)])
    for node in (PolynomialNode(1), ExpSeriesNode(1)):
        assert evaluate(node, math.inf, params) == math.inf
        assert evaluate(node, -math.inf, params) == -math.inf
        assert evaluate(node, math.inf, params) == evaluate(parse("a + b*x"), math.inf, params)
        values = evaluate_many(node, [1.0, math.inf, -math.inf], params)
        assert values[0] == pytest.approx(3.0)
        assert values[1] == math.inf
        assert values[2] == -math.inf
    assert evaluate(PolynomialNode(0), math.inf, params) == 1.0


def test_polynomial_missing_coefficient():
    with pytest.raises(ParameterNotBoundError):
        evaluate(PolynomialNode(2), 1.0, Params.from_pairs([('a', 1.0), ('b', 1.0)]))


def test_polynomial_degree_validation():
    with pytest.raises(ValueError):
        PolynomialNode(-1)
    with pytest.raises(ValueError):
        ExpSeriesNode(100)


def test_collect_parameter_names():
    assert collect_parameter_names(parse("a*x + b*sin(a)")) == ['a', 'b', 'a']
    assert collect_parameter_names(parse("x + 1")) == []
    assert collect_parameter_names(PolynomialNode(3)) == ['a', 'b', 'c', 'd']
    assert collect_parameter_names(ExpSeriesNode(4)) == ['a', 'b', 'c', 'd', 'f']


def test_expression_facade():
    expr = Expression.from_string("a * x^2")
    assert expr.evaluate(3.0, {'a': 2.0}) == pytest.approx(18.0)
    assert expr.get_parameter_names() == ['a']
    assert expr.size() == 4
    assert expr.depth() == 3
    assert expr == Expression.from_string("(a)*(x)^2")
    assert len({expr, Expression.from_string("a*x^2")}) == 1
