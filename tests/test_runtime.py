import pytest

from smartcalc.errors import DivisionByZero, InvalidExpression, UnknownVariable
from smartcalc.runtime import divide, evaluate_postfix
from smartcalc.tokenizer import Operator, Token, identifier_token, number_token, operator_token
from smartcalc.variables import VariableStore


def test_operands_are_popped_right_then_left() -> None:
    postfix = [number_token("2"), number_token("3"), operator_token(Operator.MINUS)]
    assert evaluate_postfix(postfix, VariableStore()) == -1


def test_identifier_lookup() -> None:
    postfix = [identifier_token("n"), number_token("10"), operator_token(Operator.STAR)]
    assert evaluate_postfix(postfix, VariableStore({"n": 7})) == 70


def test_unknown_identifier() -> None:
    with pytest.raises(UnknownVariable):
        evaluate_postfix([identifier_token("n")], VariableStore())


def test_too_few_operands() -> None:
    with pytest.raises(InvalidExpression) as e:
        evaluate_postfix([number_token("1"), operator_token(Operator.PLUS)], VariableStore())
    assert e.value.errmsg == "Too many signs in expression"


@pytest.mark.parametrize(
    "postfix",
    [
        pytest.param([], id="empty"),
        pytest.param([number_token("1"), number_token("2")], id="two values left"),
        pytest.param(
            [number_token("1"), number_token("2"), operator_token(Operator.BRACKET_OPEN)],
            id="bracket as operator",
        ),
    ],
)
def test_malformed_postfix(postfix: list[Token]) -> None:
    with pytest.raises(InvalidExpression):
        evaluate_postfix(postfix, VariableStore())


@pytest.mark.parametrize(
    "a, b, expected",
    [
        pytest.param(7, 2, 3),
        pytest.param(-7, 2, -3),
        pytest.param(7, -2, -3),
        pytest.param(-7, -2, 3),
        pytest.param(6, 3, 2),
        pytest.param(0, 5, 0),
        pytest.param(1, 2, 0),
        pytest.param(-1, 2, 0),
        pytest.param(10**30, 10**10, 10**20),
    ],
)
def test_divide_truncates_toward_zero(a: int, b: int, expected: int) -> None:
    assert divide(a, b) == expected


def test_divide_by_zero() -> None:
    with pytest.raises(DivisionByZero):
        divide(1, 0)
