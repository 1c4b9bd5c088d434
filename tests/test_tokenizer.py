import pytest

from smartcalc.errors import InvalidExpression
from smartcalc.tokenizer import (
    Operator,
    Token,
    TokenType,
    identifier_token,
    number_token,
    operator_by_sign,
    operator_token,
    tokenize,
    untokenize,
)


@pytest.mark.parametrize(
    "code, expected_tokens",
    [
        pytest.param("42", [number_token("42")]),
        pytest.param("-42", [number_token("-42")]),
        pytest.param("abc", [identifier_token("abc")]),
        pytest.param(
            "8 * ( 4 - -2 )",
            [
                number_token("8"),
                operator_token(Operator.STAR),
                operator_token(Operator.BRACKET_OPEN),
                number_token("4"),
                operator_token(Operator.MINUS),
                number_token("-2"),
                operator_token(Operator.BRACKET_CLOSE),
            ],
        ),
        pytest.param(
            "a + bc",
            [identifier_token("a"), operator_token(Operator.PLUS), identifier_token("bc")],
        ),
        # fused signs become one token per char
        pytest.param(
            "2 *( 3 )",
            [
                number_token("2"),
                operator_token(Operator.STAR),
                operator_token(Operator.BRACKET_OPEN),
                number_token("3"),
                operator_token(Operator.BRACKET_CLOSE),
            ],
        ),
        pytest.param("", []),
    ],
)
def test_tokenize(code: str, expected_tokens: list[Token]) -> None:
    assert tokenize(code) == expected_tokens


@pytest.mark.parametrize("code", ["1 $ 2", "a_b", "2 ^ 3", "x1y", "٣", "1 + ٣"])
def test_tokenize_unknown_char(code: str) -> None:
    with pytest.raises(InvalidExpression):
        tokenize(code)


def test_token_types() -> None:
    tokens = tokenize("a * 10")
    assert [t.type for t in tokens] == [TokenType.IDENTIFIER, TokenType.OPERATOR, TokenType.NUMBER]
    assert tokens[1].operator is Operator.STAR


def test_operator_of_non_operator_token() -> None:
    with pytest.raises(TypeError):
        number_token("1").operator


@pytest.mark.parametrize(
    "sign, operator, priority",
    [
        pytest.param("+", Operator.PLUS, 0),
        pytest.param("-", Operator.MINUS, 0),
        pytest.param("*", Operator.STAR, 1),
        pytest.param("/", Operator.SLASH, 1),
        pytest.param("(", Operator.BRACKET_OPEN, 99),
        pytest.param(")", Operator.BRACKET_CLOSE, 99),
    ],
)
def test_operator_by_sign(sign: str, operator: Operator, priority: int) -> None:
    assert operator_by_sign(sign) is operator
    assert operator.sign == sign
    assert operator.priority == priority


def test_operator_by_unknown_sign() -> None:
    with pytest.raises(InvalidExpression):
        operator_by_sign("%")


def test_untokenize() -> None:
    assert untokenize(tokenize("( 1 + a ) * -2")) == "(1 + a) * -2"
