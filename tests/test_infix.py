import pytest

from dslab.infix import InvalidExpression, infix_to_postfix, main, precedence


@pytest.mark.parametrize(
    "op, expected",
    [("+", 1), ("-", 1), ("*", 2), ("/", 2), ("^", 3), ("%", -1), ("(", -1)],
)
def test_precedence(op, expected):
    assert precedence(op) == expected


def test_multiplication_binds_tighter():
    assert infix_to_postfix("a+b*c") == "abc*+"


def test_parentheses_override_precedence():
    assert infix_to_postfix("(a+b)*c") == "ab+c*"


def test_equal_precedence_is_left_associative():
    assert infix_to_postfix("a-b-c") == "ab-c-"


def test_single_operand():
    assert infix_to_postfix("x") == "x"


@pytest.mark.parametrize(
    "expression", ["a+b*c", "(a+b)*(c-d)", "A*(B+C)/D^E", "((x))", "1+2*3-4"]
)
def test_operands_keep_order_and_parentheses_vanish(expression):
    result = infix_to_postfix(expression)
    assert [c for c in result if c.isalnum()] == [c for c in expression if c.isalnum()]
    assert "(" not in result and ")" not in result
    assert len(result) == len(expression.replace("(", "").replace(")", ""))


@pytest.mark.parametrize("expression", ["(a+b", "a+b)", ")a", "((a)"])
def test_unbalanced_parentheses(expression):
    with pytest.raises(InvalidExpression):
        infix_to_postfix(expression)


def test_main_prints_postfix(capsys):
    assert main(["a+b"]) == 0
    assert f"Postfix expression: {infix_to_postfix('a+b')}" in capsys.readouterr().out


def test_main_reports_invalid(capsys):
    assert main(["(a"]) == 1
    assert "Invalid expression" in capsys.readouterr().out