"""Conversion of infix expressions to postfix notation."""

from __future__ import annotations

import sys


class InvalidExpression(ValueError):
    """Raised when the parentheses of an expression do not match."""


_PRECEDENCE = {"+": 1, "-": 1, "*": 2, "/": 2, "^": 3}


def precedence(op: str) -> int:
    """Return the binding strength of an operator, or -1 for anything else."""
    return _PRECEDENCE.get(op, -1)


def _is_operand(ch: str) -> bool:
    return ch.isascii() and ch.isalnum()


def infix_to_postfix(expression: str) -> str:
    """Convert an infix expression of single-character operands to postfix."""
    output: list[str] = []
    stack: list[str] = []
    for ch in expression:
        if _is_operand(ch):
            output.append(ch)
        elif ch == "(":
            stack.append(ch)
        elif ch == ")":
            while stack and stack[-1] != "(":
                output.append(stack.pop())
            if not stack:
                raise InvalidExpression("unmatched ')'")
            stack.pop()
        else:
            while stack and precedence(ch) <= precedence(stack[-1]):
                output.append(stack.pop())
            stack.append(ch)
    while stack:
        top = stack.pop()
        if top == "(":
            raise InvalidExpression("unmatched '('")
        output.append(top)
    return "".join(output)


def main(argv: list[str] | None = None) -> int:
    """Read an infix expression and print its postfix form."""
    args = sys.argv[1:] if argv is None else argv
    if args:
        expression = args[0]
    else:
        try:
            words = input("Enter the infix expression: ").split()
        except EOFError:
            return 1
        expression = words[0] if words else ""
    try:
        postfix = infix_to_postfix(expression)
    except InvalidExpression:
        print("Invalid expression")
        return 1
    print(f"Postfix expression: {postfix}")
    return 0


if __name__ == "__main__":
    sys.exit(main())