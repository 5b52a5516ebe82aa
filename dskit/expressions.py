"""Bracket matching and infix to postfix conversion with a stack."""

from __future__ import annotations

_OPENERS = {")": "(", "]": "[", "}": "{"}
_OPERATORS = frozenset("+-*/^()")


def is_balanced(expression):
    """True if every bracket in ``expression`` is closed in the right order."""
    stack: list[str] = []
    for char in expression:
        if char in "([{":
            stack.append(char)
        elif char in _OPENERS:
            if not stack or stack[-1] != _OPENERS[char]:
                return False
            stack.pop()
    return not stack


def is_operand(char):
    """True for any character that is not an operator or a parenthesis."""
    return char not in _OPERATORS


def in_stack_precedence(char):
    """Precedence of an operator while it waits on the stack."""
    if char in "+-":
        return 2
    if char in "*/":
        return 4
    if char == "^":
        return 5
    return 0


def out_stack_precedence(char):
    """Precedence of an operator as it arrives from the input."""
    if char in "+-":
        return 1
    if char in "*/":
        return 3
    if char == "^":
        return 6
    if char == "(":
        return 7
    if char == ")":
        return 0
    raise ValueError(f"{char!r} is not an operator")


def precedence(char):
    """Plain precedence: 1 for + and -, 2 for * and /, 0 otherwise."""
    if char in "+-":
        return 1
    if char in "*/":
        return 2
    return 0


def to_postfix(infix):
    """Convert an infix expression of single-character operands to postfix."""
    stack: list[str] = []
    output: list[str] = []
    chars = iter(infix)
    char = next(chars, None)
    while char is not None:
        if is_operand(char):
            output.append(char)
            char = next(chars, None)
            continue
        waiting = in_stack_precedence(stack[-1]) if stack else 0
        arriving = out_stack_precedence(char)
        if waiting < arriving:
            stack.append(char)
            char = next(chars, None)
        elif waiting > arriving:
            output.append(stack.pop())
        else:
            if not stack:
                raise ValueError(f"unmatched ')' in {infix!r}")
            stack.pop()
            char = next(chars, None)
    while stack:
        operator = stack.pop()
        if operator == "(":
            raise ValueError(f"unmatched '(' in {infix!r}")
        output.append(operator)
    return "".join(output)


def _divide(dividend: int, divisor: int) -> int:
    quotient = abs(dividend) // abs(divisor)
    return quotient if (dividend < 0) == (divisor < 0) else -quotient


def evaluate_postfix(postfix):
    """Evaluate a postfix expression of single-digit operands.

    Division truncates toward zero.
    """
    stack: list[int] = []
    for char in postfix:
        if is_operand(char):
            if not char.isdigit():
                raise ValueError(f"operand {char!r} is not a digit")
            stack.append(int(char))
            continue
        if len(stack) < 2:
            raise ValueError(f"operator {char!r} lacks operands")
        first = stack.pop()
        second = stack.pop()
        if char == "+":
            result = second + first
        elif char == "-":
            result = second - first
        elif char == "*":
            result = second * first
        elif char == "/":
            if first == 0:
                raise ZeroDivisionError("division by zero in postfix expression")
            result = _divide(second, first)
        else:
            raise ValueError(f"unsupported operator {char!r}")
        stack.append(result)
    if not stack:
        raise ValueError("empty expression")
    return stack[-1]