"""Infix to postfix conversion and evaluation of postfix expressions.

Postfix expressions are written as comma-separated tokens, for example
``a,2,^``. Operands are runs of letters, digits and dots; letters name
variables whose values are supplied by the caller.
"""

from __future__ import annotations

import math
import operator
import re
import string
from collections.abc import Callable, Mapping

__all__ = ["evaluate_infix", "evaluate_postfix", "infix_to_postfix", "priority"]

_PRIORITIES = {"+": 1, "-": 1, "*": 2, "/": 2, "^": 3}
_OPERAND_CHARS = frozenset(string.ascii_letters + string.digits + ".")
_OPERATIONS: dict[str, Callable[[float, float], float]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": operator.truediv,
    "^": math.pow,
}
_INFIX_PATTERN = re.compile(r"[A-Za-z0-9.]+|\S")


def priority(ch: str) -> int:
    """Return an operator's precedence, 0 for operand characters, -1 otherwise."""
    if ch in _PRIORITIES:
        return _PRIORITIES[ch]
    if ch in _OPERAND_CHARS:
        return 0
    return -1


def infix_to_postfix(infix: str) -> str:
    """Convert an infix expression to comma-separated postfix.

    Operators of equal precedence, ``^`` included, associate to the left.
    """
    output: list[str] = []
    pending: list[str] = []
    for part in _INFIX_PATTERN.findall(infix):
        if part == "(":
            pending.append(part)
        elif part == ")":
            while pending and pending[-1] != "(":
                output.append(pending.pop())
            if not pending:
                raise ValueError("unbalanced ')' in expression")
            pending.pop()
        elif priority(part[0]) == 0:
            output.append(part)
        else:
            rank = priority(part)
            if rank < 0:
                raise ValueError(f"unexpected character {part!r} in expression")
            while pending and pending[-1] != "(" and rank <= priority(pending[-1]):
                output.append(pending.pop())
            pending.append(part)
    while pending:
        top = pending.pop()
        if top == "(":
            raise ValueError("unbalanced '(' in expression")
        output.append(top)
    return ",".join(output)


def evaluate_postfix(
    postfix: str, variables: Mapping[str, float] | None = None
) -> float:
    """Evaluate a comma-separated postfix expression.

    Names are looked up in variables; a missing name raises KeyError.
    """
    values: list[float] = []
    for raw in postfix.split(","):
        part = raw.strip()
        if not part:
            continue
        if part in _OPERATIONS:
            if len(values) < 2:
                raise ValueError(f"operator {part!r} needs two operands")
            right = values.pop()
            left = values.pop()
            values.append(_OPERATIONS[part](left, right))
        elif part[0] in string.digits or part[0] == ".":
            try:
                values.append(float(part))
            except ValueError:
                raise ValueError(f"malformed number {part!r}") from None
        elif part[0] in string.ascii_letters:
            if variables is None or part not in variables:
                raise KeyError(part)
            values.append(float(variables[part]))
        else:
            raise ValueError(f"unexpected item {part!r} in postfix expression")
    if len(values) != 1:
        raise ValueError("postfix expression does not reduce to a single value")
    return values[0]


def evaluate_infix(infix: str, variables: Mapping[str, float] | None = None) -> float:
    """Evaluate an infix expression by way of its postfix form."""
    return evaluate_postfix(infix_to_postfix(infix), variables)