# MathEngine - Equations and Solver
# Copyright (c) 2024 MathEngine Contributors. All rights reserved.

"""
Equations and the single-occurrence solver.

``solve`` isolates one unknown in three steps:

1. Normalize: move everything to one side, ``d = simplify(lhs + -(rhs))``.
2. Plan: walk ``d`` down to the unique occurrence of the unknown and record
   the inverse of every operator on the way (an ``AntiOperation``).
3. Replay: starting from ``0`` at the root of ``d``, apply the recorded
   inverses root-first, picking up each operator's other operand.

Example:
    >>> x = var('x')
    >>> str(solve(Equation(-x + 5, 2 * x), 'x'))
    '5/3'
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Union

from .exceptions import (
    EquationMismatchError, InternalError, NotYetImplementedError,
    UnsupportedExpressionError,
)
from .expr import (
    Expr, ExprLike, Constant, Variable, Add, Sub, Mul, Div, Pow, Log, Negate,
    to_expr,
)
from .formula import Formula
from .number import ZERO, ONE
from .ordering import order
from .simplify import simplify
from .substitution import count_occurrences, substitute

logger = logging.getLogger(__name__)


class AntiOperation(Enum):
    """Inverse of one operator, tagged with the side holding the unknown."""
    SUBTRACT_RHS = "subtract_rhs"                        # a + b = r, unknown in a: a = r - b
    SUBTRACT_LHS = "subtract_lhs"                        # unknown in b: b = r - a
    ADD_RHS = "add_rhs"                                  # a - b = r, unknown in a: a = r + b
    SUBTRACT_FROM_LHS = "subtract_from_lhs"              # unknown in b: b = a - r
    DIVIDE_BY_RHS = "divide_by_rhs"                      # a * b = r, unknown in a: a = r / b
    DIVIDE_BY_LHS = "divide_by_lhs"                      # unknown in b: b = r / a
    MULTIPLY_BY_DENOMINATOR = "multiply_by_denominator"  # n / d = r, unknown in n: n = r * d
    DIVIDE_NUMERATOR = "divide_numerator"                # unknown in d: d = n / r
    RAISE_TO_RECIPROCAL = "raise_to_reciprocal"          # b ^ e = r, unknown in b: b = r ^ (1 / e)
    TAKE_LOG = "take_log"                                # unknown in e: e = Log_b(r)
    ROOT_OF_ARGUMENT = "root_of_argument"                # Log_b(a) = r, unknown in b: b = a ^ (1 / r)
    RAISE_BASE = "raise_base"                            # unknown in a: a = b ^ r
    NEGATE = "negate"                                    # -(v) = r: v = -(r)


# Inverse per node kind, indexed by the position of the child holding the unknown
_INVERSES = {
    Add: (AntiOperation.SUBTRACT_RHS, AntiOperation.SUBTRACT_LHS),
    Sub: (AntiOperation.ADD_RHS, AntiOperation.SUBTRACT_FROM_LHS),
    Mul: (AntiOperation.DIVIDE_BY_RHS, AntiOperation.DIVIDE_BY_LHS),
    Div: (AntiOperation.MULTIPLY_BY_DENOMINATOR, AntiOperation.DIVIDE_NUMERATOR),
    Pow: (AntiOperation.RAISE_TO_RECIPROCAL, AntiOperation.TAKE_LOG),
    Log: (AntiOperation.ROOT_OF_ARGUMENT, AntiOperation.RAISE_BASE),
    Negate: (AntiOperation.NEGATE,),
}

# Node kind and child position each anti-operation descends into
_STEPS = {
    operation: (kind, index)
    for kind, operations in _INVERSES.items()
    for index, operation in enumerate(operations)
}


@dataclass(frozen=True)
class Equation:
    """An equation ``lhs = rhs`` between two expressions."""
    lhs: Expr
    rhs: Expr

    @classmethod
    def of(cls, lhs: Union[Formula, ExprLike], rhs: Union[Formula, ExprLike]) -> Equation:
        """Build an equation from Formulas, expressions or numbers."""
        return cls(_as_expr(lhs), _as_expr(rhs))

    def solve(self, variable: Union[str, Variable]) -> Expr:
        """Solve for ``variable``. See :func:`solve`."""
        return solve(self, variable)

    def substitute(self, variable: str, replacement: Union[Formula, ExprLike]) -> Equation:
        """Substitute on both sides; each side is canonicalized."""
        replacement = _as_expr(replacement)
        return Equation(
            substitute(self.lhs, variable, replacement),
            substitute(self.rhs, variable, replacement),
        )

    def count(self, variable: str) -> int:
        return count_occurrences(self.lhs, variable) + count_occurrences(self.rhs, variable)

    def __str__(self) -> str:
        return f"{self.lhs} = {self.rhs}"


def _as_expr(value: Union[Formula, ExprLike]) -> Expr:
    if isinstance(value, Formula):
        return value.expr
    return to_expr(value)


def solve(equation: Equation, variable: Union[str, Variable]) -> Expr:
    """
    Solve an equation for a variable that occurs exactly once.

    Args:
        equation: The equation to solve.
        variable: The unknown, as a letter or a Variable.

    Returns:
        The canonical expression the unknown equals.

    Raises:
        EquationMismatchError: If the unknown does not appear.
        NotYetImplementedError: If the unknown appears more than once on one
            side of the equation, or more than once after normalization.
        InternalError: If the plan and the tree disagree during replay.
    """
    if isinstance(variable, Variable):
        variable = variable.name

    for side in (equation.lhs, equation.rhs):
        if count_occurrences(side, variable) > 1:
            raise NotYetImplementedError(
                f"Cannot solve for '{variable}': it appears more than once in {side}"
            )

    difference = simplify(Add(simplify(equation.lhs), Negate(simplify(equation.rhs))))
    logger.debug(f"Normalized {equation} to {difference} = 0")

    occurrences = count_occurrences(difference, variable)
    if occurrences == 0:
        raise EquationMismatchError(variable, equation)
    if occurrences > 1:
        raise NotYetImplementedError(
            f"Cannot solve for '{variable}': it appears {occurrences} times in {difference}"
        )

    plan: list[AntiOperation] = []
    if not _build_plan(difference, variable, plan):
        raise InternalError(f"Variable '{variable}' was counted but not found in {difference}")
    logger.debug(f"Solving for '{variable}' with {[op.name for op in reversed(plan)]}")

    result = _replay(difference, variable, plan)
    return order(simplify(result))


def _build_plan(expr: Expr, variable: str, plan: list[AntiOperation]) -> bool:
    """Append the inverses leading to ``variable``, innermost first."""
    if isinstance(expr, Variable):
        return expr.name == variable
    if isinstance(expr, Constant):
        return False

    inverses = _INVERSES.get(type(expr))
    if inverses is None:
        raise UnsupportedExpressionError(type(expr).__name__.lower(), context="solving")

    for index, child in enumerate(expr.children()):
        if _build_plan(child, variable, plan):
            plan.append(inverses[index])
            return True
    return False


def _replay(difference: Expr, variable: str, plan: list[AntiOperation]) -> Expr:
    """Consume the plan root-first, rebuilding the isolated side."""
    result: Expr = Constant(ZERO)
    node = difference

    while plan:
        operation = plan.pop()
        kind, index = _STEPS[operation]
        if not isinstance(node, kind):
            raise InternalError(f"Step {operation.name} does not match node {node}")
        result = _invert(operation, node, result)
        node = node.children()[index]

    if not (isinstance(node, Variable) and node.name == variable):
        raise InternalError(f"Replay ended at {node} instead of '{variable}'")
    return result


def _invert(operation: AntiOperation, node: Expr, result: Expr) -> Expr:
    if operation is AntiOperation.SUBTRACT_RHS:
        return Sub(result, node.rhs)
    if operation is AntiOperation.SUBTRACT_LHS:
        return Sub(result, node.lhs)
    if operation is AntiOperation.ADD_RHS:
        return Add(result, node.rhs)
    if operation is AntiOperation.SUBTRACT_FROM_LHS:
        return Sub(node.lhs, result)
    if operation is AntiOperation.DIVIDE_BY_RHS:
        return Div(result, node.rhs)
    if operation is AntiOperation.DIVIDE_BY_LHS:
        return Div(result, node.lhs)
    if operation is AntiOperation.MULTIPLY_BY_DENOMINATOR:
        return Mul(result, node.denominator)
    if operation is AntiOperation.DIVIDE_NUMERATOR:
        return Div(node.numerator, result)
    if operation is AntiOperation.RAISE_TO_RECIPROCAL:
        return Pow(result, Div(Constant(ONE), node.exponent))
    if operation is AntiOperation.TAKE_LOG:
        return Log(node.base, result)
    if operation is AntiOperation.ROOT_OF_ARGUMENT:
        return Pow(node.argument, Div(Constant(ONE), result))
    if operation is AntiOperation.RAISE_BASE:
        return Pow(node.base, result)
    return Negate(result)
