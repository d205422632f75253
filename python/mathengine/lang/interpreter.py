# MathEngine - Interpreter
# Copyright (c) 2024 MathEngine Contributors. All rights reserved.

"""
Evaluation of parsed statements against the core engine.

- ``expr`` shows the canonical form of ``expr``
- ``lhs = rhs`` shows the equation with canonical sides
- ``lhs = rhs @ x`` solves for ``x`` (``expr @ x`` solves ``expr = 0``)
- ``... @ x, v`` substitutes ``v`` for ``x``
"""

from __future__ import annotations
import logging
from typing import Optional, Union

from ..config import Config
from ..equation import Equation, solve
from ..exceptions import EvalError
from ..expr import Expr, Constant, Variable
from ..formula import Formula
from ..number import ZERO
from ..ordering import order
from ..simplify import simplify
from .parser import Solve, Statement, Substitute, parse

logger = logging.getLogger(__name__)

Result = Union[Formula, Equation]


class Interpreter:
    """Runs statements with a fixed configuration."""

    def __init__(self, config: Optional[Config] = None):
        self.config = config or Config()

    def execute(self, source: str) -> Result:
        """Parse and evaluate one line of input."""
        statement = parse(source, self.config)
        logger.debug(f"Parsed {source!r} as {statement}")
        return self.evaluate(statement)

    def evaluate(self, statement: Statement) -> Result:
        body = statement.body
        directive = statement.directive

        if isinstance(directive, Solve):
            equation = body if isinstance(body, Equation) else Equation(body, Constant(ZERO))
            solution = solve(equation, directive.variable)
            return Equation(Variable(directive.variable), solution)

        if isinstance(directive, Substitute):
            if isinstance(body, Equation):
                return body.substitute(directive.variable, directive.replacement)
            return Formula(body).substitute(directive.variable, directive.replacement)

        if directive is not None:
            raise EvalError("Unknown directive", directive)
        if isinstance(body, Equation):
            return Equation(order(simplify(body.lhs)), order(simplify(body.rhs)))
        if isinstance(body, Expr):
            return Formula(body)
        raise EvalError("Cannot evaluate statement", body)
