# MathEngine - Configuration
# Copyright (c) 2024 MathEngine Contributors. All rights reserved.

"""Configuration settings for MathEngine."""

from __future__ import annotations
import os
from dataclasses import dataclass


# Working precision (in bits) of Float numbers when none is given explicitly.
DEFAULT_PRECISION = 100

DEFAULT_PROMPT = "MathEngine >>> "


@dataclass
class Config:
    """
    Configuration for the engine and its interactive front-end.

    Attributes:
        precision: Working precision of Float numbers, in bits.
        exact_decimals: Read decimal literals such as ``2.5`` as exact
                        rationals instead of floats.
        prompt: Prompt shown by the REPL.
    """
    precision: int = DEFAULT_PRECISION
    exact_decimals: bool = False
    prompt: str = DEFAULT_PROMPT

    def __post_init__(self):
        if isinstance(self.precision, bool) or not isinstance(self.precision, int):
            raise ValueError(f"precision must be an integer number of bits, got {self.precision!r}")
        if self.precision < 2:
            raise ValueError(f"precision must be at least 2 bits, got {self.precision}")

    @classmethod
    def low_precision(cls) -> Config:
        """IEEE double sized floats (53 bits)."""
        return cls(precision=53)

    @classmethod
    def default(cls) -> Config:
        """The default 100 bit configuration."""
        return cls()

    @classmethod
    def high_precision(cls) -> Config:
        """High precision configuration (256 bits)."""
        return cls(precision=256)

    @classmethod
    def from_env(cls) -> Config:
        """
        Build a configuration from environment variables.

        ``MATHENGINE_PRECISION`` sets the float precision in bits and
        ``MATHENGINE_EXACT`` (``1``/``true``/``yes``) turns on exact decimals.
        """
        raw_precision = os.getenv("MATHENGINE_PRECISION")
        try:
            precision = int(raw_precision) if raw_precision else DEFAULT_PRECISION
        except ValueError:
            raise ValueError(f"MATHENGINE_PRECISION must be an integer, got {raw_precision!r}") from None
        exact = os.getenv("MATHENGINE_EXACT", "").strip().lower() in ("1", "true", "yes")
        return cls(precision=precision, exact_decimals=exact)

    def __repr__(self) -> str:
        return (
            f"Config(precision={self.precision}, "
            f"exact_decimals={self.exact_decimals})"
        )
