from __future__ import annotations

import logging

import numpy as np

from .typing import FloatDType, SeriesLike
from .types import VaRResult

logger = logging.getLogger(__name__)

CURRENCY = "£"


def _format_number(x: float) -> str:
    # shortest form: 50.0 -> "50", 12.50 -> "12.5"; "+ 0.0" drops a negative zero
    return f"{round(float(x), 10) + 0.0:.15g}"


def format_var_report(var: float, alpha: float, *, currency: str = CURRENCY) -> str:
    """
    Narrative VaR line, e.g. ``"The 95% VaR is £12.5"``.

    `var` is a change (negative for a loss); the amount printed is
    ``-round(var, 2)`` so a loss reads as a positive figure.
    """
    level = (1.0 - alpha) * 100.0
    amount = -round(float(var), 2)
    return f"The {_format_number(level)}% VaR is {currency}{_format_number(amount)}"


def assemble_result(
    *,
    var: float,
    expected_shortfall: float,
    alpha: float,
    changes: SeriesLike,
    log_returns: SeriesLike,
) -> VaRResult:
    report = format_var_report(var, alpha)
    logger.info("%s", report)
    return VaRResult(
        report=report,
        changes=np.asarray(changes, dtype=FloatDType),
        var=float(var),
        expected_shortfall=float(expected_shortfall),
        alpha=float(alpha),
        log_returns=np.asarray(log_returns, dtype=FloatDType),
    )
