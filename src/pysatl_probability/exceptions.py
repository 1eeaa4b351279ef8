"""
Exceptions raised by PySATL Probability.

Domain violations (invalid parameters, probabilities outside ``[0, 1]``) are
reported with the built-in :class:`ValueError`; this module only holds errors
that have no built-in counterpart.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


class ConvergenceError(RuntimeError):
    """
    An iterative numerical procedure exhausted its iteration budget.

    Parameters
    ----------
    method : str
        Name of the procedure that failed to converge.
    iterations : int
        Number of iterations performed before giving up.
    detail : str, optional
        Additional context, e.g. the arguments of the failed call.
    """

    def __init__(self, method: str, iterations: int, detail: str = "") -> None:
        self.method = method
        self.iterations = iterations
        message = f"{method} did not converge after {iterations} iterations"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


__all__ = ["ConvergenceError"]
