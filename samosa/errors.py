# Copyright (c) 2026 Samosa
# SPDX-License-Identifier: MIT

"""
Error types for samosa.

There is a single error kind: invalid input. It is raised for malformed
rasters, unreadable image files and non-positive calibration values.
Area arithmetic never raises; it reports invalid input through an
``AreaResult`` instead.
"""

from __future__ import annotations


class InvalidInputError(ValueError):
    """Raised when an input cannot be measured.

    Subclasses ``ValueError`` so callers that already guard against bad
    values keep working.

    Args:
        message: Human-readable description of the problem.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message: str = message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r})"
