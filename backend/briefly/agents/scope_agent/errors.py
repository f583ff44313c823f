"""Exceptions raised by the scope agent.

Both subclass the builtin error the rest of the backend already catches, so
callers that only know about ValueError / RuntimeError keep working.
"""

from __future__ import annotations

from typing import Iterable


class ScopeError(Exception):
    """Base class for scope generation errors."""


class ValidationError(ScopeError, ValueError):
    """Required client input is missing. Raised before generation begins."""

    def __init__(self, missing_fields: Iterable[str]):
        self.missing_fields = list(missing_fields)
        super().__init__(
            f"Missing required client input: {', '.join(self.missing_fields)}"
        )


class GenerationFailure(ScopeError, RuntimeError):
    """The scope model failed to produce a result.

    Reserved for a real model integration; the canned templates never raise it.
    """
