"""Domain errors raised by services; endpoints map them to HTTP status codes."""

from __future__ import annotations

from typing import Any


class NotFoundError(LookupError):
    """A referenced session, exercise or set does not exist (HTTP 404)."""

    def __init__(self, resource: str, identifier: Any):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} {identifier} not found")


class InvalidValueError(ValueError):
    """An entity was constructed or updated with an out-of-range value (HTTP 400)."""
