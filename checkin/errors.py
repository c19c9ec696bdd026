from __future__ import annotations

from typing import Any, Dict, List, Optional

import pydantic


class CheckinError(Exception):
    """Base class for record store / registry failures."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(CheckinError):
    """
    Input rejected: a required attribute is missing or has the wrong shape.

    `errors` is a list of {"field": ..., "message": ...} entries, one per
    offending field. Never retried, never partially applied.
    """

    def __init__(self, message: str, errors: Optional[List[Dict[str, str]]] = None) -> None:
        super().__init__(message)
        self.errors: List[Dict[str, str]] = list(errors or [])

    @property
    def fields(self) -> List[str]:
        return [e["field"] for e in self.errors]

    @classmethod
    def from_pydantic(cls, exc: pydantic.ValidationError, message: str) -> "ValidationError":
        return cls(message, field_errors(exc.errors()))


class StorageError(CheckinError):
    """The backing store could not complete the operation. Opaque to callers."""


def _field_name(loc: Any) -> str:
    # FastAPI prefixes request locations with "body" / "query" / "path"
    parts = [str(p) for p in (loc or ()) if p not in ("body", "query", "path")]
    return ".".join(parts) or "__root__"


def field_errors(raw_errors: Any) -> List[Dict[str, str]]:
    """
    Flatten pydantic/FastAPI error dicts into {"field", "message"} pairs.
    """
    out: List[Dict[str, str]] = []
    for err in raw_errors or []:
        msg = str(err.get("msg") or "invalid value")
        # pydantic prefixes ValueError messages raised from validators
        if msg.startswith("Value error, "):
            msg = msg[len("Value error, "):]
        out.append({"field": _field_name(err.get("loc")), "message": msg})
    return out
