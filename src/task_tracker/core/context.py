"""Per-request correlation id storage shared by middleware, handlers and logs."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar

REQUEST_ID_HEADER = "X-Request-ID"
NO_REQUEST_ID = "-"

_request_id: ContextVar[str] = ContextVar("task_tracker_request_id", default=NO_REQUEST_ID)


def get_request_id() -> str:
    """Return the correlation id of the request being served, or ``"-"``."""
    return _request_id.get()


@contextmanager
def request_id_bound(request_id: str | None) -> Iterator[str]:
    """Bind ``request_id`` for the duration of the block.

    A missing id leaves whatever is currently bound in place.
    """
    if not request_id:
        yield _request_id.get()
        return
    token = _request_id.set(request_id)
    try:
        yield request_id
    finally:
        _request_id.reset(token)


__all__ = ["NO_REQUEST_ID", "REQUEST_ID_HEADER", "get_request_id", "request_id_bound"]
