"""WSGI middleware that adds permissive CORS headers."""

from __future__ import annotations

from typing import Any, Callable, Iterable

CORS_HEADERS = (
    ("Access-Control-Allow-Origin", "*"),
    ("Access-Control-Allow-Credentials", "true"),
    (
        "Access-Control-Allow-Headers",
        "Content-Type, Content-Length, Accept-Encoding, X-CSRF-Token, Authorization, "
        "accept, origin, Cache-Control, X-Requested-With",
    ),
    ("Access-Control-Allow-Methods", "POST, OPTIONS, GET, PUT"),
)

_CORS_NAMES = {name.lower() for name, _ in CORS_HEADERS}


def _with_cors(headers: Iterable[tuple[str, str]]) -> list[tuple[str, str]]:
    kept = [(name, value) for name, value in headers if name.lower() not in _CORS_NAMES]
    return list(CORS_HEADERS) + kept


class CORSMiddleware:
    """Wrap a WSGI app, adding CORS headers and answering preflight requests."""

    def __init__(self, app: Callable[..., Iterable[bytes]]) -> None:
        self.app = app

    def __call__(self, environ: dict[str, Any], start_response: Callable[..., Any]) -> Iterable[bytes]:
        if environ.get("REQUEST_METHOD", "").upper() == "OPTIONS":
            start_response("204 No Content", list(CORS_HEADERS))
            return [b""]

        def cors_start_response(status, headers, exc_info=None):
            return start_response(status, _with_cors(headers), exc_info)

        return self.app(environ, cors_start_response)