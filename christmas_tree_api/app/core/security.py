"""
Cross-origin access policy and request authorization.

Browsers may call the API only from the configured origin patterns.
Patterns are plain origins in which ``*`` acts as a wildcard: in the
port position (``http://localhost:*``) it matches any numeric port,
anywhere else it matches a run of characters other than ``/``.  All
patterns are compiled into one anchored regular expression which is
handed to Starlette's ``CORSMiddleware``.  Because credentials are
allowed, the middleware echoes the caller's origin rather than ``*``.
``OriginGuardMiddleware`` answers any cross-origin request from an
origin outside the patterns with 403 before it is routed.

The API has no user accounts or sessions, so there is no CSRF token
and every request is authorized.  ``permit_all`` keeps that decision
explicit as a router dependency.
"""

import logging
import re
from typing import Iterable, List, Optional

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response

from .config import settings


logger = logging.getLogger(__name__)

_PORT_WILDCARD = ":*"


def _pattern_to_regex(pattern: str) -> str:
    """Translate a single origin pattern into a regular expression."""
    port_regex = ""
    if pattern.endswith(_PORT_WILDCARD):
        pattern = pattern[: -len(_PORT_WILDCARD)]
        port_regex = r":[0-9]+"
    parts = [re.escape(part) for part in pattern.split("*")]
    return "[^/]*".join(parts) + port_regex


def build_origin_regex(patterns: Iterable[str]) -> str:
    """Combine origin patterns into one regex suitable for ``fullmatch``."""
    alternatives = [_pattern_to_regex(p) for p in patterns]
    if not alternatives:
        # Matches nothing.
        return r"(?!)"
    return "|".join(f"(?:{alt})" for alt in alternatives)


def is_origin_allowed(origin: str, patterns: Iterable[str]) -> bool:
    """Return ``True`` if ``origin`` matches any of ``patterns``."""
    return re.fullmatch(build_origin_regex(patterns), origin) is not None


_DEFAULT_PORTS = {"http": "80", "https": "443"}


def _normalise_origin(origin: str) -> str:
    """Lower-case ``origin`` and drop an explicit default port."""
    origin = origin.lower()
    scheme, _, rest = origin.partition("://")
    default_port = _DEFAULT_PORTS.get(scheme)
    if default_port and rest.endswith(f":{default_port}"):
        origin = origin[: -len(default_port) - 1]
    return origin


def is_same_origin(origin: str, request: Request) -> bool:
    """Return ``True`` if ``origin`` is the scheme/host/port the request was sent to."""
    own_origin = f"{request.url.scheme}://{request.url.netloc}"
    return _normalise_origin(origin) == _normalise_origin(own_origin)


class OriginGuardMiddleware(BaseHTTPMiddleware):
    """Refuse cross-origin requests from origins outside the allowed patterns.

    ``CORSMiddleware`` only withholds the CORS response headers from a
    disallowed origin; the request itself still reaches the route.  This
    middleware sits in front of it and answers such requests, preflight
    or not, with 403 before any routing happens.  Requests without an
    ``Origin`` header and same-origin requests pass through.
    """

    def __init__(self, app, origin_regex: str) -> None:
        super().__init__(app)
        self.origin_regex = re.compile(origin_regex)

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        origin = request.headers.get("origin")
        if origin is None or self.origin_regex.fullmatch(origin) or is_same_origin(origin, request):
            return await call_next(request)
        logger.warning("Rejected %s %s from origin %s", request.method, request.url.path, origin)
        return PlainTextResponse("Invalid CORS request", status_code=status.HTTP_403_FORBIDDEN)


def install_cors(app: FastAPI, patterns: Optional[List[str]] = None, max_age: Optional[int] = None) -> None:
    """Attach the CORS policy to ``app``.

    All methods and headers are permitted, credentials are allowed and
    preflight results may be cached by the browser for ``max_age``
    seconds.  Requests from any other origin get 403.
    """
    if patterns is None:
        patterns = settings.cors_origin_patterns()
    if max_age is None:
        max_age = settings.cors_max_age
    logger.debug("CORS origin patterns: %s", patterns)
    origin_regex = build_origin_regex(patterns)
    app.add_middleware(
        CORSMiddleware,
        allow_origin_regex=origin_regex,
        allow_methods=["*"],
        allow_headers=["*"],
        allow_credentials=True,
        max_age=max_age,
    )
    # Added last so it wraps CORSMiddleware and runs first.
    app.add_middleware(OriginGuardMiddleware, origin_regex=origin_regex)


async def permit_all(request: Request) -> None:
    """Authorization check applied to every API route.

    There is no authentication in this service; every method on every
    path is allowed.
    """
    return None
