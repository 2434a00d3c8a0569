# ua_classifier/context.py

import re
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Callable, Iterator, Optional
from markupsafe import Markup
from starlette.datastructures import Headers
from starlette.types import ASGIApp, Receive, Scope, Send

# Zero-argument source of the "current" user agent
UserAgentProvider = Callable[[], str]

# Raw User-Agent header of the request being handled, if any
_request_user_agent: ContextVar[Optional[str]] = ContextVar("request_user_agent", default=None)

_SLASHED = re.compile(r"\\(.?)", re.DOTALL)
_SCRIPT_OR_STYLE = re.compile(r"<(script|style)[^>]*?>.*?</\1>", re.IGNORECASE | re.DOTALL)


def _unslash(match: re.Match) -> str:
    char = match.group(1)
    return "\0" if char == "0" else char


def sanitize_user_agent(raw: Optional[str]) -> str:
    """
    Clean a raw header value for matching.

    Removes backslash escaping, drops <script>/<style> blocks with their
    content, strips remaining tags and unescapes entities. Stripping repeats
    until nothing changes, so entity-encoded markup cannot come back as tags.
    """
    if not raw:
        return ""

    value = _SLASHED.sub(_unslash, raw)
    value = _SCRIPT_OR_STYLE.sub("", value)
    stripped = str(Markup(value).striptags())
    while stripped != value:
        value = stripped
        stripped = str(Markup(value).striptags())

    return stripped.strip()


def current_user_agent() -> str:
    """Sanitized User-Agent of the current request, or empty string."""
    return sanitize_user_agent(_request_user_agent.get())


def resolve_user_agent(user_agent: Optional[str], provider: UserAgentProvider) -> str:
    # Only None falls back; an explicit "" stays empty
    if user_agent is None:
        return provider() or ""
    return user_agent


@contextmanager
def user_agent_scope(raw: Optional[str]) -> Iterator[None]:
    """Make `raw` the ambient user agent for code outside a request."""
    token = _request_user_agent.set(raw)
    try:
        yield
    finally:
        _request_user_agent.reset(token)


class UserAgentContextMiddleware:
    """Exposes each HTTP request's User-Agent header to current_user_agent()."""

    def __init__(self, app: ASGIApp) -> None:
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        headers = Headers(scope=scope)
        with user_agent_scope(headers.get("user-agent")):
            await self.app(scope, receive, send)
