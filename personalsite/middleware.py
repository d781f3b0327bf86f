"""WSGI middleware: content security policy nonces, logging and content type."""

from __future__ import annotations

import logging
import secrets
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any
from urllib.parse import quote

log = logging.getLogger(__name__)

NONCE_KEY = "personalsite.nonces"
CSP_HEADER = "Content-Security-Policy"
CSP_TEMPLATE = (
    "default-src 'self'; script-src 'self' 'nonce-{}' 'nonce-{}' ; style-src 'self' 'nonce-{}';"
)
HTML_CONTENT_TYPE = "text/html; charset=utf-8"

WSGIApp = Callable[[dict, Callable[..., Any]], Iterable[bytes]]


@dataclass(frozen=True)
class Nonces:
    """Per-request nonces for inline scripts and styles."""

    htmx: str
    response_targets: str
    tw: str
    htmx_css_hash: str = ""


def generate_random_string(length: int) -> str:
    """Return ``length`` random bytes as lower-case hex."""
    return secrets.token_hex(length)


def _default_header(start_response: Callable[..., Any], name: str, value: str):
    """Wrap start_response so ``name`` is sent unless the app set it itself."""

    def wrapped(status, headers, exc_info=None):
        if not any(key.lower() == name.lower() for key, _ in headers):
            headers = [*headers, (name, value)]
        return start_response(status, headers, exc_info)

    return wrapped


def csp_middleware(app: WSGIApp) -> WSGIApp:
    """Give each request fresh nonces and a matching CSP header."""

    def middleware(environ, start_response):
        nonces = Nonces(
            htmx=generate_random_string(16),
            response_targets=generate_random_string(16),
            tw=generate_random_string(16),
        )
        environ[NONCE_KEY] = nonces
        header = CSP_TEMPLATE.format(nonces.htmx, nonces.response_targets, nonces.tw)
        return app(environ, _default_header(start_response, CSP_HEADER, header))

    return middleware


def logger(app: WSGIApp) -> WSGIApp:
    """Log the method and path of every request."""

    def middleware(environ, start_response):
        log.info("%s: %s", environ.get("REQUEST_METHOD", ""), environ.get("PATH_INFO", ""))
        return app(environ, start_response)

    return middleware


def _request_uri(environ: dict) -> str:
    if "REQUEST_URI" in environ:
        return environ["REQUEST_URI"]
    uri = quote(environ.get("SCRIPT_NAME", "") + environ.get("PATH_INFO", ""))
    query = environ.get("QUERY_STRING")
    return f"{uri}?{query}" if query else uri


def text_html_middleware(app: WSGIApp) -> WSGIApp:
    """Default the content type to HTML, except for CSS and JavaScript requests."""

    def middleware(environ, start_response):
        if _request_uri(environ).endswith((".css", ".js")):
            return app(environ, start_response)
        return app(environ, _default_header(start_response, "Content-Type", HTML_CONTENT_TYPE))

    return middleware


def get_nonces(environ: dict) -> Nonces:
    """Return the request's nonces set by :func:`csp_middleware`."""
    nonces = environ.get(NONCE_KEY)
    if nonces is None:
        raise LookupError("error getting nonce set - is missing")
    if not isinstance(nonces, Nonces):
        raise TypeError("error getting nonce set - wrong type")
    return nonces


def get_htmx_nonce(environ: dict) -> str:
    return get_nonces(environ).htmx


def get_response_targets_nonce(environ: dict) -> str:
    return get_nonces(environ).response_targets


def get_tw_nonce(environ: dict) -> str:
    return get_nonces(environ).tw