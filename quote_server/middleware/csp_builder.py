"""Pure-function CSP (Content-Security-Policy) and HSTS utilities."""

from __future__ import annotations

from collections.abc import Iterable


def build_csp(directives: Iterable[tuple[str, Iterable[str]]]) -> str:
    """Build a CSP string from (directive, values) pairs, keeping their order.

    Example:
        >>> build_csp([("default-src", ["'self'"]), ("upgrade-insecure-requests", [])])
        "default-src 'self'; upgrade-insecure-requests"
    """
    parts = []
    for directive, values in directives:
        values = list(values)
        if values:
            parts.append(f"{directive} {' '.join(values)}")
        else:
            parts.append(directive)
    return "; ".join(parts)


def build_hsts(max_age: int, include_subdomains: bool = True, preload: bool = True) -> str:
    """Build a Strict-Transport-Security value.

    Example:
        >>> build_hsts(31536000)
        "max-age=31536000; includeSubDomains; preload"
    """
    parts = [f"max-age={max_age}"]
    if include_subdomains:
        parts.append("includeSubDomains")
    if preload:
        parts.append("preload")
    return "; ".join(parts)
