"""Static security policy loaded from security_headers.yaml."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import structlog
import yaml

logger = structlog.get_logger()


@dataclass(frozen=True)
class CorsRules:
    """Cross-origin allow rules. Origins are supplied by settings."""

    origins: tuple[str, ...] = ()
    credentials: bool = True
    methods: tuple[str, ...] = ("GET", "POST")
    allowed_headers: tuple[str, ...] = ("Content-Type", "Authorization")


@dataclass(frozen=True)
class SecurityPolicy:
    """Header mapping, CSP directives and CORS rules, fixed at startup."""

    custom_headers: tuple[tuple[str, str], ...] = ()
    csp_directives: tuple[tuple[str, tuple[str, ...]], ...] = ()
    cors: CorsRules = field(default_factory=CorsRules)


def _load_yaml(path: Path) -> dict:
    """Read the policy file. Missing or malformed files stop startup."""
    if not path.is_file():
        logger.error("security_headers_not_found", path=str(path))
        raise FileNotFoundError(f"security headers file not found: {path}")
    with open(path) as f:
        raw = yaml.safe_load(f)
    if not isinstance(raw, dict) or not isinstance(raw.get("custom_headers"), dict):
        logger.error("security_headers_invalid", path=str(path))
        raise ValueError(f"security headers file has no custom_headers mapping: {path}")
    return raw


def load_security_policy(path: str | Path, origins: tuple[str, ...] = ()) -> SecurityPolicy:
    """Build a SecurityPolicy from a YAML file, keeping mapping order."""
    raw = _load_yaml(Path(path))

    headers = tuple(
        (str(name), str(value)) for name, value in (raw.get("custom_headers") or {}).items()
    )
    directives = tuple(
        (str(name), tuple(str(v) for v in (values or ())))
        for name, values in (raw.get("content_security_policy") or {}).items()
    )
    cors_raw = raw.get("cors") or {}
    cors = CorsRules(
        origins=tuple(origins),
        credentials=bool(cors_raw.get("credentials", True)),
        methods=tuple(cors_raw.get("methods", CorsRules.methods)),
        allowed_headers=tuple(cors_raw.get("allowed_headers", CorsRules.allowed_headers)),
    )

    logger.info(
        "security_policy_loaded",
        path=str(path),
        headers=len(headers),
        csp_directives=len(directives),
    )
    return SecurityPolicy(custom_headers=headers, csp_directives=directives, cors=cors)
