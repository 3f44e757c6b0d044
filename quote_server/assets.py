"""Static asset minifier for the site's CSS and JavaScript.

Writes ``name.min.css`` / ``name.min.js`` next to each source file. The JS pass
is deliberately conservative: it drops comments, console calls and
indentation but never rewrites tokens inside a line.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path

import structlog

logger = structlog.get_logger()

_BLOCK_COMMENT_RE = re.compile(r"/\*.*?\*/", re.DOTALL)
_WHITESPACE_RE = re.compile(r"\s+")
_CSS_PUNCT_RE = re.compile(r"\s*([{}:;,>])\s*")
_CSS_TRAILING_SEMI_RE = re.compile(r";}")
_CONSOLE_CALL_RE = re.compile(r"console\.(?:log|error|warn|info|debug)\([^)]*\);?")


@dataclass(frozen=True)
class MinifyResult:
    source: Path
    output: Path
    original_bytes: int
    minified_bytes: int

    @property
    def savings_percent(self) -> float:
        if not self.original_bytes:
            return 0.0
        return round((self.original_bytes - self.minified_bytes) / self.original_bytes * 100, 1)


def minify_css(css: str) -> str:
    css = _BLOCK_COMMENT_RE.sub("", css)
    css = _WHITESPACE_RE.sub(" ", css)
    css = _CSS_PUNCT_RE.sub(r"\1", css)
    css = _CSS_TRAILING_SEMI_RE.sub("}", css)
    return css.strip()


def strip_console_calls(js: str) -> str:
    """Remove single-line console.log/error/warn/info/debug calls."""
    return _CONSOLE_CALL_RE.sub("", js)


def minify_js(js: str, strip_console: bool = True) -> str:
    js = _BLOCK_COMMENT_RE.sub("", js)
    if strip_console:
        js = strip_console_calls(js)
    lines = []
    for line in js.splitlines():
        line = line.strip()
        # Whole-line comments only; "//" inside a line may be part of a URL
        if not line or line.startswith("//"):
            continue
        lines.append(line)
    return "\n".join(lines)


def _is_minified(path: Path) -> bool:
    return path.stem.endswith(".min")


def minify_file(path: Path, strip_console: bool = True) -> MinifyResult:
    content = path.read_text(encoding="utf-8")
    if path.suffix == ".css":
        minified = minify_css(content)
    else:
        minified = minify_js(content, strip_console=strip_console)
    output = path.with_name(f"{path.stem}.min{path.suffix}")
    output.write_text(minified, encoding="utf-8")
    return MinifyResult(
        source=path,
        output=output,
        original_bytes=len(content.encode("utf-8")),
        minified_bytes=len(minified.encode("utf-8")),
    )


def optimize_assets(site_root: str | Path, strip_console: bool = True) -> list[MinifyResult]:
    """Minify every CSS and JS file under ``site_root/assets``."""
    assets_dir = Path(site_root) / "assets"
    if not assets_dir.is_dir():
        logger.warning("assets_dir_missing", path=str(assets_dir))
        return []

    results = []
    sources = sorted(p for p in assets_dir.rglob("*") if p.suffix in (".css", ".js") and p.is_file())
    for path in sources:
        if _is_minified(path):
            continue
        result = minify_file(path, strip_console=strip_console)
        logger.info(
            "asset_minified",
            path=str(path.relative_to(assets_dir)),
            original_bytes=result.original_bytes,
            minified_bytes=result.minified_bytes,
            savings_percent=result.savings_percent,
        )
        results.append(result)
    return results
