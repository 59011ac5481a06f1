"""Line sources for the command line sorter."""
from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Iterable

import requests

from .config import SortConfig

STDIN_SOURCE = "-"

logger = logging.getLogger(__name__)


class SourceError(RuntimeError):
    """Raised when a source cannot be read or decoded."""

    def __init__(self, source: str, reason: str) -> None:
        super().__init__(f"{source}: {reason}")
        self.source = source
        self.reason = reason


def is_remote(source: str) -> bool:
    return source.lower().startswith(("http://", "https://"))


def read_text(source: str, config: SortConfig) -> str:
    if source == STDIN_SOURCE:
        return sys.stdin.read()
    if is_remote(source):
        return _fetch(source, config)
    try:
        return Path(source).read_text(encoding=config.encoding)
    except OSError as exc:
        raise SourceError(source, exc.strerror or str(exc)) from exc
    except UnicodeDecodeError as exc:
        raise SourceError(source, f"cannot decode as {config.encoding}") from exc


def _fetch(url: str, config: SortConfig) -> str:
    try:
        response = requests.get(
            url,
            timeout=config.timeout,
            headers={"User-Agent": config.user_agent},
        )
        response.raise_for_status()
    except requests.RequestException as exc:
        raise SourceError(url, str(exc)) from exc
    content_type = response.headers.get("Content-Type", "")
    if "charset=" not in content_type.lower():
        # requests falls back to ISO-8859-1 for text/* without a declared charset
        response.encoding = config.encoding
    logger.debug("Fetched %s (status %s)", url, response.status_code)
    return response.text


def read_lines(source: str, config: SortConfig) -> list[str]:
    lines = read_text(source, config).splitlines()
    if config.strip:
        lines = [line.rstrip() for line in lines]
    if config.skip_blank:
        lines = [line for line in lines if line.strip()]
    logger.info("Read %s lines from %s", len(lines), source)
    return lines


def collect_lines(sources: Iterable[str], config: SortConfig) -> list[str]:
    lines: list[str] = []
    for source in sources:
        lines.extend(read_lines(source, config))
    return lines


__all__ = ["SourceError", "STDIN_SOURCE", "collect_lines", "is_remote", "read_lines", "read_text"]
