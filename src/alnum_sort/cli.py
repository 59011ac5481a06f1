"""Command-line interface for natural line sorting."""
from __future__ import annotations

import argparse
import locale
import logging
import sys
from pathlib import Path

if __package__ is None or __package__ == "":  # pragma: no cover - script execution path
    PACKAGE_ROOT = Path(__file__).resolve().parents[1]
    if str(PACKAGE_ROOT) not in sys.path:
        sys.path.insert(0, str(PACKAGE_ROOT))

    from alnum_sort.config import DEFAULT_USER_AGENT, SortConfig
    from alnum_sort.core.models import StringComparison
    from alnum_sort.sorting import natural_sorted, unique_sorted
    from alnum_sort.sources import STDIN_SOURCE, collect_lines
else:  # pragma: no cover - package execution path
    from .config import DEFAULT_USER_AGENT, SortConfig
    from .core.models import StringComparison
    from .sorting import natural_sorted, unique_sorted
    from .sources import STDIN_SOURCE, collect_lines

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Sort lines so that embedded numbers order by value (item2 before item10)"
    )
    parser.add_argument(
        "sources",
        nargs="*",
        default=[STDIN_SOURCE],
        help="Files or http(s) URLs to read; '-' or nothing reads stdin",
    )
    parser.add_argument(
        "--mode",
        choices=[mode.value for mode in StringComparison],
        default=StringComparison.CURRENT_CULTURE.value,
        help="Comparison used for the non-numeric parts of each line",
    )
    parser.add_argument("--locale", help="Collation locale for the current-culture modes, e.g. de_DE.UTF-8")
    parser.add_argument("--reverse", action="store_true", help="Sort in descending order")
    parser.add_argument("--unique", action="store_true", help="Drop lines that compare equal to the previous one")
    parser.add_argument("--keep-whitespace", action="store_true", help="Keep trailing whitespace on each line")
    parser.add_argument("--skip-blank", action="store_true", help="Ignore blank lines")
    parser.add_argument("--encoding", default="utf-8", help="Encoding of input files")
    parser.add_argument("--timeout", type=float, default=10.0, help="Request timeout for URL sources (seconds)")
    parser.add_argument("--user-agent", default=DEFAULT_USER_AGENT, help="User-Agent header for URL sources")
    parser.add_argument("--output", type=Path, help="Path to write sorted lines; prints to stdout if omitted")
    parser.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging verbosity")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    if args.locale:
        try:
            locale.setlocale(locale.LC_COLLATE, args.locale)
        except locale.Error as exc:
            logger.error("Unsupported locale %s: %s", args.locale, exc)
            return 2

    config = SortConfig(
        mode=StringComparison.parse(args.mode),
        reverse=args.reverse,
        unique=args.unique,
        strip=not args.keep_whitespace,
        skip_blank=args.skip_blank,
        encoding=args.encoding,
        timeout=args.timeout,
        user_agent=args.user_agent,
    )

    try:
        lines = collect_lines(args.sources, config)
    except RuntimeError as exc:
        logger.error("Failed to read input: %s", exc)
        return 1

    comparer = config.comparer()
    if config.unique:
        ordered = unique_sorted(lines, comparer=comparer, reverse=config.reverse)
    else:
        ordered = natural_sorted(lines, comparer=comparer, reverse=config.reverse)
    logger.info("Sorted %s lines using %s", len(ordered), comparer.mode.value)

    text = "".join(f"{line}\n" for line in ordered)
    if args.output:
        _ensure_parent(args.output)
        args.output.write_text(text, encoding=config.encoding)
        logger.info("Sorted output written to %s", args.output)
    else:
        sys.stdout.write(text)

    return 0


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _ensure_parent(path: Path) -> None:
    if path.parent and not path.parent.exists():
        path.parent.mkdir(parents=True, exist_ok=True)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
