"""tin CLI entry point.

Allows running via `python -m tin` and provides the console script
defined in `pyproject.toml`.
"""

from __future__ import annotations

import argparse
import logging
import sys

from .version import get_version_string


def _parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="tin", description="TIN Isn't Nano: a small terminal text editor.")
    parser.add_argument("filename", nargs="?", help="file to edit")
    parser.add_argument("-V", "--version", action="store_true", help="print version and exit")
    parser.add_argument("--log", metavar="FILE", help="write debug log to FILE")
    return parser.parse_args(argv)


def _configure_logging(path: str) -> None:
    handler = logging.FileHandler(path, encoding="utf-8")
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    logger = logging.getLogger("tin")
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(sys.argv[1:] if argv is None else argv)
    if args.version:
        print(get_version_string())
        return 0
    if args.log:
        _configure_logging(args.log)

    # Lazy import to avoid importing UI deps for --version
    from .editor import Editor
    from .errors import FatalError
    from .settings import load_settings

    editor = Editor(settings=load_settings())
    if args.filename:
        editor.load_file(args.filename)
    try:
        editor.run()
    except (FatalError, MemoryError) as e:
        logging.getLogger("tin").critical(f"Fatal error: {e!r}")
        print(f"tin: {e or type(e).__name__}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
