"""
mpags-cipher command-line entry point.

    mpags-cipher -c vigenere -k KEY -i plain.txt -o secret.txt
    echo "Hello, World" | mpags-cipher -k 3 --encrypt

Exit status: 0 on success, 1 on any argument, key or file error.
Nothing is written to the output until the whole text is transformed.
"""

import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from . import __version__
from .exceptions import InvalidKey, MissingArgument, UnknownArgument
from .factory    import cipher_factory
from .modes      import CipherType
from .parallel   import DEFAULT_WORKERS, run_parallel
from .sanitize   import sanitize
from .settings   import build_parser, process_command_line

logger = logging.getLogger(__name__)


def _error(message: str) -> int:
    print(f"[error] {message}", file=sys.stderr)
    return 1


def main(argv: Optional[Sequence[str]] = None) -> int:
    try:
        settings = process_command_line(argv)
    except MissingArgument as exc:
        return _error(f"Missing argument: {exc}")
    except UnknownArgument as exc:
        return _error(f"Unknown argument: {exc}")

    logging.basicConfig(
        level=logging.DEBUG if settings.verbose else logging.WARNING,
        format="[%(levelname)s] %(name)s: %(message)s",
    )

    if settings.help_requested:
        print(build_parser().format_help())
        return 0

    if settings.version_requested:
        print(__version__)
        return 0

    # Undecodable bytes become U+FFFD, which sanitize() drops
    if settings.input_file:
        try:
            raw = Path(settings.input_file).read_text(encoding="utf-8", errors="replace")
        except OSError as exc:
            return _error(f"failed to read input file '{settings.input_file}': {exc}")
    else:
        try:
            raw = sys.stdin.read()
        except UnicodeDecodeError as exc:
            return _error(f"failed to decode standard input: {exc}")
    text = sanitize(raw)
    logger.debug("Sanitized %d input characters to %d", len(raw), len(text))

    try:
        cipher = cipher_factory(settings.cipher_type, settings.cipher_key)
    except InvalidKey as exc:
        return _error(f"Invalid key: {exc}")

    if settings.cipher_type is CipherType.CAESAR:
        output = run_parallel(cipher, text, settings.cipher_mode, DEFAULT_WORKERS)
    else:
        output = cipher.transform(text, settings.cipher_mode)

    if settings.output_file:
        try:
            Path(settings.output_file).write_text(output + "\n", encoding="utf-8")
        except OSError as exc:
            return _error(f"failed to write output file '{settings.output_file}': {exc}")
    else:
        print(output)
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    sys.exit(main())
