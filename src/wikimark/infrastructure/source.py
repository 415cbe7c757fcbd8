"""Reading wikimark source text from the filesystem or stdin."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import TextIO

from wikimark.config.logging import get_logger
from wikimark.core.exceptions import InputError

logger = get_logger(__name__)

STDIN_MARKER = "-"


def read_source(
    source: str | Path,
    *,
    encoding: str = "utf-8",
    stdin: TextIO | None = None,
) -> str:
    """Return the text of *source*.

    ``"-"`` reads from *stdin* (``sys.stdin`` by default); anything else is
    treated as a path.

    Raises:
        InputError: If the file cannot be read or is not valid *encoding*.
    """
    if str(source) == STDIN_MARKER:
        stream = stdin if stdin is not None else sys.stdin
        text = stream.read()
        logger.debug("source.read", path=STDIN_MARKER, chars=len(text))
        return text

    path = Path(source)
    try:
        text = path.read_text(encoding=encoding)
    except UnicodeDecodeError as e:
        raise InputError(
            f"Cannot decode {path} as {encoding}",
            details={"path": str(path), "encoding": encoding, "reason": str(e)},
        ) from e
    except LookupError as e:
        raise InputError(
            f"Unknown encoding: {encoding}",
            details={"encoding": encoding},
        ) from e
    except OSError as e:
        raise InputError(
            f"Cannot read {path}: {e.strerror or e}",
            details={"path": str(path)},
        ) from e

    logger.debug("source.read", path=str(path), chars=len(text))
    return text
