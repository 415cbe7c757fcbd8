r"""Line splitting and trimming rules shared by the parser.

Lines end at ``\n`` or ``\r\n`` only; other separators such as a bare ``\r``
or U+2028 stay inside the line. Trimming removes Unicode White_Space
characters only, so the information separators U+001C..U+001F that
``str.strip()`` would drop are kept as content.
"""

from __future__ import annotations

WHITESPACE = (
    "\t\n\x0b\x0c\r\x20\x85\xa0\u1680"
    + "".join(chr(code) for code in range(0x2000, 0x200B))
    + "\u2028\u2029\u202f\u205f\u3000"
)


def split_lines(text: str) -> list[str]:
    r"""Split *text* on ``\n``, dropping one ``\r`` before each break.

    A trailing line break does not produce an extra empty line.
    """
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line.removesuffix("\r") for line in lines]


def trim(text: str) -> str:
    """Strip leading and trailing Unicode White_Space from *text*."""
    return text.strip(WHITESPACE)
