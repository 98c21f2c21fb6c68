"""
Utilities for scrubbing corpus text before tokenization.
"""

import unicodedata


def _is_printable(c: str) -> bool:
    """
    Return ``True`` for characters that may appear inside a token.

    Control, format, unassigned and private-use characters (category ``C*``) are
    not printable, and neither is any separator except the plain space.
    """
    category = unicodedata.category(c)
    if category[0] == "C":
        return False
    return category[0] != "Z" or c == " "


def scrub(text: str) -> str:
    """
    Replace every non-printable character in ``text`` with a space.

    The result has the same length as the input, so offsets into the original
    text stay valid. Newlines and carriage returns are scrubbed as well, which
    is harmless because they are token delimiters.

    Args:
        text (str): Raw corpus text.

    Returns:
        str: Text where every character is printable or a plain space.
    """
    return "".join(c if _is_printable(c) else " " for c in text)
