from __future__ import annotations
import re

# Arabic letters U+0621-U+064A and Arabic-Indic digits U+0660-U+0669
ARABIC_RE = re.compile('[ء-ي٠-٩]+')
WORD_LENGTH = 3


def is_valid_format(word: str) -> bool:
    """True if `word` is exactly three Arabic letters or digits."""
    return len(word) == WORD_LENGTH and ARABIC_RE.fullmatch(word) is not None


def is_allowed_char(char: str) -> bool:
    """
    Keystroke filter for the quiz input boxes.

    Advisory only: the page may drop keys this rejects, and `/dict/validate`
    reports it per word as `charsAllowed`. Submitted words are still checked
    with `is_valid_format`.
    """
    return len(char) == 1 and ARABIC_RE.fullmatch(char) is not None
