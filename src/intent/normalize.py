"""Text sanitization for deterministic intent parsing."""

from __future__ import annotations

import re
import unicodedata

DEFAULT_MAX_LEN = 2048

_LINE_BREAKS_RE = re.compile(r"[\r\n\t]")
_MULTISPACE_RE = re.compile(r"\s{2,}")


def _is_control(ch: str) -> bool:
    # Unicode "other" categories (Cc, Cf, Co, Cs, Cn) that are not whitespace.
    return unicodedata.category(ch).startswith("C") and not ch.isspace()


def sanitize_text(text: str, max_len: int = DEFAULT_MAX_LEN) -> str:
    """Sanitize free text from a chat message.

    Steps:
        - Replace CR/LF/TAB with spaces.
        - Drop non-printable control characters (whitespace is kept).
        - Collapse runs of whitespace into a single space.
        - Trim, then clamp to `max_len` characters.

    The function is idempotent: `sanitize_text(sanitize_text(s)) == sanitize_text(s)`.
    """

    value = _LINE_BREAKS_RE.sub(" ", text or "")
    value = "".join(ch for ch in value if not _is_control(ch))
    value = _MULTISPACE_RE.sub(" ", value).strip()

    if len(value) > max_len:
        # A cut may land right after a space; trim again so a second pass is a no-op.
        value = value[:max_len].rstrip()
    return value


def not_empty(text: str) -> bool:
    """Whether the text has any non-whitespace content."""

    return bool((text or "").strip())
