"""Cell text utilities: width measurement, word wrapping, centering.

Widths are terminal display widths: ANSI escape sequences count as zero
columns, wide (CJK, emoji) grapheme clusters count as two.
"""

from __future__ import annotations

import re
import unicodedata

import grapheme
import wcwidth as _wcwidth


# ---------------------------------------------------------------------------
# Regex patterns for ANSI / OSC sequences
# ---------------------------------------------------------------------------

_ANSI_PATTERN = (
    r"\x1b\[[0-9;]*[mGKHJ]"          # CSI
    r"|\x1b\]8;;[^\x07]*\x07"         # OSC 8
    r"|\x1b_[^\x07\x1b]*(?:\x07|\x1b\\)"  # APC
)

_STRIP_RE = re.compile(_ANSI_PATTERN)
# Capturing variant: re.split keeps the escape sequences as separate pieces
_SPLIT_RE = re.compile(f"({_ANSI_PATTERN})")

# ---------------------------------------------------------------------------
# Width cache (capped at 512 entries)
# ---------------------------------------------------------------------------

_width_cache: dict[str, int] = {}
_WIDTH_CACHE_MAX = 512


def _cache_width(key: str, value: int) -> int:
    if len(_width_cache) >= _WIDTH_CACHE_MAX:
        _width_cache.clear()
    _width_cache[key] = value
    return value


# ---------------------------------------------------------------------------
# Grapheme width
# ---------------------------------------------------------------------------

def _grapheme_width(g: str) -> int:
    """Return the terminal display width of a single grapheme cluster."""
    if not g:
        return 0

    if len(g) == 1:
        cp = ord(g)
        if cp < 0x20 or (0x7F <= cp <= 0x9F):
            return 0
        return max(_wcwidth.wcwidth(g), 0)

    # VS16, ZWJ sequences, skin tones and flags render as emoji
    for ch in g:
        cp = ord(ch)
        if cp in (0xFE0F, 0x200D):
            return 2
        if 0x1F3FB <= cp <= 0x1F3FF or 0x1F1E6 <= cp <= 0x1F1FF:
            return 2

    first = g[0]
    if ord(first) >= 0x1F000 or 0x2600 <= ord(first) <= 0x27BF:
        return 2

    cat = unicodedata.category(first)
    if cat.startswith("M") or cat == "Cf":
        return 0

    return max(_wcwidth.wcwidth(first), 0)


def visible_width(text: str) -> int:
    """Calculate the visible terminal width of *text*.

    ANSI escape sequences are ignored. Pure printable ASCII takes a fast
    path; everything else is measured per grapheme cluster and cached.
    """
    if not text:
        return 0

    stripped = _STRIP_RE.sub("", text)
    if not stripped:
        return 0

    if stripped.isascii() and stripped.isprintable():
        return len(stripped)

    cached = _width_cache.get(stripped)
    if cached is not None:
        return cached

    total = sum(_grapheme_width(g) for g in grapheme.graphemes(stripped))
    return _cache_width(stripped, total)


# ---------------------------------------------------------------------------
# wrap_cell
# ---------------------------------------------------------------------------

def wrap_cell(text: str, width: int) -> list[str]:
    """Word-wrap *text* into sub-lines no wider than *width* columns.

    Breaks at whitespace where possible; whitespace at a break is dropped.
    A word wider than *width* is hard-broken at grapheme boundaries. Embedded
    newlines always start a new sub-line. Empty text yields one empty
    sub-line.
    """
    if width <= 0:
        raise ValueError(f"cell width must be positive, got {width}")

    result: list[str] = []
    for physical_line in text.split("\n"):
        result.extend(_wrap_physical_line(physical_line, width))
    return result


def _wrap_physical_line(line: str, width: int) -> list[str]:
    words = line.split()
    if not words:
        return [""]

    result: list[str] = []
    current = ""
    current_width = 0

    for word in words:
        word_width = visible_width(word)

        if current and current_width + 1 + word_width <= width:
            current += " " + word
            current_width += 1 + word_width
            continue

        if current:
            result.append(current)

        if word_width <= width:
            current = word
            current_width = word_width
            continue

        chunks = _break_word(word, width)
        result.extend(chunks[:-1])
        current = chunks[-1]
        current_width = visible_width(current)

    result.append(current)
    return result


def _break_word(word: str, width: int) -> list[str]:
    """Hard-break *word* into chunks of at most *width* columns.

    Escape sequences stay attached to the chunk they appear in. A grapheme
    wider than *width* on its own still gets a chunk to itself.
    """
    chunks: list[str] = []
    current: list[str] = []
    current_width = 0

    for piece in _SPLIT_RE.split(word):
        if not piece:
            continue
        if _STRIP_RE.fullmatch(piece):
            current.append(piece)
            continue
        for g in grapheme.graphemes(piece):
            w = _grapheme_width(g)
            if current_width + w > width and current_width > 0:
                chunks.append("".join(current))
                current = []
                current_width = 0
            current.append(g)
            current_width += w

    chunks.append("".join(current))
    return chunks


# ---------------------------------------------------------------------------
# center_to_width
# ---------------------------------------------------------------------------

def center_to_width(text: str, width: int) -> str:
    """Pad *text* with spaces to *width* columns, centered.

    When the padding is odd the extra space goes on the right. Text that is
    already *width* columns or wider is returned unchanged.
    """
    pad = width - visible_width(text)
    if pad <= 0:
        return text
    left = pad // 2
    return " " * left + text + " " * (pad - left)
