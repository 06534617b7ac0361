"""
Text <-> Morse codec.
Encoding and decoding never raise on content: unsupported characters become
config.UNKNOWN_SYMBOL and malformed Morse is sanitized before decoding.
"""

import re
import unicodedata
import regex
import config
from alphabet import MORSE_DICT, MORSE_TO_CHAR

NON_MORSE_RE = re.compile(r"[^.\-\s/]")
MORSE_CHARS_RE = re.compile(r"[.\-\s/]")
MORSE_ONLY_RE = re.compile(r"[.\-\s/]+")
DOT_DASH_RE = re.compile(r"[.\-]")
ALNUM_RE = re.compile(r"[A-Za-z0-9]")
WHITESPACE_RE = re.compile(r"\s+")
# Combining accents as well as spacing ones such as ^ ` ´ ¨
DIACRITIC_RE = regex.compile(r"\p{Diacritic}")
# A separator together with any neighbouring spaces or further slashes
SEPARATOR_RE = re.compile(r"\s*/[\s/]*")


def normalize_text(text: str) -> str:
    """NFD-decompose, drop diacritical marks and upper-case."""
    decomposed = unicodedata.normalize("NFD", text)
    return DIACRITIC_RE.sub("", decomposed).upper()


def normalize_morse_string(text: str) -> str:
    """
    Canonical Morse form: only '.', '-', single spaces between letters and
    ' / ' between words. Anything else is treated as a space. Blank input
    (or input with no Morse content) normalizes to "".
    """
    if not text.strip():
        return ""

    sanitized = NON_MORSE_RE.sub(" ", text)
    sanitized = WHITESPACE_RE.sub(" ", sanitized).strip()
    sanitized = SEPARATOR_RE.sub(config.WORD_SEPARATOR, sanitized)
    # separators at either end do not separate anything
    return sanitized.strip(" /")


def encode(text: str) -> str:
    words = normalize_text(text).split()
    return config.WORD_SEPARATOR.join(
        config.LETTER_SEPARATOR.join(MORSE_DICT.get(c, config.UNKNOWN_SYMBOL) for c in word)
        for word in words
    )


def decode(morse: str) -> str:
    normalized = normalize_morse_string(morse)
    if not normalized:
        return ""

    decoded_words = []
    for word in normalized.split(config.WORD_SEPARATOR):
        tokens = [t for t in word.split(config.LETTER_SEPARATOR) if t]
        decoded_words.append("".join(MORSE_TO_CHAR.get(t, config.UNKNOWN_SYMBOL) for t in tokens))
    return " ".join(decoded_words)


def detect_direction(text: str) -> str:
    """
    Guess whether raw input is Morse or natural text.
    Heuristic only: a lone "-" reads as Morse and short digit strings read as
    text, which callers are expected to live with.
    """
    trimmed = text.strip()
    if not trimmed:
        return config.DIRECTION_TEXT

    non_morse = MORSE_CHARS_RE.sub("", trimmed)
    dot_dash_count = len(DOT_DASH_RE.findall(trimmed))
    alnum_count = len(ALNUM_RE.findall(trimmed))

    if not non_morse and dot_dash_count > 0 and dot_dash_count >= alnum_count:
        return config.DIRECTION_MORSE

    if MORSE_ONLY_RE.fullmatch(trimmed) and dot_dash_count > alnum_count:
        return config.DIRECTION_MORSE

    return config.DIRECTION_TEXT


def resolve_direction(text: str, mode: str = config.MODE_AUTO) -> str:
    """Map a translator mode ("auto", "text", "morse") to a concrete direction."""
    if mode not in config.MODES:
        raise ValueError(f"Unknown mode: {mode!r} (expected one of {config.MODES})")
    if mode == config.MODE_AUTO:
        return detect_direction(text)
    return mode


def translate(text: str, direction: str) -> str:
    if direction == config.DIRECTION_MORSE:
        return decode(text)
    return encode(text)


def sanitize_input(text: str, direction: str) -> str:
    if direction == config.DIRECTION_MORSE:
        return normalize_morse_string(text)
    return normalize_text(text)


def has_morse_content(text: str) -> bool:
    return bool(normalize_morse_string(text))
