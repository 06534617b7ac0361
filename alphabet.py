"""
Morse alphabet table.
MORSE_DICT is the single source of truth; the reverse map and the chart
entries are derived from it once at import time.
"""

from typing import Dict, List, NamedTuple
import config

# Morse Code Definition
MORSE_DICT = {
    'A': '.-', 'B': '-...', 'C': '-.-.', 'D': '-..', 'E': '.', 'F': '..-.',
    'G': '--.', 'H': '....', 'I': '..', 'J': '.---', 'K': '-.-', 'L': '.-..',
    'M': '--', 'N': '-.', 'O': '---', 'P': '.--.', 'Q': '--.-', 'R': '.-.',
    'S': '...', 'T': '-', 'U': '..-', 'V': '...-', 'W': '.--', 'X': '-..-',
    'Y': '-.--', 'Z': '--..', '0': '-----', '1': '.----', '2': '..---',
    '3': '...--', '4': '....-', '5': '.....', '6': '-....', '7': '--...',
    '8': '---..', '9': '----.', '.': '.-.-.-', ',': '--..--', '?': '..--..',
    '!': '-.-.--', ':': '---...', ';': '-.-.-.', "'": '.----.', '"': '.-..-.',
    '/': '-..-.', '-': '-....-', '+': '.-.-.', '=': '-...-', '@': '.--.-.',
    '(': '-.--.', ')': '-.--.-', '&': '.-...', '$': '...-..-', '_': '..--.-',
}


def build_reverse_map(table: Dict[str, str]) -> Dict[str, str]:
    """Invert a char -> code table. Raises ValueError if two characters share a code."""
    reverse = {}
    for char, code in table.items():
        if code in reverse:
            raise ValueError(f"Duplicate code {code!r} for {reverse[code]!r} and {char!r}")
        reverse[code] = char
    return reverse


MORSE_TO_CHAR = build_reverse_map(MORSE_DICT)
SUPPORTED_CHARACTERS = frozenset(MORSE_DICT)


class ChartEntry(NamedTuple):
    symbol: str
    code: str
    pattern: List[str]


def to_pattern(code: str) -> List[str]:
    return ["dot" if c == config.DOT else "dash" for c in code]


def build_entries(symbols) -> List[ChartEntry]:
    """Chart rows for the given symbols, skipping any not in the table."""
    entries = []
    for symbol in symbols:
        code = MORSE_DICT.get(symbol, "")
        if not code:
            continue
        entries.append(ChartEntry(symbol, code, to_pattern(code)))
    return entries


LETTER_ENTRIES = build_entries(config.LETTER_SYMBOLS)
NUMBER_ENTRIES = build_entries(config.NUMBER_SYMBOLS)
SYMBOL_ENTRIES = build_entries(config.CHART_SYMBOLS)


if __name__ == "__main__":
    print(f"Supported characters: {len(SUPPORTED_CHARACTERS)}")
    for title, entries in [("Letters", LETTER_ENTRIES), ("Numbers", NUMBER_ENTRIES), ("Symbols", SYMBOL_ENTRIES)]:
        print(f"\n{title}")
        print(f"{'Sym':>3} | {'Code':<8} | {'Pattern'}")
        print("-" * 40)
        for e in entries:
            print(f"{e.symbol:>3} | {e.code:<8} | {' '.join(e.pattern)}")
