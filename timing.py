"""
Timing compiler.
Turns a Morse string into an ordered list of tone/silence events following
the international ratios (dot 1, dash 3, gaps 1/3/7 units). Scheduling the
events against a real clock is left to the caller; see build_cues().
"""

import math
from typing import List, NamedTuple, Optional, Tuple
import config
from codec import normalize_morse_string

TONE = "tone"
SILENCE = "silence"


class TimingEvent(NamedTuple):
    kind: str        # TONE or SILENCE
    duration: float  # seconds


class Cue(NamedTuple):
    at: float  # seconds from start
    on: bool


class LightSegment(NamedTuple):
    kind: str                  # "light" or "gap"
    duration: float
    step_index: Optional[int]  # running index of the dot/dash, None for gaps


class LightSequence(NamedTuple):
    segments: List[LightSegment]
    preview: List[Tuple[str, Optional[int]]]

    @property
    def has_content(self) -> bool:
        return any(step is not None for _, step in self.preview)


def unit_duration(wpm: float, min_wpm: float = config.MIN_WPM) -> float:
    """Length of one unit in seconds (PARIS timing), clamping wpm to min_wpm."""
    if not wpm or not math.isfinite(wpm):
        wpm = min_wpm
    return config.PARIS_UNIT / max(min_wpm, wpm)


def compile_timing(morse: str, wpm: float = config.DEFAULT_WPM,
                   min_wpm: float = config.MIN_WPM) -> List[TimingEvent]:
    """
    Generate the event sequence for the given Morse string.
    Gaps are emitted only between elements, so the sequence never starts or
    ends with silence and never holds two silences in a row. Empty or
    all-invalid input gives an empty list.
    """
    normalized = normalize_morse_string(morse)
    if not normalized:
        return []

    unit = unit_duration(wpm, min_wpm)
    events = []
    words = normalized.split(config.WORD_SEPARATOR)

    for i, word in enumerate(words):
        letters = word.split(config.LETTER_SEPARATOR)
        for j, letter in enumerate(letters):
            for k, symbol in enumerate(letter):
                units = config.DASH_UNITS if symbol == config.DASH else config.DOT_UNITS
                events.append(TimingEvent(TONE, units * unit))
                if k < len(letter) - 1:
                    events.append(TimingEvent(SILENCE, config.INTRA_CHAR_GAP_UNITS * unit))

            if j < len(letters) - 1:
                events.append(TimingEvent(SILENCE, config.INTER_CHAR_GAP_UNITS * unit))

        if i < len(words) - 1:
            events.append(TimingEvent(SILENCE, config.INTER_WORD_GAP_UNITS * unit))

    return events


def total_duration(events: List[TimingEvent]) -> float:
    return sum(e.duration for e in events)


def build_cues(events: List[TimingEvent]) -> List[Cue]:
    """
    On/off switch points for driving an oscillator gain or a light.
    The last cue is always off at the total duration. Stopping playback
    early means dropping whatever cues have not fired yet.
    """
    cues = []
    elapsed = 0.0
    for event in events:
        if event.kind == TONE:
            cues.append(Cue(elapsed, True))
            cues.append(Cue(elapsed + event.duration, False))
        elapsed += event.duration
    return cues


def build_light_sequence(morse: str, wpm: float = config.DEFAULT_WPM) -> LightSequence:
    """The visual flasher allows slower speeds than audio, down to config.LIGHT_MIN_WPM."""
    segments = []
    step = 0
    for event in compile_timing(morse, wpm, min_wpm=config.LIGHT_MIN_WPM):
        if event.kind == TONE:
            segments.append(LightSegment("light", event.duration, step))
            step += 1
        else:
            segments.append(LightSegment("gap", event.duration, None))

    preview = []
    step = 0
    for c in normalize_morse_string(morse):
        if c in (config.DOT, config.DASH):
            preview.append((c, step))
            step += 1
        elif c == "/":
            preview.append(("/", None))

    return LightSequence(segments, preview)
