"""
Waveform synthesizer.
Renders a timing event sequence as a sine tone and packages it as a
16-bit mono PCM WAV file held in memory.
"""

import io
import math
import numpy as np
import scipy.io.wavfile
from typing import List, Optional
import config
from timing import TONE, TimingEvent, compile_timing


def clamp_frequency(frequency: float) -> float:
    if not frequency or not math.isfinite(frequency):
        frequency = config.DEFAULT_FREQUENCY
    return max(config.MIN_FREQUENCY, float(frequency))


def check_sample_rate(sample_rate: int) -> int:
    if isinstance(sample_rate, bool) or not isinstance(sample_rate, (int, np.integer)) or sample_rate <= 0:
        raise ValueError(f"sample_rate must be a positive integer, got {sample_rate!r}")
    return int(sample_rate)


def event_sample_count(duration: float, sample_rate: int) -> int:
    """round(duration * sample_rate), half up, and never less than one sample."""
    return max(1, int(math.floor(duration * sample_rate + 0.5)))


def render_samples(events: List[TimingEvent], frequency: float = config.DEFAULT_FREQUENCY,
                   sample_rate: int = config.SAMPLE_RATE) -> np.ndarray:
    """
    Convert a timing sequence to a float waveform in [-1, 1].
    The buffer length is the sum of the per-event sample counts. The sine
    phase follows the absolute sample index so consecutive tones do not
    restart at zero phase.
    """
    frequency = clamp_frequency(frequency)
    sample_rate = check_sample_rate(sample_rate)

    counts = [event_sample_count(e.duration, sample_rate) for e in events]
    waveform = np.zeros(sum(counts))

    current_sample = 0
    for event, num_samples in zip(events, counts):
        if event.kind == TONE:
            t = (current_sample + np.arange(num_samples)) / sample_rate
            waveform[current_sample:current_sample + num_samples] = \
                np.sin(2 * np.pi * frequency * t) * config.AMPLITUDE
        current_sample += num_samples

    return waveform


def to_pcm16(samples: np.ndarray) -> np.ndarray:
    # Asymmetric scaling so -1.0 reaches -32768 and +1.0 reaches 32767
    full_scale = 2 ** (config.PCM_BITS - 1)
    clipped = np.clip(np.asarray(samples, dtype=np.float64), -1.0, 1.0)
    scaled = np.where(clipped < 0, clipped * full_scale, clipped * (full_scale - 1))
    return scaled.astype(np.int16)


def encode_wav(samples: np.ndarray, sample_rate: int = config.SAMPLE_RATE) -> bytes:
    """Little-endian RIFF/WAVE, PCM, 16-bit, mono, 44-byte header."""
    sample_rate = check_sample_rate(sample_rate)
    buffer = io.BytesIO()
    scipy.io.wavfile.write(buffer, sample_rate, to_pcm16(samples))
    return buffer.getvalue()


def synthesize_wav(morse: str, wpm: float = config.DEFAULT_WPM,
                   frequency: float = config.DEFAULT_FREQUENCY,
                   sample_rate: int = config.SAMPLE_RATE) -> Optional[bytes]:
    """
    Render the Morse string to WAV bytes.
    Returns None when there is nothing to play (empty or all-invalid input).
    """
    sample_rate = check_sample_rate(sample_rate)
    events = compile_timing(morse, wpm)
    if not events:
        return None

    samples = render_samples(events, frequency, sample_rate)
    return encode_wav(samples, sample_rate)
