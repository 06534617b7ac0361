import sys
import os
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import io
import struct
import pytest
import numpy as np
import scipy.io.wavfile
import config
from timing import TONE, SILENCE, TimingEvent, compile_timing
from synth import render_samples, to_pcm16, encode_wav, synthesize_wav, event_sample_count


def test_wav_header():
    wav = synthesize_wav("...", wpm=20, frequency=600)
    # 5 events of 0.06s at 44100 Hz
    num_samples = 5 * 2646
    assert len(wav) == config.WAV_HEADER_SIZE + num_samples * 2

    fields = struct.unpack("<4sI4s4sIHHIIHH4sI", wav[:44])
    assert fields == (b"RIFF", 36 + num_samples * 2, b"WAVE", b"fmt ", 16, 1, 1,
                      44100, 88200, 2, 16, b"data", num_samples * 2)


def test_wav_custom_sample_rate():
    wav = synthesize_wav(".", wpm=20, frequency=600, sample_rate=8000)
    rate, byte_rate = struct.unpack("<II", wav[24:32])
    assert rate == 8000
    assert byte_rate == 16000


def test_wav_readback():
    wav = synthesize_wav("...", wpm=20, frequency=600)
    rate, data = scipy.io.wavfile.read(io.BytesIO(wav))
    assert rate == config.SAMPLE_RATE
    assert data.dtype == np.int16
    assert len(data) == 5 * 2646

    # Second event is an intra-char gap
    assert np.all(data[2646:2 * 2646] == 0)
    peak = np.max(np.abs(data))
    assert 13000 < peak <= int(config.AMPLITUDE * 32767) + 1


def test_waveform_determinism():
    a = synthesize_wav("...", wpm=20, frequency=600)
    b = synthesize_wav("...", wpm=20, frequency=600)
    assert a == b


def test_empty_input_returns_none():
    assert synthesize_wav("", wpm=20, frequency=600) is None
    assert synthesize_wav("hello", wpm=20, frequency=600) is None
    assert synthesize_wav(" / ", wpm=20, frequency=600) is None


def test_phase_is_continuous_across_events():
    sr = 8000
    events = [TimingEvent(TONE, 0.01), TimingEvent(SILENCE, 0.0123), TimingEvent(TONE, 0.01)]
    waveform = render_samples(events, frequency=700, sample_rate=sr)

    assert len(waveform) == 80 + 98 + 80
    start = 80 + 98
    expected = np.sin(2 * np.pi * 700 * (start + np.arange(80)) / sr) * config.AMPLITUDE
    assert np.allclose(waveform[start:], expected)
    # Not restarted at zero phase
    assert abs(waveform[start]) > 0.1


def test_sample_counts_accumulate_per_event():
    # Each event rounds to one sample; the buffer is not sized from the total duration
    events = [TimingEvent(TONE, 0.00014)] * 3
    waveform = render_samples(events, frequency=600, sample_rate=10000)
    assert len(waveform) == 3

    assert event_sample_count(0.0, 44100) == 1
    assert event_sample_count(0.06, 44100) == 2646


def test_frequency_floor():
    events = compile_timing(".-", 20)
    low = render_samples(events, frequency=10, sample_rate=8000)
    floor = render_samples(events, frequency=config.MIN_FREQUENCY, sample_rate=8000)
    assert np.array_equal(low, floor)

    missing = render_samples(events, frequency=0, sample_rate=8000)
    default = render_samples(events, frequency=config.DEFAULT_FREQUENCY, sample_rate=8000)
    assert np.array_equal(missing, default)

    infinite = render_samples(events, frequency=float("inf"), sample_rate=8000)
    assert np.array_equal(infinite, default)
    assert np.all(np.isfinite(infinite))


def test_to_pcm16():
    pcm = to_pcm16(np.array([-1.0, -0.5, 0.0, 0.5, 1.0, 2.0, -2.0]))
    assert pcm.dtype == np.int16
    assert pcm.tolist() == [-32768, -16384, 0, 16383, 32767, 32767, -32768]


def test_encode_wav_length():
    wav = encode_wav(np.zeros(10), sample_rate=8000)
    assert len(wav) == 44 + 20
    assert wav[44:] == b"\x00" * 20


@pytest.mark.parametrize("sample_rate", [0, -8000, 44100.5])
def test_invalid_sample_rate(sample_rate):
    with pytest.raises(ValueError):
        synthesize_wav("...", wpm=20, frequency=600, sample_rate=sample_rate)
