"""
Global Configuration for the Morse translator engine.
Centralizing all parameters to ensure consistency across encoding,
timing compilation and waveform synthesis.
"""

# Audio / PCM Parameters
SAMPLE_RATE = 44100    # Default sample rate (Hz)
AMPLITUDE = 0.4        # Tone amplitude relative to full scale (headroom against clipping)
PCM_BITS = 16          # Signed 16-bit linear PCM
WAV_HEADER_SIZE = 44   # RIFF + fmt + data chunk headers

# Speed / Tone Parameters
DEFAULT_WPM = 20
MIN_WPM = 5            # Lower bound; slower values are clamped here
LIGHT_MIN_WPM = 1      # Lower bound for the light flasher sequence
PARIS_UNIT = 1.2       # unit (sec) = 1.2 / WPM
DEFAULT_FREQUENCY = 600.0
MIN_FREQUENCY = 100.0  # Lower bound (Hz)

# Timing ratios, in units
DOT_UNITS = 1
DASH_UNITS = 3
INTRA_CHAR_GAP_UNITS = 1   # between symbols of a letter
INTER_CHAR_GAP_UNITS = 3   # between letters of a word
INTER_WORD_GAP_UNITS = 7   # between words

# Text form
DOT = "."
DASH = "-"
LETTER_SEPARATOR = " "
WORD_SEPARATOR = " / "
UNKNOWN_SYMBOL = "?"

# Direction detection
DIRECTION_TEXT = "text"
DIRECTION_MORSE = "morse"
MODE_AUTO = "auto"
MODES = [MODE_AUTO, DIRECTION_TEXT, DIRECTION_MORSE]

# Chart groups
LETTER_SYMBOLS = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
NUMBER_SYMBOLS = "0123456789"
CHART_SYMBOLS = [".", ",", "?", "!", "/", "@", ":", "'", "-", "(", ")"]
