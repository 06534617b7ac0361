import argparse
import sys
import config
from codec import resolve_direction, translate, normalize_morse_string
from synth import synthesize_wav
from timing import compile_timing, total_duration


def main(argv=None):
    parser = argparse.ArgumentParser(description="Translate a message and export it as a Morse WAV file")
    parser.add_argument("message", type=str, help="Text or Morse code to translate")
    parser.add_argument("--mode", type=str, default=config.MODE_AUTO, choices=config.MODES,
                        help="Input direction (auto detects text vs morse)")
    parser.add_argument("--wpm", type=float, default=config.DEFAULT_WPM, help="Speed in words per minute")
    parser.add_argument("--freq", type=float, default=config.DEFAULT_FREQUENCY, help="Tone frequency (Hz)")
    parser.add_argument("--sample-rate", type=int, default=config.SAMPLE_RATE, help="Sample rate (Hz)")
    parser.add_argument("--output", type=str, default="morse.wav", help="Output WAV path")
    args = parser.parse_args(argv)

    direction = resolve_direction(args.message, args.mode)
    translation = translate(args.message, direction)
    morse = args.message if direction == config.DIRECTION_MORSE else translation
    morse = normalize_morse_string(morse)

    print(f"Direction: {direction}")
    print(f"Translation: {translation}")

    wav = synthesize_wav(morse, wpm=args.wpm, frequency=args.freq, sample_rate=args.sample_rate)
    if wav is None:
        print("No Morse content to render.")
        return 1

    duration = total_duration(compile_timing(morse, args.wpm))
    with open(args.output, "wb") as f:
        f.write(wav)
    print(f"Saved {duration:.2f}s of audio to {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
