import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np
import argparse
import sys
import os
import config
from codec import encode, resolve_direction, normalize_morse_string
from synth import render_samples
from timing import TONE, compile_timing, total_duration


def plot_timing(morse, wpm, frequency, sample_rate, output):
    events = compile_timing(morse, wpm)
    if not events:
        return False

    waveform = render_samples(events, frequency, sample_rate)
    t = np.arange(len(waveform)) / sample_rate

    fig, (ax_wf, ax_ev) = plt.subplots(2, 1, figsize=(15, 6), sharex=True)

    ax_wf.plot(t, waveform, linewidth=0.5)
    ax_wf.set_title(f"'{morse}' (WPM: {wpm}, {frequency:.0f} Hz)\nWaveform")
    ax_wf.set_ylabel("Amplitude")
    ax_wf.grid(True, alpha=0.3)

    elapsed = 0.0
    for event in events:
        color = "tab:orange" if event.kind == TONE else "tab:gray"
        alpha = 0.8 if event.kind == TONE else 0.2
        ax_ev.axvspan(elapsed, elapsed + event.duration, color=color, alpha=alpha)
        elapsed += event.duration
    ax_ev.set_title(f"Events ({len(events)}, total {total_duration(events):.3f}s)")
    ax_ev.set_xlabel("Time (s)")
    ax_ev.set_yticks([])

    plt.tight_layout()
    out_dir = os.path.dirname(output)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    plt.savefig(output)
    plt.close(fig)
    return True


def main(argv=None):
    parser = argparse.ArgumentParser(description="Visualize Morse timing and waveform")
    parser.add_argument("message", type=str, help="Text or Morse code")
    parser.add_argument("--mode", type=str, default=config.MODE_AUTO, choices=config.MODES)
    parser.add_argument("--wpm", type=float, default=config.DEFAULT_WPM)
    parser.add_argument("--freq", type=float, default=config.DEFAULT_FREQUENCY)
    parser.add_argument("--sample-rate", type=int, default=8000, help="Plot resolution (Hz)")
    parser.add_argument("--output", type=str, default="diagnostics/timing_visualization.png")
    args = parser.parse_args(argv)

    direction = resolve_direction(args.message, args.mode)
    if direction == config.DIRECTION_MORSE:
        morse = normalize_morse_string(args.message)
    else:
        morse = encode(args.message)

    if not plot_timing(morse, args.wpm, args.freq, args.sample_rate, args.output):
        print("No Morse content to visualize.")
        return 1
    print(f"Saved visualization to {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
