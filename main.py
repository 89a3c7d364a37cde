from __future__ import annotations

import argparse
import logging
from pathlib import Path

import numpy as np

from signal_drawer import EqualTemperament, WidgetStack, load_plot_config, plot_config
from signal_drawer.colors import BLUE, RED, YELLOW


DEMO_SAMPLE_RATE = 44_100
DEMO_FFT_SIZE = 4096
DEMO_TONES = ("A2", "A4", "E6")


def build_demo_stack(
    config_path: Path | None = None,
    *,
    a4: float = 440.0,
    sample_rate: int = DEMO_SAMPLE_RATE,
    fft_size: int = DEMO_FFT_SIZE,
) -> WidgetStack:
    """Stack a waveform, a linear spectrum and a logarithmic spectrum of a synthesized chord."""
    config = load_plot_config(config_path) if config_path is not None else plot_config()
    temperament = EqualTemperament(a4)
    tones = [temperament.note_named(name) for name in DEMO_TONES]

    t = np.arange(fft_size, dtype=np.float64) / sample_rate
    signal = sum(np.sin(2.0 * np.pi * note.exact_frequency * t) / (i + 1) for i, note in enumerate(tones))
    times_ns = np.rint(t * 1e9).astype(np.int64)

    spectrum = np.fft.rfft(signal * np.hanning(fft_size))
    frequencies = np.fft.rfftfreq(fft_size, d=1.0 / sample_rate)
    magnitude = np.abs(spectrum)
    phase = np.angle(spectrum)

    out = WidgetStack(config=config)
    out.wave(times_ns, "waveform").add_series(signal, color=YELLOW)
    linear = out.spectrum(frequencies, "spectrum", start=20.0, end=5000.0).set_temperament(temperament)
    linear.add_series(magnitude).add_series(phase, mode="point", color=BLUE)
    for note in tones:
        linear.add_mark(note.exact_frequency, RED)
    log_spectrum = out.spectrum(frequencies, "spectrum (log)").set_temperament(temperament)
    log_spectrum.fit_to_data().set_start(20.0).set_log_scale(True).add_series(magnitude)
    for octave in range(1, 9):
        log_spectrum.add_side_label(config.plot_height * octave // 9, octave, "oct")
    return out


def main() -> None:
    parser = argparse.ArgumentParser(prog="signal-drawer")
    parser.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    sub = parser.add_subparsers(dest="command", required=True)

    demo = sub.add_parser("demo", help="Render a synthesized chord as wave + spectrum widgets to a PNG.")
    demo.add_argument("--out", type=Path, default=Path("signal_drawer_demo.png"))
    demo.add_argument("--config", type=Path, default=None, help="TOML file with a [layout] table.")
    demo.add_argument("--a4", type=float, default=440.0, help="Reference pitch for note labels in Hz.")
    args = parser.parse_args()

    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")

    if args.command == "demo":
        stack = build_demo_stack(args.config, a4=args.a4)
        out = stack.save_png(args.out)
        print(f"wrote {out} ({stack.total_width()}x{stack.total_height()})")
        return


if __name__ == "__main__":
    main()
