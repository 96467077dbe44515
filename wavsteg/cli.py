"""Command-line interface: hide text in WAV files and read it back."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

from wavsteg.audio import WavAudio, load_wav, render_waveform, save_wav, write_png
from wavsteg.stego import decode_message, encode_message

__all__ = ["main"]

EMPTY_MESSAGE = "<empty>"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wavsteg", description="Hide text in the low bits of WAV audio."
    )
    commands = parser.add_subparsers(dest="command", required=True)

    encode = commands.add_parser("encode", help="write a message into a WAV file")
    encode.add_argument("input", type=Path)
    encode.add_argument("output", type=Path)
    encode.add_argument("-m", "--message", required=True)
    encode.add_argument("-b", "--bits", type=int, default=1)
    encode.add_argument("-r", "--repeat", action="store_true")
    encode.add_argument("--waveform", type=Path, help="also render the result as PNG")

    decode = commands.add_parser("decode", help="read a message from a WAV file")
    decode.add_argument("input", type=Path)
    decode.add_argument("-b", "--bits", type=int, default=1)
    decode.add_argument("-r", "--repeat", action="store_true")

    info = commands.add_parser("info", help="show a WAV file's name and duration")
    info.add_argument("input", type=Path)
    info.add_argument("--waveform", type=Path, help="render the waveform as PNG")

    for sub in (encode, info):
        sub.add_argument("--width", type=int, default=2000)
        sub.add_argument("--height", type=int, default=160)
    return parser


def _save_waveform(path: Path, audio: WavAudio, width: int, height: int) -> None:
    write_png(path, render_waveform(audio.samples, width, height), width, height)


def _run(args: argparse.Namespace) -> None:
    audio = load_wav(args.input)
    if args.command == "decode":
        text = decode_message(audio.samples, args.bits, args.repeat)
        print(text or EMPTY_MESSAGE)
    elif args.command == "encode":
        if not audio.samples:
            raise ValueError(f"{args.input.name} holds no audio samples")
        samples = encode_message(audio.samples, args.message, args.bits, args.repeat)
        result = WavAudio(samples, audio.channels, audio.sample_rate, audio.bits_per_sample)
        save_wav(args.output, result)
        if args.waveform:
            _save_waveform(args.waveform, result, args.width, args.height)
        print(args.output.name)
    else:
        print(args.input.name)
        print(f"{audio.duration():.3f}")
        if args.waveform:
            _save_waveform(args.waveform, audio, args.width, args.height)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line; return the process exit status."""
    args = _build_parser().parse_args(argv)
    try:
        _run(args)
    except (OSError, ValueError) as exc:
        print(f"wavsteg: error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())