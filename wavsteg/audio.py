"""Reading and writing PCM WAV files and rendering waveform images."""

from __future__ import annotations

import math
import struct
import wave
import zlib
from collections.abc import Sequence
from dataclasses import dataclass, field
from os import PathLike
from typing import Union

__all__ = ["WavAudio", "load_wav", "save_wav", "render_waveform", "write_png"]

PathArg = Union[str, "PathLike[str]"]

_SUPPORTED_BITS = (8, 16)
_PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"


@dataclass
class WavAudio:
    """Interleaved integer PCM samples together with the stream format."""

    samples: list[int] = field(default_factory=list)
    channels: int = 1
    sample_rate: int = 44100
    bits_per_sample: int = 16

    def __post_init__(self) -> None:
        if self.channels < 1:
            raise ValueError(f"channel count must be positive, got {self.channels}")
        if self.sample_rate < 1:
            raise ValueError(f"sample rate must be positive, got {self.sample_rate}")
        if self.bits_per_sample not in _SUPPORTED_BITS:
            raise ValueError(
                f"unsupported sample width: {self.bits_per_sample} bits "
                f"(supported: {', '.join(map(str, _SUPPORTED_BITS))})"
            )

    def duration(self) -> float:
        """Length of the audio in seconds."""
        frames = len(self.samples) // self.channels
        return frames / self.sample_rate


def load_wav(path: PathArg) -> WavAudio:
    """Read an 8- or 16-bit PCM WAV file.

    Raises ``ValueError`` for files that are not readable PCM WAV data or use
    another sample width; ``OSError`` propagates for files that cannot be opened.
    """
    try:
        with wave.open(str(path), "rb") as reader:
            channels = reader.getnchannels()
            width = reader.getsampwidth()
            rate = reader.getframerate()
            frames = reader.readframes(reader.getnframes())
    except (wave.Error, EOFError) as exc:
        raise ValueError(f"not a readable WAV file: {path}") from exc

    if width == 1:
        samples = [byte - 128 for byte in frames]
    elif width == 2:
        count = len(frames) // 2
        samples = list(struct.unpack(f"<{count}h", frames[: count * 2]))
    else:
        raise ValueError(f"unsupported sample width: {width * 8} bits")
    return WavAudio(samples, channels, rate, width * 8)


def save_wav(path: PathArg, audio: WavAudio) -> None:
    """Write ``audio`` as a PCM WAV file."""
    if len(audio.samples) % audio.channels:
        raise ValueError("sample count is not a multiple of the channel count")
    bits = audio.bits_per_sample
    low, high = -(1 << (bits - 1)), (1 << (bits - 1)) - 1
    for sample in audio.samples:
        if not low <= sample <= high:
            raise ValueError(f"sample {sample} does not fit in {bits} bits")

    if bits == 8:
        payload = bytes(sample + 128 for sample in audio.samples)
    else:
        payload = struct.pack(f"<{len(audio.samples)}h", *audio.samples)

    with wave.open(str(path), "wb") as writer:
        writer.setnchannels(audio.channels)
        writer.setsampwidth(bits // 8)
        writer.setframerate(audio.sample_rate)
        writer.writeframes(payload)


def render_waveform(samples: Sequence[int], width: int = 2000, height: int = 160) -> bytes:
    """Render a peak-amplitude waveform as RGBA pixels, rows top to bottom.

    Each column covers an equal run of samples; the area under its scaled peak
    is painted opaque white and the rest is left fully transparent.
    """
    if width < 1 or height < 1:
        raise ValueError(f"image size must be positive, got {width}x{height}")
    pixels = bytearray(width * height * 4)
    if not samples:
        return bytes(pixels)

    peak = max(abs(sample) for sample in samples)
    chunk = max(len(samples) // width, 1)
    white = b"\xff" * 4
    for column, start in zip(range(width), range(0, len(samples), chunk)):
        level = max(abs(sample) for sample in samples[start : start + chunk]) / (peak + 1.0)
        level = min(max(level, 0.0), 1.0)
        top = int((1.0 - math.sqrt(level) * 0.98) * (height - 1))
        for row in range(top, height):
            offset = (row * width + column) * 4
            pixels[offset : offset + 4] = white
    return bytes(pixels)


def _png_chunk(kind: bytes, data: bytes) -> bytes:
    crc = zlib.crc32(kind + data) & 0xFFFFFFFF
    return struct.pack(">I", len(data)) + kind + data + struct.pack(">I", crc)


def write_png(path: PathArg, rgba: bytes, width: int, height: int) -> None:
    """Write 8-bit RGBA pixel data as a PNG image."""
    if width < 1 or height < 1:
        raise ValueError(f"image size must be positive, got {width}x{height}")
    stride = width * 4
    if len(rgba) != stride * height:
        raise ValueError(
            f"expected {stride * height} bytes of RGBA data, got {len(rgba)}"
        )
    raw = b"".join(
        b"\x00" + bytes(rgba[offset : offset + stride])
        for offset in range(0, len(rgba), stride)
    )
    header = struct.pack(">IIBBBBB", width, height, 8, 6, 0, 0, 0)
    with open(path, "wb") as handle:
        handle.write(_PNG_SIGNATURE)
        handle.write(_png_chunk(b"IHDR", header))
        handle.write(_png_chunk(b"IDAT", zlib.compress(raw)))
        handle.write(_png_chunk(b"IEND", b""))