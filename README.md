# wavsteg

`wavsteg` hides a text message in the lowest bits of the samples of a PCM WAV
file and reads such a message back out. It can also draw a peak-amplitude
waveform preview of an audio file as a PNG image.

8-bit and 16-bit PCM WAV files are supported, mono or multi-channel.

## Installation

```
pip install .
```

No third-party libraries are needed at run time. The tests use `pytest` and
`hypothesis` (`pip install .[test]`).

## How it works

The message is UTF-8 encoded. Its bits, least significant bit first, replace
the lowest `bits` bits (1 to 16) of each sample in turn; samples are treated as
16-bit signed values. With *repeating* on, the message is written again and
again until every sample carries a piece of it. With it off, writing stops as
soon as the message runs out and the remaining samples are left as they were.

Decoding reads the lowest `bits` bits (1 to 8) of each sample back into bytes,
least significant bit first, up to 10,000 bytes. The text stops at the first
byte sequence that is not valid UTF-8. With *repeating* on, the text is then
cut down to its shortest repeating period, so a message that fills the whole
file comes back once.

When an encoded sample no longer fits the file's sample width (possible with
8-bit files and a large `bits`), writing the file fails with an error.

## Command line

```
wavsteg encode INPUT.wav OUTPUT.wav -m "hello" [-b BITS] [-r] [--waveform OUT.png] [--width W] [--height H]
wavsteg decode INPUT.wav [-b BITS] [-r]
wavsteg info INPUT.wav [--waveform OUT.png] [--width W] [--height H]
```

- `encode` writes the message into a copy of the input and prints the output
  file's name. It refuses an input with no samples.
- `decode` prints the recovered message, or `<empty>` when there is none.
- `info` prints the file's name and its duration in seconds (three decimals).
- `-b/--bits` defaults to 1; `-r/--repeat` turns on repeating.
- `--waveform` renders a PNG preview, `--width` by `--height` pixels
  (default 2000 by 160).

On a file that cannot be read or written, or an invalid argument value, the
command prints `wavsteg: error: ...` to standard error and exits with status 1.

## Library use

```python
from wavsteg.audio import WavAudio, load_wav, save_wav, render_waveform, write_png
from wavsteg.stego import encode_message, decode_message

audio = load_wav("input.wav")
print(audio.duration())

hidden = encode_message(audio.samples, "hello", bits=1, repeating=True)
save_wav("output.wav", WavAudio(hidden, audio.channels, audio.sample_rate, audio.bits_per_sample))

print(decode_message(hidden, bits=1, repeating=True))  # "hello"

width, height = 2000, 160
rgba = render_waveform(audio.samples, width, height)
write_png("waveform.png", rgba, width, height)
```

- `wavsteg.audio`: `WavAudio` (samples, channels, sample rate, bits per sample,
  `duration()`), `load_wav`, `save_wav`, `render_waveform` (RGBA bytes, opaque
  white under each column's peak, transparent above), `write_png`.
- `wavsteg.stego`: `encode_message`, `decode_message`, `MAX_MESSAGE_BYTES`.
- `wavsteg.bits`: `iter_bits` and `pack_bytes` for least-significant-first
  bit streams.
- `wavsteg.prefix`: `prefix_function` and `period` for strings.

## What it does not do

`wavsteg` has no audio playback and no graphical interface: it works on files
only, and the waveform preview is written to a PNG file rather than shown on
screen.