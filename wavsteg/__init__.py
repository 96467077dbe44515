"""Hide text in the low bits of PCM WAV samples, read it back, and render waveforms."""

__version__ = "1.0.0"