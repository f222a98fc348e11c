"""Estimate the delay between two sampled signals by cross-correlation."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass
class SampleBuffer:
    """Unsigned 8-bit samples together with their sample rate in Hz."""

    samples: np.ndarray
    sample_rate: int

    def __post_init__(self) -> None:
        self.samples = np.asarray(self.samples, dtype=np.uint8)

    def __len__(self) -> int:
        return len(self.samples)


@dataclass(frozen=True)
class Delay:
    """Offset of the first signal relative to the second."""

    samples: int
    sample_rate: int
    milliseconds: int


def pad_to_same_length(first: SampleBuffer, second: SampleBuffer) -> tuple[SampleBuffer, SampleBuffer]:
    """Return both buffers zero-padded at the end to the longer length."""
    length = max(len(first), len(second))

    def padded(buffer: SampleBuffer) -> SampleBuffer:
        extra = length - len(buffer)
        return SampleBuffer(np.pad(buffer.samples, (0, extra)), buffer.sample_rate)

    return padded(first), padded(second)


def cross_correlation(first: SampleBuffer, second: SampleBuffer) -> np.ndarray:
    """Return the unnormalised circular cross-correlation of two buffers."""
    length = len(first)
    if length == 0:
        raise ValueError("cannot correlate empty buffers")
    if len(second) != length:
        raise ValueError("buffers must have the same length")
    spectrum_first = np.fft.rfft(first.samples.astype(np.float64))
    spectrum_second = np.fft.rfft(second.samples.astype(np.float64))
    product = spectrum_first * np.conj(spectrum_second)
    return np.fft.irfft(product, length) * length


def find_delay(correlation, sample_rate: int) -> Delay:
    """Locate the correlation peak and express it in samples and milliseconds."""
    values = np.asarray(correlation)
    length = len(values)
    if length == 0:
        raise ValueError("correlation is empty")
    if sample_rate <= 0:
        raise ValueError("sample rate must be positive")
    peak = int(np.argmax(values))
    shift = peak - length if peak > length // 2 else peak
    product = shift * 1000
    millis = abs(product) // sample_rate
    return Delay(shift, sample_rate, -millis if product < 0 else millis)


def format_delay(delay: Delay) -> str:
    """Render the delay report."""
    return (
        f"delta: {delay.samples} samples\n"
        f"sample rate: {delay.sample_rate} Hz\n"
        f"delta time: {delay.milliseconds} ms\n"
    )