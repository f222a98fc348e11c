import numpy as np
import pytest

from labkit.crosscorr import (
    Delay,
    SampleBuffer,
    cross_correlation,
    find_delay,
    format_delay,
    pad_to_same_length,
)


def _signal(length=64, seed=3):
    rng = np.random.default_rng(seed)
    return rng.integers(0, 256, size=length).astype(np.uint8)


def test_pad_to_same_length_extends_shorter_with_zeros():
    first = SampleBuffer([1, 2, 3], 8000)
    second = SampleBuffer([4], 16000)
    a, b = pad_to_same_length(first, second)
    assert list(a.samples) == [1, 2, 3]
    assert list(b.samples) == [4, 0, 0]
    assert a.sample_rate == 8000
    assert b.sample_rate == 16000


def test_pad_keeps_equal_lengths():
    first = SampleBuffer([5, 6], 100)
    second = SampleBuffer([7, 8], 100)
    a, b = pad_to_same_length(first, second)
    assert len(a) == len(b) == 2


def test_autocorrelation_zero_lag_is_energy():
    data = _signal()
    buf = SampleBuffer(data, 1000)
    corr = cross_correlation(buf, buf)
    energy = float(np.sum(data.astype(np.float64) ** 2))
    assert corr[0] == pytest.approx(energy)
    assert int(np.argmax(corr)) == 0


def test_autocorrelation_is_symmetric():
    data = _signal(32)
    buf = SampleBuffer(data, 1000)
    corr = cross_correlation(buf, buf)
    for k in range(1, len(corr)):
        assert corr[k] == pytest.approx(corr[len(corr) - k])


@pytest.mark.parametrize("shift", [5, -7, 0])
def test_delay_of_rolled_signal_is_recovered(shift):
    base = _signal(128)
    delayed = np.roll(base, shift)
    corr = cross_correlation(SampleBuffer(delayed, 8000), SampleBuffer(base, 8000))
    delay = find_delay(corr, 8000)
    assert delay.samples == shift
    assert delay.sample_rate == 8000


def test_mismatched_lengths_rejected():
    with pytest.raises(ValueError):
        cross_correlation(SampleBuffer([1, 2], 10), SampleBuffer([1], 10))


def test_empty_buffers_rejected():
    with pytest.raises(ValueError):
        cross_correlation(SampleBuffer([], 10), SampleBuffer([], 10))


def test_find_delay_takes_first_maximum():
    delay = find_delay([1.0, 9.0, 9.0, 0.0, 0.0, 0.0], 1000)
    assert delay.samples == 1


def test_find_delay_negative_time_truncates_toward_zero():
    delay = find_delay([0.0, 0.0, 0.0, 5.0], 3)
    assert delay.samples == -1
    assert delay.milliseconds == -333


def test_find_delay_rejects_bad_input():
    with pytest.raises(ValueError):
        find_delay([], 1000)
    with pytest.raises(ValueError):
        find_delay([1.0], 0)


def test_format_delay():
    text = format_delay(Delay(-3, 44100, 0))
    assert text == "delta: -3 samples\nsample rate: 44100 Hz\ndelta time: 0 ms\n"