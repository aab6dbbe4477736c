import numpy as np
import pytest

from tonewav.source import SineWaveGenerator


class TestSample:
    def test_first_sample_is_zero(self):
        gen = SineWaveGenerator(300000, 1000, 48000)
        assert gen.sample(0) == 0

    def test_quarter_period_reaches_amplitude(self):
        # 48 samples per period at 1 kHz, so index 12 is the positive peak
        gen = SineWaveGenerator(300000, 1000, 48000)
        assert 299999 <= gen.sample(12) <= 300000

    def test_three_quarter_period_is_negative_peak(self):
        gen = SineWaveGenerator(300000, 1000, 48000)
        assert -300000 <= gen.sample(36) <= -299999

    def test_truncates_toward_zero(self):
        # sin(5*pi/4) * 10 = -7.07..., floor would give -8
        gen = SineWaveGenerator(10, 1, 8)
        assert gen.sample(5) == -7
        # sin(pi/4) * 10 = 7.07...
        assert gen.sample(1) == 7

    def test_returns_python_int(self):
        gen = SineWaveGenerator(100, 1, 8)
        assert isinstance(gen.sample(3), int)

    def test_zero_amplitude_is_silent(self):
        gen = SineWaveGenerator(0, 440, 48000)
        assert not gen.samples(1000).any()


class TestSamples:
    def test_length(self):
        gen = SineWaveGenerator(300000, 1000, 48000)
        assert len(gen.samples(480)) == 480

    def test_empty(self):
        gen = SineWaveGenerator(300000, 1000, 48000)
        assert len(gen.samples(0)) == 0

    def test_integer_dtype(self):
        gen = SineWaveGenerator(300000, 1000, 48000)
        assert gen.samples(10).dtype == np.int64

    def test_bounded_by_amplitude(self):
        gen = SineWaveGenerator(300000, 997, 48000)
        values = gen.samples(48000)
        assert np.abs(values).max() <= 300000

    def test_periodic(self):
        gen = SineWaveGenerator(300000, 1000, 48000)
        values = gen.samples(96)
        assert np.all(np.abs(values[:48] - values[48:]) <= 1)

    def test_deterministic(self):
        a = SineWaveGenerator(300000, 440, 48000).samples(4800)
        b = SineWaveGenerator(300000, 440, 48000).samples(4800)
        assert np.array_equal(a, b)


    def test_start_offset_continues_sequence(self):
        gen = SineWaveGenerator(300000, 440, 48000)
        assert np.array_equal(gen.samples(100, start=50), gen.samples(150)[50:])


class TestParameters:
    def test_exposes_parameters(self):
        gen = SineWaveGenerator(5, 440, 48000)
        assert (gen.amplitude, gen.frequency, gen.sample_rate) == (5, 440, 48000)

    def test_parameters_are_read_only(self):
        gen = SineWaveGenerator(5, 440, 48000)
        with pytest.raises(AttributeError):
            gen.frequency = 880
