import numpy as np


class SineWaveGenerator:
    """
    Pure sinusoidal tone source.

    Parameters:
    amplitude (int): Peak value of the wave
    frequency (int): Frequency of the wave in Hz
    sample_rate (int): Number of samples per second
    """

    def __init__(self, amplitude, frequency, sample_rate):
        self._amplitude = amplitude
        self._frequency = frequency
        self._sample_rate = sample_rate

    @property
    def amplitude(self):
        return self._amplitude

    @property
    def frequency(self):
        return self._frequency

    @property
    def sample_rate(self):
        return self._sample_rate

    def _evaluate(self, indices):
        # Time of each sample in seconds, reused in place for the phase and wave
        wave = indices / self._sample_rate
        wave *= 2 * np.pi * self._frequency
        np.sin(wave, out=wave)
        wave *= self._amplitude

        # Truncate toward zero
        return wave.astype(np.int64)

    def sample(self, index):
        """Return the signed amplitude at sample ``index``."""
        return int(self._evaluate(np.array([index], dtype=np.float64))[0])

    def samples(self, count, start=0):
        """
        Evaluate the wave for indices start to start + count - 1.

        Returns:
        numpy.ndarray: int64 sample values
        """
        return self._evaluate(np.arange(start, start + count, dtype=np.float64))

    def __repr__(self):
        return (
            f"SineWaveGenerator(amplitude={self._amplitude}, "
            f"frequency={self._frequency}, sample_rate={self._sample_rate})"
        )
