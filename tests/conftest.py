import pytest

from tonewav.config import ToneConfig

# 1 kHz at 48 kHz, 24-bit mono
FREQUENCY = 1000
AMPLITUDE = 300000


@pytest.fixture
def output_path(tmp_path):
    return tmp_path / "audio.wav"


@pytest.fixture
def config(output_path):
    return ToneConfig(amplitude=AMPLITUDE, output_path=str(output_path))
