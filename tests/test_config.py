"""Tests for config module."""

import pytest

from lazy_sequence.config import SequenceConfig, get_sequence_config

ENV_VARS = [
    "SEQUENCE_PRODUCER",
    "SEQUENCE_STYLE",
    "SEQUENCE_COUNT",
    "SEQUENCE_START",
    "SEQUENCE_BATCH_SIZE",
    "SEQUENCE_OUTPUT",
    "LOG_LEVEL",
]


@pytest.fixture
def clean_env(monkeypatch):
    """Remove sequence variables from the environment."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_defaults(clean_env):
    """Test configuration defaults."""
    config = get_sequence_config()

    assert config.producer == "fibonacci"
    assert config.style == "native"
    assert config.count == 10
    assert config.start == 5
    assert config.batch_size == 4
    assert config.output == "lines"
    assert config.log_level == "INFO"


def test_from_env(clean_env):
    """Test reading every variable from the environment."""
    clean_env.setenv("SEQUENCE_PRODUCER", "Two_Segment")
    clean_env.setenv("SEQUENCE_STYLE", "state_machine")
    clean_env.setenv("SEQUENCE_COUNT", "3")
    clean_env.setenv("SEQUENCE_START", "9")
    clean_env.setenv("SEQUENCE_BATCH_SIZE", "2")
    clean_env.setenv("SEQUENCE_OUTPUT", "table")
    clean_env.setenv("LOG_LEVEL", "debug")

    config = SequenceConfig.from_env()

    assert config.producer == "two_segment"
    assert config.style == "state_machine"
    assert config.count == 3
    assert config.start == 9
    assert config.batch_size == 2
    assert config.output == "table"
    assert config.log_level == "DEBUG"


def test_invalid_values():
    """Test validation of configuration values."""
    with pytest.raises(ValueError, match="Unknown producer"):
        SequenceConfig(producer="primes")
    with pytest.raises(ValueError, match="Unknown style"):
        SequenceConfig(style="threaded")
    with pytest.raises(ValueError, match="Unknown output"):
        SequenceConfig(output="json")
    with pytest.raises(ValueError, match="count must be non-negative"):
        SequenceConfig(count=-1)
    with pytest.raises(ValueError, match="batch_size must be positive"):
        SequenceConfig(batch_size=0)


def test_non_numeric_count(clean_env):
    """Test that a non-numeric count is rejected."""
    clean_env.setenv("SEQUENCE_COUNT", "many")

    with pytest.raises(ValueError):
        SequenceConfig.from_env()
