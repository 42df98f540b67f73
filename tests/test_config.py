"""
Tests for EngineConfig.
"""
import pytest
from gomoku.core.config import EngineConfig, WinCheck
from gomoku.core.coordinate import MARGIN


def test_default_config():
    """Test the defaults match the standard board geometry."""
    config = EngineConfig()
    assert config.margin == MARGIN
    assert config.win_check is WinCheck.SYMMETRIC


def test_config_round_trip():
    """Test a config survives conversion to and from a dictionary."""
    config = EngineConfig(margin=20, win_check=WinCheck.DIRECTIONAL)
    config_dict = config.to_dict()

    assert config_dict == {'margin': 20, 'win_check': 'directional'}
    restored = EngineConfig.from_dict(config_dict)
    assert restored.margin == 20
    assert restored.win_check is WinCheck.DIRECTIONAL


def test_win_check_accepts_names():
    """Test policies can be given by value or member name."""
    assert EngineConfig(win_check='symmetric').win_check is WinCheck.SYMMETRIC
    assert EngineConfig(win_check='DIRECTIONAL').win_check is WinCheck.DIRECTIONAL


@pytest.mark.parametrize("margin", [0, -35, 2.5, True, "35"])
def test_invalid_margin(margin):
    """Test non-positive or non-integer margins are rejected."""
    with pytest.raises(ValueError):
        EngineConfig(margin=margin)


def test_invalid_win_check():
    """Test unknown policies are rejected."""
    with pytest.raises(ValueError):
        EngineConfig(win_check='diagonal')
    with pytest.raises(ValueError):
        EngineConfig(win_check=None)
