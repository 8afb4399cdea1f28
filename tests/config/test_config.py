"""Tests for `eulerpath.config` focusing on behavior and correctness."""

from eulerpath.config import DEFAULT_CONFIG, EulerianPathConfig


def test_default_config_values() -> None:
    config = EulerianPathConfig()
    assert config.verify_edges is False
    assert config.log_preview_nodes == 16
    assert DEFAULT_CONFIG == config


def test_preview_short_trail_is_complete() -> None:
    config = EulerianPathConfig(log_preview_nodes=4)
    assert config.preview([0, 1, 0]) == "0 -> 1 -> 0"
    assert config.preview([]) == ""


def test_preview_long_trail_is_clipped() -> None:
    config = EulerianPathConfig(log_preview_nodes=3)
    assert config.preview(list(range(10))) == "0 -> 1 -> 2 ... (+7 more)"


def test_preview_with_zero_limit() -> None:
    config = EulerianPathConfig(log_preview_nodes=0)
    assert config.preview([5, 6]) == " ... (+2 more)"
