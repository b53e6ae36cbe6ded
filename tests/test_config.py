"""Tests for engine configuration loading."""

import pytest

from ladder.core.config import (
    EngineConfig,
    EstimatorConfig,
    engine_config_from_dict,
    load_engine_config,
)
from ladder.core.constants import DEFAULT_K_FACTOR


class TestEngineConfig:
    def test_defaults(self):
        config = EngineConfig()
        assert config.predictor.k_factor == DEFAULT_K_FACTOR
        assert config.simulation.k_factor == DEFAULT_K_FACTOR
        assert config.simulation.max_games == 100
        assert config.estimator.shielded_loss_delta == -12
        assert config.confidence.high_threshold == 75

    def test_none_path_gives_defaults(self):
        assert load_engine_config(None) == EngineConfig()

    def test_partial_override(self):
        config = engine_config_from_dict({"predictor": {"k_factor": 24}})
        assert config.predictor.k_factor == 24
        assert config.estimator == EstimatorConfig()

    def test_unknown_section_rejected(self):
        with pytest.raises(ValueError, match="Unknown config sections"):
            engine_config_from_dict({"scraper": {}})

    def test_unknown_key_rejected(self):
        with pytest.raises(ValueError, match="Unknown keys in 'simulation'"):
            engine_config_from_dict({"simulation": {"games": 10}})

    def test_section_must_be_mapping(self):
        with pytest.raises(ValueError, match="must be a mapping"):
            engine_config_from_dict({"estimator": [1, 2]})

    def test_simulation_game_cap_cannot_be_raised(self):
        with pytest.raises(ValueError, match="max_games"):
            engine_config_from_dict({"simulation": {"max_games": 500}})


class TestLoadEngineConfig:
    def test_yaml_file(self, tmp_path):
        path = tmp_path / "engine.yaml"
        path.write_text(
            "simulation:\n"
            "  diminishing_divisor: 1500\n"
            "  max_games: 50\n"
            "confidence:\n"
            "  small_sample_cap: 40\n",
            encoding="utf-8",
        )
        config = load_engine_config(path)
        assert config.simulation.diminishing_divisor == 1500
        assert config.simulation.max_games == 50
        assert config.confidence.small_sample_cap == 40
        assert config.predictor.k_factor == DEFAULT_K_FACTOR

    def test_empty_yaml_gives_defaults(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        assert load_engine_config(path) == EngineConfig()

    def test_non_mapping_yaml_rejected(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- 1\n- 2\n", encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid config format"):
            load_engine_config(path)
