"""Tests for configuration loading."""

import math
from pathlib import Path
from typing import Any

import pytest
import yaml

from bfl.core.config import ConfigError, ConfigLoader, load_calculation, load_calculation_file

EXAMPLE_CONFIG = Path(__file__).parents[2] / "config" / "example_aircraft.yaml"


@pytest.fixture
def config_data() -> dict[str, Any]:
    """Configuration of the example aircraft."""
    with EXAMPLE_CONFIG.open("r", encoding="utf-8") as f:
        return yaml.safe_load(f)


def write_config(path: Path, data: Any) -> Path:
    path.write_text(yaml.safe_dump(data), encoding="utf-8")
    return path


class TestConfigLoader:
    """Tests for the YAML configuration loader."""

    def test_load_and_get(self, tmp_path: Path) -> None:
        """Test nested access with dot notation."""
        path = write_config(tmp_path / "settings.yaml", {"simulation": {"time_step": 0.05}})

        config = ConfigLoader.load(path)

        assert config.get("simulation.time_step") == 0.05
        assert config.get("simulation.density", default=1.225) == 1.225

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        """Test that a missing file is reported."""
        with pytest.raises(ConfigError, match="not found"):
            ConfigLoader.load(tmp_path / "missing.yaml")

    def test_invalid_yaml_raises(self, tmp_path: Path) -> None:
        """Test that malformed YAML is reported."""
        path = tmp_path / "broken.yaml"
        path.write_text("simulation: [unclosed", encoding="utf-8")

        with pytest.raises(ConfigError, match="Failed to load"):
            ConfigLoader.load(path)

    def test_empty_file_gives_empty_config(self, tmp_path: Path) -> None:
        """Test that an empty file loads as an empty configuration."""
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")

        config = ConfigLoader.load(path)

        assert config.get("simulation") is None
        with pytest.raises(ConfigError, match="not found"):
            config.get_section("simulation")

    def test_get_section(self) -> None:
        """Test section access and its errors."""
        config = ConfigLoader({"engine": {"nr_of_engines": 2}, "name": "A320"})

        assert config.get_section("engine") == {"nr_of_engines": 2}
        with pytest.raises(ConfigError, match="not found"):
            config.get_section("aircraft")
        with pytest.raises(ConfigError, match="not a section"):
            config.get_section("name")

    def test_merge_overrides_nested_values(self) -> None:
        """Test that merging keeps untouched keys and overrides the rest."""
        base = ConfigLoader({"simulation": {"density": 1.225, "time_step": 0.1}})
        override = ConfigLoader({"simulation": {"time_step": 0.01}})

        base.merge(override)

        assert base.get("simulation.density") == 1.225
        assert base.get("simulation.time_step") == 0.01


class TestLoadCalculation:
    """Tests for building a calculation from a configuration."""

    def test_example_configuration(self) -> None:
        """Test loading the shipped example aircraft."""
        calculation = load_calculation_file(EXAMPLE_CONFIG)

        assert calculation.engine_data.nr_of_engines == 2
        assert calculation.engine_data.nr_of_failed_engines == 1
        assert calculation.aircraft_data.maximum_thrust_per_engine == 75.0
        assert calculation.aircraft_data.maximum_pitch_angle.degrees == 16.0
        assert calculation.aircraft_data.pitch_angle_gradient.radians == pytest.approx(math.radians(6.0))
        assert calculation.aircraft_data.aerodynamic_data.wing_area == 100.0
        assert calculation.simulation_settings.end_failure_velocity == 90

    def test_missing_section_raises(self, config_data: dict[str, Any]) -> None:
        """Test that every section is required."""
        del config_data["aerodynamics"]

        with pytest.raises(ConfigError, match="aerodynamics"):
            load_calculation(ConfigLoader(config_data))

    def test_missing_key_raises(self, config_data: dict[str, Any]) -> None:
        """Test that a missing key is named in the error."""
        del config_data["aircraft"]["takeoff_weight"]

        with pytest.raises(ConfigError, match="aircraft.takeoff_weight"):
            load_calculation(ConfigLoader(config_data))

    def test_non_numeric_value_raises(self, config_data: dict[str, Any]) -> None:
        """Test that values must be numbers."""
        config_data["simulation"]["density"] = "dense"

        with pytest.raises(ConfigError, match="simulation.density"):
            load_calculation(ConfigLoader(config_data))

    def test_invalid_value_raises(self, config_data: dict[str, Any]) -> None:
        """Test that numeric validation errors are reported as configuration errors."""
        config_data["aircraft"]["takeoff_weight"] = -500.0

        with pytest.raises(ConfigError, match="takeoff_weight"):
            load_calculation(ConfigLoader(config_data))

    def test_angle_out_of_range_raises(self, config_data: dict[str, Any]) -> None:
        """Test that angles must lie within [0, 360] degrees."""
        config_data["aircraft"]["maximum_pitch_angle"] = 400.0

        with pytest.raises(ConfigError):
            load_calculation(ConfigLoader(config_data))

    def test_fractional_iteration_count_raises(self, config_data: dict[str, Any]) -> None:
        """Test that integer settings reject fractions."""
        config_data["simulation"]["maximum_nr_of_iterations"] = 100.5

        with pytest.raises(ConfigError, match="integer"):
            load_calculation(ConfigLoader(config_data))

    def test_zero_pitch_angle_gradient_raises(self, config_data: dict[str, Any]) -> None:
        """Test that the pitch angle gradient must be larger than zero."""
        config_data["aircraft"]["pitch_angle_gradient"] = 0.0

        with pytest.raises(ConfigError, match="aircraft.pitch_angle_gradient"):
            load_calculation(ConfigLoader(config_data))
