"""Configuration loader for YAML files.

This module provides configuration loading with support for nested access and
merging, and builds a balanced field length calculation from a configuration.

Typical usage example:
    from bfl.core.config import ConfigLoader, load_calculation

    config = ConfigLoader.load("config/example_aircraft.yaml")
    time_step = config.get("simulation.time_step", default=0.1)
    calculation = load_calculation(config)
"""

from pathlib import Path
from typing import Any

import yaml

from bfl.common.angle import Angle
from bfl.common.number_guard import (
    ensure_angle_larger_than_zero,
    ensure_concrete_number,
    ensure_larger_or_equal_to_zero,
    ensure_larger_than_zero,
)
from bfl.core.exceptions import BalancedFieldLengthError
from bfl.core.logging_system import get_logger
from bfl.data.aircraft import AerodynamicData, AircraftData, EngineData
from bfl.data.settings import BalancedFieldLengthCalculation, GeneralSimulationSettings

logger = get_logger(__name__)


class ConfigError(Exception):
    """Raised when configuration operations fail."""


class ConfigLoader:
    """Configuration loader for YAML files.

    Provides loading, nested access, and default values for configuration.

    Examples:
        >>> config = ConfigLoader.load("config/example_aircraft.yaml")
        >>> density = config.get("simulation.density", default=1.225)
    """

    def __init__(self, data: dict[str, Any]) -> None:
        self._data = data

    @classmethod
    def load(cls, path: str | Path) -> "ConfigLoader":
        """Load configuration from a YAML file.

        Args:
            path: Path to YAML configuration file.

        Returns:
            ConfigLoader instance with loaded data.

        Raises:
            ConfigError: If the file cannot be loaded or is not a mapping.
        """
        path = Path(path)

        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")

        try:
            with path.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Failed to load configuration: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError(f"Configuration root must be a mapping: {path}")

        logger.info("Loaded configuration from: %s", path)
        return cls(data)

    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value using dot notation.

        Args:
            key: Configuration key, e.g. "simulation.time_step".
            default: Default value if key not found.

        Returns:
            Configuration value or default.
        """
        value = self._data

        for k in key.split("."):
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

    def get_section(self, key: str) -> dict[str, Any]:
        """Get an entire configuration section.

        Raises:
            ConfigError: If section not found or not a dict.
        """
        value = self.get(key)

        if value is None:
            raise ConfigError(f"Configuration section not found: {key}")

        if not isinstance(value, dict):
            raise ConfigError(f"Configuration key is not a section: {key}")

        return value

    def merge(self, other: "ConfigLoader") -> None:
        """Merge another configuration into this one.

        Values of ``other`` override existing ones.
        """
        self._data = self._merge_dicts(self._data, other._data)

    def _merge_dicts(self, base: dict, override: dict) -> dict:
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._merge_dicts(result[key], value)
            else:
                result[key] = value

        return result


def _require(section: dict[str, Any], section_name: str, key: str) -> Any:
    if key not in section:
        raise ConfigError(f"Missing configuration key: {section_name}.{key}")
    return section[key]


def _require_number(section: dict[str, Any], section_name: str, key: str) -> float:
    value = _require(section, section_name, key)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigError(f"Configuration key {section_name}.{key} must be a number, got {value!r}")
    ensure_concrete_number(value, f"{section_name}.{key}")
    return float(value)


def _require_integer(section: dict[str, Any], section_name: str, key: str) -> int:
    value = _require(section, section_name, key)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"Configuration key {section_name}.{key} must be an integer, got {value!r}")
    return value


def _load_aerodynamic_data(config: ConfigLoader) -> AerodynamicData:
    section = config.get_section("aerodynamics")

    def number(key: str) -> float:
        return _require_number(section, "aerodynamics", key)

    aerodynamic_data = AerodynamicData(
        aspect_ratio=number("aspect_ratio"),
        wing_area=number("wing_area"),
        zero_lift_angle_of_attack=Angle.from_degrees(number("zero_lift_angle_of_attack")),
        lift_coefficient_gradient=number("lift_coefficient_gradient"),
        maximum_lift_coefficient=number("maximum_lift_coefficient"),
        rest_drag_coefficient_without_engine_failure=number("rest_drag_coefficient_without_engine_failure"),
        rest_drag_coefficient_with_engine_failure=number("rest_drag_coefficient_with_engine_failure"),
        oswald_factor=number("oswald_factor"),
    )

    ensure_larger_than_zero(aerodynamic_data.aspect_ratio, "aerodynamics.aspect_ratio")
    ensure_larger_than_zero(aerodynamic_data.wing_area, "aerodynamics.wing_area")
    ensure_larger_than_zero(aerodynamic_data.lift_coefficient_gradient, "aerodynamics.lift_coefficient_gradient")
    ensure_larger_than_zero(aerodynamic_data.maximum_lift_coefficient, "aerodynamics.maximum_lift_coefficient")
    ensure_larger_than_zero(
        aerodynamic_data.rest_drag_coefficient_without_engine_failure,
        "aerodynamics.rest_drag_coefficient_without_engine_failure",
    )
    ensure_larger_than_zero(
        aerodynamic_data.rest_drag_coefficient_with_engine_failure,
        "aerodynamics.rest_drag_coefficient_with_engine_failure",
    )
    ensure_larger_than_zero(aerodynamic_data.oswald_factor, "aerodynamics.oswald_factor")
    return aerodynamic_data


def _load_engine_data(config: ConfigLoader) -> EngineData:
    section = config.get_section("engine")

    engine_data = EngineData(
        nr_of_engines=_require_integer(section, "engine", "nr_of_engines"),
        nr_of_failed_engines=_require_integer(section, "engine", "nr_of_failed_engines"),
        thrust_per_engine=_require_number(section, "engine", "thrust_per_engine"),
    )

    ensure_larger_than_zero(engine_data.nr_of_engines, "engine.nr_of_engines")
    ensure_larger_than_zero(engine_data.nr_of_failed_engines, "engine.nr_of_failed_engines")
    ensure_larger_than_zero(engine_data.thrust_per_engine, "engine.thrust_per_engine")
    return engine_data


def _load_aircraft_data(
    config: ConfigLoader, aerodynamic_data: AerodynamicData, engine_data: EngineData
) -> AircraftData:
    section = config.get_section("aircraft")

    def number(key: str) -> float:
        return _require_number(section, "aircraft", key)

    aircraft_data = AircraftData(
        nr_of_engines=engine_data.nr_of_engines,
        maximum_thrust_per_engine=engine_data.thrust_per_engine,
        takeoff_weight=number("takeoff_weight"),
        pitch_angle_gradient=Angle.from_degrees(number("pitch_angle_gradient")),
        maximum_pitch_angle=Angle.from_degrees(number("maximum_pitch_angle")),
        rolling_resistance_coefficient=number("rolling_resistance_coefficient"),
        braking_resistance_coefficient=number("braking_resistance_coefficient"),
        aerodynamic_data=aerodynamic_data,
    )

    ensure_larger_than_zero(aircraft_data.takeoff_weight, "aircraft.takeoff_weight")
    ensure_angle_larger_than_zero(aircraft_data.pitch_angle_gradient, "aircraft.pitch_angle_gradient")
    ensure_angle_larger_than_zero(aircraft_data.maximum_pitch_angle, "aircraft.maximum_pitch_angle")
    ensure_larger_or_equal_to_zero(
        aircraft_data.rolling_resistance_coefficient, "aircraft.rolling_resistance_coefficient"
    )
    ensure_larger_or_equal_to_zero(
        aircraft_data.braking_resistance_coefficient, "aircraft.braking_resistance_coefficient"
    )
    return aircraft_data


def _load_simulation_settings(config: ConfigLoader) -> GeneralSimulationSettings:
    section = config.get_section("simulation")

    settings = GeneralSimulationSettings(
        density=_require_number(section, "simulation", "density"),
        gravitational_acceleration=_require_number(section, "simulation", "gravitational_acceleration"),
        maximum_nr_of_iterations=_require_integer(section, "simulation", "maximum_nr_of_iterations"),
        time_step=_require_number(section, "simulation", "time_step"),
        end_failure_velocity=_require_integer(section, "simulation", "end_failure_velocity"),
    )

    ensure_larger_than_zero(settings.density, "simulation.density")
    ensure_larger_than_zero(settings.gravitational_acceleration, "simulation.gravitational_acceleration")
    ensure_larger_than_zero(settings.maximum_nr_of_iterations, "simulation.maximum_nr_of_iterations")
    ensure_larger_than_zero(settings.time_step, "simulation.time_step")
    ensure_larger_than_zero(settings.end_failure_velocity, "simulation.end_failure_velocity")
    return settings


def load_calculation(config: ConfigLoader) -> BalancedFieldLengthCalculation:
    """Build a balanced field length calculation from a configuration.

    The configuration holds the sections ``aircraft``, ``aerodynamics``,
    ``engine`` and ``simulation``. Angles are given in degrees, the pitch
    angle gradient in degrees per second.

    Args:
        config: The loaded configuration.

    Returns:
        The calculation described by the configuration.

    Raises:
        ConfigError: If a section or key is missing, or a value is invalid.
    """
    try:
        aerodynamic_data = _load_aerodynamic_data(config)
        engine_data = _load_engine_data(config)
        aircraft_data = _load_aircraft_data(config, aerodynamic_data, engine_data)
        simulation_settings = _load_simulation_settings(config)
    except BalancedFieldLengthError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e

    return BalancedFieldLengthCalculation(aircraft_data, engine_data, simulation_settings)


def load_calculation_file(path: str | Path) -> BalancedFieldLengthCalculation:
    """Load a YAML file and build the calculation it describes."""
    return load_calculation(ConfigLoader.load(path))
