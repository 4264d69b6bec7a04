"""Balanced field length calculator.

Command line entry point. Loads a calculation from a YAML file, sweeps the
failure speed and prints the balanced field length.

Typical usage:
    python -m bfl.main --config config/example_aircraft.yaml
    python -m bfl.main --config config/example_aircraft.yaml --output results.csv
"""

import argparse
import csv
import math
import sys
from collections.abc import Sequence
from pathlib import Path

from bfl.calculation_module import BalancedFieldLengthCalculationModule
from bfl.core.config import ConfigError, load_calculation_file
from bfl.core.exceptions import BalancedFieldLengthError
from bfl.core.logging_system import LoggingError, get_logger, initialize_logging
from bfl.data.outputs import AggregatedDistanceOutput

logger = get_logger(__name__)

CSV_HEADER = ("failure_speed", "continued_distance", "aborted_distance")


def write_outputs(path: str | Path, outputs: Sequence[AggregatedDistanceOutput]) -> None:
    """Write the distances of every failure speed as a semicolon separated file.

    Args:
        path: Destination file.
        outputs: Aggregated distance outputs to write.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    with path.open("w", encoding="utf-8", newline="") as f:
        writer = csv.writer(f, delimiter=";")
        writer.writerow(CSV_HEADER)
        for output in outputs:
            writer.writerow(
                (output.failure_speed, output.continued_takeoff_distance, output.aborted_takeoff_distance)
            )

    logger.info("Wrote %d distance outputs to: %s", len(outputs), path)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments.

    Returns:
        Parsed arguments
    """
    parser = argparse.ArgumentParser(description="Balanced Field Length Calculator")

    parser.add_argument(
        "--config",
        type=Path,
        required=True,
        help="Calculation definition (YAML)",
    )

    parser.add_argument(
        "--output",
        type=Path,
        help="Write the distances per failure speed to this CSV file",
    )

    parser.add_argument(
        "--logging-config",
        type=Path,
        help="Logging configuration (YAML)",
    )

    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point.

    Returns:
        Exit code (0 for success).
    """
    args = parse_args(argv)

    try:
        if args.logging_config:
            initialize_logging(args.logging_config, use_platform_dir=True)

        calculation = load_calculation_file(args.config)
        module = BalancedFieldLengthCalculationModule()

        messages = module.validate(calculation)
        if messages:
            for message in messages:
                print(f"Invalid input: {message}", file=sys.stderr)
            return 1

        output = module.calculate(calculation)

        if args.output:
            write_outputs(args.output, output.distance_outputs)
    except (ConfigError, LoggingError, BalancedFieldLengthError) as e:
        logger.error("Calculation failed: %s", e)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if math.isnan(output.velocity):
        print("No balanced field length found: the take-off distances do not cross.")
    else:
        print(f"Balanced field length: {output.distance:.1f} m at a failure speed of {output.velocity:.2f} m/s")
    return 0


if __name__ == "__main__":
    sys.exit(main())
