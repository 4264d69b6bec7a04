"""Balanced Field Length - takeoff performance simulator.

Simulates continued and aborted takeoffs after an engine failure for a sweep of
failure speeds and determines the balanced field length: the runway distance
at which both takeoff distances are equal.

Typical usage:
    python -m bfl.main --config config/example_aircraft.yaml
"""

__version__ = "0.1.0"
