"""Runtime services shared across the editor (telemetry)."""

from . import telemetry

__all__ = ["telemetry"]
