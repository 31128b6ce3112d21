"""Runtime services shared by every layer: environment lookups and telemetry."""

from . import env, telemetry

__all__ = ["env", "telemetry"]
