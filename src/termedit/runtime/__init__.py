"""Runtime services shared by the buffer and view layers."""

from . import telemetry

__all__ = ["telemetry"]
