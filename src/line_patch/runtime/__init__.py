"""Runtime services (telemetry)."""
