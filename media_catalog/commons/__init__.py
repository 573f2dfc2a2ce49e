"""Commons package - settings, telemetry and storage providers."""
