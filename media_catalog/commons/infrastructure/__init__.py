"""Low-level storage providers shared by the infrastructure adapters."""
