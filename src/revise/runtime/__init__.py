"""Runtime services shared across the buffer and highlight layers."""
