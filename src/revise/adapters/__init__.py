"""Host integrations that consume the buffer layer."""
