"""Host integrations."""
