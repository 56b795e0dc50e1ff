"""Application layer - fingerprinting and session binding services."""
