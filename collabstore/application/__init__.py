"""Application layer: repository ports consumed by service code."""
