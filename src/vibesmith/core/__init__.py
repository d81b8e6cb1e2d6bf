"""Core types: genes, errors, configuration and shared thresholds."""
