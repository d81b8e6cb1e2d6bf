"""Constraint store, color synthesis and grid patterns."""
