"""Core business logic layer.

Subpackages:
- matching: name normalization, match bank, coverage scoring, consumption planning
- kitchen: coverage / cook / ranking operations over the repositories
- pantry: pantry analysis helpers
"""
__all__ = ["matching", "kitchen", "pantry"]
