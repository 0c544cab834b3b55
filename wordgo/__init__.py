"""Find dictionary words in a letter grid, in straight lines or along paths."""

__version__ = "0.1.0"
__all__ = ["__version__"]