"""Square matrices of floats with operator-based arithmetic, and a demo command."""

__version__ = "0.1.0"
__all__ = ["__version__"]