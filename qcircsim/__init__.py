"""State-vector quantum circuit simulator driven by plain-text input files."""

__version__ = "0.1.0"
__all__ = ["__version__"]