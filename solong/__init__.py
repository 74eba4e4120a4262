"""A tile-based collect-and-escape game played on .ber map files."""

__version__ = "0.1.0"
__all__ = ["__version__"]