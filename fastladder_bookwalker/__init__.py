"""Post BOOK WALKER listings to a fastladder instance."""

__version__ = "0.3.0"

__all__ = ["__version__"]
