"""Building blocks for filtering, redacting and measuring command-line output."""

__version__ = "0.1.0"