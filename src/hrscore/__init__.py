"""Heart-rate workout analysis and stat scoring."""

__version__ = "0.1.0"
