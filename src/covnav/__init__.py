"""covnav - browse Go coverage profiles in the terminal."""

__version__ = "0.1.0"
