"""LogBook - daily journaling and periodic reviews from the command line."""

__version__ = "0.1.0"
