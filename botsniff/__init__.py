"""botsniff: spot AI coding tool involvement in Git history and free text."""

__version__ = "0.3.0"
