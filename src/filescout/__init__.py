"""FileScout - corpus analysis engine for directories of text files."""

__version__ = "0.1.0"
