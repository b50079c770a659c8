"""picomap: a narrow change/diagnostic map for editor side panels."""

__version__ = "0.1.0"
