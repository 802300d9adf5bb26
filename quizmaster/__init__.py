"""A terminal multiple-choice quiz game with five categories and a session ranking."""

__version__ = "1.0.0"