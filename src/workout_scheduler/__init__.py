"""Workout scheduling assistant.

Turns a user's activity history, weekly availability and calendar busy
blocks into ranked, explained workout suggestions.
"""

__version__ = "0.1.0"
