"""Daily food diary: user profile, food database, meal log, reports and the interactive command."""

__version__ = "0.1.0"