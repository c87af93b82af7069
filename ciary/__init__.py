"""Diary building blocks: dates, configuration, entry files, calendar state and greetings."""

__version__ = "0.1.0"