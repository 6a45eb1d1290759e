"""A minimalistic, customizable terminal typing test: content generation, test sessions, results and screens."""

__version__ = "0.6.0"