"""UNova: AI assistant API for Model UN delegates."""

__version__ = "1.0.0"
