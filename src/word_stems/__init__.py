"""Word stems - tokenize Russian/English text and count words by stem."""

__version__ = "0.1.0"
