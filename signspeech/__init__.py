"""Speech and text to sign language avatar poses."""

__version__ = '1.0.0'
