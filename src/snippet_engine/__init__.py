"""snippet-engine: keep student and solution variants of code in one compilable file."""

__version__ = "0.1.0"
