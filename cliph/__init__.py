"""Parse, simplify, differentiate, evaluate, format and plot mathematical expressions."""

__version__ = "0.1.0"