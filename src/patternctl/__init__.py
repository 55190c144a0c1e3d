"""patternctl: Strategy and Visitor pattern demonstrations."""

__version__ = "0.1.0"
