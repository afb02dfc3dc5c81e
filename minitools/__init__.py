"""Small command-line tools: exchange conversion, an RPN calculator and merge-insertion sorting."""

__version__ = "0.1.0"