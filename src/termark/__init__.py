"""termark - terminal markdown viewer."""

__version__ = "0.1.0"
