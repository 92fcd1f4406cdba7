"""An arcade game where a chicken jumps over bouncing sawblades, built on pygame."""

__version__ = "0.1.0"
__all__ = ["__version__"]