"""Loading, compiling and checking exercise files, with worked lesson solutions."""

__version__ = "0.1.0"
__all__ = ["__version__"]