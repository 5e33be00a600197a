"""Language-server proxy that translates TypeScript diagnostics into readable explanations."""

__version__ = "0.1.1"
__all__ = ["__version__"]