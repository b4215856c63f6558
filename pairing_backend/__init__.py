"""British drink pairing backend: recommend drinks for a dish."""

__version__ = "0.1.0"
