"""Secret-scanning building blocks: entropy, allowlists, path filters, config and verification."""

__version__ = "0.1.0"