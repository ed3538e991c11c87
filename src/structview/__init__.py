"""structview: explore huge component-tree documents as a lazy outline."""

__version__ = "0.1.0"
