"""docgrep - keyword search over crawled documentation references."""

__version__ = "0.1.0"
