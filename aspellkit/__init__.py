"""ASCII text helpers, byte regions and memory streams, directory listing and install-path resolution for a spell checker."""

__version__ = "0.1.0"
__all__ = ["bcs", "region", "memstream", "dirent", "dirs", "textdomain"]