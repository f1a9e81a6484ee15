"""Media Services Test Harness - environment cleanup and listing verification."""

__version__ = "0.1.0"
