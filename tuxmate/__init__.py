"""TuxMate — generate install scripts for Linux and macOS package managers."""

__version__ = "0.1.0"
