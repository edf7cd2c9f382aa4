"""Solidity compile server: an HTTP adapter around solc --standard-json."""

__version__ = "0.1.0"
