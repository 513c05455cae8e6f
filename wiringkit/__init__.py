"""Formatted output, stream parsing, strings, IP addresses and math helpers."""

__version__ = "0.1.0"

__all__ = ["dtostrf", "ipaddress", "printing", "strbase", "stream", "wmath", "wstring"]