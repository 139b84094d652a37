"""
Google Docs Editor utility modules.
"""

import sys


def log(message: str) -> None:
    """Log a message to stderr.

    stdout carries the MCP JSON-RPC stream, so anything printed there
    would corrupt the protocol.
    """
    print(message, file=sys.stderr)


def utf16_len(text: str) -> int:
    """Length of a string in UTF-16 code units, the unit of document indices."""
    return len(text.encode("utf-16-le")) // 2
