"""
Google Docs Editor MCP Server

A Model Context Protocol (MCP) server that reads, edits and exports
Google Documents through an index-aware mutation engine.
"""

__version__ = "1.0.0"
