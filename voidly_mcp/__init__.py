"""
Voidly censorship index MCP server package.

This package exposes LLM-friendly tools and resources backed by the public
Voidly Global Censorship Index API. See DESIGN.md for full details.
"""

__all__ = ["config"]
