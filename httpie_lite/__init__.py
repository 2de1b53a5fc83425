"""
httpie-lite.

A small httpie-style command-line HTTP client: one GET or POST request,
pretty-printed response.
"""

__version__ = "0.1.0"
