"""
CLI Module.

httpie-style command-line client built with Typer.

Architecture:
- parsing turns argv tokens into validated schemas
- client issues exactly one request through httpx
- render prints the response with Rich

Usage:
    httpie-lite get https://httpbin.org/get
    httpie-lite post https://httpbin.org/post name=alice role=admin
"""
