"""Core interfaces/abstractions.

Why:
- Defines contracts (Protocol) implemented by concrete adapters.
- The formatter depends on an abstraction, not on a terminal library.
"""
