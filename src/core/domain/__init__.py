"""Domain types and marker constants.

Why here:
- Pure value types and the literal markers the formatter rewrites.
- The domain knows nothing about terminals, files or the CLI.
"""
