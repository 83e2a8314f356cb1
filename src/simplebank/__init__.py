"""SimpleBank — account and transfer API.

Callers authenticate with stateless bearer tokens (signed JWT or
ChaCha20-Poly1305 encrypted) and may only act on accounts they own.
"""

__version__ = "0.1.0"
