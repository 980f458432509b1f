"""Bookery library record store.

This package contains the validated domain model for authors, books,
costumers and rentals, the relational persistence layer behind it and the
HTTP API that exposes it.
"""

__version__ = "0.1.0"
