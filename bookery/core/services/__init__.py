"""Core services.

The record services live in :mod:`bookery.core.services.records` and are
imported from there; they depend on the entities, which depend on this
package's database helpers.
"""

from .database import DbSessionService

__all__ = ["DbSessionService"]
