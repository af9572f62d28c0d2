"""
Dishka providers.

- container.AppProvider: services and command/query handlers (storage-agnostic)
- persistence.PersistenceProvider: Prisma client and repository implementations
"""

from marketchat.setup.ioc.container import AppProvider

__all__ = ["AppProvider"]
