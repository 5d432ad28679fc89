"""Storage providers.

``ProdPersistenceProvider`` must be imported here so ``get_provider`` can
find it among ``PersistenceProvider.__subclasses__()``.
"""

from explora.util.di.infrastructure.persistence import (
    PersistenceProvider,
    ProdPersistenceProvider,
)

__all__ = ["PersistenceProvider", "ProdPersistenceProvider"]
