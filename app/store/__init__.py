"""Store package: persistence port for the import pipeline."""

from app.store.contracts import (
    ContractStore,
    DuplicateContractError,
    SchemaNotInitializedError,
    StoreError,
)
from app.store.sqlalchemy_impl import SqlContractStore

__all__ = [
    "ContractStore",
    "DuplicateContractError",
    "SchemaNotInitializedError",
    "SqlContractStore",
    "StoreError",
]
