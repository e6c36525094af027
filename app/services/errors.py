"""Error types for the contract import pipeline."""

from __future__ import annotations


class ContractImportError(Exception):
    """Base class for contract import errors."""

    pass


class EmptyInputError(ContractImportError):
    """Input has no content at all - the whole batch is rejected."""

    pass


class RowValidationError(ContractImportError):
    """A single row failed validation - the row is skipped, the batch continues."""

    def __init__(self, row_number: int, field: str, message: str):
        self.row_number = row_number
        self.field = field
        self.message = message
        super().__init__(f"Row {row_number}: {message}")


__all__ = ["ContractImportError", "EmptyInputError", "RowValidationError"]
