"""Business logic services."""

from app.services.contract_import import ContractImporter, import_contracts, import_csv_file
from app.services.csv_parser import QuoteMode, parse_rows
from app.services.errors import ContractImportError, EmptyInputError, RowValidationError
from app.services.export import import_result_to_csv

__all__ = [
    "ContractImportError",
    "ContractImporter",
    "EmptyInputError",
    "QuoteMode",
    "RowValidationError",
    "import_contracts",
    "import_csv_file",
    "import_result_to_csv",
    "parse_rows",
]
