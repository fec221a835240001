"""
JSON Schema Contract Validators

Validation of fiscal-year payloads exchanged with the API layer against
formal JSON Schema contracts, using the jsonschema library.

Schemas (bundled in contracts/schema/):
- fiscal_year_filter.json
- fiscal_year_range_request.json
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

import jsonschema
from jsonschema import Draft202012Validator

logger = logging.getLogger(__name__)


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Loader for bundled JSON Schema files.

    Schemas live in the schema/ directory next to this module.
    """

    def __init__(self, schema_dir: Optional[Path] = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Loaded schema cache
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Load a JSON Schema file.

        Args:
            schema_name: Schema name without extension (e.g. 'fiscal_year_filter')

        Returns:
            Loaded schema as dict

        Raises:
            FileNotFoundError: If the schema file does not exist
            ValueError: If the file is not a valid JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Meta-validation
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

        logger.debug("Loaded contract schema %s from %s", schema_name, schema_path)
        self._schemas[schema_name] = schema
        return schema


_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Base class for contract validators.

    Wraps validation of data against a named JSON Schema.
    """

    def __init__(self, schema_name: str, loader: Optional[SchemaLoader] = None):
        self.schema_name = schema_name
        self.schema = (loader or _SCHEMA_LOADER).load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Validate data against the schema.

        Raises:
            ValidationError: If data does not match the schema
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        """Iterate over every ValidationError found in data."""
        return self.validator.iter_errors(data)


class FiscalYearFilterValidator(ContractValidator):
    """Validator for the fiscal_year_filter contract."""

    def __init__(self):
        super().__init__("fiscal_year_filter")


class FiscalYearRangeRequestValidator(ContractValidator):
    """Validator for the fiscal_year_range_request contract."""

    def __init__(self):
        super().__init__("fiscal_year_range_request")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_fiscal_year_filter(data: Dict[str, Any]) -> None:
    """
    Validate a fiscal year filter payload.

    Raises:
        ValidationError: If data does not match the schema
    """
    FiscalYearFilterValidator().validate(data)


def validate_fiscal_year_range_request(data: Dict[str, Any]) -> None:
    """
    Validate a fiscal year range request payload.

    Raises:
        ValidationError: If data does not match the schema
    """
    FiscalYearRangeRequestValidator().validate(data)
