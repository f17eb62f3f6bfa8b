"""JSON Schema shape checks for manifest documents (Draft 7)."""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List, Optional

from jsonschema import Draft7Validator, ValidationError

SCHEMAS_DIR = Path(__file__).resolve().parent.parent / "schemas"

ENVELOPE_SCHEMA = 'envelope-schema.json'
SECRET_SCHEMA = 'secret-schema.json'
BAREMETALHOST_SCHEMA = 'baremetalhost-schema.json'


@lru_cache(maxsize=None)
def load_validator(schema_name: str) -> Draft7Validator:
    """Load a bundled schema file and build a validator for it."""
    with open(SCHEMAS_DIR / schema_name, 'r', encoding='utf-8') as f:
        schema = json.load(f)
    Draft7Validator.check_schema(schema)
    return Draft7Validator(schema)


def format_schema_error(error: ValidationError) -> str:
    """Format validation error for display"""
    path = " -> ".join([str(p) for p in error.absolute_path]) if error.absolute_path else "root"

    if error.validator == "required":
        missing_props = error.message.split("'")[1::2]
        return f"Missing required field(s) at '{path}': {', '.join(missing_props)}"
    if error.validator == "type":
        expected_type = error.validator_value
        return f"Type error at '{path}': expected {expected_type}, got {type(error.instance).__name__}"
    if error.validator == "enum":
        return f"Invalid value at '{path}': '{error.instance}' not in allowed values {error.validator_value}"
    return f"Validation error at '{path}': {error.message}"


def schema_errors(schema_name: str, document: Any) -> List[str]:
    """Return formatted shape errors for document, sorted for stable output."""
    validator = load_validator(schema_name)
    return [format_schema_error(error) for error in sorted(validator.iter_errors(document), key=str)]


def first_schema_error(schema_name: str, document: Dict[str, Any]) -> Optional[str]:
    errors = schema_errors(schema_name, document)
    return errors[0] if errors else None
