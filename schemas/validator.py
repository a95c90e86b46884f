"""
Schema validation utilities for output CSV files.

Checks that exported frames carry the columns and column types declared
by their Pydantic row schema before they are written, so files consumed
by spreadsheets and dashboards keep a stable shape.
"""

import types
import typing
import warnings
from pathlib import Path
from typing import Type, List, Optional, Dict, Tuple

import pandas as pd
from pydantic import BaseModel


class SchemaValidationError(Exception):
    """Raised when schema validation fails."""

    def __init__(
        self,
        message: str,
        missing_columns: Optional[List[str]] = None,
        type_mismatches: Optional[Dict[str, Tuple[str, str]]] = None,
        extra_columns: Optional[List[str]] = None,
    ):
        super().__init__(message)
        self.missing_columns = missing_columns or []
        self.type_mismatches = type_mismatches or {}
        self.extra_columns = extra_columns or []


def pandas_dtype_to_python_type(dtype) -> str:
    """Convert pandas dtype to a simplified type string."""
    dtype_str = str(dtype).lower()

    if dtype_str.startswith('int') or dtype_str.startswith('uint'):
        return 'int'
    elif dtype_str.startswith('float'):
        return 'float'
    elif dtype_str in ('object', 'string'):
        return 'str'
    elif dtype_str == 'boolean' or dtype_str == 'bool':
        return 'bool'
    return dtype_str


def pydantic_type_to_string(annotation) -> str:
    """Convert a Pydantic field annotation to a simplified type string."""
    # Optional[X] / X | None -> X
    if typing.get_origin(annotation) in (typing.Union, types.UnionType):
        args = [a for a in typing.get_args(annotation) if a is not type(None)]
        if len(args) == 1:
            annotation = args[0]

    for py_type, name in ((bool, 'bool'), (int, 'int'), (float, 'float'), (str, 'str')):
        if annotation is py_type:
            return name
    return str(annotation)


def types_compatible(pandas_type: str, pydantic_type: str) -> bool:
    """
    Check if pandas type is compatible with pydantic type.

    Lenient where pandas inference is: nullable integer columns load as
    float, and all-empty columns load as object or float.
    """
    if pandas_type == pydantic_type:
        return True

    # float in pandas can represent nullable int or an all-NaN column
    if pandas_type == 'float' and pydantic_type in ('int', 'str'):
        return True

    # object columns of None values
    if pandas_type == 'str' and pydantic_type in ('int', 'float', 'bool'):
        return True

    if pandas_type == 'int' and pydantic_type == 'float':
        return True

    return False


def get_column_name(field_name: str, field_info) -> str:
    """CSV column name for a field: its alias when it has one."""
    return field_info.alias or field_name


def validate_dataframe(
    df: pd.DataFrame,
    schema: Type[BaseModel],
    strict: bool = False,
) -> List[str]:
    """
    Validate a DataFrame against a Pydantic schema.

    Args:
        df: DataFrame to validate
        schema: Pydantic model class defining expected columns
        strict: If True, fail on extra columns not in schema

    Returns:
        List of validation error messages (empty if valid)
    """
    errors = []

    column_to_field = {
        get_column_name(name, info): name
        for name, info in schema.model_fields.items()
    }
    expected_columns = set(column_to_field)
    actual_columns = set(df.columns)

    missing = expected_columns - actual_columns
    if missing:
        errors.append(f"Missing required columns: {sorted(missing)}")

    extra = actual_columns - expected_columns
    if extra and strict:
        errors.append(f"Unexpected columns (strict mode): {sorted(extra)}")

    mismatches = []
    for col in sorted(expected_columns & actual_columns):
        got = pandas_dtype_to_python_type(df[col].dtype)
        field_info = schema.model_fields[column_to_field[col]]
        expected = pydantic_type_to_string(field_info.annotation)
        if not types_compatible(got, expected):
            mismatches.append(f"{col}: got {got}, expected {expected}")

    if mismatches:
        errors.append(f"Type mismatches: {'; '.join(mismatches)}")

    return errors


def validate_output_file(
    file_path: Path,
    schema: Type[BaseModel],
    strict: bool = False,
    sample_rows: int = 100,
) -> List[str]:
    """
    Validate an output CSV file against a schema.

    Raises:
        FileNotFoundError: If file doesn't exist
    """
    file_path = Path(file_path)
    if not file_path.exists():
        raise FileNotFoundError(f"File not found: {file_path}")

    df = pd.read_csv(file_path, nrows=sample_rows)
    return validate_dataframe(df, schema, strict=strict)


def validated_df_to_csv(
    df: pd.DataFrame,
    file_path: Path,
    strict: bool = False,
    **to_csv_kwargs,
) -> None:
    """
    Validate a DataFrame against its registered schema and write to CSV.

    The file name selects the schema through the registry. Unregistered
    names are written with a warning.

    Raises:
        SchemaValidationError: If validation fails
    """
    from .registry import get_schema_for_file

    file_path = Path(file_path)
    schema = get_schema_for_file(file_path.name)

    if schema is None:
        warnings.warn(
            f"No schema registered for '{file_path.name}'. "
            f"Consider adding a schema to schemas/registry.py for validation.",
            UserWarning
        )
        df.to_csv(file_path, **to_csv_kwargs)
        return

    errors = validate_dataframe(df, schema, strict=strict)
    if errors:
        error_msg = (
            f"Schema validation failed for '{file_path.name}':\n"
            + "\n".join(f"  - {e}" for e in errors)
        )
        raise SchemaValidationError(error_msg)

    df.to_csv(file_path, **to_csv_kwargs)
