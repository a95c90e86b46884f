"""
Data schemas for the construction planner.

Pydantic models for the JSON task contract and for the CSV files the
planner exports.

Usage:
    from schemas import validated_df_to_csv
    from schemas.planner import TaskRecord

    record = TaskRecord.model_validate({'taskCode': 'A', 'operationName': 'Dig', 'duration': 3})
    validated_df_to_csv(df, output_dir / 'schedule.csv', index=False)
"""

from .validator import (
    validate_output_file,
    validate_dataframe,
    validated_df_to_csv,
    SchemaValidationError,
)
from .registry import SCHEMA_REGISTRY, get_schema_for_file

__all__ = [
    'validate_output_file',
    'validate_dataframe',
    'validated_df_to_csv',
    'SchemaValidationError',
    'SCHEMA_REGISTRY',
    'get_schema_for_file',
]
