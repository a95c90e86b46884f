"""
Unit tests for schema definitions.

Tests the task contract and the CSV validation logic without requiring
actual data files.
"""

import pandas as pd
import pytest
from pydantic import BaseModel, ValidationError

from schemas.planner import (
    CrewUtilizationRow,
    ProjectStatistics,
    ScheduleRow,
    TaskRecord,
    TaskWithIntervals,
)
from schemas.registry import SCHEMA_REGISTRY, get_schema_for_file, list_registered_files
from schemas.validator import (
    SchemaValidationError,
    pandas_dtype_to_python_type,
    pydantic_type_to_string,
    types_compatible,
    validate_dataframe,
    validated_df_to_csv,
)


class TestSchemaDefinitions:
    """Test that schema definitions are valid Pydantic models."""

    @pytest.mark.parametrize("schema", [
        TaskRecord,
        TaskWithIntervals,
        ProjectStatistics,
        ScheduleRow,
        CrewUtilizationRow,
    ])
    def test_schema_is_pydantic_model(self, schema):
        assert issubclass(schema, BaseModel)


class TestTaskRecord:
    """The camelCase task contract."""

    def test_minimal_record(self):
        record = TaskRecord.model_validate({
            'taskCode': 'A',
            'operationName': 'Dig',
            'duration': 3,
        })
        assert record.task_code == 'A'
        assert record.crew is None
        assert record.dependencies == []
        assert record.equipment == []

    def test_full_record(self, sample_task_records):
        record = TaskRecord.model_validate(sample_task_records[0])

        assert record.element_name == 'Foundation'
        assert record.crew.assignment == 3
        assert record.equipment[0].name == 'Excavator'

    def test_accepts_field_names(self):
        record = TaskRecord(task_code='A', operation_name='Dig', duration=1)
        assert record.task_code == 'A'

    def test_strips_whitespace(self):
        record = TaskRecord.model_validate({
            'taskCode': '  A  ',
            'operationName': 'Dig',
            'duration': 1,
        })
        assert record.task_code == 'A'

    @pytest.mark.parametrize("overrides", [
        {'taskCode': ''},
        {'taskCode': '   '},
        {'operationName': ''},
        {'duration': 0},
        {'duration': -2},
        {'crew': {'name': 'X', 'assignment': -1}},
        {'crew': {'name': '', 'assignment': 1}},
    ])
    def test_rejects_invalid_fields(self, overrides):
        data = {'taskCode': 'A', 'operationName': 'Dig', 'duration': 1}
        data.update(overrides)
        with pytest.raises(ValidationError):
            TaskRecord.model_validate(data)

    @pytest.mark.parametrize("missing", ['taskCode', 'operationName', 'duration'])
    def test_required_fields(self, missing):
        data = {'taskCode': 'A', 'operationName': 'Dig', 'duration': 1}
        del data[missing]
        with pytest.raises(ValidationError):
            TaskRecord.model_validate(data)


class TestPublishedModels:

    def test_task_with_intervals_dumps_camel_case(self):
        task = TaskWithIntervals(
            task_code='A',
            operation_name='Dig',
            duration=3,
            start_interval=2,
            end_interval=5,
            is_critical=True,
        )
        data = task.model_dump(by_alias=True)

        assert data['taskCode'] == 'A'
        assert data['startInterval'] == 2
        assert data['endInterval'] == 5
        assert data['isCritical'] is True

    def test_statistics_defaults(self):
        stats = ProjectStatistics()
        assert stats.model_dump(by_alias=True) == {
            'totalProjectDuration': 0,
            'peakCrewUtilization': 0,
        }


class TestSchemaRegistry:
    """Test schema registry functionality."""

    def test_registered_files(self):
        assert list_registered_files() == ['crew_utilization.csv', 'schedule.csv']

    def test_all_registered_schemas_are_valid(self):
        for filename, schema in SCHEMA_REGISTRY.items():
            assert issubclass(schema, BaseModel), f"Schema for {filename} is not a Pydantic model"

    def test_get_schema_for_file_found(self):
        assert get_schema_for_file('schedule.csv') == ScheduleRow

    def test_get_schema_for_file_with_path(self):
        assert get_schema_for_file('/some/path/to/crew_utilization.csv') == CrewUtilizationRow

    def test_get_schema_for_file_not_found(self):
        assert get_schema_for_file('nonexistent.csv') is None


class TestTypeConversion:
    """Test type conversion utilities."""

    @pytest.mark.parametrize("dtype,expected", [
        ('int64', 'int'),
        ('Int64', 'int'),
        ('float64', 'float'),
        ('object', 'str'),
        ('string', 'str'),
        ('bool', 'bool'),
        ('boolean', 'bool'),
    ])
    def test_pandas_dtype_to_python_type(self, dtype, expected):
        assert pandas_dtype_to_python_type(dtype) == expected

    def test_pydantic_type_unwraps_optional(self):
        annotation = ScheduleRow.model_fields['element_name'].annotation
        assert pydantic_type_to_string(annotation) == 'str'

    def test_pydantic_type_bool_before_int(self):
        annotation = ScheduleRow.model_fields['is_critical'].annotation
        assert pydantic_type_to_string(annotation) == 'bool'

    @pytest.mark.parametrize("pandas_type,pydantic_type,expected", [
        ('int', 'int', True),
        ('float', 'int', True),
        ('float', 'str', True),
        ('int', 'float', True),
        ('int', 'str', False),
        ('bool', 'int', False),
    ])
    def test_types_compatible(self, pandas_type, pydantic_type, expected):
        assert types_compatible(pandas_type, pydantic_type) is expected


class TestDataFrameValidation:
    """Test DataFrame validation against schemas."""

    def test_valid_dataframe(self):
        df = pd.DataFrame({'interval': [0, 1, 2], 'crew_count': [3, 5, 2]})
        assert validate_dataframe(df, CrewUtilizationRow) == []

    def test_missing_columns(self):
        df = pd.DataFrame({'interval': [0, 1]})
        errors = validate_dataframe(df, CrewUtilizationRow)

        assert len(errors) == 1
        assert 'crew_count' in errors[0]

    def test_extra_columns_allowed_by_default(self):
        df = pd.DataFrame({'interval': [0], 'crew_count': [1], 'note': ['x']})
        assert validate_dataframe(df, CrewUtilizationRow) == []

    def test_extra_columns_strict(self):
        df = pd.DataFrame({'interval': [0], 'crew_count': [1], 'note': ['x']})
        errors = validate_dataframe(df, CrewUtilizationRow, strict=True)
        assert any('note' in e for e in errors)

    def test_type_mismatch(self):
        df = pd.DataFrame({'interval': [True, False], 'crew_count': [1, 2]})
        errors = validate_dataframe(df, CrewUtilizationRow)
        assert any('interval' in e for e in errors)


class TestValidatedWrite:

    def test_writes_registered_file(self, tmp_path):
        df = pd.DataFrame({'interval': [0, 1], 'crew_count': [2, 4]})
        path = tmp_path / 'crew_utilization.csv'

        validated_df_to_csv(df, path, index=False)

        assert pd.read_csv(path)['crew_count'].tolist() == [2, 4]

    def test_rejects_invalid_frame(self, tmp_path):
        df = pd.DataFrame({'interval': [0, 1]})
        path = tmp_path / 'crew_utilization.csv'

        with pytest.raises(SchemaValidationError):
            validated_df_to_csv(df, path, index=False)
        assert not path.exists()

    def test_unregistered_file_warns(self, tmp_path):
        df = pd.DataFrame({'a': [1]})
        path = tmp_path / 'other.csv'

        with pytest.warns(UserWarning):
            validated_df_to_csv(df, path, index=False)
        assert path.exists()
