"""
Data Loader for construction task data.

Parses JSON task records through the TaskRecord schema and converts them
into Task objects for CPM analysis.
"""

import json
import logging
from pathlib import Path
from typing import Any, Iterable

from pydantic import TypeAdapter

from schemas.planner import TaskRecord
from .cpm.models import Task, Crew, Equipment

logger = logging.getLogger(__name__)

_TASK_LIST = TypeAdapter(list[TaskRecord])


def task_from_record(record: TaskRecord) -> Task:
    """Convert a validated TaskRecord into an engine Task."""
    crew = None
    if record.crew is not None:
        crew = Crew(name=record.crew.name, assignment=record.crew.assignment)

    return Task(
        task_code=record.task_code,
        operation_name=record.operation_name,
        element_name=record.element_name,
        duration=record.duration,
        crew=crew,
        equipment=[Equipment(name=e.name, quantity=e.quantity) for e in record.equipment],
        dependencies=list(record.dependencies),
    )


def parse_tasks(records: Iterable[dict[str, Any]]) -> list[Task]:
    """
    Validate raw task dictionaries and convert them to Task objects.

    Raises:
        pydantic.ValidationError: If any record breaks the task contract
    """
    validated = _TASK_LIST.validate_python(list(records))
    return [task_from_record(record) for record in validated]


def load_tasks(path: Path) -> list[Task]:
    """
    Load tasks from a JSON file holding an array of task objects.

    Args:
        path: JSON file path

    Returns:
        List of Task objects in file order

    Raises:
        FileNotFoundError: If the file does not exist
        json.JSONDecodeError: If the file is not valid JSON
        pydantic.ValidationError: If any record breaks the task contract
    """
    path = Path(path)
    logger.info(f"Loading tasks from: {path.name}")

    with open(path, 'r', encoding='utf-8') as f:
        data = json.load(f)

    tasks = parse_tasks(data)
    logger.info(f"Successfully loaded {len(tasks)} tasks")
    return tasks
