"""
Project planner service.

Holds the active task set and its computed schedule. Replacing the set and
reading the schedule are serialized by one lock; every submission is
computed on private copies so published snapshots never change afterwards.
"""

import copy
import logging
import threading
from pathlib import Path
from typing import Iterable, Optional

from schemas.planner import (
    CrewRecord,
    EquipmentRecord,
    ProjectStatistics,
    TaskWithIntervals,
)
from .config.settings import settings
from .cpm.crew import compute_crew_utilization
from .cpm.engine import compute_schedule
from .cpm.models import Task, CPMResult
from .data_loader import load_tasks

logger = logging.getLogger(__name__)


def to_task_with_intervals(task: Task) -> TaskWithIntervals:
    """Convert a scheduled Task into its published form."""
    crew = None
    if task.crew is not None:
        crew = CrewRecord(name=task.crew.name, assignment=task.crew.assignment)

    return TaskWithIntervals(
        task_code=task.task_code,
        operation_name=task.operation_name,
        element_name=task.element_name,
        duration=task.duration,
        crew=crew,
        equipment=[EquipmentRecord(name=e.name, quantity=e.quantity) for e in task.equipment],
        dependencies=list(task.dependencies or []),
        start_interval=task.start_interval if task.start_interval is not None else 0,
        end_interval=task.end_interval if task.end_interval is not None else 0,
        earliest_start=task.earliest_start,
        latest_start=task.latest_start,
        slack=task.slack,
        is_critical=task.is_critical,
    )


class ProjectPlanner:
    """
    In-memory store for the active task set.

    register_tasks replaces the whole set; there is no incremental update.
    """

    def __init__(self):
        self._lock = threading.RLock()
        self._tasks: list[Task] = []
        self._statistics = ProjectStatistics(total_project_duration=0, peak_crew_utilization=0)

    @classmethod
    def from_settings(cls, data_file: Optional[Path] = None) -> 'ProjectPlanner':
        """
        Create a planner seeded from the configured task file.

        A missing or unreadable file is logged and leaves the planner empty.
        """
        planner = cls()
        data_file = Path(data_file or settings.TASKS_DATA_FILE)

        if not data_file.exists():
            logger.warning(f"Task data file not found: {data_file}")
            return planner

        try:
            tasks = load_tasks(data_file)
        except (OSError, ValueError) as e:
            # pydantic.ValidationError and json.JSONDecodeError are ValueErrors
            logger.error(f"Failed to load tasks from file: {e}")
            return planner

        planner.register_tasks(tasks)
        return planner

    @staticmethod
    def _calculate(tasks: Iterable[Task]) -> tuple[list[Task], ProjectStatistics]:
        tasks_copy = copy.deepcopy(list(tasks))
        for task in tasks_copy:
            task.reset_schedule()

        result: CPMResult = compute_schedule(tasks_copy)
        crew = compute_crew_utilization(result.tasks)
        statistics = ProjectStatistics(
            total_project_duration=result.project_duration,
            peak_crew_utilization=crew.peak,
        )
        return tasks_copy, statistics

    def register_tasks(self, tasks: Optional[Iterable[Task]]) -> None:
        """
        Replace the active task set and recompute its schedule.

        On a schedule error the previous set stays active.

        Raises:
            ValueError: If tasks is None
            ScheduleError: If the new set cannot be scheduled
        """
        if tasks is None:
            raise ValueError("Task list cannot be null")

        with self._lock:
            logger.info("Initializing project planner...")
            scheduled, statistics = self._calculate(tasks)

            self._tasks = scheduled
            self._statistics = statistics

            logger.info("Project initialization complete:")
            logger.info(f"  - Total tasks: {len(scheduled)}")
            logger.info(f"  - Project duration: {statistics.total_project_duration} time units")
            logger.info(f"  - Peak crew utilization: {statistics.peak_crew_utilization} crew members")

    def clear_tasks(self) -> None:
        """Reset the planner to an empty task set."""
        with self._lock:
            self._tasks = []
            self._statistics = ProjectStatistics(total_project_duration=0, peak_crew_utilization=0)
            logger.info("Cleared all tasks")

    def get_task_count(self) -> int:
        with self._lock:
            return len(self._tasks)

    def get_all_tasks(self) -> list[Task]:
        """Copies of the active tasks with their computed fields."""
        with self._lock:
            return copy.deepcopy(self._tasks)

    def get_project_statistics(self) -> ProjectStatistics:
        with self._lock:
            return self._statistics.model_copy()

    def get_tasks_with_intervals(self) -> list[TaskWithIntervals]:
        with self._lock:
            return [to_task_with_intervals(task) for task in self._tasks]

    def calculate_project(self, tasks: Iterable[Task]) -> ProjectStatistics:
        """Statistics for a task set without registering it."""
        _, statistics = self._calculate(tasks or [])
        return statistics

    def calculate_tasks_with_intervals(self, tasks: Iterable[Task]) -> list[TaskWithIntervals]:
        """Scheduled tasks for a task set without registering it."""
        scheduled, _ = self._calculate(tasks or [])
        return [to_task_with_intervals(task) for task in scheduled]
