"""
Data models for CPM calculations.

Defines dataclasses for tasks, crews, and calculation results.
"""

from dataclasses import dataclass, field
from typing import Optional

import pandas as pd


@dataclass
class Crew:
    """A named crew and the number of members it puts on a task."""

    name: str
    assignment: int = 0


@dataclass
class Equipment:
    """Equipment needed by a task. Carried through, not scheduled."""

    name: str
    quantity: int = 1


@dataclass
class Task:
    """Represents a schedulable unit of construction work."""

    task_code: str
    operation_name: str
    duration: int                   # time units, zero allowed
    element_name: Optional[str] = None
    crew: Optional[Crew] = None
    equipment: list[Equipment] = field(default_factory=list)
    dependencies: Optional[list[str]] = field(default_factory=list)

    # CPM Results (calculated by engine)
    earliest_start: int = 0
    earliest_finish: int = 0
    latest_start: int = 0
    latest_finish: int = 0
    slack: int = 0
    is_critical: bool = False

    # Published schedule (calculated by engine)
    start_interval: Optional[int] = None
    end_interval: Optional[int] = None

    @property
    def crew_count(self) -> int:
        """Number of crew members assigned to this task (0 without a crew)."""
        return self.crew.assignment if self.crew is not None else 0

    def has_dependencies(self) -> bool:
        """Check if task lists any dependencies."""
        return bool(self.dependencies)

    def reset_schedule(self) -> None:
        """Clear all engine-computed fields."""
        self.earliest_start = 0
        self.earliest_finish = 0
        self.latest_start = 0
        self.latest_finish = 0
        self.slack = 0
        self.is_critical = False
        self.start_interval = None
        self.end_interval = None


@dataclass
class CPMResult:
    """Results from a CPM calculation."""

    project_duration: int
    tasks: list[Task]
    critical_path: list[str] = field(default_factory=list)  # task codes by earliest start

    def get_task(self, task_code: str) -> Optional[Task]:
        """Get a task by code."""
        for task in self.tasks:
            if task.task_code == task_code:
                return task
        return None

    def get_critical_tasks(self) -> list[Task]:
        """Get Task objects on the critical path."""
        by_code = {task.task_code: task for task in self.tasks}
        return [by_code[code] for code in self.critical_path if code in by_code]

    def get_tasks_by_slack(self, max_slack: int = None) -> list[Task]:
        """Get tasks sorted by slack (ascending)."""
        tasks = list(self.tasks)
        if max_slack is not None:
            tasks = [t for t in tasks if t.slack <= max_slack]
        return sorted(tasks, key=lambda t: t.slack)


@dataclass
class CrewUtilizationResult:
    """Crew demand per interval and its peak."""

    peak: int
    by_interval: dict[int, int] = field(default_factory=dict)

    def peak_intervals(self) -> list[int]:
        """Intervals at which demand equals the peak."""
        if not self.by_interval:
            return []
        return sorted(i for i, count in self.by_interval.items() if count == self.peak)

    def to_dataframe(self) -> pd.DataFrame:
        """Crew profile as a frame with `interval` and `crew_count` columns."""
        rows = [
            {'interval': interval, 'crew_count': count}
            for interval, count in sorted(self.by_interval.items())
        ]
        return pd.DataFrame(rows, columns=['interval', 'crew_count'])


@dataclass
class CriticalPathResult:
    """Results from critical path analysis."""

    critical_path: list[Task]
    near_critical_tasks: list[Task]
    slack_distribution: dict[str, int]  # slack bucket -> count
    project_duration: int
    near_critical_threshold: int
    total_tasks: int

    def get_critical_path_length(self) -> int:
        """Number of tasks on critical path."""
        return len(self.critical_path)

    def get_risk_summary(self) -> str:
        """Get summary of schedule risk."""
        critical = len(self.critical_path)
        near_critical = len(self.near_critical_tasks)
        return (f"{critical} critical tasks, {near_critical} near-critical "
                f"(<= {self.near_critical_threshold} units slack)")
