"""
Construction Planner.

Provides CPM scheduling and crew utilization for construction task sets.
"""

from .cpm import (
    Task,
    Crew,
    Equipment,
    CPMResult,
    CrewUtilizationResult,
    CriticalPathResult,
    ScheduleError,
    InvalidDependencyError,
    CircularDependencyError,
    DuplicateTaskError,
    TaskNetwork,
    CPMEngine,
    compute_schedule,
    compute_crew_utilization,
)
from .data_loader import load_tasks, parse_tasks
from .service import ProjectPlanner

__all__ = [
    # Models
    'Task',
    'Crew',
    'Equipment',
    'CPMResult',
    'CrewUtilizationResult',
    'CriticalPathResult',
    # Errors
    'ScheduleError',
    'InvalidDependencyError',
    'CircularDependencyError',
    'DuplicateTaskError',
    # Core
    'TaskNetwork',
    'CPMEngine',
    'compute_schedule',
    'compute_crew_utilization',
    # Loading
    'load_tasks',
    'parse_tasks',
    # Service
    'ProjectPlanner',
]
