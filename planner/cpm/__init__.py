"""
CPM (Critical Path Method) scheduling engine for construction tasks.

This module provides:
- Task network construction with dependency validation
- Forward/backward pass CPM calculations over integer time units
- Slack and critical path identification
- Crew utilization aggregation over the scheduled timeline
"""

from .models import Task, Crew, Equipment, CPMResult, CrewUtilizationResult, CriticalPathResult
from .exceptions import (
    ScheduleError,
    InvalidDependencyError,
    CircularDependencyError,
    DuplicateTaskError,
)
from .network import TaskNetwork
from .engine import CPMEngine, compute_schedule
from .crew import (
    compute_crew_utilization,
    calculate_peak_crew_utilization,
    get_utilization_by_interval,
)

__all__ = [
    'Task',
    'Crew',
    'Equipment',
    'CPMResult',
    'CrewUtilizationResult',
    'CriticalPathResult',
    'ScheduleError',
    'InvalidDependencyError',
    'CircularDependencyError',
    'DuplicateTaskError',
    'TaskNetwork',
    'CPMEngine',
    'compute_schedule',
    'compute_crew_utilization',
    'calculate_peak_crew_utilization',
    'get_utilization_by_interval',
]
