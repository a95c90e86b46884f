"""
Crew utilization across the project timeline.

Sweeps each task's [start_interval, start_interval + duration) range and
sums crew members per discrete time unit.
"""

import logging
from collections import defaultdict
from typing import Iterable, Optional

from .models import Task, CrewUtilizationResult

logger = logging.getLogger(__name__)


def get_utilization_by_interval(tasks: Optional[Iterable[Task]]) -> dict[int, int]:
    """
    Crew count at each covered time interval.

    Intervals no task covers are absent. Tasks without a start interval
    are skipped.

    Args:
        tasks: Tasks with start intervals assigned

    Returns:
        Dict mapping interval to aggregate crew count
    """
    crew_by_interval = defaultdict(int)

    for task in tasks or []:
        if task.start_interval is None:
            logger.warning(f"Task {task.task_code} has no start interval set")
            continue

        start = task.start_interval
        crew_count = task.crew_count
        for interval in range(start, start + task.duration):
            crew_by_interval[interval] += crew_count

    return dict(crew_by_interval)


def calculate_peak_crew_utilization(tasks: Optional[Iterable[Task]]) -> int:
    """
    Highest number of crew members working at any single interval.

    Returns 0 when no interval is covered.
    """
    return compute_crew_utilization(tasks).peak


def compute_crew_utilization(tasks: Optional[Iterable[Task]]) -> CrewUtilizationResult:
    """
    Compute the crew profile and its peak.

    Args:
        tasks: Tasks with start intervals assigned. None or empty gives peak 0.

    Returns:
        CrewUtilizationResult with peak and per-interval counts
    """
    tasks = list(tasks or [])
    if not tasks:
        logger.warning("No tasks provided for crew utilization calculation")
        return CrewUtilizationResult(peak=0, by_interval={})

    by_interval = get_utilization_by_interval(tasks)
    peak = max(by_interval.values(), default=0)

    logger.info(f"Peak crew utilization: {peak} crew members")
    logger.info(f"Total time intervals analyzed: {len(by_interval)}")

    return CrewUtilizationResult(peak=peak, by_interval=by_interval)
