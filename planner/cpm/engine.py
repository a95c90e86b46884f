"""
CPM (Critical Path Method) Engine.

Implements dependency validation, forward and backward pass calculations,
slack and critical path identification over integer time units.
"""

import logging
from typing import Iterable, Optional

from .exceptions import CircularDependencyError, InvalidDependencyError
from .models import Task, CPMResult
from .network import TaskNetwork

logger = logging.getLogger(__name__)


class CPMEngine:
    """
    CPM calculation engine.

    Performs forward pass (earliest times), backward pass (latest times),
    slack calculation, and critical path identification. Computed values
    are written onto the network's Task objects.
    """

    def __init__(self, network: TaskNetwork):
        """
        Initialize CPM engine.

        Args:
            network: Task network to calculate
        """
        self.network = network

    def validate_dependencies(self) -> None:
        """
        Check that every dependency code names a task in the network.

        Raises:
            InvalidDependencyError: listing every (task, missing dependency) pair
        """
        violations = self.network.find_missing_dependencies()
        if violations:
            error = InvalidDependencyError(violations)
            logger.error(str(error))
            raise error

    def forward_pass(self) -> int:
        """
        Calculate earliest start and earliest finish for all tasks.

        Tasks without dependencies start at 0. Every other task starts at
        the latest earliest finish among its dependencies, once all of
        them are known.

        Returns:
            Project duration (latest earliest finish, 0 for no tasks)

        Raises:
            CircularDependencyError: if some tasks never become ready
        """
        network = self.network

        def set_earliest_times(task: Task) -> None:
            deps = network.get_dependencies(task.task_code)
            task.earliest_start = max(
                (network.tasks[code].earliest_finish for code in deps),
                default=0,
            )
            task.earliest_finish = task.earliest_start + task.duration

        unprocessed = network.propagate(
            seeds=network.get_start_tasks(),
            fan_out=network.get_successors,
            requires=network.get_dependencies,
            visit=set_earliest_times,
        )
        if unprocessed:
            error = CircularDependencyError(unprocessed, pass_name='forward')
            logger.error(str(error))
            raise error

        return self.get_project_duration()

    def backward_pass(self, project_duration: int) -> None:
        """
        Calculate latest start and latest finish for all tasks.

        Tasks without successors finish at project_duration. Every other
        task finishes at the earliest latest start among its successors.

        Raises:
            CircularDependencyError: if some tasks never become ready. Not
                expected once forward_pass has succeeded on the same network.
        """
        network = self.network

        def set_latest_times(task: Task) -> None:
            successors = network.get_successors(task.task_code)
            task.latest_finish = min(
                (network.tasks[code].latest_start for code in successors),
                default=project_duration,
            )
            task.latest_start = task.latest_finish - task.duration

        unprocessed = network.propagate(
            seeds=network.get_end_tasks(),
            fan_out=network.get_dependencies,
            requires=network.get_successors,
            visit=set_latest_times,
        )
        if unprocessed:
            error = CircularDependencyError(unprocessed, pass_name='backward')
            logger.error(str(error))
            raise error

    def calculate_slack(self) -> None:
        """
        Calculate slack and critical flag for all tasks.

        Slack = Latest Start - Earliest Start. Critical tasks have zero slack.
        """
        for task in self.network.tasks.values():
            task.slack = task.latest_start - task.earliest_start
            task.is_critical = task.slack == 0

    def assign_intervals(self) -> None:
        """Publish every task at its earliest opportunity."""
        for task in self.network.tasks.values():
            task.start_interval = task.earliest_start
            task.end_interval = task.earliest_finish

    def get_project_duration(self) -> int:
        """Get the latest earliest finish as project duration."""
        return max((t.earliest_finish for t in self.network.tasks.values()), default=0)

    def get_critical_path(self) -> list[str]:
        """
        Return task codes on the critical path in execution order.

        Ordered by earliest start; ties keep network order.
        """
        critical = [t for t in self.network.tasks.values() if t.is_critical]
        critical.sort(key=lambda t: t.earliest_start)
        return [t.task_code for t in critical]

    def run(self) -> CPMResult:
        """
        Execute full CPM calculation.

        Returns:
            CPMResult with all calculated values
        """
        self.validate_dependencies()
        project_duration = self.forward_pass()
        self.backward_pass(project_duration)
        self.calculate_slack()
        self.assign_intervals()

        critical_path = self.get_critical_path()

        logger.info(f"CPM calculation complete. Project duration: {project_duration} time units")
        logger.info(f"Critical path contains {len(critical_path)} tasks")

        return CPMResult(
            project_duration=project_duration,
            tasks=list(self.network.tasks.values()),
            critical_path=critical_path,
        )


def compute_schedule(tasks: Optional[Iterable[Task]]) -> CPMResult:
    """
    Compute the CPM schedule for a task set.

    The Task objects passed in receive the computed fields.

    Args:
        tasks: Tasks to schedule. None or empty gives an empty schedule.

    Returns:
        CPMResult with project duration and scheduled tasks in input order

    Raises:
        InvalidDependencyError: a dependency names a task not in the set
        CircularDependencyError: the dependencies contain a cycle
        DuplicateTaskError: two tasks share a task code
    """
    tasks = list(tasks or [])
    if not tasks:
        logger.warning("No tasks provided for CPM calculation")
        return CPMResult(project_duration=0, tasks=[], critical_path=[])

    network = TaskNetwork.from_tasks(tasks)
    logger.debug(f"Built {network!r}: {network.get_statistics()}")
    return CPMEngine(network).run()
