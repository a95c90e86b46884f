"""
Errors raised by the scheduling engine.

All of them are deterministic, input-driven validation failures. None are
retryable, and a schedule is never partially returned when one is raised.
"""


class ScheduleError(ValueError):
    """Base class for task set problems that prevent a schedule."""


class InvalidDependencyError(ScheduleError):
    """One or more tasks depend on task codes absent from the task set."""

    def __init__(self, violations: list[tuple[str, str]]):
        self.violations = list(violations)
        lines = [
            f"Task '{task_code}' depends on non-existent task '{missing}'"
            for task_code, missing in self.violations
        ]
        super().__init__("Invalid task dependencies detected:\n" + "\n".join(lines))


class CircularDependencyError(ScheduleError):
    """Worklist propagation could not reach every task."""

    def __init__(self, task_codes: list[str], pass_name: str = 'forward'):
        self.task_codes = list(task_codes)
        self.pass_name = pass_name
        codes = ", ".join(self.task_codes)
        if pass_name == 'forward':
            message = (
                "Unable to calculate project schedule due to circular dependencies or "
                f"invalid task relationships. The following tasks could not be scheduled: {codes}. "
                "Please review the task dependencies and ensure there are no circular references."
            )
        else:
            message = (
                f"Backward pass failed due to circular dependencies - the following tasks "
                f"were not processed: {codes}. "
                "This indicates a structural problem in the task graph."
            )
        super().__init__(message)


class DuplicateTaskError(ScheduleError):
    """Two tasks in one set share a task code."""

    def __init__(self, task_code: str):
        self.task_code = task_code
        super().__init__(f"Duplicate task code '{task_code}' in task set")
