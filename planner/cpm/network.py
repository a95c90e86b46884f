"""
Task Network for CPM calculations.

Indexes tasks by code with their dependency and successor relationships
and provides the worklist propagation used by both CPM passes.
"""

from collections import deque
from typing import Callable, Iterable, Optional

from .exceptions import DuplicateTaskError
from .models import Task


class TaskNetwork:
    """
    Task dependency network for CPM calculations.

    Keeps tasks in their submitted order. The successor index only
    contains edges between tasks present in the network.
    """

    def __init__(self):
        self.tasks: dict[str, Task] = {}
        self._successors: dict[str, list[str]] = {}

    @classmethod
    def from_tasks(cls, tasks: Iterable[Task]) -> 'TaskNetwork':
        """Build a network from a task list. Raises DuplicateTaskError on repeated codes."""
        network = cls()
        for task in tasks:
            network.add_task(task)
        network.build_successor_index()
        return network

    def add_task(self, task: Task) -> None:
        """Add a task to the network."""
        if task.task_code in self.tasks:
            raise DuplicateTaskError(task.task_code)
        self.tasks[task.task_code] = task

    def build_successor_index(self) -> None:
        """Map each task code to the codes of tasks that depend on it."""
        self._successors = {code: [] for code in self.tasks}
        for task in self.tasks.values():
            for dep_code in self.get_dependencies(task.task_code):
                if dep_code in self._successors:
                    self._successors[dep_code].append(task.task_code)

    def get_task(self, task_code: str) -> Optional[Task]:
        """Get a task by code."""
        return self.tasks.get(task_code)

    def get_dependencies(self, task_code: str) -> list[str]:
        """Dependency codes of a task, duplicates removed, order kept."""
        task = self.tasks[task_code]
        return list(dict.fromkeys(task.dependencies or []))

    def get_successors(self, task_code: str) -> list[str]:
        """Codes of tasks that list task_code as a dependency."""
        return self._successors.get(task_code, [])

    def get_start_tasks(self) -> list[str]:
        """Get task codes with no dependencies."""
        return [code for code, task in self.tasks.items() if not task.has_dependencies()]

    def get_end_tasks(self) -> list[str]:
        """Get task codes with no successors."""
        return [code for code in self.tasks if not self._successors.get(code)]

    def find_missing_dependencies(self) -> list[tuple[str, str]]:
        """
        Find dependency codes that do not resolve to a task.

        Returns (task_code, missing_code) pairs in encounter order.
        """
        missing = []
        for task in self.tasks.values():
            for dep_code in task.dependencies or []:
                if dep_code not in self.tasks:
                    missing.append((task.task_code, dep_code))
        return missing

    def propagate(
        self,
        seeds: list[str],
        fan_out: Callable[[str], list[str]],
        requires: Callable[[str], list[str]],
        visit: Callable[[Task], None],
    ) -> list[str]:
        """
        Breadth-first worklist propagation over the network.

        Seeds are visited first. A task reached through fan_out is visited
        once every code returned by requires(task_code) has been visited.
        Each task is visited at most once.

        Args:
            seeds: Task codes ready without prerequisites
            fan_out: Codes to examine after a task is visited
            requires: Codes that must be visited before a task can be
            visit: Callback computing a task's values

        Returns:
            Codes of tasks never visited, in network order. Non-empty only
            when the graph has a cycle or a task depends on itself.
        """
        processed = set()
        queue = deque()

        for code in seeds:
            if code in processed:
                continue
            visit(self.tasks[code])
            processed.add(code)
            queue.append(code)

        while queue:
            current = queue.popleft()
            for code in fan_out(current):
                if code in processed or code not in self.tasks:
                    continue
                if all(req in processed for req in requires(code)):
                    visit(self.tasks[code])
                    processed.add(code)
                    queue.append(code)

        return [code for code in self.tasks if code not in processed]

    def get_statistics(self) -> dict:
        """Get network statistics."""
        return {
            'total_tasks': len(self.tasks),
            'total_dependencies': sum(len(v) for v in self._successors.values()),
            'start_tasks': len(self.get_start_tasks()),
            'end_tasks': len(self.get_end_tasks()),
            'crewed_tasks': sum(1 for t in self.tasks.values() if t.crew is not None),
        }

    def __len__(self) -> int:
        return len(self.tasks)

    def __contains__(self, task_code: str) -> bool:
        return task_code in self.tasks

    def __repr__(self) -> str:
        return f"TaskNetwork({len(self.tasks)} tasks)"
