"""Pytest configuration and fixtures."""
import json
import random

import pytest

from planner.cpm.models import Task, Crew


def make_task(code, duration, dependencies=None, crew=None, start_interval=None):
    """Build a task with generated descriptive fields."""
    task = Task(
        task_code=code,
        operation_name=f'Operation {code}',
        element_name=f'Element {code}',
        duration=duration,
        crew=Crew(name=f'Crew {code}', assignment=crew) if crew is not None else None,
        dependencies=list(dependencies or []),
    )
    task.start_interval = start_interval
    return task


def random_dag(seed: int, size: int = 25) -> list[Task]:
    """
    Random acyclic task set.

    Each task depends on a random subset of earlier tasks; the returned
    list is shuffled so input order differs from dependency order.
    """
    rng = random.Random(seed)
    tasks = []
    for i in range(size):
        code = f'T{i:03d}'
        earlier = [t.task_code for t in tasks]
        deps = rng.sample(earlier, k=min(len(earlier), rng.randint(0, 3)))
        tasks.append(make_task(code, rng.randint(0, 9), deps, crew=rng.randint(0, 5)))
    rng.shuffle(tasks)
    return tasks


@pytest.fixture
def task_factory():
    """Factory for tasks with generated descriptive fields."""
    return make_task


@pytest.fixture
def linear_chain():
    """A(5) -> B(3) -> C(4)."""
    return [
        make_task('A', 5),
        make_task('B', 3, ['A']),
        make_task('C', 4, ['B']),
    ]


@pytest.fixture
def parallel_paths():
    """
    A(4) -> C(2) -> E(3)
    B(6) -> D(5) -> E(3)
    """
    return [
        make_task('A', 4),
        make_task('B', 6),
        make_task('C', 2, ['A']),
        make_task('D', 5, ['B']),
        make_task('E', 3, ['C', 'D']),
    ]


@pytest.fixture
def sample_task_records():
    """Raw camelCase task records as submitted over the wire."""
    return [
        {
            'taskCode': 'EXC',
            'operationName': 'Excavation',
            'elementName': 'Foundation',
            'duration': 4,
            'crew': {'name': 'Earthworks', 'assignment': 3},
            'equipment': [{'name': 'Excavator', 'quantity': 1}],
            'dependencies': [],
        },
        {
            'taskCode': 'FRM',
            'operationName': 'Formwork',
            'elementName': 'Foundation',
            'duration': 2,
            'crew': {'name': 'Carpenters', 'assignment': 4},
            'dependencies': ['EXC'],
        },
        {
            'taskCode': 'RBR',
            'operationName': 'Rebar',
            'elementName': 'Foundation',
            'duration': 3,
            'crew': {'name': 'Ironworkers', 'assignment': 2},
            'dependencies': ['EXC'],
        },
        {
            'taskCode': 'POUR',
            'operationName': 'Concrete pour',
            'elementName': 'Foundation',
            'duration': 1,
            'crew': {'name': 'Concrete', 'assignment': 5},
            'dependencies': ['FRM', 'RBR'],
        },
    ]


@pytest.fixture
def tasks_file(tmp_path, sample_task_records):
    """JSON task file on disk."""
    path = tmp_path / 'tasks.json'
    path.write_text(json.dumps(sample_task_records), encoding='utf-8')
    return path
