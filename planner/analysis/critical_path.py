"""
Critical Path Analysis.

Identifies critical and near-critical tasks of a computed schedule and
summarizes the slack distribution.
"""

from collections import defaultdict

from ..cpm.models import CPMResult, CriticalPathResult


def slack_bucket(slack: int) -> str:
    """Name of the distribution bucket a slack value falls into."""
    if slack <= 0:
        return '0 (critical)'
    elif slack == 1:
        return '1 unit'
    elif slack <= 5:
        return '2-5 units'
    elif slack <= 10:
        return '6-10 units'
    return '>10 units'


def analyze_critical_path(
    result: CPMResult,
    near_critical_threshold: int = 2,
) -> CriticalPathResult:
    """
    Analyze critical path and near-critical tasks.

    Args:
        result: Computed schedule
        near_critical_threshold: Largest positive slack counted as near-critical

    Returns:
        CriticalPathResult with critical path, near-critical tasks, and statistics
    """
    near_critical = []
    slack_buckets = defaultdict(int)

    for task in result.tasks:
        slack_buckets[slack_bucket(task.slack)] += 1
        if 0 < task.slack <= near_critical_threshold:
            near_critical.append(task)

    near_critical.sort(key=lambda t: (t.slack, t.earliest_start))

    return CriticalPathResult(
        critical_path=result.get_critical_tasks(),
        near_critical_tasks=near_critical,
        slack_distribution=dict(slack_buckets),
        project_duration=result.project_duration,
        near_critical_threshold=near_critical_threshold,
        total_tasks=len(result.tasks),
    )


def print_critical_path_report(result: CriticalPathResult, show: int = 20) -> None:
    """Print a formatted critical path report."""
    print("=" * 80)
    print("CRITICAL PATH ANALYSIS REPORT")
    print("=" * 80)

    print(f"\nProject Duration: {result.project_duration} time units")
    print(f"Total Tasks: {result.total_tasks}")
    print(f"Critical Tasks: {len(result.critical_path)}")
    print(f"Near-Critical Tasks (<= {result.near_critical_threshold} units slack): "
          f"{len(result.near_critical_tasks)}")

    if result.total_tasks:
        print("\n--- Slack Distribution ---")
        for bucket, count in sorted(result.slack_distribution.items()):
            pct = count / result.total_tasks * 100
            bar = '#' * int(pct / 2)
            print(f"  {bucket:15s}: {count:5d} ({pct:5.1f}%) {bar}")

    print(f"\n--- Critical Path (first {show} tasks) ---")
    for i, task in enumerate(result.critical_path[:show]):
        print(f"  {i+1:3d}. {task.task_code:12s} | {task.operation_name[:40]:40s} | "
              f"{task.earliest_start:5d} -> {task.earliest_finish:5d}")

    if len(result.critical_path) > show:
        print(f"  ... and {len(result.critical_path) - show} more critical tasks")

    print("\n--- Near-Critical Tasks (first 10) ---")
    for i, task in enumerate(result.near_critical_tasks[:10]):
        print(f"  {i+1:3d}. {task.task_code:12s} | Slack: {task.slack:3d} | "
              f"{task.operation_name[:35]:35s}")

    print("\n" + "=" * 80)
