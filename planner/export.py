"""
CSV export of computed schedules.

Writes schedule.csv and crew_utilization.csv, both validated against
their registered row schemas before writing.
"""

import logging
from pathlib import Path

import pandas as pd

from schemas import validated_df_to_csv
from schemas.planner import ScheduleRow
from .cpm.models import CPMResult, CrewUtilizationResult

logger = logging.getLogger(__name__)

SCHEDULE_FILE = 'schedule.csv'
CREW_UTILIZATION_FILE = 'crew_utilization.csv'


def schedule_to_dataframe(result: CPMResult) -> pd.DataFrame:
    """One row per task with its schedule fields, in input order."""
    rows = []
    for task in result.tasks:
        rows.append({
            'task_code': task.task_code,
            'operation_name': task.operation_name,
            'element_name': task.element_name,
            'duration': task.duration,
            'crew_name': task.crew.name if task.crew else None,
            'crew_count': task.crew_count,
            'dependencies': ';'.join(task.dependencies or []),
            'earliest_start': task.earliest_start,
            'earliest_finish': task.earliest_finish,
            'latest_start': task.latest_start,
            'latest_finish': task.latest_finish,
            'slack': task.slack,
            'is_critical': task.is_critical,
            'start_interval': task.start_interval,
            'end_interval': task.end_interval,
        })

    columns = list(ScheduleRow.model_fields)
    return pd.DataFrame(rows, columns=columns)


def export_schedule(
    result: CPMResult,
    crew: CrewUtilizationResult,
    output_dir: Path,
) -> dict[str, Path]:
    """
    Write the schedule and crew profile as CSV files.

    Args:
        result: Computed schedule
        crew: Crew utilization of the same schedule
        output_dir: Directory to write into (created if needed)

    Returns:
        Dict mapping file name to written path
    """
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    written = {}

    schedule_path = output_dir / SCHEDULE_FILE
    validated_df_to_csv(schedule_to_dataframe(result), schedule_path, index=False)
    written[SCHEDULE_FILE] = schedule_path

    crew_path = output_dir / CREW_UTILIZATION_FILE
    validated_df_to_csv(crew.to_dataframe(), crew_path, index=False)
    written[CREW_UTILIZATION_FILE] = crew_path

    logger.info(f"Exported {len(result.tasks)} tasks and "
                f"{len(crew.by_interval)} crew intervals to {output_dir}")
    return written
