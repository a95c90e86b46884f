"""
Construction planner schemas.

Wire models mirror the camelCase JSON task contract. Row models describe
the CSV files written by planner.export.

Output Location: {PLANNER_OUTPUT_DIR}/
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class CrewRecord(BaseModel):
    """Crew assigned to a task."""
    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    name: str = Field(min_length=1, description="Crew name")
    assignment: int = Field(ge=0, description="Number of crew members on the task")


class EquipmentRecord(BaseModel):
    """Equipment needed by a task."""
    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    name: str = Field(min_length=1, description="Equipment name")
    quantity: int = Field(gt=0, description="Units needed")


class TaskRecord(BaseModel):
    """
    Task as submitted by a caller.

    File: tasks.json (JSON array of these objects)
    """
    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    task_code: str = Field(alias="taskCode", min_length=1, description="Unique task identifier")
    operation_name: str = Field(alias="operationName", min_length=1, description="Operation performed")
    element_name: Optional[str] = Field(default=None, alias="elementName", description="Construction element")
    duration: int = Field(gt=0, description="Duration in time units")
    crew: Optional[CrewRecord] = Field(default=None, description="Crew assignment")
    equipment: list[EquipmentRecord] = Field(default_factory=list, description="Equipment needed")
    dependencies: list[str] = Field(default_factory=list, description="Task codes that must finish first")


class TaskWithIntervals(BaseModel):
    """Task with its calculated CPM schedule."""
    model_config = ConfigDict(populate_by_name=True)

    task_code: str = Field(alias="taskCode", description="Unique task identifier")
    operation_name: str = Field(alias="operationName", description="Operation performed")
    element_name: Optional[str] = Field(default=None, alias="elementName", description="Construction element")
    duration: int = Field(ge=0, description="Duration in time units")
    crew: Optional[CrewRecord] = Field(default=None, description="Crew assignment")
    equipment: list[EquipmentRecord] = Field(default_factory=list, description="Equipment needed")
    dependencies: list[str] = Field(default_factory=list, description="Task codes that must finish first")
    start_interval: int = Field(default=0, alias="startInterval", description="Scheduled start")
    end_interval: int = Field(default=0, alias="endInterval", description="Scheduled end")
    earliest_start: int = Field(default=0, alias="earliestStart")
    latest_start: int = Field(default=0, alias="latestStart")
    slack: int = Field(default=0, description="Delay allowed without moving the project end")
    is_critical: bool = Field(default=False, alias="isCritical")


class ProjectStatistics(BaseModel):
    """Project-level schedule statistics."""
    model_config = ConfigDict(populate_by_name=True)

    total_project_duration: int = Field(
        default=0, alias="totalProjectDuration",
        description="Total project duration in time units (length of critical path)",
    )
    peak_crew_utilization: int = Field(
        default=0, alias="peakCrewUtilization",
        description="Maximum number of crew members needed at any point in time",
    )


class ScheduleRow(BaseModel):
    """
    One scheduled task.

    File: schedule.csv
    """
    task_code: str = Field(description="Unique task identifier")
    operation_name: str = Field(description="Operation performed")
    element_name: Optional[str] = Field(default=None, description="Construction element")
    duration: int = Field(description="Duration in time units")
    crew_name: Optional[str] = Field(default=None, description="Assigned crew")
    crew_count: int = Field(description="Crew members on the task")
    dependencies: Optional[str] = Field(default=None, description="Dependency codes, ';' separated")
    earliest_start: int = Field(description="Earliest start")
    earliest_finish: int = Field(description="Earliest finish")
    latest_start: int = Field(description="Latest start")
    latest_finish: int = Field(description="Latest finish")
    slack: int = Field(description="Latest start minus earliest start")
    is_critical: bool = Field(description="Zero slack")
    start_interval: int = Field(description="Published start")
    end_interval: int = Field(description="Published end")


class CrewUtilizationRow(BaseModel):
    """
    Crew demand at one interval.

    File: crew_utilization.csv
    """
    interval: int = Field(description="Time unit")
    crew_count: int = Field(description="Crew members working during the interval")
