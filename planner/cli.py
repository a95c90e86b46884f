#!/usr/bin/env python3
"""
Construction planner CLI.

Computes the CPM schedule and crew utilization for a JSON task file.

Usage:
    planner schedule data/tasks.json [--output DIR] [--near-critical N]
    planner crew data/tasks.json
    planner --help
"""

import argparse
import sys
from pathlib import Path

from pydantic import ValidationError

from .analysis.critical_path import analyze_critical_path, print_critical_path_report
from .config.settings import settings
from .cpm.crew import compute_crew_utilization
from .cpm.engine import compute_schedule
from .cpm.exceptions import ScheduleError
from .data_loader import load_tasks
from .export import export_schedule
from .utils.logger import configure_logging

EXIT_OK = 0
EXIT_MISSING_FILE = 1
EXIT_INVALID_INPUT = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='planner',
        description='CPM schedule and crew utilization for construction tasks',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  planner schedule data/tasks.json                   # Print schedule report
  planner schedule data/tasks.json --output out      # Also write CSV files
  planner schedule data/tasks.json --near-critical 5 # Widen near-critical band
  planner crew data/tasks.json                       # Crew demand per interval
        """
    )
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Debug logging')

    subparsers = parser.add_subparsers(dest='command', required=True)

    schedule = subparsers.add_parser('schedule', help='Compute the CPM schedule')
    schedule.add_argument('tasks_file', type=Path, help='JSON file with an array of tasks')
    schedule.add_argument('--output', '-o', type=Path, default=None,
                          help='Directory for schedule.csv and crew_utilization.csv')
    schedule.add_argument('--near-critical', type=int, default=settings.NEAR_CRITICAL_THRESHOLD,
                          help=f'Slack threshold for near-critical tasks '
                               f'(default: {settings.NEAR_CRITICAL_THRESHOLD})')
    schedule.add_argument('--show', type=int, default=20,
                          help='Number of critical tasks to list (default: 20)')
    schedule.add_argument('--quiet', '-q', action='store_true',
                          help='Only print the project summary')

    crew = subparsers.add_parser('crew', help='Print crew utilization per interval')
    crew.add_argument('tasks_file', type=Path, help='JSON file with an array of tasks')

    return parser


def run_schedule(args) -> int:
    tasks = load_tasks(args.tasks_file)
    result = compute_schedule(tasks)
    crew = compute_crew_utilization(result.tasks)

    print(f"Total project duration: {result.project_duration}")
    print(f"Peak crew utilization: {crew.peak}")

    if not args.quiet:
        analysis = analyze_critical_path(result, near_critical_threshold=args.near_critical)
        print_critical_path_report(analysis, show=args.show)

    if args.output:
        written = export_schedule(result, crew, args.output)
        for path in written.values():
            print(f"Saved: {path}")

    return EXIT_OK


def run_crew(args) -> int:
    tasks = load_tasks(args.tasks_file)
    result = compute_schedule(tasks)
    crew = compute_crew_utilization(result.tasks)

    print(f"{'interval':>8s}  crew")
    for interval, count in sorted(crew.by_interval.items()):
        marker = '  <- peak' if count == crew.peak and crew.peak > 0 else ''
        print(f"{interval:8d}  {count:4d}{marker}")
    print(f"\nPeak crew utilization: {crew.peak}")

    return EXIT_OK


def main(argv=None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging('planner', level='DEBUG' if args.verbose else None)

    handlers = {
        'schedule': run_schedule,
        'crew': run_crew,
    }

    try:
        return handlers[args.command](args)
    except FileNotFoundError as e:
        print(f"Error: file not found: {e.filename}", file=sys.stderr)
        return EXIT_MISSING_FILE
    except ScheduleError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_INVALID_INPUT
    except ValidationError as e:
        print(f"Error: invalid task data: {e}", file=sys.stderr)
        return EXIT_INVALID_INPUT
    except ValueError as e:
        # malformed JSON
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_INVALID_INPUT


if __name__ == "__main__":
    sys.exit(main())
