"""
Configuration settings for the construction planner.
Load configuration from environment variables or a .env file.
"""
import os
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables from .env file
env_file = Path(__file__).parent.parent.parent / '.env'
if env_file.exists():
    load_dotenv(env_file)


def _env_flag(name: str, default: str = 'false') -> bool:
    return os.getenv(name, default).strip().lower() in ('1', 'true', 'yes', 'on')


class Settings:
    """Application settings loaded from environment variables."""

    # Project paths
    PROJECT_ROOT = Path(__file__).parent.parent.parent
    DATA_DIR = PROJECT_ROOT / 'data'

    # Logging
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    LOG_DIR = Path(os.getenv('PLANNER_LOG_DIR', str(PROJECT_ROOT / 'logs')))
    LOG_TO_FILE = _env_flag('PLANNER_LOG_TO_FILE')

    # ============================================================================
    # Task data
    # ============================================================================
    TASKS_DATA_FILE = Path(os.getenv('PLANNER_TASKS_FILE', str(DATA_DIR / 'tasks.json')))
    OUTPUT_DIR = Path(os.getenv('PLANNER_OUTPUT_DIR', str(DATA_DIR / 'output')))

    # ============================================================================
    # Analysis
    # ============================================================================
    # Tasks with 0 < slack <= threshold are reported as near-critical
    NEAR_CRITICAL_THRESHOLD = int(os.getenv('PLANNER_NEAR_CRITICAL_THRESHOLD', '2'))

    @classmethod
    def validate_required_settings(cls) -> list[str]:
        """
        Validate that settings hold usable values.
        Returns list of problems found.
        """
        problems = []

        if cls.NEAR_CRITICAL_THRESHOLD < 0:
            problems.append('PLANNER_NEAR_CRITICAL_THRESHOLD must be zero or positive')

        if cls.LOG_LEVEL.upper() not in ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'):
            problems.append(f'LOG_LEVEL has unknown value: {cls.LOG_LEVEL}')

        return problems


# Create settings instance
settings = Settings()
