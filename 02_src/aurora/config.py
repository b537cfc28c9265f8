"""Project-level configuration and path helpers."""

from pathlib import Path
from typing import Union

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
DATA_DIR = PROJECT_ROOT / "03_data"
LOGS_DIR = PROJECT_ROOT / "04_logs"
DEFAULT_DB_PATH = DATA_DIR / "aurora.db"
DEFAULT_LOG_PATH = LOGS_DIR / "app.log"
DEFAULT_SEQUENCE_PATH = DATA_DIR / "protocol_sequence.txt"
DEFAULT_DOCUMENT_PATH = DATA_DIR / "RCA.pdf"

DATA_DIR.mkdir(parents=True, exist_ok=True)
LOGS_DIR.mkdir(parents=True, exist_ok=True)


PathLike = Union[str, Path]


def resolve_db_path(env_value: PathLike | None = None) -> PathLike:
    """Resolve DATABASE_URL to an absolute path."""
    if not env_value:
        return DEFAULT_DB_PATH

    if str(env_value) == ":memory:":
        return ":memory:"

    return resolve_path(env_value, DEFAULT_DB_PATH)


def resolve_path(env_value: PathLike | None, default: Path) -> Path:
    """Resolve a file path from the environment, relative to the project root."""
    if not env_value:
        return default

    candidate = Path(env_value)
    return candidate if candidate.is_absolute() else PROJECT_ROOT / candidate


def env_float(value: str | None, default: float = 0.0) -> float:
    """Parse a numeric environment value, falling back to default."""
    if value is None or not value.strip():
        return default
    try:
        return float(value)
    except ValueError:
        return default
