"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os
from pathlib import Path

import dotenv

from balance_scale.infrastructure.logging.logger import get_app_logger
from balance_scale.utils.utils import get_project_root


SUPPORTED_BACKENDS = ("json", "sqlalchemy")


@dataclass(frozen=True)
class TrackerSettings:
    """Settings for selecting storage locations.

    Attributes:
        backend: Entries storage backend (json or sqlalchemy).
        data_file: JSON file holding the entries for the json backend.
        db_url: SQLAlchemy URL for the sqlalchemy backend.
        snapshot_file: Shared snapshot file read by the widget.
    """

    backend: str
    data_file: Path
    db_url: str
    snapshot_file: Path

    @classmethod
    def from_env(cls) -> "TrackerSettings":
        """Build settings from environment variables and ``.env``.

        Returns:
            TrackerSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        data_dir = get_project_root() / "data"

        backend = os.getenv("BALANCE_SCALE_BACKEND", "json").strip().lower()
        if backend not in SUPPORTED_BACKENDS:
            logger.warning(
                f"Unknown BALANCE_SCALE_BACKEND '{backend}', using json"
            )
            backend = "json"

        data_file = cls._path_from_env(
            "BALANCE_SCALE_DATA_FILE",
            data_dir / "entries.json",
        )
        snapshot_file = cls._path_from_env(
            "BALANCE_SCALE_SNAPSHOT_FILE",
            data_dir / "widget_snapshot.json",
        )
        db_url = os.getenv("BALANCE_SCALE_DB_URL") or (
            f"sqlite:///{data_dir / 'balance_scale.db'}"
        )
        return cls(
            backend=backend,
            data_file=data_file,
            db_url=db_url,
            snapshot_file=snapshot_file,
        )

    @staticmethod
    def _path_from_env(name: str, default: Path) -> Path:
        """Return the path stored in an environment variable.

        Args:
            name: Environment variable to read.
            default: Path used when the variable is unset or blank.

        Returns:
            Path: Absolute path.
        """
        raw_path = os.getenv(name, "").strip()
        if not raw_path:
            return default
        return Path(raw_path).expanduser().resolve()


__all__ = ["TrackerSettings", "SUPPORTED_BACKENDS"]
