import os
from dataclasses import dataclass
from importlib.resources import files
from pathlib import Path

DEFAULT_SNAPSHOT = Path(str(files("acc_jabra_ui") / "public" / "index.html"))
SNAPSHOT_ENV = "ACC_JABRA_SNAPSHOT"


class SnapshotLoadError(Exception):
    def __init__(self, path, reason):
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


class SnapshotNotFound(SnapshotLoadError):
    pass


class SnapshotReadError(SnapshotLoadError):
    pass


@dataclass(frozen=True)
class Snapshot:
    """Markup read once from disk; shared read-only by every case."""

    path: Path
    markup: str


def default_snapshot_path():
    override = os.getenv(SNAPSHOT_ENV)
    if override:
        return Path(override)
    return DEFAULT_SNAPSHOT


def load_snapshot(path=None):
    path = Path(path) if path is not None else default_snapshot_path()
    try:
        markup = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise SnapshotNotFound(path, "file not found") from None
    except (OSError, UnicodeDecodeError) as exc:
        raise SnapshotReadError(path, str(exc)) from exc
    return Snapshot(path=path, markup=markup)
