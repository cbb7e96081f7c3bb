"""Reading and writing the tasks file."""

import logging
import os
import stat
import sys
import tempfile
from pathlib import Path

from pydantic import ValidationError

from simple_tasks.api.models import AppState
from simple_tasks.config import Settings, settings as default_settings

logger = logging.getLogger(__name__)

TASKS_FILE_NAME = ".tasks"


def _is_android() -> bool:
    return sys.platform == "android" or "ANDROID_ROOT" in os.environ


def resolve_path(settings: Settings | None = None) -> Path:
    """Get the location of the tasks file for this platform.

    An explicit ``SIMPLE_TASKS_TASKS_FILE`` wins. Otherwise Android apps keep
    the file in their private data directory and desktop platforms keep it in
    the user's home directory.
    """
    settings = settings or default_settings

    override = settings.get_tasks_file()
    if override is not None:
        path = override
    elif _is_android():
        path = Path("/data/data") / settings.app_identifier / TASKS_FILE_NAME
    else:
        path = Path.home() / TASKS_FILE_NAME

    logger.debug(f"Tasks file path: {path}")
    return path


def load(path: Path) -> AppState:
    """Load the app state from ``path``.

    Never raises: a missing, unreadable or malformed file gives an empty
    state so that startup is never blocked by a bad store.
    """
    try:
        data = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        logger.info(f"No tasks file at {path}, starting empty")
        return AppState.empty()
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(f"Failed to read tasks file {path}: {e}")
        return AppState.empty()

    try:
        state = AppState.model_validate_json(data, strict=True)
    except ValidationError as e:
        logger.warning(f"Ignoring malformed tasks file {path}: {e.error_count()} error(s)")
        return AppState.empty()

    ids = [task.id for task in state.tasks]
    if len(set(ids)) != len(ids):
        logger.warning(f"Ignoring tasks file {path}: duplicate task ids")
        return AppState.empty()

    # A hand-edited counter must not hand out an id that is still in use.
    if ids and state.next_task_id <= max(ids):
        logger.warning(
            f"next_task_id {state.next_task_id} is not above existing ids in {path}, "
            f"using {max(ids) + 1}"
        )
        state.next_task_id = max(ids) + 1

    return state


def save(state: AppState, path: Path | None = None) -> None:
    """Write the full state to ``path``, replacing the previous file atomically.

    Raises:
        OSError: If the file could not be written
    """
    path = path or resolve_path()
    path.parent.mkdir(parents=True, exist_ok=True)

    fd, tmp_name = tempfile.mkstemp(prefix=f"{path.name}.", suffix=".tmp", dir=path.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(state.model_dump_json())
            f.flush()
            os.fsync(f.fileno())
        # mkstemp creates 0600; keep whatever mode the existing file had.
        try:
            os.chmod(tmp_name, stat.S_IMODE(path.stat().st_mode))
        except FileNotFoundError:
            pass
        os.replace(tmp_name, path)
    except BaseException:
        _discard_temp(tmp_name)
        raise

    logger.debug(f"Saved {len(state.tasks)} tasks to {path}")


def _discard_temp(name: str) -> None:
    try:
        os.unlink(name)
    except OSError as e:
        logger.debug(f"Could not remove temp file {name}: {e}")
