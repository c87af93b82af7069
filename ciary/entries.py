"""Journal entry files: locating, counting, creating and opening them."""

from __future__ import annotations

import datetime
import shutil
import subprocess
from pathlib import Path

from ciary.config import MAX_PATH_LENGTH, Config
from ciary.dates import _DateLike

EDITORS = ("nvim", "vim", "nano", "emacs", "vi")
PAGERS = ("less", "more", "cat")
FALLBACK_EDITOR = "vi"
TIME_HEADER_PREFIX = "## "


def ensure_journal_dir(config: Config) -> Path:
    """Create the journal directory and its parents if needed; return it."""
    directory = Path(config.journal_directory)
    directory.mkdir(parents=True, exist_ok=True)
    return directory


def get_entry_path(date: _DateLike, config: Config) -> Path:
    """Return the file holding the entries of ``date``.

    Raises ValueError if the resulting path would be too long.
    """
    name = f"{date.year:04d}-{date.month:02d}-{date.day:02d}.md"
    path = Path(config.journal_directory) / name
    if len(str(path)) > MAX_PATH_LENGTH:
        raise ValueError(f"entry path too long: {path}")
    return path


def entry_exists(date: _DateLike, config: Config) -> bool:
    """Return True when an entry file exists for ``date``."""
    try:
        return get_entry_path(date, config).exists()
    except ValueError:
        return False


def count_entries(date: _DateLike, config: Config) -> int:
    """Count the time sections (lines starting with ``## ``) of a day."""
    try:
        path = get_entry_path(date, config)
        with path.open(encoding="utf-8", errors="replace") as handle:
            return sum(1 for line in handle if line.startswith(TIME_HEADER_PREFIX))
    except (ValueError, OSError):
        return 0


def append_entry_header(
    date: _DateLike,
    entry_time: datetime.time | None,
    config: Config,
) -> Path:
    """Append a new time section to the entry file of ``date``.

    A new file starts with a ``# YYYY-MM-DD`` header; an existing one gets a
    blank line before the new section. ``entry_time`` defaults to now.
    Returns the path of the entry file.
    """
    ensure_journal_dir(config)
    path = get_entry_path(date, config)
    when = entry_time if entry_time is not None else datetime.datetime.now().time()
    is_new = not path.exists() or path.stat().st_size == 0
    with path.open("a", encoding="utf-8") as handle:
        if is_new:
            handle.write(f"# {date.year:04d}-{date.month:02d}-{date.day:02d}\n\n")
        else:
            handle.write("\n")
        handle.write(
            f"{TIME_HEADER_PREFIX}{when.hour:02d}:{when.minute:02d}:{when.second:02d}\n\n"
        )
    return path


def program_available(name: str) -> bool:
    """Return True when ``name`` can be found on the search path."""
    return shutil.which(name) is not None


def _find_program(preference: str, candidates: tuple[str, ...]) -> str | None:
    if preference != "auto" and program_available(preference):
        return preference
    return next((name for name in candidates if program_available(name)), None)


def get_actual_editor(config: Config) -> str:
    """Return the editor that will be used, falling back to ``vi``."""
    return _find_program(config.editor_preference, EDITORS) or FALLBACK_EDITOR


def get_actual_viewer(config: Config) -> str | None:
    """Return the pager that will be used, or None if none is available."""
    return _find_program(config.viewer_preference, PAGERS)


def open_entry_in_editor(
    date: _DateLike,
    config: Config,
    entry_time: datetime.time | None = None,
) -> bool:
    """Add a time section to the day's entry and open it in an editor.

    Returns True when the editor exited successfully. Raises RuntimeError
    when no editor can be found.
    """
    path = append_entry_header(date, entry_time, config)
    editor = _find_program(config.editor_preference, EDITORS)
    if editor is None:
        raise RuntimeError("no suitable editor found")
    result = subprocess.run([editor, str(path)], check=False)
    return result.returncode == 0


def view_entry(date: _DateLike, config: Config) -> bool:
    """Show the day's entry in a pager.

    Returns True when the pager exited successfully. Raises
    FileNotFoundError when there is no entry for ``date`` and RuntimeError
    when no pager can be found.
    """
    if not entry_exists(date, config):
        raise FileNotFoundError(
            f"No entries found for {date.year:04d}-{date.month:02d}-{date.day:02d}"
        )
    path = get_entry_path(date, config)
    viewer = get_actual_viewer(config)
    if viewer is None:
        raise RuntimeError("no suitable pager found")
    result = subprocess.run([viewer, str(path)], check=False)
    if result.returncode != 0:
        return False
    if viewer == "cat":
        print("\nPress Enter to continue...")
        try:
            input()
        except EOFError:
            pass
    return True