"""User configuration: defaults, the config file and first-run setup."""

from __future__ import annotations

import dataclasses
import os
import sys
from collections.abc import Callable
from pathlib import Path
from typing import TextIO

CONFIG_DIR = Path(".config") / "ciary"
DATA_DIR = Path(".local") / "share" / "ciary"
CONFIG_FILE = "config.conf"
MAX_NAME_LENGTH = 63
MAX_PATH_LENGTH = 1023
FALLBACK_JOURNAL_DIR = "./journal"


@dataclasses.dataclass
class Config:
    """User preferences."""

    preferred_name: str = "friend"
    editor_preference: str = "auto"
    viewer_preference: str = "auto"
    journal_directory: str = FALLBACK_JOURNAL_DIR
    show_ascii_art: bool = True
    enable_personalization: bool = True


def _home() -> Path:
    home = os.environ.get("HOME")
    if not home:
        raise RuntimeError("HOME is not set")
    return Path(home)


def get_config_dir() -> Path:
    """Return the directory holding the configuration file."""
    return _home() / CONFIG_DIR


def get_config_path() -> Path:
    """Return the path of the configuration file."""
    return get_config_dir() / CONFIG_FILE


def ensure_config_dir() -> Path:
    """Create the configuration directory if needed and return it."""
    directory = get_config_dir()
    directory.mkdir(parents=True, exist_ok=True)
    return directory


def get_default_journal_dir() -> str:
    """Return ~/Documents/journal if ~/Documents exists, else the data dir."""
    home = _home()
    if (home / "Documents").is_dir():
        return str(home / "Documents" / "journal")
    return str(home / DATA_DIR)


def load_default_config() -> Config:
    """Return the configuration used when no file overrides it."""
    user = os.environ.get("USER") or os.environ.get("USERNAME") or "friend"
    try:
        journal = get_default_journal_dir()
    except RuntimeError:
        journal = FALLBACK_JOURNAL_DIR
    return Config(
        preferred_name=user[:MAX_NAME_LENGTH],
        journal_directory=journal,
    )


def _is_true(value: str) -> bool:
    return value in ("true", "1")


def parse_config(text: str, config: Config) -> Config:
    """Apply the ``key=value`` lines of ``text`` on top of ``config``.

    Comment lines (starting with ``#``), blank lines, lines without ``=``
    and unknown keys are ignored. Returns a new Config.
    """
    changes: dict[str, object] = {}
    for line in text.splitlines():
        if not line or line.startswith("#"):
            continue
        key, sep, value = line.partition("=")
        if not sep:
            continue
        key = key.lstrip(" \t")
        value = value.lstrip(" \t")
        if key in ("preferred_name", "editor_preference", "viewer_preference"):
            changes[key] = value[:MAX_NAME_LENGTH]
        elif key == "journal_directory":
            changes[key] = value[:MAX_PATH_LENGTH]
        elif key in ("show_ascii_art", "enable_personalization"):
            changes[key] = _is_true(value)
    return dataclasses.replace(config, **changes)


def load_config(path: Path | str | None = None) -> Config:
    """Load the configuration file, falling back to defaults if it is absent."""
    path = Path(path) if path is not None else get_config_path()
    defaults = load_default_config()
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return defaults
    return parse_config(text, defaults)


def save_config(config: Config, path: Path | str | None = None) -> Path:
    """Write ``config`` to ``path`` (the standard location by default)."""
    path = Path(path) if path is not None else get_config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    ascii_art = "true" if config.show_ascii_art else "false"
    personalization = "true" if config.enable_personalization else "false"
    text = (
        "# Ciary Configuration File\n"
        "# This file is automatically generated and can be edited manually\n\n"
        "# Your preferred name (how Ciary addresses you)\n"
        f"preferred_name={config.preferred_name}\n\n"
        "# Directory where journal entries are stored\n"
        f"journal_directory={config.journal_directory}\n\n"
        "# Preferred text editor (auto, nvim, vim, nano, emacs, vi)\n"
        f"editor_preference={config.editor_preference}\n\n"
        "# Preferred file viewer (auto, less, more, cat)\n"
        f"viewer_preference={config.viewer_preference}\n\n"
        "# Show ASCII art on startup (true/false)\n"
        f"show_ascii_art={ascii_art}\n\n"
        "# Enable personalized messages (true/false)\n"
        f"enable_personalization={personalization}\n"
    )
    path.write_text(text, encoding="utf-8")
    return path


def _expand_home(text: str) -> str:
    if text.startswith("~/"):
        home = os.environ.get("HOME")
        if home:
            return home + text[1:]
    return text


def setup_first_run(
    path: Path | str | None = None,
    input_func: Callable[[], str] | None = None,
    output: TextIO | None = None,
) -> Config:
    """Load the configuration, asking the user for preferences on first run.

    If the configuration file already exists it is simply loaded. Otherwise
    the user is asked a few questions, and the answers are saved.
    """
    path = Path(path) if path is not None else get_config_path()
    if path.exists():
        return load_config(path)

    read = input_func if input_func is not None else input
    out = output if output is not None else sys.stdout

    def ask(prompt: str) -> str:
        out.write(prompt)
        out.flush()
        try:
            return read().rstrip("\n")
        except EOFError:
            return ""

    out.write("🌟 Welcome to Ciary! 🌟\n\n")
    out.write("It looks like this is your first time running Ciary.\n")
    out.write(
        "Let's set up a few preferences to make your experience more personal.\n\n"
    )

    config = load_default_config()

    name = ask(
        f"What would you like me to call you? (default: {config.preferred_name}): "
    )
    if name:
        config.preferred_name = name[:MAX_NAME_LENGTH]

    directory = ask(
        "\nWhere would you like to store your journal entries?\n"
        f"(default: {config.journal_directory}): "
    )
    if directory:
        config.journal_directory = _expand_home(directory)[:MAX_PATH_LENGTH]

    answer = ask("\nWould you like personalized welcome messages? (Y/n): ")
    if answer[:1] in ("n", "N"):
        config.enable_personalization = False

    answer = ask("Show ASCII art on startup? (Y/n): ")
    if answer[:1] in ("n", "N"):
        config.show_ascii_art = False

    try:
        save_config(config, path)
    except OSError:
        out.write("\n❌ Warning: Could not save configuration file.\n")
        out.write("Using default settings for this session.\n\n")
    else:
        out.write("\n✅ Configuration saved successfully!\n")
        out.write(f"You can edit your preferences anytime in: {path}\n\n")
    ask("Press Enter to continue...")
    return config