import io

import pytest

from ciary.config import (
    Config,
    ensure_config_dir,
    get_config_dir,
    get_config_path,
    get_default_journal_dir,
    load_config,
    load_default_config,
    parse_config,
    save_config,
    setup_first_run,
)


@pytest.fixture
def home(tmp_path, monkeypatch):
    home_dir = tmp_path / "home"
    home_dir.mkdir()
    monkeypatch.setenv("HOME", str(home_dir))
    monkeypatch.setenv("USER", "tester")
    return home_dir


def _answers(*values):
    items = iter(values)
    return lambda: next(items)


def test_default_config(home):
    config = load_default_config()
    assert config.editor_preference == "auto"
    assert config.viewer_preference == "auto"
    assert config.show_ascii_art is True
    assert config.enable_personalization is True
    assert config.preferred_name == "tester"
    assert len(config.journal_directory) > 0
    assert config.journal_directory.startswith("/")


def test_default_name_fallbacks(home, monkeypatch):
    monkeypatch.delenv("USER", raising=False)
    monkeypatch.setenv("USERNAME", "winuser")
    assert load_default_config().preferred_name == "winuser"
    monkeypatch.delenv("USERNAME", raising=False)
    assert load_default_config().preferred_name == "friend"


def test_default_journal_dir_without_documents(home):
    assert get_default_journal_dir() == str(home / ".local" / "share" / "ciary")


def test_default_journal_dir_with_documents(home):
    (home / "Documents").mkdir()
    assert get_default_journal_dir() == str(home / "Documents" / "journal")


def test_default_journal_dir_without_home(monkeypatch):
    monkeypatch.delenv("HOME", raising=False)
    with pytest.raises(RuntimeError):
        get_default_journal_dir()
    assert load_default_config().journal_directory == "./journal"


def test_config_paths(home):
    assert get_config_dir() == home / ".config" / "ciary"
    assert get_config_path() == home / ".config" / "ciary" / "config.conf"


def test_ensure_config_dir_creates_directory(home):
    directory = ensure_config_dir()
    assert directory == home / ".config" / "ciary"
    assert directory.is_dir()
    assert ensure_config_dir() == directory


def test_config_file_parsing(home, tmp_path):
    journal = str(tmp_path / "test_journal")
    text = (
        "preferred_name=TestUser\n"
        f"journal_directory={journal}\n"
        "editor_preference=nano\n"
        "viewer_preference=cat\n"
        "show_ascii_art=false\n"
        "enable_personalization=false\n"
    )
    config = parse_config(text, load_default_config())
    assert config.preferred_name == "TestUser"
    assert config.editor_preference == "nano"
    assert config.viewer_preference == "cat"
    assert config.show_ascii_art is False
    assert config.enable_personalization is False
    assert config.journal_directory == journal


def test_parse_config_ignores_comments_and_unknown_keys():
    base = Config(preferred_name="Base")
    text = (
        "# preferred_name=Commented\n"
        "\n"
        "no equals sign here\n"
        "unknown_key=value\n"
        "  \teditor_preference=  vim\n"
        "show_ascii_art=1\n"
        "enable_personalization=yes\n"
    )
    config = parse_config(text, base)
    assert config.preferred_name == "Base"
    assert config.editor_preference == "vim"
    assert config.show_ascii_art is True
    assert config.enable_personalization is False
    assert base.editor_preference == "auto"


def test_parse_config_truncates_long_values():
    config = parse_config("preferred_name=" + "A" * 200 + "\n", Config())
    assert config.preferred_name == "A" * 63


def test_parse_config_keeps_everything_after_first_equals():
    config = parse_config("journal_directory=/tmp/a=b\n", Config())
    assert config.journal_directory == "/tmp/a=b"


def test_load_config_missing_file_gives_defaults(home, tmp_path):
    config = load_config(tmp_path / "missing.conf")
    assert config == load_default_config()


def test_load_config_from_standard_location(home):
    path = get_config_path()
    path.parent.mkdir(parents=True)
    path.write_text("preferred_name=Alice\nshow_ascii_art=false\n")
    config = load_config()
    assert config.preferred_name == "Alice"
    assert config.show_ascii_art is False
    assert config.editor_preference == "auto"


def test_save_and_load_round_trip(home, tmp_path):
    original = Config(
        preferred_name="Smith-Jones",
        editor_preference="vim",
        viewer_preference="less",
        journal_directory=str(tmp_path / "journal"),
        show_ascii_art=False,
        enable_personalization=True,
    )
    path = save_config(original, tmp_path / "nested" / "config.conf")
    assert path.exists()
    assert load_config(path) == original


def test_saved_file_format(home, tmp_path):
    path = save_config(Config(preferred_name="Bob"), tmp_path / "config.conf")
    lines = path.read_text().splitlines()
    assert lines[0] == "# Ciary Configuration File"
    assert "preferred_name=Bob" in lines
    assert "show_ascii_art=true" in lines
    assert lines[-1] == "enable_personalization=true"


def test_save_config_default_location(home):
    path = save_config(Config(preferred_name="Carol"))
    assert path == home / ".config" / "ciary" / "config.conf"
    assert load_config().preferred_name == "Carol"


def test_setup_first_run_loads_existing(home, tmp_path):
    path = save_config(Config(preferred_name="Existing"), tmp_path / "config.conf")
    out = io.StringIO()
    config = setup_first_run(path, _answers(), out)
    assert config.preferred_name == "Existing"
    assert out.getvalue() == ""


def test_setup_first_run_with_answers(home, tmp_path):
    path = tmp_path / "cfg" / "config.conf"
    out = io.StringIO()
    config = setup_first_run(
        path, _answers("Alice", "~/notes", "n", "N", ""), out
    )
    assert config.preferred_name == "Alice"
    assert config.journal_directory == str(home) + "/notes"
    assert config.enable_personalization is False
    assert config.show_ascii_art is False
    assert "Configuration saved successfully" in out.getvalue()
    assert load_config(path) == config


def test_setup_first_run_empty_answers_keep_defaults(home, tmp_path):
    path = tmp_path / "config.conf"
    out = io.StringIO()
    config = setup_first_run(path, _answers("", "", "", "", ""), out)
    assert config == load_default_config()
    assert path.exists()


def test_setup_first_run_end_of_input(home, tmp_path):
    def closed():
        raise EOFError

    config = setup_first_run(tmp_path / "config.conf", closed, io.StringIO())
    assert config.preferred_name == "tester"
    assert config.enable_personalization is True


def test_setup_first_run_reports_save_failure(home, tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")
    out = io.StringIO()
    config = setup_first_run(
        blocker / "config.conf", _answers("Dave", "", "", "", ""), out
    )
    assert config.preferred_name == "Dave"
    assert "Could not save configuration file" in out.getvalue()