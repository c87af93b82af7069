# ciary

Building blocks for a small diary: calendar arithmetic, a user
configuration file, one Markdown file per day with a `## HH:MM:SS` section
for every entry, the state of a month calendar view, and personalised
greetings.

## Installing

```
pip install .
```

There are no third-party dependencies.

## Modules

### `ciary.dates`

- `is_leap_year(year)`, `days_in_month(month, year)` (raises `ValueError`
  for a month outside 1..12).
- `day_of_week(year, month, day)`: 0 for Sunday through 6 for Saturday.
- `get_current_date()`, `is_today(date)`, `date_add_days(date, days)`.
- `date_compare(a, b)`: the difference of the first of year, month, day
  that differs; negative, zero or positive.

### `ciary.config`

`Config` is a dataclass with `preferred_name`, `editor_preference`,
`viewer_preference`, `journal_directory`, `show_ascii_art` and
`enable_personalization`.

- `load_default_config()`: the name comes from `$USER`, then `$USERNAME`,
  then `friend`; the journal directory is `~/Documents/journal` when
  `~/Documents` exists, otherwise `~/.local/share/ciary`; editor and viewer
  are `auto`; both flags are on.
- `get_config_path()` is `~/.config/ciary/config.conf`;
  `ensure_config_dir()` creates its directory.
- `parse_config(text, config)` applies `key=value` lines and returns a new
  `Config`; comments, blank lines and unknown keys are ignored, and
  booleans are true only for `true` or `1`.
- `load_config(path=None)` falls back to the defaults if the file is
  missing; `save_config(config, path=None)` writes a commented file.
- `setup_first_run(path=None, input_func=None, output=None)` loads an
  existing file, or asks for a name, a journal directory (`~/` is
  expanded) and the two flags, then saves the answers.

A configuration file looks like this:

```
preferred_name=Alex
journal_directory=/home/alex/Documents/journal
editor_preference=auto
viewer_preference=auto
show_ascii_art=true
enable_personalization=true
```

### `ciary.entries`

Each day is a file named `YYYY-MM-DD.md` in the journal directory:

```
# 2024-07-15

## 09:30:00

Morning thoughts.
```

- `get_entry_path(date, config)`, `entry_exists(date, config)`,
  `ensure_journal_dir(config)`.
- `count_entries(date, config)`: the number of `## ` lines, 0 if there is
  no file.
- `append_entry_header(date, entry_time, config)`: starts a new file with
  the date header, or adds a blank line to an existing one, then appends
  a time header (the current time when `entry_time` is `None`).
- `get_actual_editor(config)`: the preferred editor if it is on the
  `PATH`, else the first of `nvim`, `vim`, `nano`, `emacs`, `vi`, else
  `vi`. `get_actual_viewer(config)` does the same with `less`, `more`,
  `cat`, returning `None` when none is found.
- `open_entry_in_editor(date, config, entry_time=None)` appends a time
  header and runs the editor on the file; `view_entry(date, config)` runs
  the pager (raising `FileNotFoundError` when the day has no entry). Both
  return whether the program exited successfully and raise `RuntimeError`
  when no program is found.

### `ciary.navigation`

`AppState` holds the displayed month (`current_date`), the
`selected_date`, a `Config` and a `Mode` (`CALENDAR` or `HELP`). Its
methods `move_left`, `move_right`, `move_up`, `move_down`,
`previous_month`, `next_month`, `previous_year` and `next_year` move the
selection; moving by month or year keeps the day, clamped to the length
of the new month.

`month_grid(year, month)` returns the weeks of a month, Sunday first,
with `None` for blank cells. `month_title`, `status_text` and
`instructions_text` return the heading, the status line and the key
summary of a month view.

### `ciary.greetings`

`generate_welcome_message(config, now=None, rng=None)` and
`generate_goodbye_message(config, now=None, rng=None)` build messages that
depend on the date and hour (New Year, Christmas, Halloween, Monday
morning, Friday evening, late night). `get_time_greeting`, `get_day_phase`,
`get_season` and `get_season_info` return the phrases they use. Pass a
`random.Random` as `rng` for repeatable output.

## Example

```python
from ciary.config import load_default_config
from ciary.dates import get_current_date
from ciary.entries import append_entry_header, count_entries
from ciary.navigation import AppState, month_grid, month_title

config = load_default_config()
today = get_current_date()
append_entry_header(today, None, config)
print(count_entries(today, config))

state = AppState(config=config)
state.next_month()
print(month_title(state.current_date.year, state.current_date.month))
print(month_grid(2024, 7))
```

## What it does not do

The package has no interactive calendar screen and installs no command;
the navigation state and view texts are there for a screen to be built
on. It does not export entries to HTML, Markdown or PDF.

## Tests

```
pip install .[test]
pytest
```