# ytt

A terminal program for YouTube playlists. The playlists you follow are
listed by title and channel, in a paginated list you can search, and
everything is drawn in a colour theme that you pick from inside the program.

Playlist metadata comes from `yt-dlp`. On start, if it is not there yet, the
`yt-dlp` executable is downloaded into `~/.cache/ytt` (`yt-dlp`,
`yt-dlp.exe` or `yt-dlp_macos`, depending on the system). Playlist metadata
is cached in the same directory as one `<playlist id>.json` file per
playlist; a cached playlist is not fetched again until the cache is cleared.

## Installing

```
pip install .
```

Python 3.11 or newer is required.

## Themes first

`ytt` reads its colour themes from `themes.json` inside the installed `ytt`
package directory. If that file is missing or holds no themes, `ytt` prints
a `themes:` message and exits with status 1. Build it with:

```
ytt-update-themes
```

This lists the Windows Terminal colour schemes of a public scheme
repository, downloads them in parallel and saves them as a JSON list.

| Option              | Meaning                                           |
|---------------------|---------------------------------------------------|
| `-o`, `--output`    | Where to save the themes (default: the package's `themes.json`) |
| `-j`, `--jobs`      | Number of parallel downloads (default 6)          |
| `--source`          | Directory listing URL to read the schemes from    |

Files that fail to download or decode are reported and skipped.

## Usage

Start the program:

```
ytt
```

Other commands:

| Command                       | What it does                                                   |
|-------------------------------|----------------------------------------------------------------|
| `ytt help` / `ytt -h`         | Print the help text                                            |
| `ytt add ID...` / `ytt -a ID...` | Add playlist IDs to the configuration, then start           |
| `ytt refresh` / `ytt -r`      | Delete cached playlist metadata, then start                    |
| `ytt config` / `ytt -c`       | Open the configuration directory in the file manager           |

Any other first argument prints the help text.

A playlist ID is `PL` followed by 32 letters, digits, `_` or `-`. If any
given ID is invalid, each invalid one is reported, nothing is saved and the
program does not start. IDs already present are skipped.

```
ytt add PLxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxx
```

## Keys and mouse

The menu is open when the program starts.

| Input                   | Action                                                  |
|-------------------------|---------------------------------------------------------|
| `space`                 | Open or close the menu at the centre of the screen      |
| right click             | Open or close the menu at the mouse pointer             |
| left click outside menu | Close the menu                                          |
| `esc`                   | Close the menu; in a list, leave search                 |
| `p` (menu open)         | Go to the playlist picker                               |
| `t` (menu open)         | Go to the theme picker                                  |
| click a menu entry      | Go to that view                                         |
| `/`                     | Start or stop searching the current list                |
| `up`/`k`, `down`/`j`    | Move the cursor; it moves on to the next or previous page at the edges |
| `left`/`h`, `right`/`l`, wheel | Change page                                      |
| `tab`, `shift+tab`      | Switch tabs in the theme picker                         |
| `enter`, left click     | In the theme picker, choose the theme or colour         |
| `q`, `ctrl+c`           | Quit                                                    |

While searching, typed characters are added to the query and `backspace`
removes the last one; entries whose name or description contain the query
(ignoring case) are shown. `q` still quits while searching.

The theme picker has three tabs: **Themes**, **Accent Color** and
**Selection Color**. The current choice in each list blinks. Every choice
takes effect at once and is saved to the configuration file.

## Configuration

Settings live in `~/.config/ytt/config.toml`; the file is created empty if
it does not exist, and a file that is not valid TOML is treated as empty.

```toml
ThemeName = "Dracula"
ThemeAccent = "BrightPurple"
ThemeSelectionColor = "ThemeDefault"
Playlists = ["PLxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxx"]
```

Accent and selection colours are one of `ThemeDefault`, `Red`, `Green`,
`Blue`, `White`, `Purple`, `Yellow`, `Pink`, `Cyan`, `BrightWhite`,
`BrightPurple`, `BrightRed`, `BrightGreen`, `BrightBlue`, `BrightYellow` or
`BrightCyan`. For the accent, `ThemeDefault` and any name without a palette
slot (such as `Pink`) mean the theme's red; for the selection they mean the
theme's cursor colour.

At start-up both the accent and the selection colour are taken from
`ThemeAccent`; `ThemeSelectionColor` is written when you pick a selection
colour but is not read back on the next start.

## What it does not do

`ytt` does not play audio. There is no audio output or stream decoding, and
choosing a playlist in the playlist picker does nothing beyond moving the
cursor. `ytt.player.Playback` offers seeking, pause/resume, volume (clamped
to 0–150) and an `HH:MM:SS` position for a player and reader object handed
to it, but nothing in the program creates one.

## Using the modules

Some parts are usable on their own:

- `ytt.overlay` — `overlay()` and `overlay_center()` place one block of
  ANSI-coloured text over another; `string_width()`, `strip_ansi()` and
  `truncate()` measure and cut such text.
- `ytt.config.Config` — `load()`, `save()`, `add_playlists()` and
  `remove_playlist()`; `is_valid_playlist_id()` checks an ID.
- `ytt.playlists.PlaylistStore` — `fetch()` a playlist from the cache or
  through `yt-dlp`; `Playlist.from_dict()` / `to_dict()`.
- `ytt.ytdlp` — `download_ytdlp()` and `run_ytdlp()`, which raise
  `YtDlpError` on failure or on any output to standard error.
- `ytt.themes.ThemeState` — load, activate and query themes.

## Development

```
pip install -e ".[test]"
pytest
```