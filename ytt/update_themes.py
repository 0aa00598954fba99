"""Rebuild the bundled theme collection from a public set of terminal schemes."""

from __future__ import annotations

import argparse
import json
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path, PurePosixPath
from typing import Any, Iterable

import requests

from ytt.themes import Theme, default_themes_path

CONCURRENT_DOWNLOADS = 6
THEMES_API_URL = (
    "https://api.github.com/repos/mbadolato/iTerm2-Color-Schemes/contents/windowsterminal?ref=master"
)


def list_theme_files(api_url: str = THEMES_API_URL) -> list[dict[str, Any]]:
    """List the JSON theme files in the directory described by ``api_url``."""
    resp = requests.get(api_url, timeout=30)
    if resp.status_code != 200:
        raise RuntimeError(f"GitHub API returned status: {resp.status_code} {resp.reason}")
    contents = resp.json()
    if not isinstance(contents, list):
        raise ValueError("directory listing must be a JSON list")
    return [
        item
        for item in contents
        if isinstance(item, dict)
        and item.get("type") == "file"
        and PurePosixPath(str(item.get("name", ""))).suffix == ".json"
    ]


def theme_from_json(data: dict[str, Any], file_name: str) -> Theme:
    """A theme from a scheme file's JSON, named after the file."""
    theme = Theme.from_dict(data)
    theme.name = file_name.removesuffix(".json")
    return theme


def fetch_theme(item: dict[str, Any]) -> Theme | None:
    """Download one listed theme file; None (with a message) if it fails."""
    try:
        resp = requests.get(item["download_url"], timeout=30)
    except requests.RequestException as exc:
        print("HTTP error:", exc)
        return None
    try:
        data = resp.json()
    except ValueError as exc:
        print("JSON decode error:", exc)
        return None
    if not isinstance(data, dict):
        print("JSON decode error: expected an object in", item["name"])
        return None
    theme = theme_from_json(data, item["name"])
    print("Downloaded:", item["name"])
    return theme


def save_themes(themes: Iterable[Theme], path: str | Path) -> None:
    """Write ``themes`` as a JSON list that ThemeState.load reads."""
    document = [theme.to_dict() for theme in themes]
    Path(path).write_text(json.dumps(document, indent=2), encoding="utf-8")


def main(argv: list[str] | None = None) -> int:
    """Download every theme and save the collection; return the exit status."""
    parser = argparse.ArgumentParser(
        prog="ytt-update-themes", description="Download terminal colour themes for ytt."
    )
    parser.add_argument("-o", "--output", default=str(default_themes_path()), help="where to save the themes")
    parser.add_argument("-j", "--jobs", type=int, default=CONCURRENT_DOWNLOADS, help="parallel downloads")
    parser.add_argument("--source", default=THEMES_API_URL, help="directory listing URL")
    args = parser.parse_args(argv)

    try:
        items = list_theme_files(args.source)
    except (requests.RequestException, RuntimeError, ValueError) as exc:
        print("Error fetching GitHub API:", exc)
        return 1

    with ThreadPoolExecutor(max_workers=max(args.jobs, 1)) as pool:
        themes = [theme for theme in pool.map(fetch_theme, items) if theme is not None]

    try:
        save_themes(themes, args.output)
    except OSError as exc:
        print("Error writing file:", exc)
        return 1
    print("Saved themes to", args.output)
    return 0