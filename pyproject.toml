[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ytt"
version = "0.1.0"
description = "Terminal browser for YouTube playlists with themable, searchable list views and a pop-up menu"
requires-python = ">=3.11"
keywords = ["youtube", "playlist", "terminal", "tui", "yt-dlp", "themes"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio :: Players",
]
dependencies = [
    "blessed",
    "wcwidth",
    "requests",
    "tomli-w",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[project.scripts]
ytt = "ytt.app:main"
ytt-update-themes = "ytt.update_themes:main"

[tool.hatch.build.targets.wheel]
packages = ["ytt"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py311"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]
