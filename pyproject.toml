[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "filesync"
version = "0.7.9"
description = "Local-network file sharing: an upload/download HTTP server, Wi-Fi hotspot credentials, a transfer history store and SVG icons"
requires-python = ">=3.10"
keywords = ["file sharing", "file transfer", "wifi", "hotspot", "http server", "svg icons"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Framework :: AsyncIO",
    "Framework :: aiohttp",
    "Topic :: Communications :: File Sharing",
]
dependencies = [
    "aiohttp>=3.9",
    "platformdirs>=3.0",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
    "pytest-asyncio>=0.21",
]

[project.scripts]
filesync-server = "filesync.server:main"

[tool.hatch.build.targets.wheel]
packages = ["filesync"]

[tool.hatch.build.targets.sdist]
include = ["filesync", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
