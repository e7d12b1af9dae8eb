[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "patternkit"
version = "0.1.0"
description = "Small, runnable concurrency and data-handling patterns: resource pools, worker pools, timed runners, fan-out search, semaphores, feed matching and more."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "concurrency",
    "threading",
    "pool",
    "worker-pool",
    "semaphore",
    "rss",
    "patterns",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
patternkit-wordcount = "patternkit.words:main"
patternkit-pool = "patternkit.pool:main"
patternkit-work = "patternkit.work:main"
patternkit-runner = "patternkit.runner:main"
patternkit-engines = "patternkit.engines:main"
patternkit-semaphore = "patternkit.semaphore:main"
patternkit-rss = "patternkit.rss:main"
patternkit-serve = "patternkit.handlers:main"
patternkit-copy = "patternkit.copier:main"
patternkit-contacts = "patternkit.contacts:main"
patternkit-logs = "patternkit.logs:main"
patternkit-tennis = "patternkit.tennis:main"
patternkit-relay = "patternkit.relay:main"
patternkit-tasks = "patternkit.tasks:main"
patternkit-counters = "patternkit.counters:main"
patternkit-primes = "patternkit.primes:main"

[tool.hatch.build.targets.wheel]
packages = ["patternkit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
