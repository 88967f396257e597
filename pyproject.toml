[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lldkit"
version = "0.1.0"
description = "Small, runnable low-level design examples: adapters, decorators, facades, logging, chess, games, shops, elevators, parking and rate limiters."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "low-level design",
    "design patterns",
    "object-oriented design",
    "rate limiter",
    "parking lot",
    "elevator",
    "tic-tac-toe",
    "snake and ladder",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
lldkit-adapter = "lldkit.adapter:main"
lldkit-decorator = "lldkit.decorator:main"
lldkit-facade = "lldkit.facade:main"
lldkit-logging = "lldkit.logmanager:main"
lldkit-tictactoe = "lldkit.tictactoe:main"
lldkit-catalog = "lldkit.catalog:main"
lldkit-elevator = "lldkit.elevator:main"
lldkit-parking = "lldkit.parking:main"
lldkit-rate-limiter = "lldkit.rate_limiter:main"
lldkit-snake-ladder = "lldkit.snake_ladder:main"

[tool.hatch.build.targets.wheel]
packages = ["lldkit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
