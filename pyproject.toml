[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "taskmaster"
version = "0.1.0"
description = "Process supervisor configuration loading, a one-shot control prompt and a demo XML-RPC service"
requires-python = ">=3.10"
dependencies = []
keywords = ["supervisor", "process", "daemon", "configuration", "ini", "xml-rpc"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Environment :: Console",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Systems Administration",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
taskmasterd = "taskmaster.cli:main"
taskmaster-rpcserver = "taskmaster.rpcserver:main"
taskmaster-rpcclient = "taskmaster.rpcclient:main"

[tool.hatch.build.targets.wheel]
packages = ["taskmaster"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
