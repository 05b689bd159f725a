[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hpclab"
version = "0.1.0"
description = "Algorithm exercises, parallel-processing experiments, resource-management helpers and IPC demos"
requires-python = ">=3.10"
keywords = [
    "algorithms",
    "benchmark",
    "ipc",
    "object-pool",
    "expression-templates",
    "lru-cache",
    "shared-memory",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: System :: Benchmark",
]
dependencies = [
    "numpy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
hpclab-linked = "hpclab.linked:main"
hpclab-transpose = "hpclab.matrix_ops:main"
hpclab-parentheses = "hpclab.parentheses:main"
hpclab-benchmark = "hpclab.benchmark:main"
hpclab-buffer = "hpclab.memory_buffer:main"
hpclab-pool = "hpclab.object_pool:main"
hpclab-expression = "hpclab.expression:main"
hpclab-file-producer = "hpclab.ipc.shared_files:producer_main"
hpclab-file-consumer = "hpclab.ipc.shared_files:consumer_main"
hpclab-pipe = "hpclab.ipc.pipes:pipe_main"
hpclab-fifo-writer = "hpclab.ipc.pipes:fifo_writer_main"
hpclab-fifo-reader = "hpclab.ipc.pipes:fifo_reader_main"
hpclab-shm-writer = "hpclab.ipc.shared_memory:writer_main"
hpclab-shm-reader = "hpclab.ipc.shared_memory:reader_main"

[tool.hatch.build.targets.wheel]
packages = ["hpclab"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
