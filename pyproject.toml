[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dslab"
version = "0.1.0"
description = "Classic data structures and algorithms with interactive console programs"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data-structures",
    "algorithms",
    "stack",
    "queue",
    "linked-list",
    "binary-search-tree",
    "graph",
    "hashing",
    "tower-of-hanoi",
    "education",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dslab-hanoi = "dslab.hanoi:main"
dslab-stack = "dslab.stack:main"
dslab-infix = "dslab.infix:main"
dslab-queue = "dslab.circular_queue:main"
dslab-list = "dslab.linked_list:main"
dslab-bst = "dslab.bst:main"
dslab-graph = "dslab.graph:main"
dslab-search = "dslab.binary_search:main"
dslab-hash = "dslab.hashing:main"
dslab-students = "dslab.student_db:main"

[tool.hatch.build.targets.wheel]
packages = ["dslab"]

[tool.pytest.ini_options]
addopts = "-ra"
