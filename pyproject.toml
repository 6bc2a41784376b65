[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "treelab"
version = "0.1.0"
description = "Small, self-checking data structures: a cube value type, a complete binary tree with traversals, and an AVL tree"
requires-python = ">=3.10"
dependencies = []
keywords = ["avl", "binary tree", "tree traversal", "data structures", "balanced tree"]
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
    "Topic :: Education",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
treelab-array-demo = "treelab.array_demo:main"
treelab-traversal-demo = "treelab.traversal_demo:main"
treelab-avl-demo = "treelab.avl_demo:main"

[tool.hatch.build.targets.wheel]
packages = ["treelab"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
