[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hftsim"
version = "0.1.0"
description = "Toy high-frequency trading simulators: an inventory-aware passive market maker and a z-score pair trader"
requires-python = ">=3.11"
dependencies = []
keywords = [
    "trading",
    "market-making",
    "statistical-arbitrage",
    "pairs-trading",
    "simulation",
    "asyncio",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Financial and Insurance Industry",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Framework :: AsyncIO",
    "Topic :: Office/Business :: Financial :: Investment",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[project.scripts]
hftsim-mm = "hftsim.marketmaking.app:main"
hftsim-statarb = "hftsim.statarb.app:main"

[tool.hatch.build.targets.wheel]
packages = ["hftsim"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py311"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.11"
warn_unused_ignores = true
warn_redundant_casts = true
