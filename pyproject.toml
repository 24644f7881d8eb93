[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "shopfront"
version = "0.1.0"
description = "A small text shop: product catalogue, search and filtering, shopping cart, checkout and user accounts"
requires-python = ">=3.10"
dependencies = []
keywords = ["shop", "cart", "inventory", "checkout", "point-of-sale"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Point-Of-Sale",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
shopfront = "shopfront.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["shopfront"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]
