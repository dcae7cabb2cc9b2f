[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "courseshop"
version = "1.0.0"
description = "Course shopping cart, receipts with IGV tax, and client and user records for an online learning platform"
requires-python = ">=3.10"
dependencies = []
keywords = ["courses", "receipt", "shopping-cart", "point-of-sale", "igv"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
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

[tool.hatch.build.targets.wheel]
packages = ["courseshop"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
