[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tsxlate"
version = "0.1.1"
description = "A language-server proxy that rewrites TypeScript diagnostics into plain-English explanations"
requires-python = ">=3.10"
dependencies = []
keywords = ["typescript", "lsp", "language-server", "diagnostics", "error-messages"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[project.scripts]
tsxlate = "tsxlate.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["tsxlate"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
