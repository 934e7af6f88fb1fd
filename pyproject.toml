[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "weddinggame"
version = "0.1.0"
description = "Error types, CORS and error-handling WSGI middleware, and upload validation for a wedding game API"
requires-python = ">=3.10"
dependencies = [
    "werkzeug",
]
keywords = ["wsgi", "middleware", "cors", "validation", "errors", "upload"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: WSGI :: Middleware",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["weddinggame"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
