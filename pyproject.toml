[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "swaggerserve"
version = "0.1.0"
description = "Serve Swagger UI and OpenAPI specifications from a WSGI application, and fetch a trimmed Swagger UI bundle."
requires-python = ">=3.10"
dependencies = []
keywords = ["openapi", "swagger", "swagger-ui", "wsgi", "documentation"]
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
    "Topic :: Internet :: WWW/HTTP :: WSGI :: Application",
    "Topic :: Software Development :: Documentation",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["swaggerserve"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
