[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "netbench"
version = "0.1.0"
description = "TCP request/response latency and throughput benchmark client using length-prefixed framing"
requires-python = ">=3.10"
dependencies = []
keywords = ["benchmark", "tcp", "latency", "throughput", "networking"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Benchmark",
    "Topic :: System :: Networking",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
netbench = "netbench.client:main"

[tool.hatch.build.targets.wheel]
packages = ["netbench"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
