[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "osdrills"
version = "0.1.0"
description = "Small operating-systems exercises: banker's algorithm, dining philosophers, and a few warm-ups"
requires-python = ">=3.10"
dependencies = []
keywords = ["bankers-algorithm", "dining-philosophers", "concurrency", "threads", "asyncio", "exercises"]
classifiers = [
    "Development Status :: 4 - Beta",
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
test = ["pytest", "pytest-asyncio"]

[project.scripts]
osdrills-hexb64 = "osdrills.hexb64:main"
osdrills-hello = "osdrills.hello:main"
osdrills-guess = "osdrills.guess:main"
osdrills-bankers = "osdrills.bankers:main"
osdrills-monitor-philosophers = "osdrills.monitor_philosophers:main"
osdrills-async-philosophers = "osdrills.async_philosophers:main"

[tool.hatch.build.targets.wheel]
packages = ["osdrills"]

[tool.pytest.ini_options]
addopts = "-ra"
