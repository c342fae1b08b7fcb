[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mqkit"
version = "1.4.14"
description = "Small toolbox: base62, byte packing, 64-bit IDs, UUIDs, AES-CFB, IP helpers, a FIFO queue, a locked map and dataclass reflection"
requires-python = ">=3.10"
keywords = ["base62", "uuid", "aes", "ip", "queue", "dataclass", "utilities"]
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
    "Topic :: Software Development :: Libraries",
]
dependencies = [
    "cryptography",
    "psutil",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["mqkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
