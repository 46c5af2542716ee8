[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "strtools"
version = "0.1.0"
description = "String and byte utilities: split/join and ASCII case mapping, hex and base64 codecs, MD5, SHA-1, AES-128 and format-driven binary pack/unpack"
requires-python = ">=3.10"
dependencies = []
keywords = ["strings", "hex", "base64", "md5", "sha1", "aes", "pack", "unpack", "binary"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Topic :: Text Processing :: General",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["strtools"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
