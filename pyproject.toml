[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "svnshell"
version = "0.1.0"
description = "A restricted login shell that only allows svnserve tunnels and whitelisted commands"
requires-python = ">=3.10"
keywords = ["svn", "subversion", "svnserve", "ssh", "restricted shell", "login shell"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Version Control",
    "Topic :: System :: Shells",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
svn-shell = "svnshell.shell:main"

[tool.hatch.build.targets.wheel]
packages = ["svnshell"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
