[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algosolve"
version = "0.1.0"
description = "Solutions to classic programming-contest problems: graphs, strings, IPv6, knapsack and more"
requires-python = ">=3.10"
keywords = ["algorithms", "competitive-programming", "knapsack", "ipv6", "graphs"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Intended Audience :: Education",
    "Topic :: Education",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
algosolve-forest = "algosolve.forest:main"
algosolve-greedy = "algosolve.greedy:main"
algosolve-html = "algosolve.html_format:main"
algosolve-ipv6 = "algosolve.ipv6:main"
algosolve-partial-sum = "algosolve.partial_sum:main"
algosolve-palindrome = "algosolve.palindrome:main"
algosolve-explosion = "algosolve.explosion:main"
algosolve-word-chain = "algosolve.word_chain:main"
algosolve-knapsack = "algosolve.knapsack:main"

[tool.hatch.build.targets.wheel]
packages = ["algosolve"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
