[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "treceval"
version = "0.1.0"
description = "Retrieval evaluation measures: precision, MAP, nDCG, bpref, infAP, G and preference measures"
requires-python = ">=3.10"
dependencies = []
keywords = ["information retrieval", "evaluation", "trec", "ndcg", "map", "bpref"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Information Analysis",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools]
packages = ["treceval"]

[tool.pytest.ini_options]
addopts = "-ra"
