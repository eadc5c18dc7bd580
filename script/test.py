#!/usr/bin/env python

"""Runs the test suite, --fast skips the formatting and lint checks."""

import os
import pathlib
import subprocess
import sys

os.chdir(pathlib.Path(__file__).parents[1])
args = [arg for arg in sys.argv[1:] if arg != "--fast"]
if "--fast" in sys.argv[1:]:
    args = ["--ignore", "tests/test_codebase.py", *args]
subprocess.run(["poetry", "run", "pytest", *args], check=True)
