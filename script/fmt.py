#!/usr/bin/env python

import os
import pathlib
import subprocess
import sys

os.chdir(pathlib.Path(__file__).parents[1])
if "--check" in sys.argv[1:]:
    subprocess.run(["poetry", "run", "black", "--check", "."], check=True)
    subprocess.run(["poetry", "run", "isort", "--check-only", "."], check=True)
else:
    subprocess.run(["poetry", "run", "black", "."], check=True)
    subprocess.run(["poetry", "run", "isort", "."], check=True)
