#!/usr/bin/env python
"""
Build the pysnag model

that's all folks.
"""
import os
import re
import subprocess

from setuptools import setup, Command
from setuptools.command.sdist import sdist as _sdist


def info(x):
    git_arg = ["git"]
    git_arg.extend(x)
    git_info = subprocess.check_output(git_arg).decode()
    return git_info.split('\n')

VERSION_PY = """
# This file is originally generated from Git information by running 'setup.py
# version'

__version__ = '%s'
"""

DEFAULT_VERSION = "1.0.0"

def update_version_py():
    if not os.path.isdir(".git"):
        print("This does not appear to be a Git repository.")
        return
    try:
        ver = info(["describe", "--tags", "--always"])[0]
    except (EnvironmentError, subprocess.CalledProcessError):
        print("unable to run git, leaving src/_version.py alone")
        return
    with open("src/_version.py", "w") as f:
        f.write(VERSION_PY % ver)
    print("set src/_version.py to '%s'" % ver)

def get_version():
    try:
        f = open("src/_version.py")
    except EnvironmentError:
        return DEFAULT_VERSION
    with f:
        for line in f.readlines():
            mo = re.match("__version__ = '([^']+)'", line)
            if mo:
                return mo.group(1)
    return DEFAULT_VERSION

class Version(Command):
    description = "update _version.py from Git repo"
    user_options = []
    boolean_options = []
    def initialize_options(self):
        pass
    def finalize_options(self):
        pass
    def run(self):
        update_version_py()
        print("Version is now", get_version())

class sdist(_sdist):
    def run(self):
        update_version_py()
        # unless we update this, the sdist command will keep using the old
        # version
        self.distribution.metadata.version = get_version()
        return _sdist.run(self)

setup(name="pysnag",
    version=get_version(),
    description="Standing deadwood and coarse woody debris carbon/nitrogen "
                "decomposition model",
    long_description="Snag model, simulates the annual decay, fall and "
                     "soil transfer of standing dead trees, branches and "
                     "coarse roots on forest resource units",
    platforms = ['any'],
    python_requires=">=3.8",
    package_dir = {'snag': 'src'},
    packages = ['snag'],
    install_requires=["numpy", "configobj"],
    extras_require={"plot": ["matplotlib"], "test": ["pytest"]},
    cmdclass={"version": Version, "sdist": sdist },
)
