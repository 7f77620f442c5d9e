#! /usr/bin/env python

from setuptools import setup

package_dirs = {
    "mapset": "src/packages/mapset",
    }
packages = [
    "mapset",
    "mapset.commandline",
    ]
versionDict = {}
with open("src/packages/mapset/version.py") as fp:
    exec(fp.read(), versionDict)
common_setup_options = {
    "name": "mapset",
    "version": versionDict["version"],
    "description": "Sets of hashable elements backed by dictionaries.",
    "package_dir": package_dirs,
    "packages": packages,
    "scripts": ["bench.py"],
    "license": "BSD",
    "python_requires": ">=3.8",
    "extras_require": {
        "test": ["pytest"],
        "check": ["pylint"],
        },
}

def run(**setup_options):
    options = common_setup_options.copy()
    options.update(setup_options)
    setup(**options)

if __name__ == "__main__":
    run()
