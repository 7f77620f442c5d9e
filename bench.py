#! /usr/bin/env python

import os
import sys

topdir = os.path.dirname(os.path.abspath(sys.argv[0]))
sys.path.insert(0, os.path.join(topdir, "src", "packages"))

from mapset.commandline.main import main

main(sys.argv)
