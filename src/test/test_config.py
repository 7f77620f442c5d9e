#! /usr/bin/env python

import io
import os
import shutil
import sys
import tempfile
import unittest

if __name__ == "__main__":
    libdir = os.path.realpath(
        os.path.join(os.path.dirname(sys.argv[0]), "..", "packages"))
    sys.path.insert(0, libdir)

from mapset.common import MapsetError
from mapset.config import *

class TestConfig(unittest.TestCase):
    def setUp(self):
        self.tmpdir = tempfile.mkdtemp()
        self.config = Config()

    def tearDown(self):
        shutil.rmtree(self.tmpdir)
        del self.config

    def writeFile(self, contents):
        location = os.path.join(self.tmpdir, "benchmark.ini")
        with open(location, "wb") as fp:
            if isinstance(contents, str):
                contents = contents.encode("utf-8")
            fp.write(contents)
        return location

    def test_error_hierarchy(self):
        for cls in [
                MissingSectionHeaderError,
                BadConfigurationFileError,
                MissingConfigurationKeyError,
                BadConfigurationValueError]:
            self.assertTrue(issubclass(cls, ConfigError))
        self.assertTrue(issubclass(ConfigError, MapsetError))

    def test_template(self):
        fp = io.StringIO()
        createConfigTemplate(fp)
        location = self.writeFile(fp.getvalue())
        self.assertEqual(self.config.read(location), [location])
        self.config.verify()
        self.assertEqual(
            self.config.getsizelist("benchmark", "sizes"), DEFAULT_SIZES)
        self.assertEqual(
            self.config.getint("benchmark", "iterations"), DEFAULT_ITERATIONS)
        self.assertEqual(
            self.config.getoperationlist("benchmark", "operations"),
            DEFAULT_OPERATIONS)

    def test_missing_file(self):
        location = os.path.join(self.tmpdir, "nonexistent.ini")
        self.assertEqual(self.config.read(location), [])
        self.assertFalse(self.config.has_section("benchmark"))

    def test_missing_section_header(self):
        location = self.writeFile("sizes = 10x10\n")
        self.assertRaises(
            MissingSectionHeaderError, self.config.read, location)

    def test_malformed_line(self):
        location = self.writeFile("[benchmark]\ngarbage line\n")
        try:
            self.config.read(location)
        except BadConfigurationFileError as e:
            self.assertEqual(e.args[0], location)
        else:
            self.fail()

    def test_undecodable_file(self):
        location = self.writeFile(b"[benchmark]\nsizes = \xff\n")
        try:
            self.config.read(location)
        except BadConfigurationFileError as e:
            self.assertEqual(e.args[0], location)
        else:
            self.fail()

    def test_no_interpolation(self):
        location = self.writeFile("[benchmark]\nsizes = 10%\n")
        self.assertEqual(self.config.read(location), [location])
        self.assertEqual(self.config.get("benchmark", "sizes"), "10%")
        self.assertRaises(
            BadConfigurationValueError,
            self.config.getsizelist, "benchmark", "sizes")

    def test_getsizelist(self):
        self.config.read_dict(
            {"benchmark": {"sizes": "10x10, 10x50 100,7x3"}})
        self.assertEqual(self.config.getsizelist("benchmark", "sizes"), [
            (10, 10), (10, 50), (100, 100), (7, 3)])

    def test_getsizelist_bad_values(self):
        for value in ["10x10x10", "ax3", "10x", "-1x5"]:
            self.config.read_dict({"benchmark": {"sizes": value}})
            try:
                self.config.getsizelist("benchmark", "sizes")
            except BadConfigurationValueError:
                pass
            else:
                self.fail(value)

    def test_getoperationlist(self):
        self.config.read_dict({"benchmark": {"operations": "union"}})
        self.assertEqual(
            self.config.getoperationlist("benchmark", "operations"),
            ["union"])
        self.config.read_dict({"benchmark": {"operations": "union xor"}})
        self.assertRaises(
            BadConfigurationValueError,
            self.config.getoperationlist, "benchmark", "operations")
        self.config.read_dict({"benchmark": {"operations": ""}})
        self.assertRaises(
            BadConfigurationValueError,
            self.config.getoperationlist, "benchmark", "operations")

    def test_verify_missing_key(self):
        self.config.read_dict(
            {"benchmark": {"sizes": "10", "operations": "union"}})
        try:
            self.config.verify()
        except MissingConfigurationKeyError as e:
            self.assertEqual(e.args, ("benchmark", "iterations"))
        else:
            self.fail()

    def test_verify_bad_iterations(self):
        for value in ["0", "-3", "many"]:
            self.config.read_dict({"benchmark": {
                "sizes": "10",
                "iterations": value,
                "operations": "union",
                }})
            self.assertRaises(BadConfigurationValueError, self.config.verify)

if __name__ == "__main__":
    unittest.main()
