"""Configuration module for the mapset benchmarks."""

__all__ = [
    "BadConfigurationFileError",
    "BadConfigurationValueError",
    "Config",
    "ConfigError",
    "DEFAULT_CONFIGFILE_LOCATION",
    "DEFAULT_ITERATIONS",
    "DEFAULT_OPERATIONS",
    "DEFAULT_SIZES",
    "MissingConfigurationKeyError",
    "MissingSectionHeaderError",
    "createConfigTemplate",
]

from configparser import ConfigParser
from configparser import Error as ConfigParserError
from configparser import MissingSectionHeaderError as \
    ConfigParserMissingSectionHeaderError
import logging
import os
import re
from mapset.common import MapsetError

DEFAULT_CONFIGFILE_LOCATION = os.path.join("~", ".mapset", "benchmark.ini")
DEFAULT_SIZES = [(10, 10), (10, 50), (10, 100)]
DEFAULT_ITERATIONS = 10000
DEFAULT_OPERATIONS = ["intersection", "union"]

logger = logging.getLogger(__name__)

class ConfigError(MapsetError):
    """Configuration error."""
    pass

class MissingSectionHeaderError(ConfigError):
    """A section header is missing in the configuration file."""
    pass

class BadConfigurationFileError(ConfigError):
    """The configuration file could not be parsed or decoded."""
    pass

class MissingConfigurationKeyError(ConfigError):
    """A key is missing in the configuration file."""
    pass

class BadConfigurationValueError(ConfigError):
    """A value is badly formatted in the configuration file."""
    pass

class Config(ConfigParser):
    """A customized configuration parser."""

    def __init__(self, encoding="utf-8"):
        """Constructor.

        Arguments:

        encoding -- The encoding of the configuration files.
        """
        ConfigParser.__init__(self, interpolation=None)
        self.encoding = encoding

    def read(self, filenames, encoding=None):
        """Read configuration files.

        Files that cannot be opened are skipped. Returns the list of
        successfully read files.
        """
        if isinstance(filenames, (str, bytes, os.PathLike)):
            filenames = [filenames]
        if encoding is None:
            encoding = self.encoding
        read_ok = []
        for filename in filenames:
            try:
                with open(filename, "r", encoding=encoding) as fp:
                    self.read_file(fp, filename)
            except ConfigParserMissingSectionHeaderError:
                raise MissingSectionHeaderError(filename) from None
            except ConfigParserError as e:
                raise BadConfigurationFileError(filename, str(e)) from None
            except UnicodeDecodeError as e:
                raise BadConfigurationFileError(filename, str(e)) from None
            except OSError:
                logger.debug("Skipping unreadable config file %s", filename)
                continue
            read_ok.append(filename)
        return read_ok

    def getsizelist(self, section, option):
        """Get a list of operand size pairs.

        Size lists look like this:

        10x10, 10x50 100

        A single number N means NxN. Returns a list of two-tuples of
        integers.
        """
        val = self.get(section, option)
        sizes = re.split(r"[,\s]+", val.strip())
        ret = []
        for size in sizes:
            parts = size.split("x")
            if len(parts) > 2:
                raise BadConfigurationValueError(section, option, val)
            if len(parts) == 1:
                parts.append(parts[0])
            try:
                a = int(parts[0])
                b = int(parts[1])
            except ValueError:
                raise BadConfigurationValueError(section, option, val)
            if a < 0 or b < 0:
                raise BadConfigurationValueError(section, option, val)
            ret.append((a, b))
        return ret

    def getoperationlist(self, section, option):
        """Get a list of benchmarked operation names."""
        val = self.get(section, option)
        operations = val.split()
        if not operations:
            raise BadConfigurationValueError(section, option, val)
        for operation in operations:
            if operation not in DEFAULT_OPERATIONS:
                raise BadConfigurationValueError(section, option, val)
        return operations

    def verify(self):
        """Verify the benchmark configuration."""

        def checkConfigurationItem(section, key, function):
            """Internal helper."""
            if not self.has_option(section, key):
                raise MissingConfigurationKeyError(section, key)
            value = self.get(section, key)
            if function and not function(value):
                raise BadConfigurationValueError(section, key, value)

        def isPositiveInteger(value):
            try:
                return int(value) > 0
            except ValueError:
                return False

        checkConfigurationItem("benchmark", "sizes", None)
        checkConfigurationItem("benchmark", "iterations", isPositiveInteger)
        checkConfigurationItem("benchmark", "operations", None)
        self.getsizelist("benchmark", "sizes")
        self.getoperationlist("benchmark", "operations")


def createConfigTemplate(fileobject):
    """Write a benchmark configuration template to a file.

    Arguments:

    fileobject -- File object to write the template to.
    """

    fileobject.write(
        '''### Configuration file for the mapset benchmarks.

######################################################################
## Benchmark configuration
[benchmark]

# Operand sizes. Each entry AxB runs the benchmarked operations on a
# set of A elements and a set of B elements. A single number N means
# NxN.
sizes = %s

# Number of times each operation is run per size pair.
iterations = %d

# Operations to benchmark. Valid operations are "union" and
# "intersection".
operations = %s
''' % (
        ", ".join("%dx%d" % pair for pair in DEFAULT_SIZES),
        DEFAULT_ITERATIONS,
        " ".join(DEFAULT_OPERATIONS)))
