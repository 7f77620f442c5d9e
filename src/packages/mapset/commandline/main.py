"""Command-line driver for the mapset benchmarks."""

__all__ = ["main"]

from optparse import OptionParser
import logging
import os
import sys
from mapset.benchmark import OPERATIONS, runBenchmarks
from mapset.config import (
    Config, ConfigError, DEFAULT_CONFIGFILE_LOCATION, DEFAULT_ITERATIONS,
    DEFAULT_SIZES, createConfigTemplate)
from mapset.version import version

def printOutput(infoString):
    sys.stdout.write(infoString)
    sys.stdout.flush()

def printError(errorString):
    sys.stderr.write(errorString)

def printErrorAndExit(errorString):
    printError(errorString)
    sys.exit(1)

def makeOptionParser():
    parser = OptionParser(
        usage="%prog [options]",
        version="%%prog %s" % version,
        description="Benchmark union and intersection of mapset sets.")
    parser.add_option(
        "--config",
        metavar="FILE",
        help="read settings from FILE (default: %s)" %
        DEFAULT_CONFIGFILE_LOCATION)
    parser.add_option(
        "--sizes",
        metavar="LIST",
        help="operand sizes, e.g. \"10x10,10x50\"")
    parser.add_option(
        "--iterations",
        type="int",
        help="iterations per operation and size pair")
    parser.add_option(
        "--operation",
        action="append",
        dest="operations",
        choices=sorted(OPERATIONS),
        help="operation to benchmark; may be repeated")
    parser.add_option(
        "--write-config",
        metavar="FILE",
        help="write a configuration template to FILE and exit")
    parser.add_option(
        "-v", "--verbose",
        action="store_const",
        const=logging.DEBUG,
        dest="loglevel",
        default=logging.WARNING)
    parser.add_option(
        "-q", "--quiet",
        action="store_const",
        const=logging.ERROR,
        dest="loglevel")
    return parser

def loadSettings(options):
    """Merge the configuration file and command-line options.

    Returns a tuple (sizes, iterations, operations).
    """
    sizes = DEFAULT_SIZES
    iterations = DEFAULT_ITERATIONS
    operations = None

    config = Config()
    if options.config:
        location = os.path.expanduser(options.config)
        if not config.read(location):
            raise ConfigError("Could not read configuration file %s" % location)
        config.verify()
    else:
        config.read(os.path.expanduser(DEFAULT_CONFIGFILE_LOCATION))
        if config.has_section("benchmark"):
            config.verify()
    if config.has_section("benchmark"):
        sizes = config.getsizelist("benchmark", "sizes")
        iterations = config.getint("benchmark", "iterations")
        operations = config.getoperationlist("benchmark", "operations")

    if options.sizes:
        config.read_dict({"override": {"sizes": options.sizes}})
        sizes = config.getsizelist("override", "sizes")
    if options.iterations is not None:
        iterations = options.iterations
    if options.operations:
        operations = options.operations
    return sizes, iterations, operations

def main(argv):
    """Run the program.

    Arguments:

    argv -- A list of arguments.
    """
    parser = makeOptionParser()
    options, args = parser.parse_args(argv[1:])
    if args:
        printErrorAndExit(
            "Unexpected argument \"%s\". See \"%s --help\" for help.\n" % (
                args[0], os.path.basename(argv[0])))

    logging.basicConfig(
        level=options.loglevel,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s")

    if options.write_config:
        with open(options.write_config, "w", encoding="utf-8") as fp:
            createConfigTemplate(fp)
        printOutput("Wrote %s\n" % options.write_config)
        return

    try:
        sizes, iterations, operations = loadSettings(options)
    except ConfigError as e:
        printErrorAndExit("Bad configuration: %s\n" % (e,))
    if iterations < 1:
        printErrorAndExit("Invalid number of iterations: %d\n" % iterations)

    for result in runBenchmarks(sizes, iterations, operations):
        printOutput("%s\n" % result)
