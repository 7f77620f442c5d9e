"""Benchmarks of the size-dependent set operations.

Union and intersection both pick their iteration target by comparing
operand sizes. The benchmarks here run each operation on pairs of sets
of given sizes, swapping the operands between runs so that both
argument orders are measured.
"""

__all__ = [
    "BenchmarkResult",
    "OPERATIONS",
    "UnknownOperationError",
    "benchmarkOperation",
    "makeSet",
    "runBenchmarks",
]

import logging
from mapset.common import MapsetError
from mapset.sets import SENTINEL, Set
from mapset.timer import Timer

OPERATIONS = {
    "intersection": Set.intersection,
    "union": Set.union,
}

logger = logging.getLogger(__name__)

class UnknownOperationError(MapsetError):
    """The operation cannot be benchmarked."""

class BenchmarkResult:
    """Timing of one operation on one pair of operand sizes."""

    def __init__(self, operation, sizes, iterations, seconds):
        self.operation = operation
        self.sizes = sizes
        self.iterations = iterations
        self.seconds = seconds

    def __repr__(self):
        return "BenchmarkResult(%r, %r, %r, %r)" % (
            self.operation, self.sizes, self.iterations, self.seconds)

    def __str__(self):
        return "%s %dx%d: %d iterations in %.6f s (%.3f us/op)" % (
            self.operation,
            self.sizes[0],
            self.sizes[1],
            self.iterations,
            self.seconds,
            self.perOperation * 1e6)

    @property
    def perOperation(self):
        """Mean number of seconds per operation."""
        return self.seconds / self.iterations


def makeSet(n):
    """Return the set of the integers 0 to n - 1."""
    return Set.fromrawmapping(dict.fromkeys(range(n), SENTINEL))


def benchmarkOperation(name, a, b, iterations):
    """Time a set operation.

    Arguments:

    name       -- Name of the operation; a key in OPERATIONS.
    a          -- First operand.
    b          -- Second operand.
    iterations -- Number of times to run the operation.

    Returns a BenchmarkResult.
    """
    try:
        operation = OPERATIONS[name]
    except KeyError:
        raise UnknownOperationError(name) from None
    if iterations < 1:
        raise ValueError("iterations must be positive, got %r" % iterations)
    sizes = (len(a), len(b))
    logger.debug(
        "Running %s on %dx%d, %d iterations",
        name, sizes[0], sizes[1], iterations)
    timer = Timer()
    for _ in range(iterations):
        a, b = b, a
        operation(a, b)
    result = BenchmarkResult(name, sizes, iterations, timer.get())
    logger.info("%s", result)
    return result


def runBenchmarks(sizes, iterations, operations=None):
    """Run benchmarks for every operation and size pair.

    Arguments:

    sizes      -- List of (a, b) operand sizes.
    iterations -- Number of times to run each operation per size pair.
    operations -- Names of the operations to benchmark; all of
                  OPERATIONS if None.

    Returns a list of BenchmarkResult instances.
    """
    if operations is None:
        operations = sorted(OPERATIONS)
    results = []
    timer = Timer()
    for name in operations:
        for asize, bsize in sizes:
            results.append(benchmarkOperation(
                name, makeSet(asize), makeSet(bsize), iterations))
        # Includes building the operands.
        logger.debug(
            "Finished %d %s benchmarks in %.3f s",
            len(sizes), name, timer.getAndReset())
    return results
