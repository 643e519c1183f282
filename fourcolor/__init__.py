# Load the core fourcolor functionality.
from fourcolor.core import *
from fourcolor.history import HistoryManager, HistorySnapshot
from fourcolor.engine import TheoremEngine
import os


class UnknownAlgorithmError(ValueError):
    'An unrecognized coloring algorithm was requested.'

    def __init__(self, name):
        self.bad_name = name
        msg = '"%s" is not a recognized coloring algorithm' % name
        super().__init__(msg)


def _load_greedy():
    import fourcolor.algorithm.greedy
    return fourcolor.algorithm.greedy.compute


def _load_dsatur():
    import fourcolor.algorithm.dsatur
    return fourcolor.algorithm.dsatur.compute


def _load_welsh_powell():
    import fourcolor.algorithm.welsh_powell
    return fourcolor.algorithm.welsh_powell.compute


def _load_backtracking():
    import fourcolor.algorithm.backtracking
    return fourcolor.algorithm.backtracking.compute


# Map each algorithm name to a function that imports and returns its compute
# function.
_ALGORITHMS = {
    'greedy': _load_greedy,
    'dsatur': _load_dsatur,
    'welsh-powell': _load_welsh_powell,
    'backtracking': _load_backtracking,
}

DEFAULT_ALGORITHM = 'greedy'


def algorithm_names():
    'Return the names of all recognized coloring algorithms.'
    return list(_ALGORITHMS)


def get_algorithm(name, strict=False):
    '''Map an algorithm name to its compute function.  An unrecognized name
    falls back to the greedy algorithm unless strict is True, in which case
    an UnknownAlgorithmError is raised.'''
    try:
        return _ALGORITHMS[name]()
    except KeyError:
        if strict:
            raise UnknownAlgorithmError(name)
    return _ALGORITHMS[DEFAULT_ALGORITHM]()


def resolve_algorithm_name(name):
    'Return the name of the algorithm that get_algorithm(name) would use.'
    if name in _ALGORITHMS:
        return name
    return DEFAULT_ALGORITHM


# Select a default algorithm based on the setting of the FOURCOLOR_ALGORITHM
# environment variable.
_algorithm_name = resolve_algorithm_name(os.getenv('FOURCOLOR_ALGORITHM',
                                                   DEFAULT_ALGORITHM))


def algorithm_name():
    'Return the name of the default coloring algorithm.'
    return _algorithm_name
