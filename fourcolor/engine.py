##########################################
# Owns a graph, its current coloring and #
# the undo/redo history of that coloring #
##########################################

import logging
import fourcolor
from fourcolor.algorithm import backtracking
from fourcolor.algorithm.common import generate_palette
from fourcolor.core import AdjacencyModel, ColorAssignment, \
    NoGraphLoadedError, count_conflicts, parse_params, validate
from fourcolor.history import HistoryManager, HistorySnapshot

LOG = logging.getLogger(__name__)

# Four colors suffice for any planar graph.
PLANAR_BOUND = 4


def _empty_coloring(palette=None):
    'Return an empty, invalid coloring.'
    return ColorAssignment({}, palette or [], chromatic=0, valid=False)


class TheoremEngine(object):
    '''Single integration point for loading a graph, coloring it
    automatically or by hand, validating the result and moving through the
    coloring history.  Engines share no state with one another.'''

    def __init__(self, max_undo_steps=20):
        self.max_undo_steps = max_undo_steps
        self.history = HistoryManager(max_undo_steps)
        self._model = None
        self._coloring = None

    @property
    def model(self):
        'The AdjacencyModel of the loaded graph, or None.'
        return self._model

    @property
    def coloring(self):
        'A copy of the current ColorAssignment, or None.'
        if self._coloring is None:
            return None
        return self._coloring.copy()

    def load_graph(self, graph):
        '''Load a graph given either as an AdjacencyModel or as a mapping with
        "nodes" and "edges" lists.  All history is discarded and the empty
        coloring becomes the first snapshot.'''
        if isinstance(graph, AdjacencyModel):
            self._model = graph
        else:
            self._model = AdjacencyModel.build(graph.get('nodes', []),
                                               graph.get('edges', []))
        self.history.clear()
        self._coloring = _empty_coloring()
        self._record('Loaded graph')
        LOG.debug('Loaded %s', self._model)

    def _record(self, action):
        'Push a snapshot of the current coloring.'
        self.history.push(HistorySnapshot(self._coloring, action))

    def compute_coloring(self, algorithm=None, **options):
        '''Color the loaded graph with the named algorithm (an unrecognized
        name falls back to greedy) and return the result.  Options from the
        FOURCOLOR_PARAMS environment variable apply unless overridden.'''
        if self._model is None:
            raise NoGraphLoadedError('compute a coloring')
        all_options = parse_params()
        all_options.update(options)
        if algorithm is None:
            algorithm = all_options.pop('algorithm', fourcolor.algorithm_name())
        else:
            all_options.pop('algorithm', None)
        name = fourcolor.resolve_algorithm_name(algorithm)
        if name != algorithm:
            LOG.debug('Unknown algorithm "%s"; using %s', algorithm, name)
        compute = fourcolor.get_algorithm(name)

        coloring = compute(self._model, **all_options)
        self._coloring = coloring
        self._record('Auto-colored using %s algorithm' % name)
        LOG.debug('%s coloring: %d color(s), valid=%s', name,
                  coloring.chromatic, coloring.valid)
        return coloring.copy()

    def validate_coloring(self, coloring=None):
        '''Return True if the given coloring (by default the current one) has
        no conflicts in the loaded graph.  Return False if there is nothing
        to validate.'''
        if coloring is None:
            coloring = self._coloring
        if coloring is None or self._model is None:
            return False
        return validate(self._model, coloring)

    def count_conflicts(self, coloring=None):
        'Return the number of adjacent pairs sharing a color.'
        if coloring is None:
            coloring = self._coloring
        if coloring is None or self._model is None:
            return 0
        return count_conflicts(self._model, coloring)

    def _manual_edit(self, action):
        'Revalidate the current coloring after a manual edit and record it.'
        self._coloring.recount()
        self._coloring.valid = self.validate_coloring()
        self._record(action)
        return self._coloring.copy()

    def assign_color(self, node_id, color_index):
        '''Manually color a single node.  Unknown node identifiers are
        accepted but match nothing in the graph.'''
        if color_index < 0:
            raise ValueError('color index must be non-negative, not %d' %
                             color_index)
        if self._coloring is None:
            self._coloring = _empty_coloring(generate_palette(PLANAR_BOUND))
        self._coloring.assignments[node_id] = color_index
        palette = self._coloring.palette
        if color_index >= len(palette):
            palette.extend(generate_palette(color_index + 1)[len(palette):])
        return self._manual_edit('Colored node %s with color %d' %
                                 (node_id, color_index))

    def clear_color(self, node_id):
        'Remove the color of a single node.'
        if self._coloring is None:
            self._coloring = _empty_coloring(generate_palette(PLANAR_BOUND))
        self._coloring.assignments.pop(node_id, None)
        return self._manual_edit('Cleared color of node %s' % node_id)

    def _restore(self, snapshot):
        if snapshot is None:
            return None
        self._coloring = snapshot.coloring
        return self._coloring.copy()

    def undo(self):
        '''Return to the previous coloring and return it, or return None if
        there is nothing to undo.'''
        return self._restore(self.history.undo())

    def redo(self):
        '''Return to the next coloring and return it, or return None if there
        is nothing to redo.'''
        return self._restore(self.history.redo())

    def can_undo(self):
        return self.history.can_undo()

    def can_redo(self):
        return self.history.can_redo()

    def reset(self):
        'Discard all colors and history, keeping the reset as a baseline.'
        self._coloring = _empty_coloring(generate_palette(PLANAR_BOUND))
        self.history.clear()
        self._record('Reset to uncolored state')

    def get_neighbors(self, node_id):
        'Return the identifiers of the nodes adjacent to node_id.'
        if self._model is None:
            return []
        return self._model.neighbor_ids(node_id)

    def get_chromatic_number(self):
        '''Return the smallest k <= 4 for which backtracking finds a valid
        coloring, or 4 if none does.  Graphs that are not planar may need
        more colors than reported.  A graph with no nodes reports 1, the
        first k tried; with no graph loaded the result is 0.'''
        if self._model is None:
            return 0
        for k in range(1, PLANAR_BOUND + 1):
            if backtracking.compute(self._model, max_colors=k).valid:
                return k
        return PLANAR_BOUND

    def _is_planar(self):
        '''Necessary (not sufficient) planarity test: E <= 3V - 6.  Graphs
        with fewer than three nodes are always planar.'''
        num_nodes = len(self._model)
        if num_nodes < 3:
            return True
        return self._model.edge_count() <= 3*num_nodes - 6

    def get_statistics(self):
        'Return a dictionary of graph statistics, or None without a graph.'
        if self._model is None:
            return None
        degrees = self._model.degrees()
        num_nodes = len(degrees)
        stats = {
            'node_count': num_nodes,
            'edge_count': self._model.edge_count(),
            'min_degree': min(degrees) if degrees else 0,
            'max_degree': max(degrees) if degrees else 0,
            'avg_degree': sum(degrees)/num_nodes if degrees else 0.0,
            'chromatic_number': self.get_chromatic_number(),
            'is_planar': self._is_planar(),
        }
        return stats
