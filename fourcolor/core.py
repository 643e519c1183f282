###################################
# fourcolor top-level definitions #
###################################

import copy
import logging
import os
import shlex
import numpy as np

LOG = logging.getLogger(__name__)


class NoGraphLoadedError(Exception):
    'An operation that needs a graph was invoked before one was loaded.'

    def __init__(self, operation=None):
        if operation is None:
            msg = 'No graph loaded'
        else:
            msg = 'No graph loaded; cannot %s' % operation
        super().__init__(msg)


class Constraint(object):
    '''Representation of a user-pinned color (and/or a set of colors a node
    must not use).'''

    def __init__(self, node_id, color_index=None, forbidden=None):
        self.node_id = node_id            # Node the constraint applies to
        self.color_index = color_index    # Fixed color or None
        self.forbidden = set(forbidden or [])  # Colors the node may not use

    @classmethod
    def from_dict(cls, data):
        'Construct a Constraint from a mapping as produced by a loader.'
        node_id = data.get('node_id', data.get('nodeId'))
        color = data.get('color_index', data.get('colorIndex'))
        return cls(node_id, color, data.get('forbidden'))

    def __str__(self):
        'Return a constraint as a string.'
        msg = '%s' % self.node_id
        if self.color_index is not None:
            msg += ' = %d' % self.color_index
        if self.forbidden:
            msg += ' not in %s' % sorted(self.forbidden)
        return msg

    def __repr__(self):
        return 'fourcolor.Constraint(%r, %r, %r)' % \
            (self.node_id, self.color_index, sorted(self.forbidden))


def _node_id(node):
    'Return the identifier of a node given either as a string or a mapping.'
    if isinstance(node, dict):
        return node['id']
    return node


def _edge_ends(edge):
    'Return the (source, target) identifiers of an edge.'
    if isinstance(edge, dict):
        src = edge.get('source', edge.get('u'))
        tgt = edge.get('target', edge.get('v'))
        return src, tgt
    src, tgt = edge
    return src, tgt


class AdjacencyModel(object):
    '''A symmetric 0/1 adjacency matrix indexed by node position, plus the
    mapping between positions and node identifiers.'''

    def __init__(self, node_ids, matrix, nodes=None):
        self.node_ids = list(node_ids)
        self.matrix = matrix
        self.matrix.flags.writeable = False
        self.nodes = list(nodes) if nodes is not None else list(node_ids)
        self._index = {}
        for i, nid in enumerate(self.node_ids):
            self._index.setdefault(nid, i)

    @classmethod
    def build(cls, nodes, edges):
        '''Build a model from a node list and an edge list.  Edges naming an
        unknown node, and self-loops, are dropped.'''
        nodes = list(nodes)
        node_ids = [_node_id(nd) for nd in nodes]
        index = {}
        for i, nid in enumerate(node_ids):
            index.setdefault(nid, i)
        n = len(node_ids)
        matrix = np.zeros((n, n), dtype=bool)
        dropped = 0
        for edge in edges:
            src, tgt = _edge_ends(edge)
            i = index.get(src)
            j = index.get(tgt)
            if i is None or j is None or i == j:
                dropped += 1
                continue
            matrix[i, j] = True
            matrix[j, i] = True
        if dropped > 0:
            LOG.debug('Dropped %d edge(s) with unusable endpoints', dropped)
        return cls(node_ids, matrix, nodes)

    def __len__(self):
        return len(self.node_ids)

    def __contains__(self, node_id):
        return node_id in self._index

    def index(self, node_id):
        'Return the position of a node, or None if the node is unknown.'
        return self._index.get(node_id)

    def degrees(self):
        'Return a list of node degrees (row sums of the matrix).'
        return [int(d) for d in self.matrix.sum(axis=1)]

    def neighbors(self, i):
        'Return the positions adjacent to position i.'
        return [int(j) for j in np.flatnonzero(self.matrix[i])]

    def neighbor_ids(self, node_id):
        'Return the identifiers adjacent to the given node.'
        i = self.index(node_id)
        if i is None:
            return []
        return [self.node_ids[j] for j in self.neighbors(i)]

    def edges(self):
        'Return each edge once as a pair of positions (i < j).'
        rows, cols = np.nonzero(np.triu(self.matrix, 1))
        return [(int(i), int(j)) for i, j in zip(rows, cols)]

    def edge_count(self):
        'Return the number of distinct edges.'
        return int(np.triu(self.matrix, 1).sum())

    def __str__(self):
        return 'AdjacencyModel with %d node(s) and %d edge(s)' % \
            (len(self), self.edge_count())


def build_adjacency(nodes, edges):
    'Build an AdjacencyModel from a node list and an edge list.'
    return AdjacencyModel.build(nodes, edges)


class ColorAssignment(object):
    'Mapping from node identifiers to color indices plus derived data.'

    def __init__(self, assignments=None, palette=None, chromatic=None,
                 valid=False, metadata=None):
        self.assignments = dict(assignments or {})
        self.palette = list(palette or [])
        if chromatic is None:
            chromatic = len(set(self.assignments.values()))
        self.chromatic = chromatic
        self.valid = valid
        self.metadata = dict(metadata or {})

    def recount(self):
        'Recompute the chromatic count from the current mapping.'
        self.chromatic = len(set(self.assignments.values()))
        return self.chromatic

    def copy(self):
        'Return a deep copy of the assignment.'
        return copy.deepcopy(self)

    def __eq__(self, other):
        if not isinstance(other, ColorAssignment):
            return NotImplemented
        return (self.assignments == other.assignments and
                self.palette == other.palette and
                self.chromatic == other.chromatic and
                self.valid == other.valid and
                self.metadata == other.metadata)

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def _repr_dict(self):
        'Return a dictionary for use internally by __repr__ and __str__.'
        ret = {
            'assignments': self.assignments,
            'palette': self.palette,
            'chromatic': self.chromatic,
            'valid': self.valid,
        }
        if self.metadata:
            ret['metadata'] = self.metadata
        return ret

    def __repr__(self):
        return 'fourcolor.ColorAssignment(%s)' % str(self._repr_dict())

    def __str__(self):
        return str(self._repr_dict())


def _conflicting_pairs(model, assignment):
    'Yield each (id, id) pair of adjacent nodes that share a color.'
    if isinstance(assignment, ColorAssignment):
        assignment = assignment.assignments
    ids = model.node_ids
    n = len(ids)
    for i in range(n):
        ci = assignment.get(ids[i])
        if ci is None:
            continue
        row = model.matrix[i]
        for j in range(i + 1, n):
            if row[j] and assignment.get(ids[j]) == ci:
                yield ids[i], ids[j]


def find_conflicts(model, assignment):
    '''Return a list of (id, id) pairs of adjacent nodes that share a color.
    Nodes without a color never conflict.'''
    return list(_conflicting_pairs(model, assignment))


def count_conflicts(model, assignment):
    'Return the number of adjacent pairs that share a color.'
    return len(find_conflicts(model, assignment))


def validate(model, assignment):
    'Return True if no two adjacent, colored nodes share a color.'
    for _ in _conflicting_pairs(model, assignment):
        return False
    return True


def parse_params(text=None):
    '''Parse key=value pairs from a string, by default the FOURCOLOR_PARAMS
    environment variable, into a dictionary.'''
    all_kwargs = {}
    if text is None:
        text = os.getenv('FOURCOLOR_PARAMS')
    if text is None:
        return all_kwargs
    toks = shlex.split(text)
    for t in toks:
        try:
            # Parse "key=value" into a key and a value.
            eq = t.index('=')
            k, v = t[:eq], t[eq+1:]

            # Attempt to convert value to a number.
            try:
                v = int(v)
            except ValueError:
                try:
                    v = float(v)
                except ValueError:
                    pass
        except ValueError:
            k, v = t, True
        all_kwargs[k.replace('-', '_')] = v
    return all_kwargs
