#########################################
# Define classes and functions that are #
# common across multiple algorithms     #
#########################################

import random
from fourcolor.core import ColorAssignment, Constraint, validate

# Base four-color palette: red, blue, yellow, green.
BASE_PALETTE = ['#E63946', '#457B9D', '#F1C40F', '#27AE60']

# Named alternatives to the base palette.
PALETTES = {
    'classic': BASE_PALETTE,
    'emergency': ['#DC143C', '#4169E1', '#FFD700', '#228B22'],
    'neutral': ['#d1d1d6', '#7f8c8d', '#95a5a6', '#bdc3c7'],
    'cb-safe-4': ['#1b9e77', '#d95f02', '#7570b3', '#e7298a'],
    'cb-safe-5': ['#66c2a5', '#fc8d62', '#8da0cb', '#e78ac3', '#a6d854'],
    'muted-earth': ['#6b705c', '#a5a58d', '#b7b7a4', '#cb997e'],
    'monochrome': ['#1f2933', '#323f4b', '#3e4c59', '#52606d'],
}

UNCOLORED = -1


def base_palette(palette=None):
    '''Return the base colors to use given a palette name, an explicit list
    of colors, or None for the default.'''
    if palette is None:
        return list(BASE_PALETTE)
    if isinstance(palette, str):
        try:
            return list(PALETTES[palette])
        except KeyError:
            raise ValueError('"%s" is not a recognized palette' % palette)
    return list(palette)


def generate_palette(num_colors, palette=None):
    '''Return exactly num_colors colors, truncating the base palette or
    extending it with evenly spaced hues.'''
    base = base_palette(palette)
    if num_colors <= len(base):
        return base[:max(num_colors, 0)]
    colors = list(base)
    hue_step = 360 / num_colors
    for i in range(len(base), num_colors):
        hue = (i*hue_step) % 360
        colors.append('hsl(%g, 70%%, 50%%)' % hue)
    return colors


def check_max_colors(max_colors):
    'Raise a ValueError if max_colors cannot color anything.'
    if max_colors < 1:
        raise ValueError('max_colors must be at least 1, not %d' % max_colors)


def neighbor_lists(model):
    'Return a list of neighbor positions for every node in the model.'
    return [model.neighbors(i) for i in range(len(model))]


def tie_ranks(n, randomize=False, seed=None):
    '''Return a rank per position used to break ties: the position itself, or
    a random permutation when randomize is True.'''
    ranks = list(range(n))
    if randomize:
        random.Random(seed).shuffle(ranks)
    return ranks


def apply_constraints(model, constraints):
    '''Return a list of pinned colors (UNCOLORED where none) and a list of
    forbidden-color sets, both indexed by position.  Constraints on unknown
    nodes are ignored.'''
    n = len(model)
    colors = [UNCOLORED]*n
    forbidden = [set() for _ in range(n)]
    for c in constraints or []:
        if isinstance(c, dict):
            c = Constraint.from_dict(c)
        i = model.index(c.node_id)
        if i is None:
            continue
        if c.color_index is not None:
            colors[i] = c.color_index
        forbidden[i] |= c.forbidden
    return colors, forbidden


def used_colors(v, colors, adj):
    'Return the set of colors already used by the neighbors of v.'
    return {colors[u] for u in adj[v] if colors[u] != UNCOLORED}


def smallest_available(v, colors, adj, max_colors, forbidden):
    '''Return the smallest color in 0..max_colors-1 not used by a neighbor of
    v and not forbidden for v, or None if there is none.'''
    used = used_colors(v, colors, adj)
    for c in range(max_colors):
        if c not in used and c not in forbidden[v]:
            return c
    return None


def failed_assignment(max_colors, palette=None, metadata=None):
    'Return the assignment reported when no coloring could be found.'
    return ColorAssignment({}, generate_palette(max_colors, palette),
                           chromatic=0, valid=False, metadata=metadata)


def build_assignment(model, colors, palette=None, metadata=None):
    '''Convert a per-position color list to a ColorAssignment and validate
    it against the model.'''
    assignments = {}
    max_color_used = UNCOLORED
    for nid, c in zip(model.node_ids, colors):
        if c != UNCOLORED:
            assignments[nid] = c
            max_color_used = max(max_color_used, c)
    result = ColorAssignment(assignments,
                             generate_palette(max_color_used + 1, palette),
                             metadata=metadata)
    result.valid = validate(model, result)
    return result
