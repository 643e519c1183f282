#######################################
# DSATUR coloring: repeatedly color    #
# the most color-constrained node      #
#######################################

import logging
from fourcolor.algorithm import common

LOG = logging.getLogger(__name__)


def saturation(v, colors, adj):
    'Return the number of distinct colors among the neighbors of v.'
    return len(common.used_colors(v, colors, adj))


def choose_next(colors, adj, degrees, ranks):
    '''Return the uncolored position with the highest saturation degree,
    breaking ties by highest degree and then by lowest rank, or None if
    every node is colored.'''
    best = None
    best_key = None
    for v in range(len(colors)):
        if colors[v] != common.UNCOLORED:
            continue
        key = (saturation(v, colors, adj), degrees[v], -ranks[v])
        if best_key is None or key > best_key:
            best = v
            best_key = key
    return best


def compute(model, max_colors=4, constraints=None, randomize=False,
            seed=None, palette=None, **kwargs):
    '''Color nodes one at a time, always picking the uncolored node whose
    neighbors already use the most distinct colors.'''
    common.check_max_colors(max_colors)
    n = len(model)
    adj = common.neighbor_lists(model)
    degrees = model.degrees()
    ranks = common.tie_ranks(n, randomize, seed)
    colors, forbidden = common.apply_constraints(model, constraints)
    metadata = {'algorithm': 'dsatur', 'vertex_order': []}

    # Saturation changes whenever a neighbor is colored, so the choice is
    # recomputed from scratch on every step.
    while True:
        v = choose_next(colors, adj, degrees, ranks)
        if v is None:
            break
        c = common.smallest_available(v, colors, adj, max_colors, forbidden)
        if c is None:
            LOG.debug('DSATUR coloring ran out of colors at node %s',
                      model.node_ids[v])
            return common.failed_assignment(max_colors, palette)
        colors[v] = c
        metadata['vertex_order'].append(model.node_ids[v])
    return common.build_assignment(model, colors, palette, metadata)
