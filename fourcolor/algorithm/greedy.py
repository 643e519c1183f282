######################################
# Color nodes in input order with the #
# smallest color no neighbor uses     #
######################################

import logging
from fourcolor.algorithm import common

LOG = logging.getLogger(__name__)


def compute(model, max_colors=4, constraints=None, randomize=False,
            seed=None, palette=None, **kwargs):
    '''Color each uncolored node, in input order, with its smallest available
    color.  Report failure the first time a node has no color left.'''
    common.check_max_colors(max_colors)
    n = len(model)
    adj = common.neighbor_lists(model)
    colors, forbidden = common.apply_constraints(model, constraints)

    # With randomize the processing order is a random permutation.
    ranks = common.tie_ranks(n, randomize, seed)
    order = sorted(range(n), key=lambda v: ranks[v])

    for v in order:
        if colors[v] != common.UNCOLORED:
            continue
        c = common.smallest_available(v, colors, adj, max_colors, forbidden)
        if c is None:
            LOG.debug('Greedy coloring ran out of colors at node %s',
                      model.node_ids[v])
            return common.failed_assignment(max_colors, palette)
        colors[v] = c
    return common.build_assignment(model, colors, palette)
