######################################
# Welsh-Powell coloring: color nodes  #
# in order of decreasing degree       #
######################################

import logging
from fourcolor.algorithm import common

LOG = logging.getLogger(__name__)


def compute(model, max_colors=4, constraints=None, randomize=False,
            seed=None, palette=None, **kwargs):
    '''Color nodes from highest to lowest degree, each with its smallest
    available color.  Equal degrees keep input order unless randomize is
    True.'''
    common.check_max_colors(max_colors)
    n = len(model)
    adj = common.neighbor_lists(model)
    degrees = model.degrees()
    ranks = common.tie_ranks(n, randomize, seed)
    order = sorted(range(n), key=lambda v: (-degrees[v], ranks[v]))
    metadata = {
        'algorithm': 'welsh-powell',
        'vertex_order': [model.node_ids[v] for v in order],
        'degree_distribution': [degrees[v] for v in order],
    }

    colors, forbidden = common.apply_constraints(model, constraints)
    for v in order:
        if colors[v] != common.UNCOLORED:
            continue
        c = common.smallest_available(v, colors, adj, max_colors, forbidden)
        if c is None:
            LOG.debug('Welsh-Powell coloring ran out of colors at node %s '
                      '(degree %d)', model.node_ids[v], degrees[v])
            return common.failed_assignment(max_colors, palette)
        colors[v] = c
    return common.build_assignment(model, colors, palette, metadata)
