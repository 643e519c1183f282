#! /usr/bin/env python

###################################
# Compare the coloring algorithms #
# on a wheel graph                #
###################################

import sys
import fourcolor

# Read the number of rim nodes from the command line.
if len(sys.argv) < 2:
    sys.exit('Usage: %s <#rim-nodes>' % sys.argv[0])
n = int(sys.argv[1])

# Define a wheel: a cycle of n nodes plus a hub adjacent to all of them.
rim = ['r%d' % i for i in range(n)]
edges = [(rim[i], rim[(i + 1) % n]) for i in range(n)]
edges += [('hub', r) for r in rim]
engine = fourcolor.TheoremEngine()
engine.load_graph({'nodes': rim + ['hub'], 'edges': edges})

# Run every algorithm with four colors.
for name in fourcolor.algorithm_names():
    coloring = engine.compute_coloring(algorithm=name, max_colors=4)
    if coloring.valid:
        print('%-14s  %d color(s)' % (name, coloring.chromatic))
    else:
        print('%-14s  failed' % name)

# Output the graph statistics.
print('')
for k, v in engine.get_statistics().items():
    print('%-18s  %s' % (k, v))
