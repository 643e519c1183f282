#! /usr/bin/env python

###################################
# Four-color the states and       #
# territories of Australia        #
###################################

import sys
import fourcolor

# Define the map as a graph of bordering regions.
graph = {
    'nodes': [
        {'id': 'WA', 'name': 'Western Australia'},
        {'id': 'NT', 'name': 'Northern Territory'},
        {'id': 'SA', 'name': 'South Australia'},
        {'id': 'Q', 'name': 'Queensland'},
        {'id': 'NSW', 'name': 'New South Wales'},
        {'id': 'V', 'name': 'Victoria'},
        {'id': 'T', 'name': 'Tasmania'},
    ],
    'edges': [('WA', 'NT'), ('WA', 'SA'), ('NT', 'SA'), ('NT', 'Q'),
              ('SA', 'Q'), ('SA', 'NSW'), ('SA', 'V'), ('Q', 'NSW'),
              ('NSW', 'V')],
}

# Read the algorithm from the command line.
algorithm = fourcolor.algorithm_name()
if len(sys.argv) > 1:
    algorithm = sys.argv[1]

# Color the map.
engine = fourcolor.TheoremEngine()
engine.load_graph(graph)
coloring = engine.compute_coloring(algorithm=algorithm)
if not coloring.valid:
    sys.exit('No valid coloring was found')

# Output the coloring.
names = {nd['id']: nd['name'] for nd in graph['nodes']}
for nid, c in sorted(coloring.assignments.items()):
    print('%-20s  %d  %s' % (names[nid], c, coloring.palette[c]))
print('')
print('Colors used:        %d' % coloring.chromatic)
print('Chromatic number:   %d' % engine.get_chromatic_number())
