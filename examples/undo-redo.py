#! /usr/bin/env python

###################################
# Color a triangle by hand and    #
# walk back through the history   #
###################################

import fourcolor

engine = fourcolor.TheoremEngine(max_undo_steps=5)
engine.load_graph({'nodes': ['A', 'B', 'C'],
                   'edges': [('A', 'B'), ('B', 'C'), ('C', 'A')]})
engine.reset()

# Make a mistake, then fix it.
for node, c in [('A', 0), ('B', 1), ('C', 1), ('C', 2)]:
    coloring = engine.assign_color(node, c)
    print('%s := %d  ->  %s  (valid: %s)' %
          (node, c, coloring.assignments, coloring.valid))

# Step backward until there is nothing left to undo.
print('')
while True:
    coloring = engine.undo()
    if coloring is None:
        break
    print('undo  ->  %s  (valid: %s)' % (coloring.assignments, coloring.valid))

# Step forward again.
while True:
    coloring = engine.redo()
    if coloring is None:
        break
    print('redo  ->  %s  (valid: %s)' % (coloring.assignments, coloring.valid))
