import pytest

import fourcolor


def make_graph(nodes, edges):
    'Return a graph in the form produced by the loaders.'
    return {
        'nodes': [{'id': n, 'name': n.upper()} for n in nodes],
        'edges': [{'source': u, 'target': v} for u, v in edges],
    }


def make_model(nodes, edges):
    return fourcolor.build_adjacency(nodes, edges)


@pytest.fixture()
def triangle():
    return make_model(['a', 'b', 'c'], [('a', 'b'), ('b', 'c'), ('a', 'c')])


@pytest.fixture()
def k4():
    nodes = ['a', 'b', 'c', 'd']
    edges = [(u, v) for i, u in enumerate(nodes) for v in nodes[i + 1:]]
    return make_model(nodes, edges)


@pytest.fixture()
def isolated():
    return make_model(['x'], [])


@pytest.fixture()
def two_triangles():
    return make_model(['a', 'b', 'c', 'd', 'e', 'f'],
                      [('a', 'b'), ('b', 'c'), ('a', 'c'),
                       ('d', 'e'), ('e', 'f'), ('d', 'f')])


@pytest.fixture()
def crown():
    #############################################
    # Bipartite graph a_i - b_j for i != j.     #
    # Greedy coloring in input order needs 3    #
    # colors although 2 suffice.                #
    #############################################
    nodes = ['a1', 'b1', 'a2', 'b2', 'a3', 'b3']
    edges = [('a%d' % i, 'b%d' % j)
             for i in range(1, 4) for j in range(1, 4) if i != j]
    return make_model(nodes, edges)


@pytest.fixture()
def australia_graph():
    #######################################
    # Mainland states and territories of  #
    # Australia plus Tasmania             #
    #######################################
    nodes = ['WA', 'NT', 'SA', 'Q', 'NSW', 'V', 'T']
    edges = [('WA', 'NT'), ('WA', 'SA'), ('NT', 'SA'), ('NT', 'Q'),
             ('SA', 'Q'), ('SA', 'NSW'), ('SA', 'V'), ('Q', 'NSW'),
             ('NSW', 'V')]
    return {'nodes': nodes, 'edges': edges}


@pytest.fixture()
def australia(australia_graph):
    return make_model(australia_graph['nodes'], australia_graph['edges'])
