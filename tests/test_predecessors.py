import pytest

import pydigraph.utils.log as logutils
logutils.enableLogger(to_file='./pydigraph.log')

from pydigraph import DiGraph, Predecessors
from pydigraph.analysis.dominators import to_post_order_indexes


def make_graph(nodes, edges):
  g = DiGraph()
  for n in nodes:
    g.add_node(n)
  for src, dst in edges:
    g.add_edge(src, dst)
  return g


def test_predecessors():
  g = make_graph([0, 1, 2, 3, 4], [(0, 1), (1, 2), (1, 3), (2, 4), (3, 4), (4, 1)])
  predecessors = g.predecessors()

  assert predecessors.by_node(1) == set([0, 4])
  assert predecessors.by_node(2) == set([1])
  assert predecessors.by_node(3) == set([1])
  assert predecessors.by_node(4) == set([2, 3])
  assert predecessors.by_node(0) is None
  assert predecessors.by_node(42) is None


def test_unreachable_nodes_are_excluded():
  g = make_graph([0, 1, 5, 6], [(0, 1), (5, 1), (5, 6)])
  predecessors = Predecessors(g)

  assert predecessors.by_node(1) == set([0])
  assert predecessors.by_node(6) is None
  assert 5 not in predecessors.post_order_number
  assert predecessors.post_order == [1, 0]


def test_post_order_numbering():
  g = make_graph([0, 1, 2, 3, 4], [(0, 1), (1, 2), (1, 3), (2, 4), (3, 4)])
  predecessors = g.predecessors()
  post_order = predecessors.post_order

  assert len(post_order) == 5
  assert post_order[0] == 4
  assert set(post_order[1:3]) == set([2, 3])
  assert post_order[3] == 1
  assert post_order[4] == 0
  for i, node in enumerate(post_order):
    assert predecessors.post_order_number[node] == i

  assert len(predecessors.predecessors) == 4

  indexes = to_post_order_indexes(predecessors)
  assert len(indexes) == 5
  assert indexes[4] == []
  assert indexes[3] == [4]
  assert indexes[2] == [3]
  assert indexes[1] == [3]
  assert indexes[0] == [1, 2]


def test_empty_graph():
  predecessors = DiGraph().predecessors()
  assert predecessors.post_order == []
  assert predecessors.predecessors == {}
