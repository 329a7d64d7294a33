import pytest

import pydigraph.utils.log as logutils
from pydigraph.utils.log import logger
logutils.enableLogger(to_file='./pydigraph.log')

from pydigraph import DiGraph, DominatorTree, DomKind, InvariantViolation
from pydigraph.analysis.dominators import intersect, UNDEFINED


def make_graph(nodes, edges):
  g = DiGraph()
  for n in nodes:
    g.add_node(n)
  for src, dst in edges:
    g.add_edge(src, dst)
  return g


def test_simple_dominators():
  g = make_graph([0, 1, 2, 3, 4], [(0, 1), (1, 2), (1, 3), (2, 4), (3, 4)])
  doms = g.dominators()

  assert doms.idom(1) == 0
  assert doms.idom(2) == 1
  assert doms.idom(3) == 1
  assert doms.idom(4) == 1
  assert doms.idom(0) is None
  assert doms.dom == {1: 0, 2: 1, 3: 1, 4: 1}
  assert doms.entry == 0


def test_dominators_with_loop():
  g = make_graph([0, 1, 2, 3, 4], [(0, 1), (1, 2), (1, 3), (2, 4), (3, 4), (4, 1)])
  doms = DominatorTree(g)

  assert doms.dom == {1: 0, 2: 1, 3: 1, 4: 1}
  assert doms.passes >= 2


def test_dominator_predecessor_of_its_successor():
  # 1 dominates 3 even if 3 is also reached through 2
  g = make_graph([0, 1, 2, 3], [(0, 1), (1, 2), (2, 3), (1, 3)])
  doms = g.dominators()
  assert doms.idom(3) == 1
  assert doms.idom(2) == 1


def test_irreducible_graph():
  g = make_graph([0, 1, 2, 3, 4],
                 [(0, 1), (0, 2), (1, 2), (2, 1), (1, 3), (2, 3), (3, 4)])
  doms = g.dominators()
  assert doms.dom == {1: 0, 2: 0, 3: 0, 4: 3}


def test_no_dominator_cases():
  g = make_graph([0, 1, 7], [(0, 1), (7, 1)])
  doms = g.dominators()

  assert doms.idom(0) is None
  assert doms.idom(7) is None
  assert doms.idom(42) is None

  assert doms.dominance(0).kind == DomKind.ENTRY
  assert doms.dominance(7).kind == DomKind.UNREACHABLE
  assert doms.dominance(42).kind == DomKind.UNREACHABLE
  assert doms.dominance(1) == (DomKind.DOMINATED, 0)


def test_single_node():
  g = DiGraph()
  g.add_node('only')
  doms = g.dominators()
  assert doms.dom == {}
  assert doms.idom('only') is None
  assert doms.dominance('only').kind == DomKind.ENTRY


def test_empty_graph():
  doms = DiGraph().dominators()
  assert doms.dom == {}
  assert doms.entry is None
  assert doms.frontier == {}
  assert len(doms.to_graph()) == 0


def test_dominator_queries():
  g = make_graph([0, 1, 2, 3, 4], [(0, 1), (1, 2), (1, 3), (2, 4), (3, 4)])
  doms = g.dominators()

  assert doms.dominators(4) == [4, 1, 0]
  assert doms.dominators(0) == [0]
  assert doms.dominators(42) == []
  assert doms.dominates(1, 4)
  assert doms.dominates(4, 4)
  assert not doms.dominates(2, 4)
  assert sorted(doms.children(1)) == [2, 3, 4]
  assert doms.children(4) == []

  tree = doms.to_graph()
  assert tree.immutable
  assert tree.entry == 0
  assert set(tree.successor_ids(1)) == set([2, 3, 4])
  doms.print_tree()


def test_frontier():
  g = make_graph([0, 1, 2, 3, 4, 5],
                 [(0, 1), (1, 2), (1, 3), (2, 4), (3, 4), (4, 1), (4, 5)])
  doms = g.dominators()
  frontier = doms.frontier

  assert frontier[2] == set([4])
  assert frontier[3] == set([4])
  assert frontier[4] == set([1])
  assert frontier[1] == set([1])
  assert frontier[0] == set()
  assert frontier[5] == set()


def test_post_dominators():
  g = make_graph([0, 1, 2, 3, 4], [(0, 1), (1, 2), (1, 3), (2, 4), (3, 4)])
  pdoms = g.post_dominators(4)

  assert pdoms.entry == 4
  assert pdoms.idom(4) is None
  assert pdoms.idom(2) == 4
  assert pdoms.idom(3) == 4
  assert pdoms.idom(1) == 4
  assert pdoms.idom(0) == 1


def test_idempotence():
  g = make_graph(list(range(8)),
                 [(0, 1), (1, 2), (2, 3), (3, 1), (1, 4), (4, 5), (5, 6), (4, 6), (6, 7), (2, 7)])
  assert g.dominators().dom == g.dominators().dom


def test_intersect_undefined():
  with pytest.raises(InvariantViolation):
    intersect([UNDEFINED, UNDEFINED, 2], 0, 2)
  assert intersect([3, 3, 3, 3], 1, 2) == 3
