# -*- coding: utf-8 -*-
"""
  pydigraph.analysis.dominators
  ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~

  Dominator tree

  :copyright: (c) 2014 by Romain Gaucher (@rgaucher)
  :license: Apache 2, see LICENSE for more details.
"""
from collections import namedtuple
from enum import Enum

from ..utils.log import logger
from ..graph.graphs import DiGraph, InvariantViolation
from .predecessors import Predecessors

UNDEFINED = -1


class DomKind(Enum):
  ENTRY = 'entry'
  UNREACHABLE = 'unreachable'
  DOMINATED = 'dominated'


Dominance = namedtuple('Dominance', ['kind', 'idom'])


def intersect(doms, finger1, finger2):
  """
    Walks up the dominator chains of both post-order indexes until they meet.
    Going up a chain always increases the index, and all chains end on the
    entry (the highest index), which is its own dominator.
  """
  while finger1 != finger2:
    while finger1 < finger2:
      finger1 = doms[finger1]
      if finger1 == UNDEFINED:
        raise InvariantViolation('Dominator chain reached an undefined slot')
    while finger2 < finger1:
      finger2 = doms[finger2]
      if finger2 == UNDEFINED:
        raise InvariantViolation('Dominator chain reached an undefined slot')
  return finger1


def to_post_order_indexes(predecessors):
  """
    Returns a list where the item at position ``i`` is the sorted list of
    the post-order indexes of the predecessors of the ``i``-th node in
    post-order.
  """
  numbers = predecessors.post_order_number
  indexes = []
  for node in predecessors.post_order:
    preds = predecessors.by_node(node) or ()
    indexes.append(sorted(numbers[p] for p in preds if p in numbers))
  return indexes


class DominatorTree(object):
  """
    Computes the immediate dominator of every node reachable from the entry
    of the graph, and the dominance frontier.

    Based on "A Simple, Fast Dominance Algorithm" (Cooper, Harvey, Kennedy):
      http://www.cs.rice.edu/~keith/Embed/dom.pdf
  """
  def __init__(self, graph, predecessors=None):
    self._graph = graph
    self._predecessors = predecessors
    self._entry = None
    self._doms = {}
    self._df = None
    self._children = None
    self._passes = 0
    self.build()

  @property
  def graph(self):
    """
      Returns the graph used for computing the dominator tree.
    """
    return self._graph

  @property
  def entry(self):
    return self._entry

  @property
  def predecessors(self):
    return self._predecessors

  @property
  def passes(self):
    """
      Returns the number of passes the fixpoint needed.
    """
    return self._passes

  @property
  def dom(self):
    """
      Returns the dict containing the mapping of each node to its
      immediate dominator. The entry node is not part of it.
    """
    return dict((node, idom) for node, idom in self._doms.items() if node != idom)

  @property
  def frontier(self):
    """
      Returns the dict containing the mapping of each node to its
      dominance frontier (a set).
    """
    if self._df is None:
      self.__build_df()
    return self._df

  def build(self):
    if self._predecessors is None:
      self._predecessors = Predecessors(self.graph)
    post_order = self._predecessors.post_order
    if not post_order:
      return

    indexes = to_post_order_indexes(self._predecessors)
    length = len(post_order)
    doms = [UNDEFINED] * length
    doms[length - 1] = length - 1

    changed = True
    while changed:
      self._passes += 1
      changed = False
      # Reverse post-order, the entry excluded
      for idx in range(length - 2, -1, -1):
        new_idom = UNDEFINED
        for p in indexes[idx]:
          if doms[p] == UNDEFINED:
            continue
          new_idom = p if new_idom == UNDEFINED else intersect(doms, p, new_idom)
        if new_idom != UNDEFINED and doms[idx] != new_idom:
          doms[idx] = new_idom
          changed = True

    if UNDEFINED in doms:
      node = post_order[doms.index(UNDEFINED)]
      raise InvariantViolation('No dominator computed for reachable node %r' % (node,))

    self._entry = post_order[-1]
    self._doms = dict((post_order[idx], post_order[dom]) for idx, dom in enumerate(doms))
    logger.debug("Dominators of %d nodes converged after %d passes", length, self._passes)

  def idom(self, node):
    """
      Returns the immediate dominator of ``node``, or None for the entry
      node and for nodes not reachable from it.
    """
    dom = self._doms.get(node)
    if dom is None or dom == node:
      return None
    return dom

  def dominance(self, node):
    """
      Same as ``idom`` but tells apart the entry node from the unreachable
      ones.
    """
    if node not in self._doms:
      return Dominance(DomKind.UNREACHABLE, None)
    if node == self._entry:
      return Dominance(DomKind.ENTRY, None)
    return Dominance(DomKind.DOMINATED, self._doms[node])

  def dominators(self, node):
    """
      Returns the list of the dominators of ``node``, starting with the node
      itself and ending with the entry.
    """
    chain = []
    if node not in self._doms:
      return chain
    while True:
      chain.append(node)
      dom = self._doms[node]
      if dom == node:
        break
      node = dom
    return chain

  def dominates(self, dominator, node):
    return dominator in self.dominators(node)

  def children(self, node):
    """
      Returns the nodes immediately dominated by ``node``.
    """
    if self._children is None:
      self._children = {}
      for child, dom in self._doms.items():
        if child != dom:
          self._children.setdefault(dom, []).append(child)
    return list(self._children.get(node, ()))

  def __build_df(self):
    """
      Builds the dominance frontier.
    """
    self._df = {}
    for b in self._doms:
      self._df[b] = set()

    for b in self._doms:
      predecessors = self._predecessors.by_node(b)
      if not predecessors or len(predecessors) < 2:
        continue
      for p in predecessors:
        runner = p
        while runner != self._doms[b]:
          self._df[runner].add(b)
          if runner == self._doms[runner]:
            raise InvariantViolation('%r is not dominated by %r' % (p, self._doms[b]))
          runner = self._doms[runner]

  def to_graph(self):
    """
      Returns the dominator tree as a frozen graph, with edges going from
      the immediate dominator to the dominated node.
    """
    g = DiGraph()
    if self._entry is None:
      g.freeze()
      return g
    for node in reversed(self._predecessors.post_order):
      g.add_node(node, self.graph.node(node))
    for node, dom in self._doms.items():
      if node != dom:
        g.add_edge(dom, node)
    g.freeze()
    return g

  def print_tree(self):
    logger.debug("DOM-tree :=\n%s", self.to_graph().to_dot())

  def __repr__(self):
    return 'DominatorTree(entry=%r, nodes=%d)' % (self._entry, len(self._doms))


def post_dominators(graph, exit_node):
  """
    Returns the post-dominator tree of ``graph``: the dominator tree of the
    inverted graph, anchored at ``exit_node``.
  """
  return DominatorTree(graph.inverse(entry=exit_node))
