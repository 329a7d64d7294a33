# -*- coding: utf-8 -*-
"""
  pydigraph.analysis.predecessors
  ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~

  Reverse adjacency of the nodes reachable from the entry.

  :copyright: (c) 2014 by Romain Gaucher (@rgaucher)
  :license: Apache 2, see LICENSE for more details.
"""

from ..graph.traversals import dfs_postorder_nodes


class Predecessors(object):
  """
    Maps each node reachable from the entry to the set of its predecessors,
    and keeps the post-order DFS sequence used to compute it.

    Only one post-order traversal is performed: every node ``u`` it
    produces is recorded as a predecessor of each of its successors.
  """
  def __init__(self, graph):
    self._graph = graph
    self._post_order = []
    self._post_order_number = {}
    self._predecessors = {}
    self.build()

  @property
  def graph(self):
    return self._graph

  @property
  def post_order(self):
    """
      Returns the list of nodes in post-order. The entry node is last.
    """
    return self._post_order

  @property
  def post_order_number(self):
    """
      Returns the dict mapping each node to its index in ``post_order``.
    """
    return self._post_order_number

  @property
  def predecessors(self):
    return self._predecessors

  def build(self):
    preds = {}
    for node in dfs_postorder_nodes(self.graph):
      self._post_order_number[node] = len(self._post_order)
      self._post_order.append(node)
      for dest in self.graph.successor_ids(node):
        preds.setdefault(dest, set()).add(node)
    self._predecessors = dict((k, frozenset(v)) for k, v in preds.items())

  def by_node(self, node):
    """
      Returns the predecessors of ``node`` or None if none was recorded.
    """
    return self._predecessors.get(node)

  def __repr__(self):
    return 'Predecessors(nodes=%d)' % len(self._post_order)
