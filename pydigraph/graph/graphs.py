# -*- coding: utf-8 -*-
"""
  pydigraph.graph.graphs
  ~~~~~~~~~~~~~~~~~~~~~~

  Graph data structures

  :copyright: (c) 2014 by Romain Gaucher (@rgaucher)
  :license: Apache 2, see LICENSE for more details.
"""
import copy
from types import MappingProxyType

from ..utils.log import logger


class GraphError(Exception):
  """
    Raised when the graph is used in a way it does not allow (mutating a
    frozen graph, adding a dangling edge to a strict graph, etc.).
  """
  pass


class GraphMutationError(GraphError):
  """
    Raised by a traversal when the graph changed while it was consumed.
  """
  pass


class InvariantViolation(GraphError):
  """
    Internal state of an algorithm is inconsistent. This is a programming
    error and the computation is aborted.
  """
  pass


class DiGraph(object):
  """
    A simple directed-graph structure.

    Nodes are arbitrary hashable ids mapped to a payload, edges are ordered
    pairs of ids mapped to a payload. There is at most one edge per ordered
    pair. The first node ever added becomes the entry of the graph, which
    anchors all the traversals and analyses.
  """

  def __init__(self, strict=False):
    self._strict = strict
    self._nodes = {} # node -> data
    self._edges = {} # source -> dest -> data
    self._entry = None
    self._immutable = False
    self._version = 0

  @property
  def strict(self):
    return self._strict

  @property
  def immutable(self):
    return self._immutable

  @property
  def version(self):
    """
      Returns the number of mutations applied to this graph so far.
    """
    return self._version

  @property
  def entry(self):
    return self._entry

  @entry.setter
  def entry(self, value):
    self.__check_mutable('set the entry')
    if value not in self._nodes:
      raise GraphError('Unknown entry node: %r' % (value,))
    self._entry = value
    self._version += 1

  @property
  def nodes(self):
    return self._nodes.keys()

  @property
  def edges(self):
    for source, dests in self._edges.items():
      for dest, data in dests.items():
        yield source, dest, data

  def __len__(self):
    return len(self._nodes)

  def __contains__(self, node):
    return node in self._nodes

  def __iter__(self):
    return iter(self._nodes)

  def __check_mutable(self, action):
    if self._immutable:
      logger.error("Rejected mutation on frozen graph: %s", action)
      raise GraphError('The graph is now immutable. Cannot %s.' % action)

  def has_node(self, node):
    return node in self._nodes

  def node(self, node):
    return self._nodes.get(node)

  def add_node(self, node, data=None):
    self.__check_mutable('add node')
    if node is None:
      raise GraphError('None cannot be used as a node id')
    self._nodes[node] = data
    if self._entry is None:
      self._entry = node
    self._version += 1
    return node

  def remove_node(self, node):
    """
      Removes the node and returns its data. Edges touching the node are
      kept; they have to be removed with ``remove_edge``.
    """
    self.__check_mutable('remove node')
    if node not in self._nodes:
      return None
    data = self._nodes.pop(node)
    self._version += 1
    if node == self._entry:
      self._entry = next(iter(self._nodes), None)
      logger.debug("Entry node %r removed, new entry is %r", node, self._entry)
    return data

  def add_edge(self, source, dest, data=None):
    """
      Adds (or replaces) the edge ``source -> dest``. Returns the data of the
      replaced edge if any.
    """
    self.__check_mutable('add edge')
    if self._strict:
      for endpoint in (source, dest):
        if endpoint not in self._nodes:
          raise GraphError('Edge %r -> %r references unknown node %r' % (source, dest, endpoint))
    dests = self._edges.setdefault(source, {})
    previous = dests.get(dest)
    dests[dest] = data
    self._version += 1
    return previous

  def remove_edge(self, source, dest):
    self.__check_mutable('remove edge')
    if source not in self._edges or dest not in self._edges[source]:
      return None
    data = self._edges[source].pop(dest)
    if not self._edges[source]:
      self._edges.pop(source, None)
    self._version += 1
    return data

  def has_edge(self, source, dest):
    return source in self._edges and dest in self._edges[source]

  def edge(self, source, dest):
    dests = self._edges.get(source)
    if dests is None:
      return None
    return dests.get(dest)

  def successors(self, node):
    """
      Returns a read-only mapping ``dest -> data`` of the out-going edges of
      ``node``, or None if it has none.
    """
    dests = self._edges.get(node)
    if not dests:
      return None
    return MappingProxyType(dests)

  def successor_ids(self, node):
    return list(self._edges.get(node, ()))

  def out_degree(self, node):
    return len(self._edges.get(node, ()))

  def freeze(self):
    self._immutable = True

  def unfreeze(self):
    self._immutable = False

  def copy(self):
    return copy.deepcopy(self)

  def inverse(self, entry=None):
    """
      Returns a frozen copy of this graph where all edges have been inverted.
      The entry of the new graph is ``entry`` if given, this graph's entry
      otherwise.
    """
    new_g = DiGraph(strict=self.strict)
    if entry is not None:
      new_g.add_node(entry, self._nodes.get(entry))
    elif self._entry is not None:
      new_g.add_node(self._entry, self._nodes[self._entry])
    for node, data in self._nodes.items():
      new_g.add_node(node, data)
    for source, dest, data in self.edges:
      new_g._edges.setdefault(dest, {})[source] = copy.deepcopy(data)
    new_g.freeze()
    return new_g

  # Analyses
  def iter_df(self):
    from .traversals import dfs_nodes
    return dfs_nodes(self)

  def iter_bf(self):
    from .traversals import bfs_nodes
    return bfs_nodes(self)

  def iter_df_post(self):
    from .traversals import dfs_postorder_nodes
    return dfs_postorder_nodes(self)

  def predecessors(self):
    from ..analysis.predecessors import Predecessors
    return Predecessors(self)

  def dominators(self):
    from ..analysis.dominators import DominatorTree
    return DominatorTree(self)

  def post_dominators(self, exit_node):
    from ..analysis.dominators import post_dominators
    return post_dominators(self, exit_node)

  def scc(self):
    from ..analysis.scc import TarjanSCC
    return TarjanSCC(self).process_graph()

  def to_dot(self, decorator=None):
    from .io import DotConverter
    return DotConverter.process(self, decorator=decorator)

  def __repr__(self):
    return 'DiGraph(nodes=%d, edges=%d, entry=%r)' \
           % (len(self._nodes), sum(len(d) for d in self._edges.values()), self._entry)
