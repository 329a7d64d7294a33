# -*- coding: utf-8 -*-
"""
  pydigraph.analysis.scc
  ~~~~~~~~~~~~~~~~~~~~~~

  Strongly connected components (Tarjan).

  :copyright: (c) 2014 by Romain Gaucher (@rgaucher)
  :license: Apache 2, see LICENSE for more details.
"""

from ..utils.log import logger
from ..graph.graphs import InvariantViolation


class _Index(object):
  __slots__ = ('index', 'low_link', 'on_stack')

  def __init__(self, index):
    self.index = index
    self.low_link = index
    self.on_stack = True

  def __repr__(self):
    return '_Index(index=%d, low_link=%d, on_stack=%s)' % (self.index, self.low_link, self.on_stack)


class TarjanSCC(object):
  """
    Decomposes the graph in strongly connected components:
      https://en.wikipedia.org/wiki/Tarjan%27s_strongly_connected_components_algorithm

    The DFS is driven by an explicit stack of ``(node, successors iterator)``
    frames, so the depth of the graph is not bounded by the recursion limit.
    Components are produced sink-first: when an edge goes from a component A
    to another component B, B comes before A.
  """
  def __init__(self, graph):
    self._graph = graph
    self._counter = 0
    self._state = {}
    self._stack = []
    self._result = None
    self._component = {}

  @property
  def graph(self):
    return self._graph

  def process_graph(self):
    """
      Returns the list of components, each of them being the list of its
      nodes. Roots are picked following the node order of the graph.
    """
    if self._result is not None:
      return list(self._result)
    self._result = []
    for node in self.graph.nodes:
      if node not in self._state:
        self.__process(node)
    logger.debug("Found %d strongly connected components", len(self._result))
    return list(self._result)

  def component_of(self, node):
    """
      Returns the position of the component of ``node`` in the result, or
      None if the node was not visited.
    """
    if self._result is None:
      self.process_graph()
    return self._component.get(node)

  def __process(self, root):
    self.__discover(root)
    frames = [(root, iter(self.graph.successor_ids(root)))]
    while frames:
      node, successors = frames[-1]
      descend = None
      for dest in successors:
        dest_state = self._state.get(dest)
        if dest_state is None:
          descend = dest
          break
        if dest_state.on_stack:
          self.__lower(node, dest_state.index)
      if descend is not None:
        self.__discover(descend)
        frames.append((descend, iter(self.graph.successor_ids(descend))))
        continue

      frames.pop()
      if self.__is_root(node):
        self.__close(node)
      if frames:
        self.__lower(frames[-1][0], self.__get(node).low_link)

  def __discover(self, node):
    self._state[node] = _Index(self._counter)
    self._counter += 1
    self._stack.append(node)

  def __get(self, node):
    state = self._state.get(node)
    if state is None:
      raise InvariantViolation('%r should have been visited' % (node,))
    return state

  def __lower(self, node, value):
    state = self.__get(node)
    if value < state.low_link:
      state.low_link = value

  def __is_root(self, node):
    state = self.__get(node)
    return state.low_link == state.index

  def __close(self, root):
    component = []
    position = len(self._result)
    while self._stack:
      current = self._stack.pop()
      self.__get(current).on_stack = False
      self._component[current] = position
      component.append(current)
      if current == root:
        self._result.append(component)
        return
    raise InvariantViolation('%r was not on the stack' % (root,))
