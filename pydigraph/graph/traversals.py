# -*- coding: utf-8 -*-
"""
  pydigraph.graph.traversals
  ~~~~~~~~~~~~~~~~~~~~~~~~~~

  DFS/BFS and post-order DFS over the nodes reachable from the entry.

  All the traversals are lazy generators anchored at ``graph.entry``. They
  can be consumed only once, and the graph must not be mutated while they
  are consumed. Successors are explored in the graph's enumeration order
  (insertion order).

  :copyright: (c) 2014 by Romain Gaucher (@rgaucher)
  :license: Apache 2, see LICENSE for more details.
"""
from collections import deque

from .graphs import GraphMutationError


def _check_version(graph, version):
  if graph.version != version:
    raise GraphMutationError('The graph was mutated during the traversal')


def dfs_nodes(graph):
  """
    Pre-order DFS. A node is marked as visited when it is pushed, so it is
    pushed at most once.
  """
  version = graph.version
  entry = graph.entry
  if entry is None:
    return
  visited = set([entry])
  worklist = [entry]
  while worklist:
    current = worklist.pop()
    for dest in reversed(graph.successor_ids(current)):
      if dest not in visited:
        visited.add(dest)
        worklist.append(dest)
    yield current
    _check_version(graph, version)


def bfs_nodes(graph):
  """
    BFS, nodes come out in layers of non-decreasing distance from the entry.
  """
  version = graph.version
  entry = graph.entry
  if entry is None:
    return
  visited = set([entry])
  worklist = deque([entry])
  while worklist:
    current = worklist.popleft()
    for dest in graph.successor_ids(current):
      if dest not in visited:
        visited.add(dest)
        worklist.append(dest)
    yield current
    _check_version(graph, version)


def dfs_postorder_nodes(graph):
  """
    Post-order DFS, the entry node always comes out last.

    A node seen for the first time stays on the worklist and gets its unseen
    successors pushed above it. It is emitted when it reaches the top of the
    worklist again, once all of them were processed. The same node can be on
    the worklist several times (reached from different paths) but is only
    emitted once.
  """
  version = graph.version
  entry = graph.entry
  if entry is None:
    return
  seen = set()
  emitted = set()
  worklist = [entry]
  while worklist:
    current = worklist[-1]
    if current not in seen:
      seen.add(current)
      for dest in reversed(graph.successor_ids(current)):
        if dest not in seen:
          worklist.append(dest)
      continue
    worklist.pop()
    if current in emitted:
      continue
    emitted.add(current)
    yield current
    _check_version(graph, version)
