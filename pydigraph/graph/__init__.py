# -*- coding: utf-8 -*-
"""
  pydigraph.graph
  ~~~~~~~~~~~~~~~

  Graph store, traversals and output.

  :copyright: (c) 2014 by Romain Gaucher (@rgaucher)
  :license: Apache 2, see LICENSE for more details.
"""

from .graphs import DiGraph, GraphError, GraphMutationError, InvariantViolation
from .traversals import dfs_nodes, bfs_nodes, dfs_postorder_nodes
from .io import DotConverter, DotDecorator
