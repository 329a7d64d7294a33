# -*- coding: utf-8 -*-
"""
  pydigraph
  ~~~~~~~~~

  Directed graphs with traversals, dominators and strongly connected
  components.

  :copyright: (c) 2014 by Romain Gaucher (@rgaucher)
  :license: Apache 2, see LICENSE for more details.
"""

__version__ = '0.1'

import sys

if sys.version_info < (3, 7):
  msg = ('Python version detected %d.%d not supported.'
      + ' Minimum supported version is 3.7') % (sys.version_info.major, sys.version_info.minor)
  raise Exception(msg)


from .graph import DiGraph,            \
                   GraphError,         \
                   GraphMutationError, \
                   InvariantViolation, \
                   DotConverter
from .analysis import Predecessors,  \
                      DominatorTree, \
                      DomKind,       \
                      Dominance,     \
                      TarjanSCC
