# -*- coding: utf-8 -*-
"""
  pydigraph.analysis
  ~~~~~~~~~~~~~~~~~~

  Analyses over the part of a graph reachable from its entry.

  :copyright: (c) 2014 by Romain Gaucher (@rgaucher)
  :license: Apache 2, see LICENSE for more details.
"""

from .predecessors import Predecessors
from .dominators import DominatorTree,  \
                        DomKind,        \
                        Dominance,      \
                        post_dominators
from .scc import TarjanSCC
