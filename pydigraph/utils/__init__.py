# -*- coding: utf-8 -*-
"""
  pydigraph.utils
  ~~~~~~~~~~~~~~~

  :copyright: (c) 2014 by Romain Gaucher (@rgaucher)
  :license: Apache 2, see LICENSE for more details.
"""
