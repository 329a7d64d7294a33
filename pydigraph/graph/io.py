# -*- coding: utf-8 -*-
"""
  pydigraph.graph.io
  ~~~~~~~~~~~~~~~~~~

  Outputs the graph structures

  :copyright: (c) 2014 by Romain Gaucher (@rgaucher)
  :license: Apache 2, see LICENSE for more details.
"""

DOT_STYLE = """
rankdir=TD; ordering=out;
graph[fontsize=10 fontname="Verdana"];
color="#efefef";
node[shape=box style=filled fontsize=8 fontname="Verdana" fillcolor="#efefef"];
edge[fontsize=8 fontname="Verdana"];
"""

SCC_COLORS = (
  'aqua', 'red', 'blue', 'green', 'chocolate', 'yellow',
  'palegreen', 'purple', 'aquamarine1', 'bisque', 'yellowgreen',
)


def quote(value):
  return '"%s"' % str(value).replace('\\', '\\\\').replace('"', '\\"')


def format_attrs(attrs):
  if not attrs:
    return ''
  return '[%s]' % ' '.join('%s=%s' % (k, v) for k, v in attrs)


class DotDecorator(object):
  """
    Gives the attributes of the nodes and edges. The default labels a node
    with its id and data, and an edge with its data.
  """
  def node_attrs(self, node, data):
    label = str(node) if data is None else '%s %s' % (node, data)
    return [('label', quote(label))]

  def edge_attrs(self, source, dest, data):
    if data is None:
      return []
    return [('label', quote(data))]


class DominatorsHighlighter(DotDecorator):
  """
    Adds the immediate dominator of each node to its label.
  """
  def __init__(self, dominators):
    self._dominators = dominators

  def node_attrs(self, node, data):
    label = str(node) if data is None else '%s %s' % (node, data)
    idom = self._dominators.idom(node)
    if idom is not None:
      label = '%s, dom = %s' % (label, idom)
    return [('label', quote(label))]


class SCCHighlighter(DotDecorator):
  """
    Colors the nodes by strongly connected component, and puts the index of
    the component as an external label.
  """
  def __init__(self, components):
    self._component = {}
    for i, component in enumerate(components):
      for node in component:
        self._component[node] = i

  def node_attrs(self, node, data):
    attrs = DotDecorator.node_attrs(self, node, data)
    idx = self._component.get(node)
    if idx is not None:
      attrs.append(('color', SCC_COLORS[idx % len(SCC_COLORS)]))
      attrs.append(('xlabel', quote(idx)))
    return attrs


class DotConverter(object):
  def __init__(self, graph, decorator=None):
    self.g = graph
    self.decorator = decorator if decorator is not None else DotDecorator()
    self.buffer = ''
    self.node_ids = {}

  @staticmethod
  def process(graph, decorator=None):
    converter = DotConverter(graph, decorator)
    converter.run()
    return converter.buffer

  @staticmethod
  def to_file(graph, path, decorator=None):
    with open(path, 'w') as fd:
      fd.write(DotConverter.process(graph, decorator))

  def run(self):
    self.buffer += 'digraph G {'
    self.buffer += DOT_STYLE

    for node in self.g.nodes:
      self.get_node_id(node)
    for source, dest, data in self.g.edges:
      self.add_edge(source, dest, data)

    self.buffer += '}\n'

  def add_edge(self, source, dest, data):
    nid1 = self.get_node_id(source)
    nid2 = self.get_node_id(dest)
    labels = format_attrs(self.decorator.edge_attrs(source, dest, data))
    self.buffer += '%s -> %s %s;\n' % (nid1, nid2, labels)

  def get_node_id(self, node):
    if node not in self.node_ids:
      self.node_ids[node] = 'node_%d' % len(self.node_ids)
      self.add_node(node, self.node_ids[node])
    return self.node_ids[node]

  def add_node(self, node, node_id):
    attrs = self.decorator.node_attrs(node, self.g.node(node))
    self.buffer += '%s %s;\n' % (node_id, format_attrs(attrs))
