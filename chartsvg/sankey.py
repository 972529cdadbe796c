# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Sankey diagram layout: topological leveling of nodes, proportional node sizing, and link bands.
Sankey series do not use the cartesian axes; the layout fills the whole plot area.
'''

from typing import Any, Iterable, NamedTuple, Sequence

from .axis import PlotArea
from .config import ChartConfig, SankeyConfig, SankeyLinkConfig, SankeyNodeConfig, SeriesConfig
from .scale import num_or_zero
from .svg import PathCommand


class NodeLayout(NamedTuple):
  id:str
  level:int
  x:float
  y:float
  width:float
  height:float
  value_in:float
  value_out:float
  value_total:float # max(value_in, value_out).


class LinkLayout(NamedTuple):
  link:SankeyLinkConfig
  sx:float # Source end: right edge of the source node.
  sy:float
  tx:float # Target end: left edge of the target node.
  ty:float
  source_width:float
  target_width:float


def parse_links(keys:Iterable[Any], values:Sequence[Any]) -> list[SankeyLinkConfig]:
  '''
  Build links from parallel key and value sequences.
  Each key is either an 'A->B' string or a mapping with 'source' and 'target' entries.
  Keys that name no source or target are skipped.
  '''
  links = []
  for i, key in enumerate(keys):
    if i >= len(values) or values[i] is None: continue
    if isinstance(key, dict):
      source = str(key.get('source') or '')
      target = str(key.get('target') or '')
    elif isinstance(key, str) and '->' in key:
      source, _, target = key.partition('->')
      source = source.strip()
      target = target.strip()
    else:
      continue
    if not source or not target: continue
    links.append(SankeyLinkConfig(source=source, target=target, value=num_or_zero(values[i])))
  return links


def series_graph(config:ChartConfig, series:SeriesConfig) -> tuple[list[SankeyNodeConfig],list[SankeyLinkConfig]]:
  '''
  The nodes and links of a sankey series.
  Links come from `sankey.links`, or else from the series x values paired with its data.
  Link endpoints that are not declared nodes are added as nodes, in first seen order.
  '''
  opts = series.sankey
  nodes = [SankeyNodeConfig(id=n, name=n) if isinstance(n, str) else n for n in opts.nodes]
  nodes = [n if n.id else SankeyNodeConfig(id=n.name, name=n.name, color=n.color) for n in nodes if n.id or n.name]
  links = list(opts.links) or parse_links(config.x_values.get(series.name, ()), series.data)
  ids = {n.id for n in nodes}
  for link in links:
    for id in (link.source, link.target):
      if id and id not in ids:
        ids.add(id)
        nodes.append(SankeyNodeConfig(id=id, name=id))
  return nodes, links


def assign_levels(node_ids:Sequence[str], links:Iterable[SankeyLinkConfig]) -> dict[str,int]:
  '''
  Assign each node a topological level: 0 for sources, else one more than the deepest of its sources.
  Levels are relaxed breadth first from the nodes without incoming links.
  If there are none (every node is on a cycle), the node with the most outgoing links among those with more outgoing
  than incoming links is used as the source.
  Cyclic input is leveled best effort: sources stay at level 0,
  and a level never exceeds the node count, which bounds the relaxation.
  Nodes unreachable from the sources take one more than the largest assigned level among their sources, or 0.
  '''
  ids = list(dict.fromkeys(node_ids))
  incoming:dict[str,list[str]] = {id: [] for id in ids}
  outgoing:dict[str,list[str]] = {id: [] for id in ids}
  for link in links:
    for id in (link.source, link.target):
      if id not in incoming:
        ids.append(id)
        incoming[id] = []
        outgoing[id] = []
    outgoing[link.source].append(link.target)
    incoming[link.target].append(link.source)

  levels = {id: -1 for id in ids}
  sources = [id for id in ids if not incoming[id]]
  if not sources:
    best = None
    best_out = -1
    for id in ids:
      n_out = len(outgoing[id])
      if n_out > len(incoming[id]) and n_out > best_out:
        best = id
        best_out = n_out
    if best is not None: sources = [best]
  for id in sources: levels[id] = 0
  source_set = set(sources)

  level_limit = max(0, len(ids) - 1)
  queue = list(sources)
  while queue:
    id = queue.pop(0)
    next_level = levels[id] + 1
    if next_level > level_limit: continue
    for target in outgoing[id]:
      if target in source_set: continue
      if levels[target] < next_level:
        levels[target] = next_level
        queue.append(target)

  for id in ids:
    if levels[id] >= 0: continue
    source_levels = [levels[s] for s in incoming[id] if levels[s] >= 0]
    levels[id] = max(source_levels) + 1 if source_levels else 0
  return levels


def node_values(node_ids:Iterable[str], links:Iterable[SankeyLinkConfig]) -> dict[str,tuple[float,float]]:
  'Map each node to its (incoming, outgoing) totals. Negative link values count as zero.'
  values = {id: [0.0, 0.0] for id in node_ids}
  for link in links:
    v = max(0.0, num_or_zero(link.value))
    values.setdefault(link.source, [0.0, 0.0])[1] += v
    values.setdefault(link.target, [0.0, 0.0])[0] += v
  return {id: (vi, vo) for id, (vi, vo) in values.items()}


def layout_nodes(node_ids:Sequence[str], links:Sequence[SankeyLinkConfig], levels:dict[str,int], area:PlotArea,
 opts:SankeyConfig) -> dict[str,NodeLayout]:
  '''
  Place the nodes in columns by level.
  Within a level, nodes are sorted by total value (descending) and sized proportionally to it,
  scaled to fill the plot height minus the padding between nodes,
  and clamped to [min_node_height, max_node_height].
  '''
  values = node_values(node_ids, links)
  max_level = max(levels.values(), default=0)
  level_width = max(0.0, (area.width - max_level * opts.level_padding) / (max_level + 1))
  node_width = level_width if opts.node_width is None else opts.node_width

  by_level:dict[int,list[str]] = {}
  for id, level in levels.items():
    by_level.setdefault(level, []).append(id)

  layouts = {}
  for level, ids in sorted(by_level.items()):
    totals = {id: max(values.get(id, (0.0, 0.0))) for id in ids}
    ids = sorted(ids, key=lambda id: -totals[id])
    level_total = sum(totals.values())
    available = area.height - opts.node_padding * (len(ids) - 1)
    scale = available / level_total if level_total > 0 else 0.0
    x = area.x + level * (level_width + opts.level_padding)
    y = area.y
    for id in ids:
      height = max(opts.min_node_height, min(opts.max_node_height, totals[id] * scale))
      value_in, value_out = values.get(id, (0.0, 0.0))
      layouts[id] = NodeLayout(id, level, x, y, node_width, height, value_in, value_out, totals[id])
      y += height + opts.node_padding
  return layouts


def layout_links(links:Iterable[SankeyLinkConfig], node_layouts:dict[str,NodeLayout]) -> list[LinkLayout]:
  '''
  Compute the band of each link.
  The width at each end is proportional to the link's share of that node's outgoing (source end)
  or incoming (target end) total, times the node height. Links stack down each node edge in declaration order.
  Links whose endpoints have no layout are skipped.
  '''
  source_offsets = {id: l.y for id, l in node_layouts.items()}
  target_offsets = dict(source_offsets)
  result = []
  for link in links:
    src = node_layouts.get(link.source)
    tgt = node_layouts.get(link.target)
    if src is None or tgt is None: continue
    v = max(0.0, num_or_zero(link.value))
    sw = v * src.height / src.value_out if src.value_out > 0 else 0.0
    tw = v * tgt.height / tgt.value_in if tgt.value_in > 0 else 0.0
    sy = source_offsets[link.source]
    ty = target_offsets[link.target]
    source_offsets[link.source] += sw
    target_offsets[link.target] += tw
    result.append(LinkLayout(link, src.x + src.width, sy, tgt.x, ty, sw, tw))
  return result


def link_path(ll:LinkLayout, curvature:float=0.5) -> list[PathCommand]:
  'The closed band of a link: a cubic Bezier along the top edge, down the target end, and a cubic back along the bottom edge.'
  dx = ll.tx - ll.sx
  cp1x = ll.sx + dx * curvature
  cp2x = ll.tx - dx * curvature
  return [
    ('M', ll.sx, ll.sy),
    ('C', cp1x, ll.sy, cp2x, ll.ty, ll.tx, ll.ty),
    ('v', ll.target_width),
    ('C', cp2x, ll.ty + ll.target_width, cp1x, ll.sy + ll.source_width, ll.sx, ll.sy + ll.source_width),
    'Z',
  ]
