# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Sankey series renderer. The layout itself lives in `chartsvg.sankey`.
Links are drawn beneath the nodes.
'''

from ..config import SankeyConfig, SankeyLinkConfig, SankeyNodeConfig, SeriesConfig
from ..io import errSL
from ..sankey import assign_levels, layout_links, layout_nodes, link_path, LinkLayout, NodeLayout, series_graph
from ..scale import fmt_number
from ..svg import G
from .base import fill_template, RenderContext, series_group


def render(ctx:RenderContext, series:list[SeriesConfig]) -> G:
  g = series_group('sankey')
  for s in series:
    render_sankey(ctx, g, s)
  return g


def render_sankey(ctx:RenderContext, g:G, s:SeriesConfig) -> None:
  opts = s.sankey
  nodes, links = series_graph(ctx.config, s)
  if not nodes: return
  ids = [n.id for n in nodes]
  levels = assign_levels(ids, links)
  node_layouts = layout_nodes(ids, links, levels, ctx.area, opts)
  link_layouts = layout_links(links, node_layouts)
  if ctx.dbg:
    errSL('chartsvg sankey:', s.name, 'levels:', levels)

  sg = g.g(cl='sankey', data_series=s.name, opacity=s.opacity if s.opacity != 1 else None)
  lg = sg.g(cl='links')
  for ll in link_layouts:
    render_link(ctx, lg, s, ll)
  ng = sg.g(cl='nodes')
  for node in nodes:
    layout = node_layouts.get(node.id)
    if layout is not None: render_node(ng, opts, node, layout)


def node_color(opts:SankeyConfig, node:SankeyNodeConfig) -> str:
  return opts.node_colors.get(node.id) or node.color or opts.node_color


def link_color(opts:SankeyConfig, link:SankeyLinkConfig) -> str:
  'The explicit color of the link, else the color of its source node, else the default link color.'
  return (opts.link_colors.get(f'{link.source}->{link.target}') or link.color or opts.node_colors.get(link.source)
    or opts.link_color)


def render_node(g:G, opts:SankeyConfig, node:SankeyNodeConfig, layout:NodeLayout) -> None:
  r = opts.corner_radius or None
  g.rect(x=layout.x, y=layout.y, width=layout.width, height=layout.height, fill=node_color(opts, node),
    fill_opacity=opts.node_opacity, stroke=opts.node_stroke_color, stroke_width=opts.node_stroke_width, rx=r, ry=r)
  labels = opts.node_labels
  if not labels.enabled: return
  y = layout.y + layout.height / 2
  match labels.position:
    case 'left': x, anchor = layout.x - 5, 'end'
    case 'right': x, anchor = layout.x + layout.width + 5, 'start'
    case _: x, anchor = layout.x + layout.width / 2, 'middle'
  g.label(node.name or node.id, x=x, y=y, text_anchor=anchor, dominant_baseline='middle', **labels.text_attrs())


def render_link(ctx:RenderContext, g:G, s:SeriesConfig, ll:LinkLayout) -> None:
  opts = s.sankey
  link = ll.link
  color = link_color(opts, link)
  if link.gradient.enabled:
    fill = ctx.gradients.fill(f'{s.name}_{link.source}_{link.target}', link.gradient, color, horizontal=True)
  else:
    fill = ctx.gradients.fill(f'{s.name}_link', s.gradient, color, horizontal=True)
  g.path(link_path(ll, opts.curvature), fill=fill, fill_opacity=opts.link_opacity, stroke='none',
    data_link=f'{link.source}->{link.target}')
  labels = opts.link_labels
  if not labels.enabled: return
  x = (ll.sx + ll.tx) / 2
  y = (ll.sy + ll.ty) / 2 + min(ll.source_width, ll.target_width) / 2
  nf = ctx.number_format
  value = fmt_number(link.value, decimal_point=nf.decimal_point, thousands_sep=nf.thousands_sep)
  text = fill_template(labels.format, value=value, source=link.source, target=link.target)
  g.label(text, x=x, y=y, text_anchor='middle', dominant_baseline='middle', **labels.text_attrs())
