# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Chart legend: one item (symbol and text) per series with `show_in_legend` set.
Text widths are estimated from the character count, since no font metrics are available server side.
'''

from math import radians, sin
from typing import NamedTuple

from .axis import ChartAxis, PlotArea
from .config import LegendConfig, SeriesConfig
from .series.base import draw_point, fill_opacity, points_enabled
from .svg import G, SvgBranch


class LegendItem(NamedTuple):
  series:SeriesConfig
  text:str
  width:float


class LegendBox(NamedTuple):
  x:float
  y:float
  width:float
  height:float
  item_height:float


def legend_items(series:list[SeriesConfig], opts:LegendConfig) -> list[LegendItem]:
  char_width = opts.font_size * 0.6
  items = []
  for s in series:
    if not s.show_in_legend: continue
    text = s.label
    items.append(LegendItem(s, text, opts.symbol_size + opts.symbol_spacing + len(text) * char_width))
  return items


def legend_size(items:list[LegendItem], opts:LegendConfig) -> tuple[float,float]:
  'The outer (width, height) of the legend, including padding.'
  item_height = opts.font_size * 1.2
  gaps = opts.item_spacing * (len(items) - 1)
  if opts.layout == 'vertical':
    w = max(item.width for item in items)
    h = item_height * len(items) + gaps
  else:
    w = sum(item.width for item in items) + gaps
    h = item_height
  return w + 2 * opts.padding, h + 2 * opts.padding


def axis_label_buffer(x_axis:ChartAxis|None) -> float:
  'The space below the plot area taken by the bottom axis labels.'
  if x_axis is None: return 40
  labels = x_axis.cfg.labels
  if labels.rotation > 0:
    longest = max((len(t.label) for t in x_axis.ticks), default=10)
    return longest * sin(radians(labels.rotation)) * labels.font_size + 20
  return labels.font_size * 2 + 10


def legend_box(items:list[LegendItem], area:PlotArea, opts:LegendConfig, x_axis:ChartAxis|None=None) -> LegendBox:
  '''
  Position the legend outside the plot area.
  Top and bottom legends align left, center or right along the plot area;
  left and right legends align top, center or bottom. Custom legends sit at (x, y).
  '''
  w, h = legend_size(items, opts)
  item_height = opts.font_size * 1.2
  align = opts.align

  def across_x() -> float:
    if align == 'left': return area.x
    if align == 'right': return area.right - w
    return area.x + (area.width - w) / 2

  def across_y() -> float:
    if align == 'top': return area.y
    if align == 'bottom': return area.bottom - h
    return area.y + (area.height - h) / 2

  match opts.position:
    case 'custom': x, y = opts.x, opts.y
    case 'top': x, y = across_x(), area.y - h - 10
    case 'left': x, y = area.x - w - 10, across_y()
    case 'right': x, y = area.right + 10, across_y()
    case _: x, y = across_x(), area.bottom + axis_label_buffer(x_axis)
  return LegendBox(x, y, w, h, item_height)


def render_legend(series:list[SeriesConfig], area:PlotArea, opts:LegendConfig, x_axis:ChartAxis|None=None) -> G|None:
  'Render the legend, or return None if it is disabled or no series is shown in it.'
  if not opts.enabled: return None
  items = legend_items(series, opts)
  if not items: return None
  box = legend_box(items, area, opts, x_axis)
  g = G(cl='legend')
  r = opts.border_radius or None
  if opts.background:
    g.rect(x=box.x, y=box.y, width=box.width, height=box.height, fill=opts.background, rx=r, ry=r)
    if opts.border.enabled:
      g.rect(x=box.x, y=box.y, width=box.width, height=box.height, fill='none',
        stroke=opts.border.color, stroke_width=opts.border.width, rx=r, ry=r)
  x = box.x + opts.padding
  y = box.y + opts.padding
  text_attrs = opts.text_attrs()
  for item in items:
    cy = y + box.item_height / 2
    ig = g.g(cl='legend-item', data_series=item.series.name)
    draw_symbol(ig, item.series, x, cy, opts.symbol_size)
    ig.label(item.text, x=x + opts.symbol_size + opts.symbol_spacing, y=cy, text_anchor='start',
      dominant_baseline='middle', **text_attrs)
    if opts.layout == 'vertical': y += box.item_height + opts.item_spacing
    else: x += item.width + opts.item_spacing
  return g


def draw_symbol(g:SvgBranch, s:SeriesConfig, x:float, y:float, size:float) -> None:
  'Draw the legend symbol for a series, with its left edge at `x` and centered vertically on `y`.'
  color = s.color
  half = size / 2
  match s.type:
    case 'line' | 'spline':
      g.line(x1=x, y1=y, x2=x + size, y2=y, stroke=color, stroke_width=s.line.width,
        stroke_dasharray=s.line.dash_array or None)
      if points_enabled(s):
        p = s.point
        draw_point(g, p.shape, x + half, y, p.size, p.color or color, p.border_color, p.border_width)
    case 'area':
      g.rect(x=x, y=y - half, width=size, height=size, fill=color, fill_opacity=s.area.fill_opacity,
        stroke=color, stroke_width=s.area.stroke_width)
    case 'pie' | 'multipie':
      g.circle(cx=x + half, cy=y, r=half, fill=color, fill_opacity=fill_opacity(s))
    case 'scatter':
      p = s.point
      draw_point(g, p.shape, x + half, y, p.size, p.color or color, p.border_color, p.border_width)
    case 'bubble':
      g.circle(cx=x + half, cy=y, r=half, fill=color, fill_opacity=fill_opacity(s, 0.7),
        stroke=s.bubble.border_color or None, stroke_width=s.bubble.border_width if s.bubble.border_color else None)
    case 'radar' | 'polar':
      g.polygon([(x + half, y - half), (x, y + half), (x + size, y + half)], fill=color, fill_opacity=fill_opacity(s))
    case _:
      r = s.bar.corner_radius or None if s.type == 'bar' else None
      g.rect(x=x, y=y - half, width=size, height=size, fill=color, fill_opacity=fill_opacity(s), rx=r, ry=r)
