# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Chart assembly: the plot area, background, grid, series, axes, title and legend of one chart, as an SVG document.
'''

from typing import Any

from .axis import Axes, cartesian_series, ChartAxis, PlotArea, prepare_axes
from .config import ChartConfig, load_chart
from .io import errSL
from .legend import render_legend
from .series import group_by_renderer
from .series.base import RenderContext
from .svg import G, rotate, Svg


def render_chart(chart:dict[str,Any]|ChartConfig, dbg:bool=False) -> str:
  '''
  Render a chart description to an SVG document string.
  Raises `ConfigError` for an invalid description and `PlotAreaError` when the margins leave no room to plot.
  '''
  return build_chart(chart, dbg=dbg).render_str()


def build_chart(chart:dict[str,Any]|ChartConfig, dbg:bool=False) -> Svg:
  'Build the SVG tree of a chart. See `render_chart`.'
  config = load_chart(chart)
  area = plot_area(config)
  if dbg: errSL('chartsvg chart:', f'{config.width}x{config.height}', 'plot area:', area)

  svg = Svg(width=config.width, height=config.height).viewbox(0, 0, config.width, config.height)
  bg = config.background
  if bg.enabled:
    r = bg.border_radius or None
    svg.rect(x=0, y=0, width=config.width, height=config.height, fill=bg.color, rx=r, ry=r, cl='background')

  axes:Axes|None = None
  if cartesian_series(config):
    axes = prepare_axes(config, area, config.is_horizontal, dbg=dbg)
    if config.grid.enabled: svg.append(render_grid(axes, area))

  ctx = RenderContext(config=config, area=area, axes=axes, dbg=dbg)
  title = render_title(config)
  if title is not None: svg.append(title)

  for render, series in group_by_renderer(config.series):
    svg.append(render(ctx, series))

  if axes is not None:
    svg.append(render_axes(axes))

  x_axis = axes.x[0] if axes is not None and axes.x else None
  legend = render_legend(config.series, area, config.legend, x_axis)
  if legend is not None: svg.append(legend)

  defs = ctx.gradients.defs()
  if defs is not None: svg._.insert(0, defs)
  if dbg: errSL('chartsvg chart: gradients:', len(ctx.gradients))
  return svg


def plot_area(config:ChartConfig) -> PlotArea:
  m = config.margin
  return PlotArea(m.left, m.top, config.width - m.left - m.right, config.height - m.top - m.bottom)


def render_grid(axes:Axes, area:PlotArea) -> G:
  '''
  Grid lines across the plot area at the ticks of each axis whose grid is enabled:
  vertical lines for horizontal axes and horizontal lines for vertical axes.
  '''
  g = G(cl='grid')
  for axis in axes.all():
    grid = axis.cfg.grid
    if not axis.cfg.enabled or not grid.enabled: continue
    attrs = dict(stroke=grid.color, stroke_width=grid.width, stroke_dasharray=grid.dash_array or None)
    for tick in axis.ticks:
      if axis.vertical: g.line(x1=area.x, y1=tick.position, x2=area.right, y2=tick.position, **attrs)
      else: g.line(x1=tick.position, y1=area.y, x2=tick.position, y2=area.bottom, **attrs)
  return g


def render_title(config:ChartConfig) -> G|None:
  'The chart title, or None when it is disabled or empty.'
  t = config.title
  if not t.enabled or not t.text: return None
  y = config.margin.top / 2 + t.offset_y
  match t.align:
    case 'left': x, anchor = config.margin.left + t.offset_x, 'start'
    case 'right': x, anchor = config.width - config.margin.right + t.offset_x, 'end'
    case _: x, anchor = config.width / 2 + t.offset_x, 'middle'
  g = G(cl='title')
  g.label(t.text, x=x, y=y, text_anchor=anchor, **t.text_attrs())
  return g


def render_axes(axes:Axes) -> G:
  g = G(cl='axes')
  for axis in axes.x: render_axis(g, axis, axes.horizontal)
  for axis in axes.y: render_axis(g, axis, axes.horizontal)
  return g


def render_axis(parent:G, axis:ChartAxis, horizontal:bool) -> None:
  '''
  Draw the line, ticks, tick labels and title of one axis.
  Ticks point away from the plot area.
  '''
  cfg = axis.cfg
  if not cfg.enabled: return
  g = parent.g(cl=['axis', 'axis-y' if axis.vertical else 'axis-x', f'axis-{axis.side}', f'axis-{axis.kind_class}'],
    data_axis=axis.axis_id)
  p = axis.position
  if cfg.line.enabled:
    g.line(x1=p.x1, y1=p.y1, x2=p.x2, y2=p.y2, stroke=cfg.line.color, stroke_width=cfg.line.width,
      stroke_dasharray=cfg.line.dash_array or None)

  ticks = cfg.ticks
  tick_size = ticks.size if ticks.enabled else 0
  labels = cfg.labels
  label_attrs = labels.text_attrs()
  for tick in axis.ticks:
    if axis.vertical:
      out = -1 if axis.side == 'left' else 1
      if ticks.enabled:
        g.line(x1=p.x1, y1=tick.position, x2=p.x1 + out * tick_size, y2=tick.position,
          stroke=ticks.color, stroke_width=ticks.width)
      if labels.enabled:
        gap = 8 if horizontal else 15
        x = p.x1 + out * (tick_size + gap) + labels.offset_x
        y = tick.position + labels.offset_y
        anchor = labels.align or ('end' if axis.side == 'left' else 'start')
        g.label(tick.label, x=x, y=y, text_anchor=anchor, dominant_baseline='middle',
          transform=rotate(labels.rotation, x, y) if labels.rotation else None, **label_attrs)
    else:
      out = 1 if axis.side == 'bottom' else -1
      if ticks.enabled:
        g.line(x1=tick.position, y1=p.y1, x2=tick.position, y2=p.y1 + out * tick_size,
          stroke=ticks.color, stroke_width=ticks.width)
      if labels.enabled:
        x = tick.position + labels.offset_x
        y = (p.y1 + tick_size + labels.font_size if out > 0 else p.y1 - tick_size - 5) + labels.offset_y
        anchor = labels.align or ('end' if labels.rotation else 'middle')
        g.label(tick.label, x=x, y=y, text_anchor=anchor,
          transform=rotate(labels.rotation, x, y) if labels.rotation else None, **label_attrs)

  title = cfg.title
  if not title.enabled or not title.text: return
  if axis.vertical:
    default_offset = -35 if axis.side == 'left' else 35
    x = p.x1 + (default_offset if title.offset_x is None else title.offset_x)
    y = (p.y1 + p.y2) / 2 + (title.offset_y or 0)
    rotation = title.rotation
    if rotation is None: rotation = 0 if horizontal else -90
  else:
    default_offset = 2.5 * labels.font_size
    if axis.side == 'top': default_offset = -default_offset
    x = (p.x1 + p.x2) / 2 + (title.offset_x or 0)
    y = p.y1 + (default_offset if title.offset_y is None else title.offset_y)
    rotation = title.rotation or 0
  g.label(title.text, x=x, y=y, text_anchor='middle', cl='axis-title',
    transform=rotate(rotation, x, y) if rotation else None, **title.text_attrs())
