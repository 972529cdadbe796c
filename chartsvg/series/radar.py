# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Radar (spider) and polar series.
Both are drawn around the center of the plot area, with a radius of 85% of half its smaller side.
Radar categories run clockwise from 12 o'clock; polar angles are taken from the x values, in degrees from east.
'''

from math import cos, pi, radians, sin
from typing import Any

from ..config import ChartConfig, SeriesConfig
from ..io import errSL
from ..scale import num_or_zero, to_num
from ..stack import StackAccumulator, stack_order
from ..svg import G, PathCommand
from .base import draw_data_label, draw_points, fill_template, fmt_label_value, PlotPoint, points_enabled, RenderContext, series_group


def render(ctx:RenderContext, series:list[SeriesConfig]) -> G:
  g = series_group('radar')
  radars = [s for s in series if s.type == 'radar']
  polars = [s for s in series if s.type == 'polar']
  if radars: render_radar(ctx, g, radars)
  if polars: render_polar(ctx, g, polars)
  return g


def chart_radius(ctx:RenderContext) -> float:
  return min(ctx.area.width, ctx.area.height) / 2 * 0.85


def spoke_angle(i:int, count:int) -> float:
  'The angle in radians of spoke `i` of `count`, starting at 12 o\'clock.'
  return 2 * pi * i / count - pi / 2


def radar_categories(config:ChartConfig, series:list[SeriesConfig]) -> list[Any]:
  '''
  The default x values, or else the union of the series x values in first seen order,
  or else '1'..'n' where n is the longest series.
  '''
  if config.x_values.get('default'): return list(config.x_values['default'])
  categories:list[Any] = []
  for s in series:
    for c in config.series_x(s):
      if c not in categories: categories.append(c)
  if categories: return categories
  n = max((len(s.data) for s in series), default=0)
  return [str(i + 1) for i in range(n)]


def category_values(config:ChartConfig, s:SeriesConfig, categories:list[Any]) -> list[float]:
  'The value of `s` for each category. Categories the series lacks, and missing values, are 0.'
  xs = config.series_x(s)
  if not xs: return [num_or_zero(s.data[i]) if i < len(s.data) else 0.0 for i in range(len(categories))]
  index = {}
  for i, x in enumerate(xs):
    index.setdefault(x, i)
  values = []
  for c in categories:
    i = index.get(c)
    values.append(num_or_zero(s.data[i]) if i is not None and i < len(s.data) else 0.0)
  return values


def radar_max(config:ChartConfig, series:list[SeriesConfig], categories:list[Any]) -> float:
  '''
  The value at the outer ring: the declared `radar.max` of the first series that has one,
  or else the greater of the largest value and the largest stacked total, but at least 1.
  '''
  for s in series:
    if s.radar.max is not None and s.radar.max > 0: return s.radar.max
  top = 0.0
  stacks:dict[str,StackAccumulator] = {}
  for s in series:
    values = category_values(config, s, categories)
    top = max([top, *values])
    if s.stacked:
      acc = stacks.setdefault(s.stack_group, StackAccumulator())
      for i, v in enumerate(values):
        acc.accumulate(i, s.name, max(0.0, v))
  for acc in stacks.values():
    top = max(top, acc.max_positive_total())
  return max(1.0, top)


def render_radar(ctx:RenderContext, g:G, series:list[SeriesConfig]) -> None:
  config = ctx.config
  categories = radar_categories(config, series)
  n = len(categories)
  if n == 0: return
  cx, cy = ctx.area.center
  radius = chart_radius(ctx)
  top = radar_max(config, series, categories)
  if ctx.dbg: errSL('chartsvg radar:', n, 'categories; max:', top)
  render_radar_grid(g, series[0], cx, cy, radius, categories)

  def at(i:int, v:float) -> tuple[float,float]:
    r = v / top * radius
    a = spoke_angle(i, n)
    return cx + r * cos(a), cy + r * sin(a)

  stacks:dict[str,list[SeriesConfig]] = {}
  for s in series:
    if s.stacked: stacks.setdefault(s.stack_group, []).append(s)

  for members in stacks.values():
    acc = StackAccumulator()
    for s in stack_order(members, 'radar'):
      values = category_values(config, s, categories)
      items = [acc.accumulate(i, s.name, max(0.0, v)) for i, v in enumerate(values)]
      tops = [PlotPoint(i, *at(i, it.band_end), it.value) for i, it in enumerate(items)]
      bottoms = [at(i, it.band_start) for i, it in enumerate(items)]
      render_radar_shape(ctx, g, s, tops, bottoms)

  for s in series:
    if s.stacked: continue
    values = category_values(config, s, categories)
    render_radar_shape(ctx, g, s, [PlotPoint(i, *at(i, v), v) for i, v in enumerate(values)], None)


def render_radar_shape(ctx:RenderContext, g:G, s:SeriesConfig, tops:list[PlotPoint],
 bottoms:list[tuple[float,float]]|None) -> None:
  '''
  Draw one radar series: the filled band (down to `bottoms` for stacked series, or the center),
  the closed outline, points and labels.
  '''
  sg = g.g(cl='radar', data_series=s.name, opacity=s.opacity if s.opacity != 1 else None)
  outline = [(p.x, p.y) for p in tops]
  if s.area.enabled:
    fill = ctx.gradients.fill(s.name, s.gradient, s.color)
    if bottoms is None:
      sg.polygon(outline, fill=fill, fill_opacity=s.area.fill_opacity, stroke='none')
    else:
      ring = outline + [outline[0]] + bottoms[::-1] + [bottoms[-1]]
      d:list[PathCommand] = [('M' if i == 0 else 'L', x, y) for i, (x, y) in enumerate(ring)]
      d.append('Z')
      sg.path(d, fill=fill, fill_opacity=s.area.fill_opacity, stroke='none', fill_rule='evenodd')
  sg.polyline(outline + outline[:1], fill='none', stroke=s.color, stroke_width=s.line.width,
    stroke_dasharray=s.line.dash_array or None)
  if s.point.enabled: draw_points(sg, s, tops)
  dl = s.data_labels
  if dl.enabled:
    for p in tops:
      draw_data_label(sg, dl, p.x, p.y, fill_template(dl.format, y=fmt_label_value(ctx, p.value, dl)))


def render_radar_grid(g:G, s:SeriesConfig, cx:float, cy:float, radius:float, categories:list[Any]) -> None:
  'Concentric level circles, one spoke per category, and the category labels beyond the spoke ends.'
  opts = s.radar
  n = len(categories)
  grid = g.g(cl='radar-grid')
  levels = max(1, opts.grid_levels)
  for i in range(1, levels + 1):
    grid.circle(cx=cx, cy=cy, r=radius * i / levels, fill='none', stroke=opts.grid_color, stroke_width=opts.grid_width)
  for i in range(n):
    a = spoke_angle(i, n)
    grid.line(x1=cx, y1=cy, x2=cx + radius * cos(a), y2=cy + radius * sin(a),
      stroke=opts.axis_color, stroke_width=opts.grid_width)
  r = radius + opts.label_offset
  slack = radius * 0.1
  for i, c in enumerate(categories):
    a = spoke_angle(i, n)
    x = cx + r * cos(a)
    y = cy + r * sin(a)
    anchor = 'end' if x < cx - slack else 'start' if x > cx + slack else 'middle'
    baseline = 'baseline' if y < cy - slack else 'hanging' if y > cy + slack else 'middle'
    grid.label(str(c), x=x, y=y, text_anchor=anchor, dominant_baseline=baseline, **opts.labels.text_attrs())


def render_polar(ctx:RenderContext, g:G, series:list[SeriesConfig]) -> None:
  cx, cy = ctx.area.center
  radius = chart_radius(ctx)
  opts = series[0].polar
  if opts.grid: render_polar_grid(g, series[0], cx, cy, radius)
  for s in series:
    render_polar_series(ctx, g, s, cx, cy, radius)


def render_polar_grid(g:G, s:SeriesConfig, cx:float, cy:float, radius:float) -> None:
  opts = s.polar
  grid = g.g(cl='polar-grid', fill='none', stroke=opts.grid_color, stroke_width=opts.grid_width)
  circles = max(1, opts.circle_count)
  for i in range(1, circles + 1):
    grid.circle(cx=cx, cy=cy, r=radius * i / circles)
  for i in range(max(0, opts.angle_count)):
    a = 2 * pi * i / opts.angle_count
    grid.line(x1=cx, y1=cy, x2=cx + radius * cos(a), y2=cy + radius * sin(a))


def polar_points(config:ChartConfig, s:SeriesConfig, cx:float, cy:float, radius:float) -> list[PlotPoint]:
  '''
  Place each (angle, value) pair: the angle comes from the series x values in degrees,
  and the value scales against `polar.max`, or else the series maximum.
  Pairs with a missing angle or value are skipped.
  '''
  angles = config.series_x(s)
  nums = [to_num(v) for v in s.data]
  top = s.polar.max
  if top is None or top <= 0:
    top = max((v for v in nums if v is not None), default=0.0)
    if top <= 0: top = 1.0
  points = []
  for i, (a, v) in enumerate(zip(angles, nums)):
    deg = to_num(a)
    if deg is None or v is None: continue
    r = v / top * radius
    t = radians(deg)
    points.append(PlotPoint(i, cx + r * cos(t), cy + r * sin(t), v))
  return points


def render_polar_series(ctx:RenderContext, g:G, s:SeriesConfig, cx:float, cy:float, radius:float) -> None:
  points = polar_points(ctx.config, s, cx, cy, radius)
  if not points: return
  sg = g.g(cl='polar', data_series=s.name, opacity=s.opacity if s.opacity != 1 else None)
  if s.polar.area:
    if len(points) >= 3:
      fill = ctx.gradients.fill(s.name, s.gradient, s.color)
      angles = ctx.config.series_x(s)
      by_angle = sorted(points, key=lambda p: num_or_zero(angles[p.index]) % 360)
      d:list[PathCommand] = [('M', cx, cy)]
      d.extend(('L', p.x, p.y) for p in by_angle)
      d.extend((('L', by_angle[0].x, by_angle[0].y), 'Z'))
      sg.path(d, fill=fill, fill_opacity=0.5 if s.fill_opacity is None else s.fill_opacity,
        stroke=s.color, stroke_width=s.line.width)
  elif len(points) > 1:
    outline = [(p.x, p.y) for p in points]
    if outline[0] != outline[-1]: outline.append(outline[0])
    sg.polyline(outline, fill='none', stroke=s.color, stroke_width=s.line.width,
      stroke_dasharray=s.line.dash_array or None)
  if points_enabled(s): draw_points(sg, s, points)
  dl = s.data_labels
  if dl.enabled:
    for p in points:
      draw_data_label(sg, dl, p.x, p.y, fill_template(dl.format, y=fmt_label_value(ctx, p.value, dl)))
