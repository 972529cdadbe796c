# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Area series, plain or stacked.
Stacked areas of the same stack group and axis pair share one `StackAccumulator`;
each area is the band between its stacked bottom and top.
'''

from typing import Any

from ..config import SeriesConfig
from ..io import errSL
from ..stack import StackAccumulator, stack_order
from ..svg import G, PathCommand
from .base import (draw_data_labels, draw_points, plot_points, PlotPoint, RenderContext, series_group,
  split_runs, value_point)


def render(ctx:RenderContext, series:list[SeriesConfig]) -> G:
  g = series_group('area')
  groups:dict[tuple[str,int,int],list[SeriesConfig]] = {}
  for s in series:
    if s.stacked:
      groups.setdefault((s.stack_group, s.x_axis_id, s.y_axis_id), []).append(s)
    else:
      render_area(ctx, g, s)
  for key, members in groups.items():
    acc = render_stack(ctx, g, members)
    if ctx.dbg: errSL('chartsvg area stack:', key, 'max total:', acc.max_positive_total())
  return g


def area_attrs(ctx:RenderContext, s:SeriesConfig) -> dict[str,Any]:
  return dict(
    fill=ctx.gradients.fill(s.name, s.gradient, s.color, horizontal=ctx.horizontal),
    fill_opacity=s.area.fill_opacity,
    stroke=s.color,
    stroke_width=s.area.stroke_width,
    opacity=s.opacity if s.opacity != 1 else None)


def render_area(ctx:RenderContext, g:G, s:SeriesConfig) -> None:
  assert ctx.axes is not None
  base = ctx.axes.value_axis(s).baseline()
  points = plot_points(ctx, s)
  sg = g.g(cl='area', data_series=s.name)
  attrs = area_attrs(ctx, s)
  for run in split_runs(points, s.line.connect_nulls):
    sg.path(area_path(run, base, ctx.horizontal), **attrs)
  present = [p for p in points if p is not None]
  if s.point.enabled: draw_points(sg, s, present)
  if s.data_labels.enabled: draw_data_labels(ctx, sg, s, present)


def area_path(points:list[PlotPoint], base:float, horizontal:bool=False) -> list[PathCommand]:
  'The outline through `points`, closed along the baseline.'
  d:list[PathCommand] = [('M' if i == 0 else 'L', p.x, p.y) for i, p in enumerate(points)]
  first = points[0]
  last = points[-1]
  if horizontal:
    d.extend((('L', base, last.y), ('L', base, first.y), 'Z'))
  else:
    d.extend((('L', last.x, base), ('L', first.x, base), 'Z'))
  return d


def render_stack(ctx:RenderContext, g:G, members:list[SeriesConfig]) -> StackAccumulator:
  '''
  Render one stack group. Series are accumulated and painted in reverse declaration order,
  so the first declared series is drawn last, on top.
  '''
  acc = StackAccumulator()
  for s in stack_order(members, 'area'):
    xs = ctx.config.series_x(s)
    tops:list[PlotPoint] = []
    bottoms:list[tuple[float,float]] = []
    for i, raw in enumerate(s.data):
      item = acc.accumulate(i, s.name, raw)
      top = value_point(ctx, s, xs, i, item.band_end)
      bottom = value_point(ctx, s, xs, i, item.band_start)
      if top is None or bottom is None: continue
      tops.append(PlotPoint(i, top[0], top[1], item.value))
      bottoms.append(bottom)
    if not tops: continue
    sg = g.g(cl='area stacked', data_series=s.name)
    outline = [(p.x, p.y) for p in tops] + bottoms[::-1]
    d:list[PathCommand] = [('M' if i == 0 else 'L', x, y) for i, (x, y) in enumerate(outline)]
    d.append('Z')
    sg.path(d, **area_attrs(ctx, s))
    if s.point.enabled: draw_points(sg, s, tops)
    if s.data_labels.enabled: draw_data_labels(ctx, sg, s, tops)
  return acc
