# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Line series: straight, stepped (`line.stepped`) and spline (series type 'spline').
'''

from ..config import SeriesConfig
from ..svg import G, PathCommand
from .base import (draw_data_labels, draw_points, plot_points, PlotPoint, points_enabled, RenderContext, series_group,
  split_runs)


def render(ctx:RenderContext, series:list[SeriesConfig]) -> G:
  g = series_group('line')
  for s in series:
    render_series(ctx, g, s)
  return g


def render_series(ctx:RenderContext, g:G, s:SeriesConfig) -> None:
  points = plot_points(ctx, s)
  runs = split_runs(points, s.line.connect_nulls)
  sg = g.g(cl='line', data_series=s.name, opacity=s.opacity if s.opacity != 1 else None)
  for run in runs:
    if s.type == 'spline' and len(run) > 2:
      d = spline_path(run)
    elif s.line.stepped:
      d = stepped_path(run)
    else:
      d = line_path(run)
    sg.path(d, fill='none', stroke=s.color, stroke_width=s.line.width, stroke_dasharray=s.line.dash_array or None)
  present = [p for p in points if p is not None]
  if points_enabled(s): draw_points(sg, s, present)
  if s.data_labels.enabled: draw_data_labels(ctx, sg, s, present)


def line_path(points:list[PlotPoint]) -> list[PathCommand]:
  return [('M' if i == 0 else 'L', p.x, p.y) for i, p in enumerate(points)]


def stepped_path(points:list[PlotPoint]) -> list[PathCommand]:
  'Hold each value horizontally until the next point, then step vertically.'
  d:list[PathCommand] = []
  prev:PlotPoint|None = None
  for p in points:
    if prev is None:
      d.append(('M', p.x, p.y))
    else:
      d.append(('L', p.x, prev.y))
      d.append(('L', p.x, p.y))
    prev = p
  return d


def spline_path(points:list[PlotPoint]) -> list[PathCommand]:
  '''
  A smooth cubic path through the points.
  Each control point follows the direction between the neighbors of its endpoint, at a third of the distance.
  '''
  n = len(points)
  d:list[PathCommand] = [('M', points[0].x, points[0].y)]
  if n == 2:
    d.append(('L', points[1].x, points[1].y))
    return d
  for i in range(n - 1):
    p1 = points[i]
    p2 = points[i + 1]
    if i == 0:
      cp1x = p1.x + (p2.x - p1.x) / 3
      cp1y = p1.y + (p2.y - p1.y) / 3
    else:
      p0 = points[i - 1]
      cp1x = p1.x + (p2.x - p0.x) / 3
      cp1y = p1.y + (p2.y - p0.y) / 3
    if i == n - 2:
      cp2x = p2.x - (p2.x - p1.x) / 3
      cp2y = p2.y - (p2.y - p1.y) / 3
    else:
      p3 = points[i + 2]
      cp2x = p2.x - (p3.x - p1.x) / 3
      cp2y = p2.y - (p3.y - p1.y) / 3
    d.append(('C', cp1x, cp1y, cp2x, cp2y, p2.x, p2.y))
  return d
