# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Scatter and bubble series.
Bubble diameters interpolate the series `size` values linearly onto [bubble.min_size, bubble.max_size].
'''

from ..config import BubbleConfig, SeriesConfig
from ..scale import data_bounds, fmt_number, to_num
from ..svg import G
from .base import (draw_data_labels, draw_label, draw_point, fill_opacity, fill_template, fmt_label_value, plot_points,
  points_enabled, RenderContext, series_group)


def render(ctx:RenderContext, series:list[SeriesConfig]) -> G:
  g = series_group('scatter')
  for s in series:
    if s.type == 'bubble': render_bubbles(ctx, g, s)
    else: render_scatter(ctx, g, s)
  return g


def render_scatter(ctx:RenderContext, g:G, s:SeriesConfig) -> None:
  points = [p for p in plot_points(ctx, s) if p is not None]
  sg = g.g(cl='scatter', data_series=s.name, opacity=s.opacity if s.opacity != 1 else None)
  if points_enabled(s):
    p = s.point
    fill = ctx.gradients.fill(s.name, s.gradient, p.color or s.color)
    for pt in points:
      draw_point(sg, p.shape, pt.x, pt.y, p.size, fill, p.border_color, p.border_width,
        fill_opacity=s.fill_opacity)
  if s.data_labels.enabled: draw_data_labels(ctx, sg, s, points)


def bubble_size(z:float|None, bounds:tuple[float,float]|None, opts:BubbleConfig) -> float:
  'The diameter of a bubble. Missing sizes, and series whose sizes are all equal, use `default_size`.'
  if z is None or bounds is None: return opts.default_size
  lo, hi = bounds
  if lo == hi: return opts.default_size
  return opts.min_size + (z - lo) / (hi - lo) * (opts.max_size - opts.min_size)


def render_bubbles(ctx:RenderContext, g:G, s:SeriesConfig) -> None:
  opts = s.bubble
  bounds = data_bounds(s.size)
  fill = ctx.gradients.fill(s.name, s.gradient, s.color)
  sg = g.g(cl='bubble', data_series=s.name, opacity=s.opacity if s.opacity != 1 else None)
  xs = ctx.config.series_x(s)
  dl = s.data_labels
  for pt in plot_points(ctx, s):
    if pt is None: continue
    z = to_num(s.size[pt.index]) if pt.index < len(s.size) else None
    size = bubble_size(z, bounds, opts)
    sg.circle(cx=pt.x, cy=pt.y, r=size / 2, fill=fill, fill_opacity=fill_opacity(s, 0.7),
      stroke=opts.border_color or None, stroke_width=opts.border_width if opts.border_color else None)
    if dl.enabled:
      x_val = xs[pt.index] if pt.index < len(xs) else pt.index
      text = fill_template(dl.format,
        x=fmt_number(x_val), y=fmt_label_value(ctx, pt.value, dl), z='' if z is None else fmt_number(z))
      draw_label(sg, dl, pt.x + dl.offset_x, pt.y, text, rotation=dl.rotation, dominant_baseline='middle')
