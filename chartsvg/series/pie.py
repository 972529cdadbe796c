# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Pie, donut and multipie series.
Pies do not use the cartesian axes: they are centered in the plot area, or in a grid cell per multipie group.
Angles are in degrees, clockwise from east, as in SVG.
'''

from math import ceil, cos, radians, sin, sqrt
from typing import NamedTuple

from ..axis import PlotArea
from ..color import default_pie_colors
from ..config import SeriesConfig
from ..scale import fmt_number, to_num
from ..svg import G, PathCommand
from .base import draw_label, fill_template, fmt_label_value, RenderContext, series_group


# A full circle is drawn as an arc just short of 360 degrees, which SVG arcs cannot express.
max_sweep = 359.99


class PieSlice(NamedTuple):
  index:int
  value:float
  start:float
  end:float

  @property
  def sweep(self) -> float: return self.end - self.start

  @property
  def mid(self) -> float: return (self.start + self.end) / 2


def pie_angles(start_angle:float, end_angle:float) -> tuple[float,float]:
  '''
  Convert configured angles to drawing angles.
  A full circle starts at 0; partial pies measure their angles from west.
  '''
  if end_angle - start_angle >= 360: return 0.0, 360.0
  start = (180 + start_angle) % 360
  end = (180 + end_angle) % 360
  if end <= start: end += 360
  return start, end


def pie_slices(values:list, start:float, end:float) -> list[PieSlice]:
  'Divide the angle range among the positive values proportionally. Nonpositive and missing values get no slice.'
  nums = [to_num(v) for v in values]
  total = sum(n for n in nums if n is not None and n > 0)
  if total <= 0: return []
  span = end - start
  slices = []
  a = start
  for i, n in enumerate(nums):
    if n is None or n <= 0: continue
    sweep = n / total * span
    slices.append(PieSlice(i, n, a, a + sweep))
    a += sweep
  return slices


def polar_point(cx:float, cy:float, r:float, angle:float) -> tuple[float,float]:
  a = radians(angle)
  return cx + r * cos(a), cy + r * sin(a)


def slice_path(cx:float, cy:float, r:float, inner:float, start:float, end:float) -> list[PathCommand]:
  'A pie wedge, or a ring segment when `inner` is positive.'
  end = min(end, start + max_sweep)
  large = 1 if end - start > 180 else 0
  sx, sy = polar_point(cx, cy, r, start)
  ex, ey = polar_point(cx, cy, r, end)
  if inner > 0:
    isx, isy = polar_point(cx, cy, inner, start)
    iex, iey = polar_point(cx, cy, inner, end)
    return [('M', sx, sy), ('A', r, r, 0, large, 1, ex, ey), ('L', iex, iey), ('A', inner, inner, 0, large, 0, isx, isy), 'Z']
  return [('M', cx, cy), ('L', sx, sy), ('A', r, r, 0, large, 1, ex, ey), 'Z']


def inner_radius(value:float|str, radius:float) -> float:
  'A pixel radius, or a percentage string of the outer radius such as "50%".'
  if isinstance(value, str):
    v = value.strip()
    try:
      if v.endswith('%'): return radius * float(v[:-1]) / 100
      return float(v)
    except ValueError:
      return 0.0
  return float(value)


def render(ctx:RenderContext, series:list[SeriesConfig]) -> G:
  g = series_group('pie')
  pies = [s for s in series if s.type == 'pie']
  multis = [s for s in series if s.type == 'multipie']
  for s in pies:
    cx, cy = ctx.area.center
    r = s.pie.radius if s.pie.radius is not None else min(ctx.area.width, ctx.area.height) * 0.45
    render_pie(ctx, g, s, cx, cy, r, inner_radius(s.pie.inner_radius, r))
  if multis: render_multipie(ctx, g, multis)
  return g


def render_pie(ctx:RenderContext, g:G, s:SeriesConfig, cx:float, cy:float, r:float, inner:float) -> None:
  p = s.pie
  colors = p.colors or default_pie_colors
  start, end = pie_angles(p.start_angle, p.end_angle)
  slices = pie_slices(s.data, start, end)
  total = sum(sl.value for sl in slices)
  categories = ctx.config.series_x(s)
  dl = s.data_labels
  sg = g.g(cl=s.type, data_series=s.name, opacity=s.opacity if s.opacity != 1 else None)
  for sl in slices:
    color = colors[sl.index % len(colors)]
    fill = ctx.gradients.fill(f'{s.name}_{sl.index}', s.gradient, color)
    sg.path(slice_path(cx, cy, r, inner, sl.start, sl.end), fill=fill, fill_opacity=s.fill_opacity,
      stroke=p.border_color or color, stroke_width=p.border_width)
    if not dl.enabled: continue
    label_r = (r + inner) / 2 if inner > 0 else r * 0.7
    lx, ly = polar_point(cx, cy, label_r, sl.mid)
    value = fmt_label_value(ctx, sl.value, dl)
    category = categories[sl.index] if sl.index < len(categories) else ''
    text = fill_template(dl.format, y=value, value=value, category=category,
      percentage=fmt_number(sl.value / total * 100, 1) + '%')
    draw_label(sg, dl, lx + dl.offset_x, ly + dl.offset_y, text, rotation=dl.rotation, dominant_baseline='middle')


class Ring(NamedTuple):
  series:SeriesConfig
  outer:float
  inner:float


def group_cells(area:PlotArea, count:int) -> list[PlotArea]:
  'Lay out `count` cells in a near square grid, each keeping 80% of its share.'
  if count < 1: return []
  cols = ceil(sqrt(count))
  rows = ceil(count / cols)
  w = area.width / cols
  h = area.height / rows
  return [PlotArea(area.x + (i % cols) * w + w * 0.1, area.y + (i // cols) * h + h * 0.1, w * 0.8, h * 0.8)
    for i in range(count)]


def ring_layout(series:list[SeriesConfig], cell:PlotArea) -> list[Ring]:
  '''
  Concentric rings for the series of one group, outermost (highest `ring_position`) first.
  Thickness is proportional to the data count, with the innermost position weighted 1.5 times;
  position 0 is a full pie.
  '''
  n = len(series)
  max_r = min(cell.width, cell.height) * 0.85 / 2
  spacing = min(5, max(2, 15 - n))
  ordered = sorted(series, key=lambda s: -s.multipie.ring_position)
  weights = [(len(s.data) or 4) * (1.5 if s.multipie.ring_position == 0 else 1.0) for s in ordered]
  total = sum(weights)
  rings = []
  r = max_r
  for s, w in zip(ordered, weights):
    thickness = w / total * max_r * 0.9
    inner = 0.0 if s.multipie.ring_position == 0 else max(0.0, r - thickness)
    rings.append(Ring(s, max(0.0, r), inner))
    r -= thickness + spacing
  return rings


def render_multipie(ctx:RenderContext, g:G, series:list[SeriesConfig]) -> None:
  groups:dict[str,list[SeriesConfig]] = {}
  for s in series:
    groups.setdefault(s.multipie.group, []).append(s)
  for cell, members in zip(group_cells(ctx.area, len(groups)), groups.values()):
    title = next((s.multipie.title for s in members if s.multipie.title), '')
    if title:
      title_h = 30
      g.label(title, x=cell.x + cell.width / 2, y=cell.y + title_h / 2, text_anchor='middle', dominant_baseline='middle',
        **ctx.config.title.text_attrs() | dict(font_size=14))
      cell = PlotArea(cell.x, cell.y + title_h, cell.width, max(0.0, cell.height - title_h))
    cx, cy = cell.center
    if len(members) == 1:
      s = members[0]
      r = s.pie.radius if s.pie.radius is not None else min(cell.width, cell.height) * 0.45
      render_pie(ctx, g, s, cx, cy, r, inner_radius(s.pie.inner_radius, r))
      continue
    for ring in ring_layout(members, cell):
      render_pie(ctx, g, ring.series, cx, cy, ring.outer, ring.inner)
