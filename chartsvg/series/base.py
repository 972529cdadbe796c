# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Shared plumbing for the series renderers.
Each renderer module provides `render(ctx, series) -> G`, drawing every series of its type into one group.
'''

from dataclasses import dataclass, field
from typing import Any, NamedTuple

from ..axis import Axes, PlotArea
from ..config import ChartConfig, DataLabelsConfig, NumberFormat, PointConfig, SeriesConfig, TextStyle
from ..gradients import GradientDefs
from ..scale import fmt_number, to_num
from ..svg import G, rotate, SvgBranch, SvgNode, Text


@dataclass
class RenderContext:
  '''
  The state of one render call, shared by the series renderers.
  `axes` is None for charts without cartesian axes.
  '''
  config:ChartConfig
  area:PlotArea
  axes:Axes|None = None
  gradients:GradientDefs = field(default_factory=GradientDefs)
  dbg:bool = False

  @property
  def horizontal(self) -> bool:
    return self.axes is not None and self.axes.horizontal

  @property
  def number_format(self) -> NumberFormat:
    return self.config.number_format


class PlotPoint(NamedTuple):
  index:int
  x:float
  y:float
  value:float


def series_group(kind:str, **attrs:Any) -> G:
  return G(cl=['series', f'series-{kind}'], **attrs)


def fill_opacity(s:SeriesConfig, default:float=0.8) -> float:
  return default if s.fill_opacity is None else s.fill_opacity


def points_enabled(s:SeriesConfig) -> bool:
  'Points default to on for line, spline, scatter and polar series.'
  if s.point.enabled is not None: return s.point.enabled
  return s.type in ('line', 'polar', 'scatter', 'spline')


def plot_points(ctx:RenderContext, s:SeriesConfig) -> list[PlotPoint|None]:
  '''
  The pixel position of every data value of a cartesian series, or None for values that are missing
  or cannot be placed on the axes. In horizontal mode the value runs along x.
  '''
  xs = ctx.config.series_x(s)
  points:list[PlotPoint|None] = []
  for i, raw in enumerate(s.data):
    v = to_num(raw)
    xy = None if v is None else value_point(ctx, s, xs, i, v)
    points.append(None if xy is None or v is None else PlotPoint(i, xy[0], xy[1], v))
  return points


def value_point(ctx:RenderContext, s:SeriesConfig, xs:list[Any], i:int, v:float) -> tuple[float,float]|None:
  'The pixel position of value `v` at index `i` of `s`, or None if it cannot be placed.'
  assert ctx.axes is not None
  pos = ctx.axes.category_axis(s).point_coord(xs, i)
  coord = ctx.axes.value_axis(s).transform(v)
  if pos is None or coord is None: return None
  return (coord, pos) if ctx.horizontal else (pos, coord)


def split_runs(points:list[PlotPoint|None], connect_nulls:bool) -> list[list[PlotPoint]]:
  'Split a point sequence at missing points, or join across them when `connect_nulls` is set.'
  runs:list[list[PlotPoint]] = [[]]
  for p in points:
    if p is None:
      if not connect_nulls and runs[-1]: runs.append([])
    else:
      runs[-1].append(p)
  return [r for r in runs if r]


def draw_point(parent:SvgBranch, shape:str, x:float, y:float, size:float, fill:str,
 border_color:str='', border_width:float=1, **attrs:Any) -> SvgNode:
  'Draw a point marker: circle, square, triangle or diamond. Unknown shapes draw circles.'
  h = size / 2
  if border_color:
    attrs['stroke'] = border_color
    attrs['stroke_width'] = border_width
  if shape == 'square':
    return parent.rect(x=x-h, y=y-h, width=size, height=size, fill=fill, **attrs)
  if shape == 'triangle':
    return parent.polygon([(x, y-h), (x-h, y+h), (x+h, y+h)], fill=fill, **attrs)
  if shape == 'diamond':
    return parent.polygon([(x, y-h), (x+h, y), (x, y+h), (x-h, y)], fill=fill, **attrs)
  return parent.circle(cx=x, cy=y, r=h, fill=fill, **attrs)


def draw_points(parent:SvgBranch, s:SeriesConfig, points:list[PlotPoint]) -> None:
  p:PointConfig = s.point
  color = p.color or s.color
  for pt in points:
    draw_point(parent, p.shape, pt.x, pt.y, p.size, color, p.border_color, p.border_width)


def fmt_label_value(ctx:RenderContext, v:Any, labels:DataLabelsConfig) -> str:
  nf = ctx.number_format
  return fmt_number(v, labels.decimals, labels.prefix, labels.suffix, nf.decimal_point, nf.thousands_sep)


def fill_template(template:str, **fields:Any) -> str:
  '''
  Replace `{name}` placeholders in a label template.
  Unknown placeholders and stray braces are left as they are.
  '''
  for k, v in fields.items():
    template = template.replace('{' + k + '}', str(v))
  return template


def draw_label(parent:SvgBranch, style:TextStyle, x:float, y:float, text:str, *,
 anchor:str='middle', rotation:float=0, **attrs:Any) -> Text:
  if rotation: attrs['transform'] = rotate(rotation, x, y)
  return parent.label(text, x=x, y=y, text_anchor=anchor, **style.text_attrs(), **attrs)


def draw_data_label(parent:SvgBranch, labels:DataLabelsConfig, x:float, y:float, text:str, *,
 anchor:str='middle', **attrs:Any) -> Text:
  'Draw a data label at the offsets of `labels` from (x, y).'
  return draw_label(parent, labels, x + labels.offset_x, y + labels.offset_y, text,
    anchor=anchor, rotation=labels.rotation, **attrs)


def draw_data_labels(ctx:RenderContext, parent:SvgBranch, s:SeriesConfig, points:list[PlotPoint]) -> None:
  dl = s.data_labels
  xs = ctx.config.series_x(s)
  for pt in points:
    x_val = xs[pt.index] if pt.index < len(xs) else pt.index
    text = fill_template(dl.format, y=fmt_label_value(ctx, pt.value, dl), x=x_val)
    draw_data_label(parent, dl, pt.x, pt.y, text)
