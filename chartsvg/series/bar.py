# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Bar series: grouped or stacked, vertical or horizontal.
Stacked series are grouped by stack group and axis pair; the groups of a category sit side by side.
'''

from typing import Any

from ..axis import ChartAxis
from ..config import SeriesConfig
from ..io import errSL
from ..scale import to_num
from ..stack import bar_span, BarSlot, grouped_bar_slot, StackAccumulator, stack_order, stacked_bar_slot
from ..svg import G
from .base import draw_label, fill_opacity, fmt_label_value, fill_template, RenderContext, series_group


def render(ctx:RenderContext, series:list[SeriesConfig]) -> G:
  g = series_group('bar')
  stacks:dict[tuple[str,int,int],list[SeriesConfig]] = {}
  unstacked = []
  for s in series:
    if s.stacked: stacks.setdefault((s.stack_group, s.x_axis_id, s.y_axis_id), []).append(s)
    else: unstacked.append(s)

  for i, s in enumerate(unstacked):
    cat_axis = category_axis(ctx, s)
    slot = grouped_bar_slot(cat_axis.category_extent, i, len(unstacked), horizontal=ctx.horizontal,
      max_width=s.bar.max_width, bar_width=s.bar.width)
    render_bars(ctx, g, s, slot)

  for gi, (key, members) in enumerate(stacks.items()):
    cat_axis = category_axis(ctx, members[0])
    slot = stacked_bar_slot(cat_axis.category_extent, gi, len(stacks), horizontal=ctx.horizontal,
      bar_width=members[0].bar.width)
    acc = render_stack(ctx, g, members, slot)
    if ctx.dbg:
      errSL('chartsvg bar stack:', key, 'totals:',
        [(acc.positive_total(k), acc.negative_total(k)) for k in acc.keys()])
  return g


def category_axis(ctx:RenderContext, s:SeriesConfig) -> ChartAxis:
  assert ctx.axes is not None
  return ctx.axes.category_axis(s)


def bar_attrs(ctx:RenderContext, s:SeriesConfig) -> dict[str,Any]:
  r = s.bar.corner_radius or None
  return dict(
    fill=ctx.gradients.fill(s.name, s.gradient, s.color, horizontal=ctx.horizontal),
    fill_opacity=fill_opacity(s),
    opacity=s.opacity if s.opacity != 1 else None,
    rx=r, ry=r)


def draw_bar(ctx:RenderContext, g:G, s:SeriesConfig, slot:BarSlot, pos:float, v0:float, v1:float,
 attrs:dict[str,Any]) -> tuple[float,float,float,float]:
  '''
  Draw one bar across the category slot centered at `pos`, spanning value coordinates `v0` to `v1`.
  Returns the rect as (x, y, width, height).
  '''
  start, length = bar_span(v0, v1)
  if ctx.horizontal:
    rect = (start, pos + slot.offset, length, slot.width)
  else:
    rect = (pos + slot.offset, start, slot.width, length)
  x, y, w, h = rect
  g.rect(x=x, y=y, width=w, height=h, **attrs)
  return rect


def render_bars(ctx:RenderContext, g:G, s:SeriesConfig, slot:BarSlot) -> None:
  assert ctx.axes is not None
  cat_axis = ctx.axes.category_axis(s)
  val_axis = ctx.axes.value_axis(s)
  base = val_axis.baseline()
  xs = ctx.config.series_x(s)
  attrs = bar_attrs(ctx, s)
  sg = g.g(cl='bar', data_series=s.name)
  dl = s.data_labels
  for i, raw in enumerate(s.data):
    v = to_num(raw)
    pos = cat_axis.point_coord(xs, i)
    coord = None if v is None else val_axis.transform(v)
    if v is None or pos is None or coord is None: continue
    x, y, w, h = draw_bar(ctx, sg, s, slot, pos, base, coord, attrs)
    if not dl.enabled: continue
    text = fill_template(dl.format, y=fmt_label_value(ctx, v, dl), x=xs[i] if i < len(xs) else i)
    if ctx.horizontal:
      if v >= 0: sg.label(text, x=x + w + 5, y=y + h / 2, text_anchor='start', dominant_baseline='middle', **dl.text_attrs())
      else: sg.label(text, x=x - 5, y=y + h / 2, text_anchor='end', dominant_baseline='middle', **dl.text_attrs())
    else:
      ly = y - 5 if v >= 0 else y + h + 15
      draw_label(sg, dl, x + w / 2 + dl.offset_x, ly, text, rotation=dl.rotation)


def render_stack(ctx:RenderContext, g:G, members:list[SeriesConfig], slot:BarSlot) -> StackAccumulator:
  '''
  Render one stack group. Series are accumulated in reverse declaration order.
  Positive and negative values stack away from zero independently.
  '''
  assert ctx.axes is not None
  acc = StackAccumulator()
  for s in stack_order(members, 'bar'):
    cat_axis = ctx.axes.category_axis(s)
    val_axis = ctx.axes.value_axis(s)
    xs = ctx.config.series_x(s)
    attrs = bar_attrs(ctx, s)
    sg = g.g(cl='bar stacked', data_series=s.name)
    dl = s.data_labels
    for i, raw in enumerate(s.data):
      item = acc.accumulate(i, s.name, raw)
      if to_num(raw) is None: continue
      pos = cat_axis.point_coord(xs, i)
      c0 = val_axis.transform(item.band_start)
      c1 = val_axis.transform(item.band_end)
      if pos is None or c0 is None or c1 is None: continue
      x, y, w, h = draw_bar(ctx, sg, s, slot, pos, c0, c1, attrs)
      if dl.enabled:
        text = fill_template(dl.format, y=fmt_label_value(ctx, item.value, dl), x=xs[i] if i < len(xs) else i)
        sg.label(text, x=x + w / 2, y=y + h / 2, text_anchor='middle', dominant_baseline='middle', **dl.text_attrs())
  return acc
