# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Waterfall series: one bar per category showing the change of a running total.
Bars span their `WaterfallBar` band; connectors join consecutive bars at the level where the previous bar ended.
'''

from ..config import SeriesConfig, WaterfallConfig
from ..io import errSL
from ..stack import bar_span, WaterfallAccumulator, WaterfallBar
from ..svg import G
from .base import fill_opacity, fill_template, fmt_label_value, RenderContext, series_group


def render(ctx:RenderContext, series:list[SeriesConfig]) -> G:
  g = series_group('waterfall')
  for s in series:
    acc = render_waterfall(ctx, g, s)
    if ctx.dbg: errSL('chartsvg waterfall:', s.name, 'final total:', acc.running)
  return g


def kind_color(s:SeriesConfig, kind:str) -> str:
  opts = s.waterfall
  match kind:
    case 'positive': return opts.positive_color
    case 'negative': return opts.negative_color
    case 'subtotal': return opts.subtotal_color
    case 'total': return opts.total_color
    case _: return s.color


def bar_fill(ctx:RenderContext, s:SeriesConfig, i:int, bar:WaterfallBar, kind_fills:dict[str,str]) -> str:
  '''
  Per bar colors when `use_individual_colors` is set and a color is given for the bar, else the color of its kind.
  Kind fills are memoized in `kind_fills` so that each kind defines at most one gradient.
  '''
  opts:WaterfallConfig = s.waterfall
  if opts.use_individual_colors and i < len(opts.colors):
    wc = opts.colors[i]
    return ctx.gradients.fill(f'{s.name}_{i}', wc.gradient, wc.color or kind_color(s, bar.kind), horizontal=ctx.horizontal)
  fill = kind_fills.get(bar.kind)
  if fill is None:
    fill = kind_fills[bar.kind] = ctx.gradients.fill(f'{s.name}_{bar.kind}', s.gradient, kind_color(s, bar.kind),
      horizontal=ctx.horizontal)
  return fill


def render_waterfall(ctx:RenderContext, g:G, s:SeriesConfig) -> WaterfallAccumulator:
  assert ctx.axes is not None
  opts = s.waterfall
  cat_axis = ctx.axes.category_axis(s)
  val_axis = ctx.axes.value_axis(s)
  horizontal = ctx.horizontal
  thickness = opts.bar_height if horizontal else opts.bar_width
  if thickness is None: thickness = cat_axis.category_extent * 0.8
  half = thickness / 2
  r = opts.corner_radius or None
  xs = ctx.config.series_x(s)
  dl = s.data_labels
  conn = opts.connectors

  acc = WaterfallAccumulator(opts.initial_value)
  kind_fills:dict[str,str] = {}
  sg = g.g(cl='waterfall', data_series=s.name, opacity=s.opacity if s.opacity != 1 else None)
  connectors = sg.g(cl='connectors', stroke=conn.color, stroke_width=conn.width,
    stroke_dasharray=conn.dash_array or None) if conn.enabled else None
  prev_pos:float|None = None
  for i, raw in enumerate(s.data):
    bar = acc.add(raw, opts.bar_types[i] if i < len(opts.bar_types) else None)
    pos = cat_axis.point_coord(xs, i)
    c0 = val_axis.transform(bar.start)
    c1 = val_axis.transform(bar.end)
    if pos is None or c0 is None or c1 is None:
      prev_pos = None
      continue
    start, length = bar_span(c0, c1)
    if horizontal: x, y, w, h = start, pos - half, length, thickness
    else: x, y, w, h = pos - half, start, thickness, length
    sg.rect(x=x, y=y, width=w, height=h, fill=bar_fill(ctx, s, i, bar, kind_fills), fill_opacity=fill_opacity(s, 1), rx=r, ry=r)

    if connectors is not None and prev_pos is not None and bar.connect_from is not None:
      level = val_axis.transform(bar.connect_from)
      if level is not None:
        if horizontal: connectors.line(x1=level, y1=prev_pos + half, x2=level, y2=pos - half)
        else: connectors.line(x1=prev_pos + half, y1=level, x2=pos - half, y2=level)
    prev_pos = pos

    if dl.enabled:
      text = fill_template(dl.format, y=fmt_label_value(ctx, bar.display_value, dl), x=xs[i] if i < len(xs) else i)
      sg.label(text, x=x + w / 2, y=y + h / 2, text_anchor='middle', dominant_baseline='middle', **dl.text_attrs())
  return acc
