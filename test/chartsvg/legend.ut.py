# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from chartsvg.axis import ChartAxis, PlotArea, Tick
from chartsvg.config import AxisConfig, AxisLabels, LegendBorder, LegendConfig, PointConfig, SeriesConfig
from chartsvg.legend import axis_label_buffer, draw_symbol, legend_box, legend_items, legend_size, LegendBox, render_legend
from chartsvg.svg import G
from utest import utest, utest_approx, utest_seq_approx, utest_val, utest_val_approx


series = [
  SeriesConfig(name='ab', type='bar', color='#ff0000'),
  SeriesConfig(name='hidden', show_in_legend=False),
  SeriesConfig(name='long name', type='line', legend_text='abcd', color='#00ff00'),
]
opts = LegendConfig()
items = legend_items(series, opts)
utest_val(['ab', 'abcd'], [item.text for item in items])
utest_val_approx(29.4, items[0].width)
utest_val_approx(43.8, items[1].width)

utest_seq_approx([113.2, 34.4], legend_size, items, opts)
utest_seq_approx([63.8, 68.8], legend_size, items, LegendConfig(layout='vertical'))


# Placement.

area = PlotArea(50, 50, 400, 300)

def box(**kwargs) -> LegendBox:
  cfg = LegendConfig(**kwargs)
  return legend_box(items, area, cfg)

utest_approx(193.4, lambda: box().x)
utest(390, lambda: box().y)
utest(50, lambda: box(align='left').x)
utest_approx(336.8, lambda: box(align='right').x)
utest_approx(5.6, lambda: box(position='top').y)
utest(460, lambda: box(position='right', layout='vertical').x)
utest_approx(165.6, lambda: box(position='right', layout='vertical').y)
utest_approx(-23.8, lambda: box(position='left', layout='vertical').x)
utest(50, lambda: box(position='left', layout='vertical', align='top').y)
utest((5, 6), lambda: box(position='custom', x=5, y=6)[:2])
utest_approx(14.4, lambda: box().item_height)

utest(40, axis_label_buffer, None)
utest(34, axis_label_buffer, ChartAxis(AxisConfig()))
rotated = ChartAxis(AxisConfig(labels=AxisLabels(rotation=30, font_size=10)))
rotated.ticks = [Tick('a', 'a', 0), Tick('b', 'abcd', 10)]
utest_approx(40, axis_label_buffer, rotated)


# Rendering.

utest(None, render_legend, series, area, LegendConfig(enabled=False))
utest(None, render_legend, [SeriesConfig(show_in_legend=False)], area, opts)

legend = render_legend(series, area, LegendConfig(border=LegendBorder(enabled=True)))
assert legend is not None
utest_val('legend', legend['class'])
utest_val(2, len(legend.find_all('g', cl='legend-item')))
utest_val(['ab', 'long name'], [g['data-series'] for g in legend.find_all('g', cl='legend-item')])
utest_val(2, len([c for c in legend._ if getattr(c, 'tag', '') == 'rect']), 'background and border')
utest_val(['ab', 'abcd'], [t.text for t in legend.find_all('text')])

no_background = render_legend(series, area, LegendConfig(background=''))
assert no_background is not None
utest_val(0, len([c for c in no_background._ if getattr(c, 'tag', '') == 'rect']))


# Symbols.

def symbol_tags(s:SeriesConfig) -> list[str]:
  g = G()
  draw_symbol(g, s, 0, 0, 10)
  return [c.tag for c in g._]

utest(['rect'], symbol_tags, SeriesConfig(type='bar'))
utest(['line', 'circle'], symbol_tags, SeriesConfig(type='line'))
utest(['line'], symbol_tags, SeriesConfig(type='spline', point=PointConfig(enabled=False)))
utest(['circle'], symbol_tags, SeriesConfig(type='pie'))
utest(['circle'], symbol_tags, SeriesConfig(type='bubble'))
utest(['polygon'], symbol_tags, SeriesConfig(type='radar'))
utest(['rect'], symbol_tags, SeriesConfig(type='waterfall'))
