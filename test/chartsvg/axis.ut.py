# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from chartsvg.axis import (AxisPosition, CategoricalAxis, LinearAxis, LogAxis, make_axis, PlotArea, prepare_axes, StringAxis,
  TimeAxis)
from chartsvg.config import AxisConfig, AxisLabels, load_chart, NumberFormat
from chartsvg.exceptions import PlotAreaError
from utest import utest, utest_exc, utest_seq, utest_seq_approx, utest_val, utest_val_approx


area = PlotArea(0, 0, 400, 300)


# Plot area.

utest_exc(PlotAreaError, PlotArea, 0, 0, -1, 10)
utest_exc(PlotAreaError, PlotArea, 0, 0, 10, float('nan'))
utest_val((210.0, 170.0), PlotArea(10, 20, 400, 300).center)
utest_val(410, PlotArea(10, 20, 400, 300).right)


# Linear axis with declared bounds.

y = LinearAxis(AxisConfig(min=0, max=100, tick_interval=25, labels=AxisLabels(decimals=0))).prepare(0, [3, 97], area, vertical=True)
utest_seq([0, 25, 50, 75, 100], lambda: [t.value for t in y.ticks])
utest_seq(['0', '25', '50', '75', '100'], lambda: [t.label for t in y.ticks])
utest_seq([300, 225, 150, 75, 0], lambda: [t.position for t in y.ticks])
utest(300.0, y.transform, 0)
utest(150.0, y.transform, '50')
utest(None, y.transform, None)
utest(None, y.transform, 'abc')
utest_val(300.0, y.baseline())

# Increasing values map to decreasing coordinates on a vertical axis.
coords = [y.transform(v) for v in range(0, 101, 10)]
utest_val(True, all(a > b for a, b in zip(coords, coords[1:])), 'vertical axis is monotonic')


# Linear axis with automatic bounds.

auto = LinearAxis(AxisConfig()).prepare(0, [0, 97], area, vertical=True)
utest_val(True, auto.min <= 0 and auto.max >= 97, 'auto bounds contain the data')
utest_val(True, auto.max >= 97 * 1.1, 'auto bounds include headroom')
utest_val(auto.min, auto.ticks[0].value)

neg = LinearAxis(AxisConfig()).prepare(0, [-40, -10], area, vertical=True)
utest_val(True, neg.min <= -40 and neg.max >= -10, 'negative bounds contain the data')
utest_val(area.y, neg.baseline(), 'baseline clamps to the top when all values are negative')

x = LinearAxis(AxisConfig(min=10, max=20)).prepare(0, [], area, vertical=False)
utest(0.0, x.transform, 10)
utest(400.0, x.transform, 20)
utest(0.0, x.point_coord, [10, 15], 0)
utest(200.0, x.point_coord, [10, 15], 1)

# An empty horizontal axis defaults to 0..100.
empty = LinearAxis(AxisConfig()).prepare(0, [], area, vertical=False)
utest_val((0.0, 100.0), (empty.min, empty.max))


# Categorical axis.

cat = CategoricalAxis(AxisConfig()).prepare(0, ['a', 'b', 'c', 'd'], area, vertical=False)
utest_val(100.0, cat.category_extent)
utest(50.0, cat.transform, 'a')
utest(250.0, cat.transform, 'c')
utest(None, cat.transform, 'zz')
utest(250.0, cat.transform, 2)
utest(250.0, cat.transform, 2.0)
utest(None, cat.transform, 4)
utest(None, cat.transform, True)
utest(150.0, cat.point_coord, ['a', 'zz'], 1)
utest(None, cat.point_coord, [], 7)
utest_seq(['a', 'b', 'c', 'd'], lambda: [t.label for t in cat.ticks])
utest_val(0, cat.baseline())

# Declared categories take priority over the chart's values.
declared = CategoricalAxis(AxisConfig(categories=['x', 'y'])).prepare(0, ['a', 'b', 'c'], area, vertical=False)
utest_val(['x', 'y'], declared.categories)
utest_val(200.0, declared.category_extent)

# Vertical categorical axes run from top to bottom.
vcat = CategoricalAxis(AxisConfig()).prepare(0, ['a', 'b', 'c'], area, vertical=True)
utest(50.0, vcat.transform, 'a')
utest(250.0, vcat.transform, 'c')
utest_val(300, vcat.baseline())


# String axis.

s_axis = StringAxis(AxisConfig(type='string')).prepare(0, ['b', 'a', 'b', '', None, 3], area, vertical=False)
utest_val(['b', 'a', '3'], s_axis.categories)


# Log axis.

log = LogAxis(AxisConfig(type='log')).prepare(0, [12, 450_000], area, vertical=True)
utest_val_approx(10, log.min)
utest_val_approx(1_000_000, log.max)
utest_val(6, len(log.ticks))
utest_seq_approx([300, 240, 180, 120, 60, 0], lambda: [t.position for t in log.ticks])
utest_val_approx(180, log.transform(1000))
utest_val_approx(300, log.baseline())


# Time axis.

t_axis = TimeAxis(AxisConfig(type='time', labels=AxisLabels(date_format='%Y-%m-%d')))
utest('1970-01-01', t_axis.tick_label, 0)
utest('2024-01-01', t_axis.tick_label, 1_704_067_200)
utest('', t_axis.tick_label, None)


# Axis kinds and positions.

nf = NumberFormat()
utest_val(LinearAxis, type(make_axis(AxisConfig(type='category'), nf, value_axis=True)))
utest_val(LogAxis, type(make_axis(AxisConfig(type='log'), nf, value_axis=True)))
utest_val(CategoricalAxis, type(make_axis(AxisConfig(), nf, value_axis=False)))
utest_val(TimeAxis, type(make_axis(AxisConfig(type='time'), nf, value_axis=False)))

plot = PlotArea(10, 20, 400, 300)
right = LinearAxis(AxisConfig(position='right')).prepare(1, [1], plot, vertical=True)
utest_val('right', right.side)
utest_val(AxisPosition(450, 20, 450, 320), right.position)
left = LinearAxis(AxisConfig()).prepare(0, [1], plot, vertical=True)
utest_val('left', left.side)
utest_val(AxisPosition(10, 20, 10, 320), left.position)
top = CategoricalAxis(AxisConfig(position='top', offset_y=-5)).prepare(0, ['a'], plot, vertical=False)
utest_val(AxisPosition(10, 15, 410, 15), top.position)


# Offsets shift values and ticks together.

shifted = LinearAxis(AxisConfig(min=0, max=10, tick_interval=5, offset_y=20)).prepare(0, [], area, vertical=True)
utest_seq([320, 170, 20], lambda: [t.position for t in shifted.ticks])
for tick in shifted.ticks:
  utest(tick.position, shifted.transform, tick.value)
utest(320.0, shifted.baseline)

shifted_x = CategoricalAxis(AxisConfig(categories=['a', 'b'], offset_x=7)).prepare(0, [], area, vertical=False)
utest_seq([107, 307], lambda: [t.position for t in shifted_x.ticks])
utest(307.0, shifted_x.transform, 'b')
utest(107.0, shifted_x.point_coord, [], 0)

shifted_log = LogAxis(AxisConfig(min=1, max=100, offset_y=-10)).prepare(0, [], area, vertical=True)
for tick in shifted_log.ticks:
  utest(tick.position, shifted_log.transform, tick.value)
utest(290.0, shifted_log.baseline)


# Axis preparation for a chart.

config = load_chart({
  'xValues': {'default': ['a', 'b']},
  'series': [
    {'name': 'bars', 'type': 'bar', 'data': [10, 20]},
    {'name': 'line', 'type': 'line', 'yAxisId': 1, 'data': [0.5, 0.7]},
  ],
  'yAxes': [{}, {'position': 'right', 'min': 0, 'max': 1}],
})
axes = prepare_axes(config, area, horizontal=False)
utest_val(1, len(axes.x))
utest_val(2, len(axes.y))
utest_val(axes.y[1], axes.value_axis(config.series[1]))
utest_val(axes.x[0], axes.category_axis(config.series[1]))
utest_val((0.0, 1.0), (axes.y[1].min, axes.y[1].max))
utest_val(True, axes.y[0].max >= 20, 'first value axis holds the bar values')
utest_val(3, len(axes.all()))

# Stacked series bound the value axis by their totals.
stacked = load_chart({
  'xValues': {'default': ['a', 'b']},
  'series': [
    {'type': 'bar', 'stacked': True, 'data': [10, -3]},
    {'type': 'bar', 'stacked': True, 'data': [5, -8]},
  ],
})
s_axes = prepare_axes(stacked, area, horizontal=False)
utest_val(True, s_axes.y[0].max >= 15 and s_axes.y[0].min <= -11, 'stacked bounds contain the totals')

# Horizontal mode swaps the roles of the axes.
h_config = load_chart({
  'xValues': {'default': ['a', 'b']},
  'series': [{'type': 'bar', 'bar': {'horizontal': True}, 'data': [1, 2]}],
})
h_axes = prepare_axes(h_config, area, horizontal=True)
utest_val(True, h_axes.horizontal)
utest_val(LinearAxis, type(h_axes.x[0]))
utest_val(CategoricalAxis, type(h_axes.y[0]))
utest_val(h_axes.x[0], h_axes.value_axis(h_config.series[0]))
utest_val(False, h_axes.x[0].vertical)
utest_val(True, h_axes.y[0].vertical)

# Without default x values, categories are numbered from 1.
n_config = load_chart({'series': [{'type': 'bar', 'data': [1, 2, 3]}]})
utest_val(['1', '2', '3'], prepare_axes(n_config, area, horizontal=False).x[0].categories)

# A single tick interval over mixed signs keeps bounds close to the data.
single = load_chart({'series': [{'type': 'bar', 'data': [-1, 1]}], 'yAxes': [{'tickAmount': 1}]})
single_y = prepare_axes(single, area, horizontal=False).y[0]
utest_val((-2.0, 2.0, 2.0), (single_y.min, single_y.max, single_y.tick_interval))
