# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from chartsvg.color import default_colors
from chartsvg.config import ChartConfig, load_chart, SankeyNodeConfig, SeriesConfig, snake_case, TitleConfig
from chartsvg.exceptions import ChartError, ConfigError
from utest import utest, utest_exc, utest_val


utest('data_labels', snake_case, 'dataLabels')
utest('y_axis_id', snake_case, 'yAxisId')
utest('x_values', snake_case, 'x_values')
utest('width', snake_case, 'width')


# Loading and defaults.

config = load_chart({
  'width': 640,
  'xValues': {'myName': [1, 2]},
  'series': [
    {'type': 'line', 'data': [1, 2], 'dataLabels': {'enabled': True, 'fontSize': 9}},
    {'name': 'second', 'type': 'bar', 'color': '#123456', 'bar': {'horizontal': True}},
  ],
})
utest_val(640, config.width)
utest_val(500, config.height)
utest_val(True, config.series[0].data_labels.enabled)
utest_val(9, config.series[0].data_labels.font_size)
utest_val('Series 1', config.series[0].name)
utest_val(default_colors[0], config.series[0].color)
utest_val('#123456', config.series[1].color)
utest_val(['myName'], list(config.x_values), 'x value keys are kept as given')
utest_val('bottom', config.x_axes[0].position)
utest_val('category', config.x_axes[0].type)
utest_val('left', config.y_axes[0].position)
utest_val('numeric', config.y_axes[0].type)
utest_val(True, config.is_horizontal)
utest_val(False, config.series[0].is_horizontal)
utest_val('second', config.series[1].label)

# Defaults that differ between inherited text styles.
utest_val(18, TitleConfig().font_size)
utest_val('bold', TitleConfig().font_weight)
utest_val('Arial, Helvetica, sans-serif', TitleConfig().text_attrs()['font_family'])

# Series x values fall back to the default entry.
xs_config = load_chart({'xValues': {'default': ['a'], 'b': ['x', 'y']}, 'series': [{'name': 'a'}, {'name': 'b'}]})
utest(['a'], xs_config.series_x, xs_config.series[0])
utest(['x', 'y'], xs_config.series_x, xs_config.series[1])
utest([], ChartConfig().series_x, SeriesConfig())

# Existing configurations are resolved in place.
existing = ChartConfig(series=[SeriesConfig(type='pie', data=[1])])
utest_val(existing, load_chart(existing))
utest_val(1, len(existing.x_axes))
utest_val(True, existing.is_pie_only)

# Union options accept each of their member types.
pie = load_chart({'series': [{'type': 'pie', 'pie': {'innerRadius': '50%'}}, {'type': 'pie', 'pie': {'innerRadius': 30}}]})
utest_val('50%', pie.series[0].pie.inner_radius)
utest_val(30, pie.series[1].pie.inner_radius)

sankey = load_chart({'series': [{'type': 'sankey', 'sankey': {'nodes': ['A', {'id': 'B', 'color': '#f00'}],
  'nodeColors': {'A': '#0f0'}}}]})
utest_val(['A', SankeyNodeConfig(id='B', color='#f00')], sankey.series[0].sankey.nodes)
utest_val({'A': '#0f0'}, sankey.series[0].sankey.node_colors)

# Nullable options.
utest_val(None, load_chart({'yAxes': [{'min': None}]}).y_axes[0].min)
utest_val(3, load_chart({'yAxes': [{'tickAmount': 3.0}]}).y_axes[0].tick_amount)


# Errors.

utest_exc('chart.bogus: unknown option for ChartConfig', load_chart, {'bogus': 1})
utest_exc("chart.series[0].type: unknown series type: 'donut'", load_chart, {'series': [{'type': 'donut'}]})
utest_exc("chart.width: expected a number; received: 'wide'", load_chart, {'width': 'wide'})
utest_exc("chart.width: expected a number; received: True", load_chart, {'width': True})
utest_exc("chart.y_axes[0].type: unknown axis type: 'polar'", load_chart, {'yAxes': [{'type': 'polar'}]})
utest_exc("chart.series[0].data: expected a list; received: 3", load_chart, {'series': [{'data': 3}]})
utest_exc("chart.legend: expected an object; received: 'top'", load_chart, {'legend': 'top'})
utest_exc('chart.title.enabled: expected a boolean; received: 1', load_chart, {'title': {'enabled': 1}})
utest_exc('chart.height: expected a number; received: None', load_chart, {'height': None})
utest_exc('chart.series[0].pie.innerRadius: value must not be null', load_chart, {'series': [{'pie': {'innerRadius': None}}]})
utest_exc("chart.yAxes[0].tickAmount: expected an integer; received: 2.5", load_chart, {'yAxes': [{'tickAmount': 2.5}]})
utest_exc(ConfigError, load_chart, {'series': [{'name': 7}]})
utest_exc(ChartError, load_chart, {'margin': {'top': 'x'}})
utest_exc(ValueError, load_chart, {'margin': {'top': 'x'}})

err = ConfigError('chart.width', 'bad')
utest_val('chart.width', err.path)
utest_val('chart.width: bad', str(err))
