# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from copy import deepcopy

from chartsvg import build_chart, render_chart
from chartsvg.demos import demos
from chartsvg.exceptions import ChartError, ConfigError, PlotAreaError
from utest import utest_exc, utest_val


def count(chart:dict, tag:str='', cl:str='') -> int:
  return len(build_chart(deepcopy(chart)).find_all(tag, cl=cl))


# Every demo renders to a complete document.

for name, demo in demos.items():
  text = render_chart(deepcopy(demo))
  utest_val(True, text.startswith('<svg xmlns="http://www.w3.org/2000/svg"'), f'{name} starts with svg root')
  utest_val(True, text.rstrip().endswith('</svg>'), f'{name} ends with svg close')
  utest_val(1, count(demo, cl='background'), f'{name} background')


# Structure.

line = {'width': 300, 'height': 200, 'series': [{'name': 'a', 'type': 'line', 'data': [1, 2, 3]}]}
svg = build_chart(deepcopy(line))
utest_val(300, svg['width'])
utest_val(200, svg['height'])
utest_val(1, len(svg.find_all('g', cl='axes')))
utest_val(1, len(svg.find_all('g', cl='grid')))
utest_val(1, len(svg.find_all('g', cl='series-line')))
utest_val(1, len(svg.find_all('g', cl='legend')))
utest_val(0, len(svg.find_all('defs')))
utest_val(0, len(svg.find_all('g', cl='title')))

utest_val(0, count({**line, 'grid': {'enabled': False}}, 'g', 'grid'))
utest_val(0, count({**line, 'legend': {'enabled': False}}, 'g', 'legend'))
utest_val(0, count({**line, 'background': {'enabled': False}}, cl='background'))
utest_val(0, count({**line, 'title': {'text': ''}}, 'g', 'title'))

titled = build_chart({**deepcopy(line), 'title': {'text': 'Sales & costs'}})
titles = titled.find_all('g', cl='title')
utest_val(1, len(titles))
utest_val('Sales & costs', titles[0].text)
utest_val(True, 'Sales &amp; costs' in titled.render_str())

# Charts without cartesian series have no axes or grid.
for name in ['pie', 'donut', 'multipie', 'radar', 'polar', 'sankey']:
  utest_val(0, count(demos[name], 'g', 'axes'), f'{name} axes')
  utest_val(0, count(demos[name], 'g', 'grid'), f'{name} grid')

utest_val(2, count(demos['mixed-axes'], 'g', 'axis-y'))
utest_val(1, count(demos['mixed-axes'], 'g', 'axis-right'))
utest_val(1, count(demos['log-axis'], 'g', 'axis-log'))
utest_val(1, count(demos['time-axis'], 'g', 'axis-time'))

# Gradient definitions come first, so that fills can refer to them.
gradient = build_chart(deepcopy(demos['area-stacked']))
utest_val('defs', gradient._[0].tag)
utest_val(True, len(gradient.find_all('linearGradient')) > 0)

utest_val(0, count({'series': []}, 'g', 'legend'))
utest_val(0, count({'series': []}, 'g', 'axes'))


# Errors.

utest_exc(PlotAreaError, render_chart, {'width': 50})
utest_exc(ChartError, render_chart, {'height': 60})
utest_exc(ConfigError, render_chart, {'series': [{'type': 'donut'}]})
utest_exc("chart.series[0].type: unknown series type: 'donut'", render_chart, {'series': [{'type': 'donut'}]})
