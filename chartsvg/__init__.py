# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Server-side SVG chart rendering.

A chart is described declaratively (see `chartsvg.config`) and rendered to an SVG document string by `render_chart`.
The geometric core is split across several modules:
* `scale`: nice axis bounds, tick generation, and number formatting.
* `axis`: per-axis state and value-to-pixel transforms.
* `stack`: band accumulation for stacked series and waterfall running totals.
* `sankey`: topological leveling and proportional node/link layout.
'''

from .chart import build_chart, render_chart
from .config import ChartConfig, load_chart
from .exceptions import ChartError, ConfigError, PlotAreaError
