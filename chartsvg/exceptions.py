# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Exception classes for chart configuration and rendering.
Degenerate data (empty series, zero spans, cyclic sankey graphs) never raises;
these errors are reserved for input that cannot describe a chart at all.
'''

from typing import Any


class ChartError(Exception):
  'Base class for chartsvg errors.'


class ConfigError(ChartError, ValueError):
  '''
  Raised by `load_chart` when a chart description is malformed:
  unknown keys, unknown series types or axis kinds, or values of the wrong shape.
  '''
  def __init__(self, path:str, msg:str) -> None:
    self.path = path
    super().__init__(f'{path}: {msg}' if path else msg)


class PlotAreaError(ChartError, ValueError):
  'Raised when the plot area has negative dimensions, i.e. the margins exceed the chart size.'

  def __init__(self, *, width:Any, height:Any) -> None:
    self.width = width
    self.height = height
    super().__init__(f'plot area has negative dimensions: width={width!r}, height={height!r}')
