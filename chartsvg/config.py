# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Chart configuration types and the single loading step that turns raw JSON-like input into them.

Every option has a documented default here; renderers never check for the presence of a key.
`load_chart` accepts camelCase or snake_case keys, builds the nested dataclasses,
rejects unknown keys and unknown series or axis kinds, and resolves the per-series and per-axis defaults.
'''

import re
from dataclasses import dataclass, field, fields, is_dataclass
from types import NoneType, UnionType
from typing import Any, get_args, get_origin, get_type_hints, Union

from .color import default_colors
from .exceptions import ConfigError


default_font = 'Arial, Helvetica, sans-serif'

series_types = frozenset({
  'area', 'bar', 'bubble', 'line', 'multipie', 'pie', 'polar', 'radar', 'sankey', 'scatter', 'spline', 'waterfall'})

axis_types = frozenset({'category', 'log', 'numeric', 'string', 'time'})

pie_types = frozenset({'multipie', 'pie'})


@dataclass
class TextStyle:
  font_family:str = default_font
  font_size:float = 12
  font_weight:str = 'normal'
  color:str = '#333333'

  def text_attrs(self) -> dict[str,Any]:
    'SVG text presentation attributes for this style, as keyword arguments for `Text`.'
    return dict(font_family=self.font_family, font_size=self.font_size, font_weight=self.font_weight, fill=self.color)


@dataclass
class Margin:
  top:float = 50
  right:float = 50
  bottom:float = 50
  left:float = 50


@dataclass
class BackgroundConfig:
  enabled:bool = True
  color:str = '#ffffff'
  border_radius:float = 0


@dataclass
class GridConfig:
  enabled:bool = True
  color:str = '#e0e0e0'
  width:float = 1
  dash_array:str = ''


@dataclass
class TitleConfig(TextStyle):
  text:str = ''
  enabled:bool = True
  font_size:float = 18
  font_weight:str = 'bold'
  align:str = 'center' # left, center, right.
  offset_x:float = 0
  offset_y:float = 20


@dataclass
class LegendBorder:
  enabled:bool = False
  color:str = '#cccccc'
  width:float = 1


@dataclass
class LegendConfig(TextStyle):
  enabled:bool = True
  position:str = 'bottom' # bottom, top, left, right, custom.
  align:str = 'center' # left, center, right.
  x:float = 0 # Used when position is custom.
  y:float = 0
  layout:str = 'horizontal' # horizontal, vertical.
  symbol_size:float = 10
  symbol_spacing:float = 5
  item_spacing:float = 20
  padding:float = 10
  background:str = '#ffffff'
  border_radius:float = 0
  border:LegendBorder = field(default_factory=LegendBorder)


@dataclass
class NumberFormat:
  decimal_point:str = '.'
  thousands_sep:str = ','


# Series options.

@dataclass
class GradientConfig:
  '''
  A gradient fill.
  Stops come from `colors` (with optional `stops` offsets, otherwise evenly spaced),
  or else from `start_color` and `end_color`, which default to the base color and its half blend with white.
  `angle` defaults to 90 degrees, or 0 for horizontal bars.
  '''
  enabled:bool = False
  type:str = 'linear' # linear, radial.
  colors:list[str] = field(default_factory=list)
  stops:list[str|float] = field(default_factory=list)
  angle:float|None = None
  start_color:str = ''
  end_color:str = ''


@dataclass
class PointConfig:
  enabled:bool|None = None # None means enabled for line, spline, scatter and polar series.
  size:float = 5
  shape:str = 'circle' # circle, square, triangle, diamond.
  color:str = ''
  border_color:str = ''
  border_width:float = 1


@dataclass
class DataLabelsConfig(TextStyle):
  enabled:bool = False
  font_size:float = 11
  format:str = '{y}'
  offset_x:float = 0
  offset_y:float = -15
  rotation:float = 0
  decimals:int|None = None
  prefix:str = ''
  suffix:str = ''


@dataclass
class BarConfig:
  width:float|None = None
  max_width:float = 50
  corner_radius:float = 0
  horizontal:bool = False


@dataclass
class LineConfig:
  width:float = 2
  dash_array:str = ''
  stepped:bool = False
  connect_nulls:bool = False


@dataclass
class AreaConfig:
  enabled:bool = True # Radar series fill their polygon when enabled.
  stroke_width:float = 2
  fill_opacity:float = 0.4


@dataclass
class PieConfig:
  inner_radius:float|str = 0 # Pixels, or a percentage string of the outer radius such as '50%'.
  radius:float|None = None
  start_angle:float = 0
  end_angle:float = 360
  colors:list[str] = field(default_factory=list)
  border_color:str = '#ffffff'
  border_width:float = 1


@dataclass
class MultipieConfig:
  group:str = 'default'
  ring_position:int = 0 # Higher positions are drawn further out.
  title:str = ''


@dataclass
class BubbleConfig:
  min_size:float = 5
  max_size:float = 50
  default_size:float = 20
  border_color:str = ''
  border_width:float = 1


@dataclass
class WaterfallColor:
  color:str = ''
  gradient:GradientConfig = field(default_factory=GradientConfig)


@dataclass
class ConnectorConfig:
  enabled:bool = True
  color:str = '#999999'
  width:float = 1
  dash_array:str = ''


@dataclass
class WaterfallConfig:
  horizontal:bool = False
  initial_value:float = 0
  bar_types:list[str] = field(default_factory=list) # Per bar kind: initial, positive, negative, subtotal, total.
  bar_width:float|None = None
  bar_height:float|None = None
  corner_radius:float = 0
  positive_color:str = '#4CAF50'
  negative_color:str = '#F44336'
  total_color:str = '#2196F3'
  subtotal_color:str = '#9C27B0'
  use_individual_colors:bool = False
  colors:list[WaterfallColor] = field(default_factory=list)
  connectors:ConnectorConfig = field(default_factory=ConnectorConfig)


@dataclass
class SankeyNodeConfig:
  id:str = ''
  name:str = ''
  color:str = ''


@dataclass
class SankeyLinkConfig:
  source:str = ''
  target:str = ''
  value:float = 0
  color:str = ''
  gradient:GradientConfig = field(default_factory=GradientConfig)


@dataclass
class SankeyLabels(TextStyle):
  enabled:bool = True
  position:str = 'inside' # inside, left, right.
  format:str = '{value}'


@dataclass
class SankeyConfig:
  nodes:list[str|SankeyNodeConfig] = field(default_factory=list)
  links:list[SankeyLinkConfig] = field(default_factory=list)
  node_width:float|None = None # Defaults to the level width.
  node_padding:float = 10
  level_padding:float = 50
  min_node_height:float = 5
  max_node_height:float = 50
  curvature:float = 0.5
  corner_radius:float = 3
  node_opacity:float = 0.8
  node_color:str = '#1f77b4'
  node_stroke_color:str = '#ffffff'
  node_stroke_width:float = 1
  node_colors:dict[str,str] = field(default_factory=dict)
  link_opacity:float = 0.4
  link_color:str = '#999999'
  link_colors:dict[str,str] = field(default_factory=dict) # Keyed by 'source->target'.
  node_labels:SankeyLabels = field(default_factory=SankeyLabels)
  link_labels:SankeyLabels = field(default_factory=lambda: SankeyLabels(enabled=False, font_size=10, position='middle'))


@dataclass
class RadarConfig:
  grid_levels:int = 5
  grid_color:str = '#e0e0e0'
  grid_width:float = 1
  axis_color:str = '#cccccc'
  labels:TextStyle = field(default_factory=TextStyle)
  label_offset:float = 10
  max:float|None = None


@dataclass
class PolarConfig:
  grid:bool = True
  grid_color:str = '#e0e0e0'
  grid_width:float = 1
  circle_count:int = 5
  angle_count:int = 8
  area:bool = False
  max:float|None = None


@dataclass
class SeriesConfig:
  name:str = ''
  type:str = 'bar'
  data:list[Any] = field(default_factory=list)
  size:list[Any] = field(default_factory=list) # Bubble sizes, parallel to `data`.
  x_axis_id:int = 0
  y_axis_id:int = 0
  color:str = ''
  opacity:float = 1
  fill_opacity:float|None = None # None means the type default: 0.8, or 0.7 for bubbles.
  gradient:GradientConfig = field(default_factory=GradientConfig)
  stacked:bool = False
  stack_group:str = 'default'
  show_in_legend:bool = True
  legend_text:str = ''
  point:PointConfig = field(default_factory=PointConfig)
  data_labels:DataLabelsConfig = field(default_factory=DataLabelsConfig)
  bar:BarConfig = field(default_factory=BarConfig)
  line:LineConfig = field(default_factory=LineConfig)
  area:AreaConfig = field(default_factory=AreaConfig)
  pie:PieConfig = field(default_factory=PieConfig)
  multipie:MultipieConfig = field(default_factory=MultipieConfig)
  bubble:BubbleConfig = field(default_factory=BubbleConfig)
  waterfall:WaterfallConfig = field(default_factory=WaterfallConfig)
  sankey:SankeyConfig = field(default_factory=SankeyConfig)
  radar:RadarConfig = field(default_factory=RadarConfig)
  polar:PolarConfig = field(default_factory=PolarConfig)

  @property
  def is_horizontal(self) -> bool:
    return (self.type == 'bar' and self.bar.horizontal) or (self.type == 'waterfall' and self.waterfall.horizontal)

  @property
  def label(self) -> str:
    return self.legend_text or self.name


# Axis options.

@dataclass
class AxisTitle(TextStyle):
  text:str = ''
  enabled:bool = True
  font_size:float = 14
  font_weight:str = 'bold'
  offset_x:float|None = None # None means the side default.
  offset_y:float|None = None
  rotation:float|None = None


@dataclass
class AxisLabels(TextStyle):
  enabled:bool = True
  rotation:float = 0
  align:str = '' # SVG text-anchor; empty means the side default.
  decimals:int|None = None
  prefix:str = ''
  suffix:str = ''
  date_format:str = '%d/%m/%Y'
  offset_x:float = 0
  offset_y:float = 0


@dataclass
class AxisLine:
  enabled:bool = True
  color:str = '#999999'
  width:float = 1
  dash_array:str = ''


@dataclass
class AxisTicks:
  enabled:bool = True
  color:str = '#999999'
  width:float = 1
  size:float = 6


@dataclass
class AxisConfig:
  enabled:bool = True
  position:str = '' # bottom or top for x axes, left or right for y axes; empty means bottom or left.
  type:str = '' # category, numeric, time, log, string; empty means category for x axes, numeric for y axes.
  categories:list[Any] = field(default_factory=list)
  min:float|None = None
  max:float|None = None
  tick_amount:int|None = None
  tick_interval:float|None = None
  offset_x:float = 0
  offset_y:float = 0
  title:AxisTitle = field(default_factory=AxisTitle)
  labels:AxisLabels = field(default_factory=AxisLabels)
  line:AxisLine = field(default_factory=AxisLine)
  ticks:AxisTicks = field(default_factory=AxisTicks)
  grid:GridConfig = field(default_factory=GridConfig)


@dataclass
class ChartConfig:
  width:float = 800
  height:float = 500
  margin:Margin = field(default_factory=Margin)
  background:BackgroundConfig = field(default_factory=BackgroundConfig)
  grid:GridConfig = field(default_factory=GridConfig)
  title:TitleConfig = field(default_factory=TitleConfig)
  legend:LegendConfig = field(default_factory=LegendConfig)
  number_format:NumberFormat = field(default_factory=NumberFormat)
  x_values:dict[str,list[Any]] = field(default_factory=dict) # Keyed by series name, or 'default' for all series.
  series:list[SeriesConfig] = field(default_factory=list)
  x_axes:list[AxisConfig] = field(default_factory=list)
  y_axes:list[AxisConfig] = field(default_factory=list)

  def series_x(self, series:SeriesConfig) -> list[Any]:
    'The x values of a series: its own entry in `x_values`, else the default entry.'
    xs = self.x_values.get(series.name)
    if xs is None: xs = self.x_values.get('default', [])
    return xs

  @property
  def is_pie_only(self) -> bool:
    return bool(self.series) and all(s.type in pie_types for s in self.series)

  @property
  def is_horizontal(self) -> bool:
    'Whether any bar or waterfall series is horizontal, which swaps the roles of the x and y axes.'
    return any(s.is_horizontal for s in self.series)


def load_chart(raw:dict[str,Any]|ChartConfig) -> ChartConfig:
  '''
  Build a `ChartConfig` from a raw mapping, or resolve the defaults of an existing one.
  Raises `ConfigError` for unknown keys, mistyped values, and unknown series or axis types.
  '''
  config = raw if isinstance(raw, ChartConfig) else build_dataclass(ChartConfig, raw, path='chart')
  resolve_defaults(config)
  return config


def resolve_defaults(config:ChartConfig) -> None:
  'Fill the defaults that depend on context: axis kinds and sides, series names and colors.'
  for i, s in enumerate(config.series):
    path = f'chart.series[{i}]'
    if s.type not in series_types: raise ConfigError(f'{path}.type', f'unknown series type: {s.type!r}')
    if not s.name: s.name = f'Series {i+1}'
    if not s.color: s.color = default_colors[i % len(default_colors)]

  if not config.x_axes: config.x_axes.append(AxisConfig())
  if not config.y_axes: config.y_axes.append(AxisConfig())
  for name, axes, position, kind in (('x_axes', config.x_axes, 'bottom', 'category'), ('y_axes', config.y_axes, 'left', 'numeric')):
    for i, axis in enumerate(axes):
      if not axis.position: axis.position = position
      if not axis.type: axis.type = kind
      if axis.type not in axis_types: raise ConfigError(f'chart.{name}[{i}].type', f'unknown axis type: {axis.type!r}')


_camel_re = re.compile(r'(?<=[a-z0-9])([A-Z])')

def snake_case(key:str) -> str:
  'Convert a camelCase key to snake_case; snake_case keys are unchanged.'
  return _camel_re.sub(r'_\1', key).lower()


def build_dataclass(cls:type, raw:Any, path:str) -> Any:
  if not isinstance(raw, dict): raise ConfigError(path, f'expected an object; received: {raw!r}')
  hints = get_type_hints(cls)
  names = {f.name for f in fields(cls)}
  kwargs = {}
  for key, val in raw.items():
    if not isinstance(key, str): raise ConfigError(path, f'keys must be strings; received: {key!r}')
    name = snake_case(key)
    if name not in names: raise ConfigError(f'{path}.{key}', f'unknown option for {cls.__name__}')
    kwargs[name] = convert_value(hints[name], val, f'{path}.{key}')
  return cls(**kwargs)


def convert_value(hint:Any, val:Any, path:str) -> Any:
  'Convert a raw value to the type described by `hint`, building nested dataclasses.'
  if hint is Any: return val
  origin = get_origin(hint)

  if origin in (Union, UnionType):
    members = get_args(hint)
    if val is None:
      if NoneType in members: return None
      raise ConfigError(path, 'value must not be null')
    errors = []
    # Try dataclass members for dicts, plain members otherwise.
    for m in sorted(members, key=lambda m: not (is_dataclass(m) and isinstance(val, dict))):
      if m is NoneType: continue
      try: return convert_value(m, val, path)
      except ConfigError as e: errors.append(e)
    raise errors[0]

  if origin is list:
    if not isinstance(val, (list, tuple)): raise ConfigError(path, f'expected a list; received: {val!r}')
    (el_hint,) = get_args(hint)
    return [convert_value(el_hint, el, f'{path}[{i}]') for i, el in enumerate(val)]

  if origin is dict:
    if not isinstance(val, dict): raise ConfigError(path, f'expected an object; received: {val!r}')
    _, val_hint = get_args(hint)
    return { str(k): convert_value(val_hint, v, f'{path}.{k}') for k, v in val.items() }

  if is_dataclass(hint):
    if isinstance(val, hint): return val
    return build_dataclass(hint, val, path) # type: ignore[arg-type]

  if hint is bool:
    if isinstance(val, bool): return val
    raise ConfigError(path, f'expected a boolean; received: {val!r}')

  if hint is float:
    if isinstance(val, (int, float)) and not isinstance(val, bool): return val
    raise ConfigError(path, f'expected a number; received: {val!r}')

  if hint is int:
    if isinstance(val, int) and not isinstance(val, bool): return val
    if isinstance(val, float) and val.is_integer(): return int(val)
    raise ConfigError(path, f'expected an integer; received: {val!r}')

  if hint is str:
    if isinstance(val, str): return val
    raise ConfigError(path, f'expected a string; received: {val!r}')

  raise ConfigError(path, f'unsupported option type: {hint!r}')
