# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Chart axes.

An axis is built once per render call from its configuration and the values of every series assigned to it.
`prepare` computes the bounds, scale, ticks and drawn position; afterwards the axis is read only,
and `transform` maps data values to pixel coordinates.

Terminology:
A vertical axis is a Y axis: its values grow upward, so numeric coordinates are inverted.
Categorical axes space a list of labels evenly; each label is centered in its slot.
'''

from dataclasses import dataclass, replace
from datetime import datetime, timezone
from math import ceil, floor, isfinite, log10
from typing import Any, Iterable, NamedTuple, Self

from .config import AxisConfig, ChartConfig, NumberFormat, SeriesConfig
from .exceptions import PlotAreaError
from .io import errSL
from .scale import fmt_number, nice_scale, tick_values, to_num
from .stack import StackAccumulator, WaterfallAccumulator


# Distance between successive axes on the same side.
axis_spacing = 40

# Series types that do not use the cartesian axes.
non_cartesian_types = frozenset({'multipie', 'pie', 'polar', 'radar', 'sankey'})

log_eps = 1e-6


@dataclass(frozen=True)
class PlotArea:
  'The pixel rectangle within which data is drawn, excluding margins.'
  x:float
  y:float
  width:float
  height:float

  def __post_init__(self) -> None:
    if self.width < 0 or self.height < 0 or not isfinite(self.width) or not isfinite(self.height):
      raise PlotAreaError(width=self.width, height=self.height)

  @property
  def right(self) -> float: return self.x + self.width

  @property
  def bottom(self) -> float: return self.y + self.height

  @property
  def center(self) -> tuple[float,float]: return (self.x + self.width / 2, self.y + self.height / 2)


class Tick(NamedTuple):
  value:Any
  label:str
  position:float # Pixel coordinate along the axis, including the axis offset.


class AxisPosition(NamedTuple):
  'Endpoints of the drawn axis line.'
  x1:float
  y1:float
  x2:float
  y2:float


class ChartAxis:
  '''
  An axis of a chart. This is an abstract base class.
  Use CategoricalAxis, StringAxis, LinearAxis, TimeAxis or LogAxis.
  '''

  def __init__(self, cfg:AxisConfig, number_format:NumberFormat|None=None) -> None:
    self.cfg = cfg
    self.number_format = number_format or NumberFormat()
    self.axis_id = 0
    self.vertical = False
    self.area = PlotArea(0, 0, 0, 0)
    self.position = AxisPosition(0, 0, 0, 0)
    self.ticks:list[Tick] = []
    self.min = 0.0
    self.max = 1.0
    self.scale = 0.0
    self.tick_interval = 0.0
    self.categories:list[Any] = []
    self.category_extent = 0.0


  def __repr__(self) -> str:
    return f'<{type(self).__name__} id={self.axis_id} vertical={self.vertical} min={self.min} max={self.max}>'


  @property
  def data_class(self) -> str:
    '''
    I.e. 'categorical', 'numerical'.
    '''
    raise NotImplementedError


  @property
  def kind_class(self) -> str:
    '''
    I.e. 'category', 'string', 'numeric', 'time', 'log'.
    '''
    raise NotImplementedError


  @property
  def is_categorical(self) -> bool: return self.data_class == 'categorical'


  @property
  def side(self) -> str:
    if self.vertical: return 'right' if self.cfg.position == 'right' else 'left'
    return 'top' if self.cfg.position == 'top' else 'bottom'


  @property
  def extent(self) -> float:
    return self.area.height if self.vertical else self.area.width


  @property
  def offset(self) -> float:
    'The configured offset along the direction of the axis.'
    return self.cfg.offset_y if self.vertical else self.cfg.offset_x


  def prepare(self, axis_id:int, values:Iterable[Any], area:PlotArea, vertical:bool) -> Self:
    '''
    Compute the position, bounds, scale and ticks of the axis from the values assigned to it.
    Must be called before `transform`.
    '''
    self.axis_id = axis_id
    self.area = area
    self.vertical = vertical
    self.position = self.calc_position()
    self.configure(list(values))
    return self


  def calc_position(self) -> AxisPosition:
    'Each additional axis on the same side moves `axis_spacing` further out from the plot area.'
    a = self.area
    out = axis_spacing * self.axis_id
    ox = self.cfg.offset_x
    oy = self.cfg.offset_y
    if self.vertical:
      x = a.right + out if self.side == 'right' else a.x - out
      return AxisPosition(x + ox, a.y + oy, x + ox, a.bottom + oy)
    y = a.y - out if self.side == 'top' else a.bottom + out
    return AxisPosition(a.x + ox, y + oy, a.right + ox, y + oy)


  def configure(self, values:list[Any]) -> None:
    '''
    Compute the bounds and ticks of the axis.
    '''
    raise NotImplementedError


  def transform(self, v:Any) -> float|None:
    '''
    Transform a value on this axis to a pixel coordinate, or None if the value cannot be placed.
    '''
    raise NotImplementedError


  def point_coord(self, xs:list[Any], i:int) -> float|None:
    '''
    The coordinate of the `i`th point of a series whose values on this axis are `xs`.
    Points without a value are placed by index.
    '''
    raise NotImplementedError


  def baseline(self) -> float:
    'The coordinate from which bars and areas grow.'
    raise NotImplementedError


  def tick_label(self, v:Any) -> str:
    l = self.cfg.labels
    nf = self.number_format
    return fmt_number(v, l.decimals, l.prefix, l.suffix, nf.decimal_point, nf.thousands_sep)



class CategoricalAxis(ChartAxis):
  '''
  An axis for a list of distinct labels, spaced evenly.
  Declared categories take priority over the values passed to `prepare`.
  '''

  @property
  def data_class(self) -> str: return 'categorical'

  @property
  def kind_class(self) -> str: return 'category'


  def configure(self, values:list[Any]) -> None:
    self.categories = list(self.cfg.categories) if self.cfg.categories else self.collect_categories(values)
    n = len(self.categories)
    self.category_extent = self.extent / n if n else 0.0
    self.min = 0.0
    self.max = float(max(1, n))
    self.scale = self.category_extent
    self._index:dict[Any,int] = {}
    for i, c in enumerate(self.categories):
      try: self._index.setdefault(c, i)
      except TypeError: pass # Unhashable labels can only be found by index.
    self.ticks = [Tick(c, self.tick_label(c), self.slot_center(i)) for i, c in enumerate(self.categories)]


  def collect_categories(self, values:list[Any]) -> list[Any]:
    return values


  def tick_label(self, v:Any) -> str:
    return '' if v is None else str(v)


  def slot_center(self, i:int) -> float:
    'The center of category slot `i`, including the axis offset. Vertical categorical axes run from top to bottom.'
    origin = self.area.y if self.vertical else self.area.x
    return origin + (i + 0.5) * self.category_extent + self.offset


  def index_of(self, v:Any) -> int|None:
    '''
    Find a category by label, or else treat an integral number as an index.
    Returns None if the value names no category.
    '''
    if v is None or isinstance(v, bool) or not self.categories: return None
    try: return self._index[v]
    except (KeyError, TypeError): pass
    if isinstance(v, float) and v.is_integer(): v = int(v)
    if isinstance(v, int) and 0 <= v < len(self.categories): return v
    return None


  def transform(self, v:Any) -> float|None:
    i = self.index_of(v)
    return None if i is None else self.slot_center(i)


  def point_coord(self, xs:list[Any], i:int) -> float|None:
    if i < len(xs):
      c = self.transform(xs[i])
      if c is not None: return c
    if 0 <= i < len(self.categories): return self.slot_center(i)
    return None


  def baseline(self) -> float:
    return (self.area.bottom if self.vertical else self.area.x) + self.offset



class StringAxis(CategoricalAxis):
  '''
  A categorical axis whose labels are the unique string values of its series, in first seen order.
  '''

  @property
  def kind_class(self) -> str: return 'string'


  def collect_categories(self, values:list[Any]) -> list[Any]:
    seen:set[str] = set()
    labels = []
    for v in values:
      if v is None or v == '': continue
      s = str(v)
      if s in seen: continue
      seen.add(s)
      labels.append(s)
    return labels



class NumericalAxis(ChartAxis):
  '''
  An axis for quantitative data.
  '''

  @property
  def data_class(self) -> str: return 'numerical'


  def linear_coord(self, units:float) -> float:
    'Map a distance in data units from `min` to a pixel coordinate, including the axis offset.'
    px = units * self.scale
    if self.vertical: return self.area.bottom - px + self.offset
    return self.area.x + px + self.offset


  def point_coord(self, xs:list[Any], i:int) -> float|None:
    return self.transform(xs[i] if i < len(xs) else i)


  def baseline(self) -> float:
    zero = min(max(0.0, self.min), self.max)
    c = self.transform(zero)
    assert c is not None
    return c


  def tick_position(self, v:float) -> float:
    c = self.transform(v)
    assert c is not None
    return c



class LinearAxis(NumericalAxis):
  '''
  A linear numeric axis.
  Auto bounds floor the data minimum and add 10% headroom to a positive data maximum before nice rounding.
  Declared bounds are kept as given.
  '''

  headroom = 1.1

  @property
  def kind_class(self) -> str: return 'numeric'


  def configure(self, values:list[Any]) -> None:
    cfg = self.cfg
    nums = [n for n in map(to_num, values) if n is not None]
    if nums:
      lo = float(floor(min(nums)))
      top = max(nums)
      hi = float(ceil(top * self.headroom if top > 0 else top))
    else:
      lo, hi = 0.0, (10.0 if self.vertical else 100.0)
    ns = nice_scale(lo, hi, cfg.tick_amount or 5, include_zero=False)
    min_ = ns.min if cfg.min is None else float(cfg.min)
    max_ = ns.max if cfg.max is None else float(cfg.max)
    if max_ <= min_: max_ = min_ + 1
    step = cfg.tick_interval if cfg.tick_interval and cfg.tick_interval > 0 else ns.tick_interval
    self.min = min_
    self.max = max_
    self.tick_interval = step
    self.scale = self.extent / (max_ - min_)
    self.ticks = [Tick(v, self.tick_label(v), self.tick_position(v)) for v in tick_values(min_, max_, step)]


  def transform(self, v:Any) -> float|None:
    n = to_num(v)
    if n is None: return None
    return self.linear_coord(n - self.min)



class TimeAxis(LinearAxis):
  '''
  A numeric axis of POSIX timestamps in seconds, labeled with `labels.date_format` in UTC.
  '''

  headroom = 1.0

  @property
  def kind_class(self) -> str: return 'time'


  def tick_label(self, v:Any) -> str:
    n = to_num(v)
    if n is None: return ''
    try: return datetime.fromtimestamp(n, tz=timezone.utc).strftime(self.cfg.labels.date_format)
    except (OverflowError, OSError, ValueError): return fmt_number(n, 0)



class LogAxis(NumericalAxis):
  '''
  A base 10 logarithmic axis. Bounds are whole powers of ten around the positive values; ticks fall on powers of ten.
  Nonpositive values are placed at the `log_eps` floor.
  '''

  @property
  def kind_class(self) -> str: return 'log'


  def configure(self, values:list[Any]) -> None:
    cfg = self.cfg
    positives = [n for n in map(to_num, values) if n is not None and n > 0]
    if cfg.min is not None and cfg.min > 0: log_min = log10(cfg.min)
    elif positives: log_min = float(floor(log10(min(positives))))
    else: log_min = 0.0
    if cfg.max is not None and cfg.max > 0: log_max = log10(cfg.max)
    elif positives: log_max = float(ceil(log10(max(positives))))
    else: log_max = log_min + 1
    if log_max <= log_min: log_max = log_min + 1
    self.log_min = log_min
    self.log_max = log_max
    self.min = 10 ** log_min
    self.max = 10 ** log_max
    self.tick_interval = 1.0
    self.scale = self.extent / (log_max - log_min)
    self.ticks = []
    for k in range(ceil(log_min - 1e-9), floor(log_max + 1e-9) + 1):
      v = 10.0 ** k
      self.ticks.append(Tick(v, self.tick_label(v), self.tick_position(v)))


  def transform(self, v:Any) -> float|None:
    n = to_num(v)
    if n is None: return None
    return self.linear_coord(log10(max(log_eps, n)) - self.log_min)


  def baseline(self) -> float:
    return self.linear_coord(0)



axis_classes:dict[str,type[ChartAxis]] = {
  'category': CategoricalAxis,
  'log': LogAxis,
  'numeric': LinearAxis,
  'string': StringAxis,
  'time': TimeAxis,
}


def make_axis(cfg:AxisConfig, number_format:NumberFormat, *, value_axis:bool) -> ChartAxis:
  '''
  Create the axis for `cfg`.
  `value_axis` is true for the axis carrying series values; such an axis is always numeric
  (log when so declared, else linear), and the other one is always categorical in horizontal mode.
  '''
  kind = cfg.type or 'category'
  cls = axis_classes.get(kind, CategoricalAxis)
  if value_axis and not issubclass(cls, NumericalAxis): cls = LinearAxis
  return cls(cfg, number_format)


class Axes(NamedTuple):
  x:list[ChartAxis]
  y:list[ChartAxis]
  horizontal:bool

  def for_series(self, s:SeriesConfig) -> tuple[ChartAxis,ChartAxis]:
    'The (x, y) axes of a series. Unknown axis ids fall back to the first axis.'
    xi = s.x_axis_id if 0 <= s.x_axis_id < len(self.x) else 0
    yi = s.y_axis_id if 0 <= s.y_axis_id < len(self.y) else 0
    return self.x[xi], self.y[yi]

  def value_axis(self, s:SeriesConfig) -> ChartAxis:
    'The axis carrying the values of `s`: Y normally, X in horizontal mode.'
    x, y = self.for_series(s)
    return x if self.horizontal else y

  def category_axis(self, s:SeriesConfig) -> ChartAxis:
    x, y = self.for_series(s)
    return y if self.horizontal else x

  def all(self) -> list[ChartAxis]:
    return self.x + self.y


def cartesian_series(config:ChartConfig) -> list[SeriesConfig]:
  return [s for s in config.series if s.type not in non_cartesian_types]


def category_source(config:ChartConfig) -> list[Any]:
  '''
  The categories of the chart: the default x values, or else '1'..'n' where n is the longest series.
  '''
  default = config.x_values.get('default')
  if default: return list(default)
  n = max((len(s.data) for s in cartesian_series(config)), default=0)
  return [str(i + 1) for i in range(n)]


def series_values(config:ChartConfig, series:list[SeriesConfig]) -> tuple[list[Any],float|None]:
  '''
  Gather the values that bound a value axis, and the largest positive stack sum if any series stack.
  Waterfall series contribute their band endpoints; stacked bars and areas their per category totals.
  '''
  values:list[Any] = [0]
  stacks = StackAccumulator()
  stacked = False
  for s in series:
    if s.type == 'waterfall':
      acc = WaterfallAccumulator(s.waterfall.initial_value)
      for bar in acc.extend(s.data, s.waterfall.bar_types):
        values.extend((bar.start, bar.end))
    elif s.stacked and s.type in ('area', 'bar'):
      stacked = True
      for i, v in enumerate(s.data):
        stacks.accumulate((s.type, s.stack_group, i), s.name, v)
    else:
      values.extend(s.data)
  if not stacked: return values, None
  for key in stacks.keys():
    values.append(stacks.positive_total(key))
    values.append(stacks.negative_total(key))
  return values, stacks.max_positive_total()


def prepare_axes(config:ChartConfig, area:PlotArea, horizontal:bool, dbg:bool=False) -> Axes:
  '''
  Create and prepare every declared axis for one render call.
  `horizontal` swaps the roles of the axis pair: X axes carry the series values and Y axes the categories.
  '''
  series = cartesian_series(config)
  nf = config.number_format
  categories = category_source(config)
  value_cfgs, cat_cfgs = (config.x_axes, config.y_axes) if horizontal else (config.y_axes, config.x_axes)

  value_axes = []
  for i, cfg in enumerate(value_cfgs):
    if horizontal: on_axis = [s for s in series if _axis_id(s.x_axis_id, value_cfgs) == i]
    else: on_axis = [s for s in series if _axis_id(s.y_axis_id, value_cfgs) == i]
    values, stack_max = series_values(config, on_axis)
    if stack_max is not None and cfg.max is not None and cfg.max < stack_max:
      cfg = replace(cfg, max=float(ceil(stack_max * 1.1)))
    value_axes.append(make_axis(cfg, nf, value_axis=True).prepare(i, values, area, vertical=not horizontal))

  cat_axes = []
  for i, cfg in enumerate(cat_cfgs):
    axis = make_axis(cfg, nf, value_axis=False) if not horizontal else (
      StringAxis(cfg, nf) if cfg.type == 'string' else CategoricalAxis(cfg, nf))
    if isinstance(axis, StringAxis):
      vals:list[Any] = []
      for s in series: vals.extend(config.series_x(s))
    elif isinstance(axis, CategoricalAxis):
      vals = categories
    else:
      vals = []
      for s in series:
        if _axis_id(s.x_axis_id, cat_cfgs) == i:
          xs = config.series_x(s)
          vals.extend(xs if xs else range(len(s.data)))
    cat_axes.append(axis.prepare(i, vals, area, vertical=horizontal))

  axes = Axes(value_axes, cat_axes, True) if horizontal else Axes(cat_axes, value_axes, False)
  if dbg:
    for axis in axes.all(): errSL('chartsvg axis:', axis, 'ticks:', [t.label for t in axis.ticks])
  return axes


def _axis_id(axis_id:int, cfgs:list[AxisConfig]) -> int:
  return axis_id if 0 <= axis_id < len(cfgs) else 0


def value_to_coord(value:Any, axis:ChartAxis) -> float|None:
  'Map a data value to a pixel coordinate on a prepared axis; None if the value cannot be placed.'
  return axis.transform(value)
