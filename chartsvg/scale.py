# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Nice axis bounds, tick generation and number formatting.
These are pure functions; the axis classes in `chartsvg.axis` build on them.
'''

from math import ceil, floor, isfinite, log10
from typing import Any, Iterable, NamedTuple


# Relative tolerance used when snapping float quotients to whole numbers.
eps = 1e-9

_nice_mantissas = (1, 2, 5, 10)


class NiceScale(NamedTuple):
  min:float
  max:float
  tick_interval:float

  @property
  def tick_count(self) -> int:
    return len(tick_values(self.min, self.max, self.tick_interval))


def to_num(v:Any) -> float|None:
  '''
  Convert a raw data value to a float, or return None if it is missing or not numeric.
  Numeric strings are accepted, since JSON inputs frequently carry them. Booleans are not numbers here.
  '''
  if v is None or isinstance(v, bool): return None
  if isinstance(v, (int, float)):
    return float(v) if isfinite(v) else None
  if isinstance(v, str):
    try: f = float(v.strip())
    except ValueError: return None
    return f if isfinite(f) else None
  return None


def num_or_zero(v:Any) -> float:
  'Missing and non-numeric values count as zero.'
  n = to_num(v)
  return 0.0 if n is None else n


def data_bounds(values:Iterable[Any]) -> tuple[float,float]|None:
  'Return the (min, max) of the numeric values, or None if there are none.'
  nums = [n for n in map(to_num, values) if n is not None]
  if not nums: return None
  return min(nums), max(nums)


def clean(v:float) -> float:
  'Remove float noise such as 0.30000000000000004 from computed bounds and ticks.'
  c = float(f'{v:.12g}')
  return 0.0 if c == 0 else c


def floor_tol(x:float) -> int:
  return floor(x + eps * max(1.0, abs(x)))


def ceil_tol(x:float) -> int:
  return ceil(x - eps * max(1.0, abs(x)))


def nice_step(rough:float) -> float:
  '''
  Round a rough step up to the nearest {1, 2, 5, 10} x 10^k.
  A rough step that is already nice (within `eps`) is returned unchanged.
  '''
  if not rough > 0 or not isfinite(rough): return 1.0
  magnitude = 10 ** floor(log10(rough))
  norm = rough / magnitude
  for m in _nice_mantissas:
    if norm <= m * (1 + eps): return clean(m * magnitude)
  return clean(10 * magnitude) # Only reachable through rounding error in `norm`.


def nice_scale(min:float, max:float, tick_count:int=5, include_zero:bool=True) -> NiceScale:
  '''
  Convert an arbitrary numeric data range into human friendly bounds and a tick interval.
  The bounds are multiples of the interval, contain the input range,
  and are a fixed point: passing the result bounds back in yields the same result.
  The interval is the smallest nice step whose snapped bounds span at most `tick_count` intervals;
  a range that crosses zero always snaps to at least two intervals, so it is allowed two.
  '''
  if min > max: min, max = max, min
  if min == max:
    min -= 1
    max += 1
  if include_zero:
    if min > 0: min = 0
    elif max < 0: max = 0
  if tick_count < 1: tick_count = 1
  if min < 0 < max and tick_count < 2: tick_count = 2

  # Any nice step below the starting one spans more than `tick_count` intervals.
  step = nice_step((max - min) / tick_count)
  for _ in range(64): # Each round at least doubles the step; the bound guards against pathological float input.
    lo, hi = _snap(min, max, step)
    if round((hi - lo) / step) <= tick_count: break
    step = nice_step(step * 1.5) # The next nice step: 1 -> 2 -> 5 -> 10.
  return NiceScale(lo, hi, step)


def _snap(min:float, max:float, step:float) -> tuple[float,float]:
  lo = clean(floor_tol(min / step) * step)
  hi = clean(ceil_tol(max / step) * step)
  if lo > min: lo = clean(lo - step)
  if hi < max: hi = clean(hi + step)
  return lo, hi


def tick_values(min:float, max:float, step:float) -> list[float]:
  '''
  Tick values `min + i*step` for every i whose value does not exceed `max`.
  Computed by multiplication so that there is no accumulated drift;
  a span within `eps` of a whole number of steps includes `max` itself.
  Values within `eps` steps of zero are exactly zero.
  '''
  if max < min: return []
  if not step > 0: return [min]
  steps = (max - min) / step
  whole = round(steps)
  count = whole if abs(steps - whole) <= eps * (whole if whole > 1 else 1) else floor(steps)
  ticks = []
  for i in range(count + 1):
    v = min + step * i
    ticks.append(0.0 if abs(v) <= eps * step else clean(v))
  return ticks


def auto_decimals(value:float) -> int:
  v = abs(value)
  if v >= 100: return 0
  if v >= 10: return 1
  if v >= 1: return 2
  decimals = 2
  while v < 0.1 and decimals < 10:
    v *= 10
    decimals += 1
  return decimals


def fmt_number(value:Any, decimals:int|None=None, prefix:str='', suffix:str='',
 decimal_point:str='.', thousands_sep:str=',') -> str:
  '''
  Format a value for display in labels.
  Non-numeric values are returned as strings unchanged.
  Values within 1e-7 of zero print as `0`.
  When `decimals` is None the count is chosen from the magnitude of the value.
  '''
  v = to_num(value)
  if v is None: return f'{prefix}{value}{suffix}' if value is not None else ''
  if abs(v) < 1e-7: return f'{prefix}0{suffix}'
  if decimals is None: decimals = auto_decimals(v)
  s = f'{v:,.{decimals}f}'
  if (decimal_point, thousands_sep) != ('.', ','):
    s = s.replace(',', '\0').replace('.', decimal_point).replace('\0', thousands_sep)
  return f'{prefix}{s}{suffix}'
