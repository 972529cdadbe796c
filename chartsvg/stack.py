# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Stacking of series values into contiguous bands.

`StackAccumulator` keeps independent positive and negative running totals per category key,
so that a stack holding both signs diverges above and below the zero baseline.
`WaterfallAccumulator` is the sequential variant: a single running total carried across categories.
Both are created fresh for each render call.
'''

from typing import Any, Hashable, Iterable, NamedTuple, Sequence, TypeVar

from .scale import num_or_zero


_T = TypeVar('_T')


class StackItem(NamedTuple):
  series_id:Any
  value:float
  band_start:float
  band_end:float

  @property
  def low(self) -> float: return min(self.band_start, self.band_end)

  @property
  def high(self) -> float: return max(self.band_start, self.band_end)


class StackAccumulator:
  '''
  Running sums keyed by category.
  The caller chooses the key; typically it combines the category index, the stack group and the axis pair.
  '''

  def __init__(self) -> None:
    self._pos:dict[Hashable,float] = {}
    self._neg:dict[Hashable,float] = {}
    self._items:dict[Hashable,list[StackItem]] = {}


  def accumulate(self, key:Hashable, series_id:Any, value:Any) -> StackItem:
    '''
    Stack `value` onto the running total for `key` and return its band.
    Values >= 0 stack upward from the positive total, negative values downward from the negative total.
    Missing or non-numeric values count as zero and produce an empty band.
    '''
    v = num_or_zero(value)
    totals = self._pos if v >= 0 else self._neg
    start = totals.get(key, 0.0)
    end = start + v
    totals[key] = end
    item = StackItem(series_id, v, start, end)
    self._items.setdefault(key, []).append(item)
    return item


  def items(self, key:Hashable) -> list[StackItem]:
    return list(self._items.get(key, ()))


  def keys(self) -> list[Hashable]:
    return list(self._items)


  def positive_total(self, key:Hashable) -> float:
    return self._pos.get(key, 0.0)


  def negative_total(self, key:Hashable) -> float:
    return self._neg.get(key, 0.0)


  def max_positive_total(self) -> float:
    return max(self._pos.values(), default=0.0)


  def min_negative_total(self) -> float:
    return min(self._neg.values(), default=0.0)


def stack_order(series:Sequence[_T], kind:str) -> list[_T]:
  '''
  The order in which the series of one stack are accumulated and painted.
  Areas and bars go in reverse declaration order, so that the first declared series paints on top;
  radar stacks go in declaration order.
  '''
  if kind == 'radar': return list(series)
  return list(reversed(series))


def stack_series(series:Iterable[Any], group:Any=None, kind:str='bar') -> StackAccumulator:
  '''
  Accumulate the data of `series` (objects with `name` and `data` attributes) per category index.
  Keys are `(group, index)` pairs.
  '''
  acc = StackAccumulator()
  for s in stack_order(list(series), kind):
    for i, v in enumerate(s.data):
      if kind == 'radar': v = max(0.0, num_or_zero(v))
      acc.accumulate((group, i), s.name, v)
  return acc


# Bar geometry.

class BarSlot(NamedTuple):
  'The placement of one bar across its category slot: `offset` is measured from the slot center.'
  offset:float
  width:float


min_bar_length = 1.0


def stacked_bar_slot(category_extent:float, group_index:int, group_count:int, *,
 horizontal:bool=False, bar_width:float|None=None) -> BarSlot:
  '''
  The slot of stack group `group_index` among `group_count` groups sharing a category.
  The groups share 80% of the category; each keeps a spacing fraction of its share (0.2, or 0.1 when horizontal).
  '''
  all_width = category_extent * 0.8
  group_width = all_width / max(1, group_count)
  spacing = group_width * (0.1 if horizontal else 0.2)
  width = group_width - spacing
  if bar_width is not None: width = min(bar_width, width)
  return BarSlot(-all_width / 2 + group_index * group_width + spacing / 2, width)


def grouped_bar_slot(category_extent:float, series_index:int, series_count:int, *,
 horizontal:bool=False, max_width:float|None=50, bar_width:float|None=None) -> BarSlot:
  '''
  The slot of unstacked series `series_index` among `series_count` side by side bars.
  Vertical bars are capped at `max_width`, and the group shrinks around them.
  '''
  n = max(1, series_count)
  width = category_extent * 0.8 / n
  if bar_width is not None: width = min(bar_width, width)
  if not horizontal and max_width is not None and width > max_width: width = max_width
  return BarSlot(-width * n / 2 + series_index * width, width)


def bar_span(a:float, b:float) -> tuple[float,float]:
  'Return (start, length) of the pixel span between `a` and `b`, with the length at least `min_bar_length`.'
  return min(a, b), max(min_bar_length, abs(b - a))


# Waterfall.

waterfall_kinds = ('initial', 'positive', 'negative', 'subtotal', 'total')


class WaterfallBar(NamedTuple):
  kind:str
  value:float # The input value.
  display_value:float # The value shown in the label; for subtotals and totals this is the resolved total.
  start:float
  end:float
  connect_from:float|None # Value at which the connector from the previous bar is drawn; None for the first bar.

  @property
  def low(self) -> float: return min(self.start, self.end)

  @property
  def high(self) -> float: return max(self.start, self.end)

  @property
  def is_sum(self) -> bool: return self.kind in ('subtotal', 'total')


class WaterfallAccumulator:
  '''
  A single running total carried across categories.
  * `initial` resets the running total to the value, drawn as a band from zero.
  * `positive` and `negative` add the signed value to the running total.
  * `subtotal` and `total` snapshot the running total when the value is zero,
    otherwise they override the running total with the explicit value. Either way the band starts at zero.
  '''

  def __init__(self, initial_value:Any=0) -> None:
    self.running = num_or_zero(initial_value)
    self.bars:list[WaterfallBar] = []


  def add(self, value:Any, kind:str|None=None) -> WaterfallBar:
    v = num_or_zero(value)
    if kind not in waterfall_kinds: kind = 'positive' if v >= 0 else 'negative'

    prev = self.bars[-1] if self.bars else None
    if prev is None: connect_from = None
    elif prev.is_sum: connect_from = prev.display_value
    else: connect_from = self.running

    if kind == 'initial':
      start, end, display = 0.0, v, v
      self.running = v
    elif kind in ('subtotal', 'total'):
      display = v if v != 0 else self.running
      start, end = 0.0, display
      self.running = display
    else:
      start = self.running
      end = start + v
      display = v
      self.running = end

    bar = WaterfallBar(kind, v, display, start, end, connect_from)
    self.bars.append(bar)
    return bar


  def extend(self, values:Iterable[Any], kinds:Sequence[str]=()) -> list[WaterfallBar]:
    'Add each value, taking its kind from the parallel `kinds` sequence where present.'
    return [self.add(v, kinds[i] if i < len(kinds) else None) for i, v in enumerate(values)]
