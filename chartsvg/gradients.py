# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Gradient definitions for one render call.
A `GradientDefs` accumulator is created by `render_chart` and passed to the series renderers;
ids are unique within that render, and nothing is cached across calls.
'''

import re
from math import cos, radians, sin

from .color import alpha_blend
from .config import GradientConfig
from .markup import fmt_num
from .svg import Defs, LinearGradient, RadialGradient


_unsafe_id_re = re.compile(r'[^a-zA-Z0-9]')


class GradientDefs:

  def __init__(self) -> None:
    self.gradients:list[LinearGradient|RadialGradient] = []
    self.ids:set[str] = set()


  def __len__(self) -> int:
    return len(self.gradients)


  def fill(self, name:str, gradient:GradientConfig, base_color:str, *, horizontal:bool=False) -> str:
    '''
    Return the fill for a shape: `url(#id)` of a new gradient when `gradient` is enabled, else `base_color`.
    '''
    if not gradient.enabled: return base_color
    return f'url(#{self.add(name, gradient, base_color, horizontal=horizontal)})'


  def add(self, name:str, gradient:GradientConfig, base_color:str, *, horizontal:bool=False) -> str:
    'Define a gradient and return its id.'
    id = self.make_id(name)
    stops = gradient_stops(gradient, base_color)
    el:LinearGradient|RadialGradient
    if gradient.type == 'radial':
      el = RadialGradient(id=id, cx='50%', cy='50%', r='50%', fx='50%', fy='50%')
    else:
      angle = gradient.angle
      if angle is None: angle = 0 if horizontal else 90
      x1, y1, x2, y2 = linear_gradient_coords(angle)
      el = LinearGradient(id=id, x1=x1, y1=y1, x2=x2, y2=y2)
    for offset, color in stops:
      el.stop(offset, color)
    self.gradients.append(el)
    return id


  def make_id(self, name:str) -> str:
    safe = _unsafe_id_re.sub('_', name)
    n = len(self.gradients)
    id = f'gradient_{safe}_{n}'
    while id in self.ids:
      n += 1
      id = f'gradient_{safe}_{n}'
    self.ids.add(id)
    return id


  def defs(self) -> Defs|None:
    'A `defs` element holding every gradient defined so far, or None if there are none.'
    if not self.gradients: return None
    return Defs(_=self.gradients)


def gradient_stops(gradient:GradientConfig, base_color:str) -> list[tuple[str,str]]:
  'The (offset, color) stop pairs for a gradient.'
  colors = gradient.colors
  if colors:
    n = len(colors)
    stops = []
    for i, color in enumerate(colors):
      if i < len(gradient.stops):
        offset = gradient.stops[i]
        if not isinstance(offset, str): offset = f'{fmt_num(offset)}%'
      else:
        offset = f'{fmt_num(i * 100 / max(1, n - 1))}%'
      stops.append((offset, color))
    return stops
  start = gradient.start_color or base_color
  end = gradient.end_color or alpha_blend(base_color, 0.5)
  return [('0%', start), ('100%', end)]


def linear_gradient_coords(angle:float) -> tuple[str,str,str,str]:
  'Percentage endpoints of a linear gradient running through the center of the bounding box at `angle` degrees.'
  a = radians(angle)
  c = cos(a) * 50
  s = sin(a) * 50
  return (f'{fmt_num(50 - c)}%', f'{fmt_num(50 - s)}%', f'{fmt_num(50 + c)}%', f'{fmt_num(50 + s)}%')
