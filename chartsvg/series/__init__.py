# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Series renderers, keyed by series type.
Several types share a renderer: splines are drawn by the line renderer, bubbles by the scatter renderer, and so on.
'''

from typing import Callable

from ..config import SeriesConfig
from ..svg import G
from . import area, bar, line, pie, radar, sankey, scatter, waterfall
from .base import RenderContext


Renderer = Callable[[RenderContext, list[SeriesConfig]], G]

renderers:dict[str,Renderer] = {
  'area': area.render,
  'bar': bar.render,
  'bubble': scatter.render,
  'line': line.render,
  'multipie': pie.render,
  'pie': pie.render,
  'polar': radar.render,
  'radar': radar.render,
  'sankey': sankey.render,
  'scatter': scatter.render,
  'spline': line.render,
  'waterfall': waterfall.render,
}


def group_by_renderer(series:list[SeriesConfig]) -> list[tuple[Renderer,list[SeriesConfig]]]:
  '''
  Group series by renderer, ordered by the first series of each group.
  Series that share a renderer are rendered together, so that e.g. lines and splines draw in declaration order.
  '''
  groups:dict[Renderer,list[SeriesConfig]] = {}
  for s in series:
    groups.setdefault(renderers[s.type], []).append(s)
  return list(groups.items())
