# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
The SVG elements that charts are drawn with, as `Mu` subclasses.
Element reference: https://developer.mozilla.org/en-US/docs/Web/SVG/Element.
'''

from typing import Any, Iterable, Self

from .markup import fmt_num, Mu


PathCommand = str|tuple[int|float|str,...]


class SvgNode(Mu):
  'Abstract base for SVG elements.'


def _tag(cls:type[Mu]) -> type[Mu]:
  'Set the tag of an element class from its name, lowercasing only the first letter (`LinearGradient` -> `linearGradient`).'
  cls.tag = cls.__name__[0].lower() + cls.__name__[1:]
  return cls


# Leaf elements.

@_tag
class Circle(SvgNode): pass

@_tag
class Line(SvgNode): pass

@_tag
class Stop(SvgNode): pass


@_tag
class Path(SvgNode):

  def __init__(self, *args, d:Iterable[PathCommand]|str|None=None, **kw_attrs) -> None:
    if d is not None and not isinstance(d, str): d = fmt_path(d)
    super().__init__(*args, d=d, **kw_attrs)


class SvgPoly(SvgNode):
  'Base for polygon and polyline; `points` may be a preformatted string or (x, y) pairs.'

  def __init__(self, *args, points:str|Iterable[tuple[float,float]]|None=None, **kw_attrs) -> None:
    if points is not None and not isinstance(points, str): points = fmt_points(points)
    super().__init__(*args, points=points, **kw_attrs)


@_tag
class Polygon(SvgPoly): pass

@_tag
class Polyline(SvgPoly): pass

@_tag
class Rect(SvgNode): pass

@_tag
class Text(SvgNode):
  inline_tags = frozenset({'text'})


# Branch elements.

class SvgBranch(SvgNode):
  'Base for elements that contain other elements. The builder methods append a new child and return it.'

  def circle(self, *, cx:float, cy:float, r:float, **kw_attrs:Any) -> Circle:
    return self.append(Circle(cx=cx, cy=cy, r=r, **kw_attrs))

  def g(self, transform:str|None=None, **kw_attrs:Any) -> 'G':
    return self.append(G(transform=transform or None, **kw_attrs))

  def line(self, *, x1:float, y1:float, x2:float, y2:float, **kw_attrs:Any) -> Line:
    return self.append(Line(x1=x1, y1=y1, x2=x2, y2=y2, **kw_attrs))

  def path(self, d:Iterable[PathCommand], **kw_attrs:Any) -> Path:
    return self.append(Path(d=d, **kw_attrs))

  def polygon(self, points:Iterable[tuple[float,float]], **kw_attrs:Any) -> Polygon:
    return self.append(Polygon(points=points, **kw_attrs))

  def polyline(self, points:Iterable[tuple[float,float]], **kw_attrs:Any) -> Polyline:
    return self.append(Polyline(points=points, **kw_attrs))

  def rect(self, *, x:float, y:float, width:float, height:float, r:float|None=None, **kw_attrs:Any) -> Rect:
    'Append a rect; `r` is shorthand for equal `rx` and `ry` corner radii.'
    if r is not None: kw_attrs.update(rx=r, ry=r)
    return self.append(Rect(x=x, y=y, width=width, height=height, **kw_attrs))

  def label(self, *text:str|int|float, x:float, y:float, **kw_attrs:Any) -> Text:
    'Append a `text` element.'
    return self.append(Text(_=text, x=x, y=y, **kw_attrs))


@_tag
class Svg(SvgBranch):
  'The document root. The xmlns attribute is always first.'

  def __init__(self, *args, **kw_attrs) -> None:
    super().__init__(*args, xmlns='http://www.w3.org/2000/svg', **kw_attrs)

  def viewbox(self, x:float, y:float, width:float, height:float) -> Self:
    self.attrs['viewBox'] = ' '.join(fmt_num(v) for v in (x, y, width, height))
    return self


@_tag
class Defs(SvgBranch): pass

@_tag
class G(SvgBranch): pass


class Gradient(SvgBranch):

  def stop(self, offset:str, color:str, opacity:float|None=None) -> Stop:
    return self.append(Stop(offset=offset, stop_color=color, stop_opacity=opacity))


@_tag
class LinearGradient(Gradient): pass

@_tag
class RadialGradient(Gradient): pass


# Attribute formatting.
# Numbers in transforms, points and paths are separated by commas.

def rotate(degrees:float, x:float=0, y:float=0) -> str:
  'A rotate transform, about (x, y) when either is nonzero.'
  if x == 0 and y == 0: return f'rotate({fmt_num(degrees)})'
  return f'rotate({fmt_num(degrees)},{fmt_num(x)},{fmt_num(y)})'


def fmt_points(points:Iterable[tuple[float,float]]) -> str:
  return ' '.join(f'{fmt_num(x)},{fmt_num(y)}' for x, y in points)


_path_arg_counts = {'A': 7, 'C': 6, 'H': 1, 'L': 2, 'M': 2, 'Q': 4, 'S': 4, 'T': 2, 'V': 1, 'Z': 0}


def fmt_path(commands:Iterable[PathCommand]) -> str:
  '''
  Format path commands as SVG path data.
  A command is a preformatted string, or a tuple of a command letter and its arguments;
  empty strings and tuples are skipped. Lowercase (relative) letters take the same arguments as uppercase.
  '''
  parts = []
  for c in commands:
    if isinstance(c, str):
      if c: parts.append(c)
      continue
    if not c: continue
    code, *args = c
    if not isinstance(code, str) or code.upper() not in _path_arg_counts:
      raise ValueError(f'bad path command: {c!r}')
    if len(args) != _path_arg_counts[code.upper()]:
      raise ValueError(f'path command {code!r} takes {_path_arg_counts[code.upper()]} arguments; received: {c!r}')
    parts.append(code + ','.join(fmt_num(float(a)) for a in args))
  return ' '.join(parts)
