# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
`Mu` is a minimal markup tree: a tag, an attribute dict and a list of children (text or nodes).
The SVG element classes in `chartsvg.svg` build on it.
'''

from math import isfinite
from typing import Any, Iterable, Iterator, TypeVar, Union


MuChild = Union[str,'Mu']

_Child = TypeVar('_Child', str, 'Mu')

# Float attribute values are rounded to this many places when rendered.
float_places = 3

# Rendered attribute order: these first, then the rest in insertion order.
_attr_ranks = {'id': 0, 'class': 1}


class Mu:
  '''
  A markup node.
  Attribute values keep their exact numeric values until render time; None values are not rendered,
  so builders can pass optional attributes through unconditionally.
  Underscores in keyword attribute names become hyphens, so that `stroke_width=2` renders as `stroke-width`.
  `cl` is shorthand for the `class` attribute and accepts a string or a sequence of class names.
  '''

  tag = ''

  def __init__(self, *children:Any, _:Any=(), tag:str='', cl:Iterable[str]|str|None=None,
   attrs:dict[str,Any]|None=None, **kw_attrs:Any) -> None:
    if tag:
      if type(self).tag and type(self).tag != tag:
        raise ValueError(f'{type(self).__name__} has fixed tag {type(self).tag!r}; received: {tag!r}')
      self.tag = tag
    self.attrs:dict[str,Any] = dict(attrs or {})
    for k, v in kw_attrs.items():
      self.attrs[k.replace('_', '-')] = v
    if cl is not None:
      classes = cl if isinstance(cl, str) else ' '.join(c for c in cl if c)
      if classes: self.attrs['class'] = classes
    self._:list[MuChild] = []
    for c in children: self._add(c)
    self._add(_)


  def __repr__(self) -> str:
    return f'<{type(self).__name__} {self.tag} {self.attrs!r} children={len(self._)}>'

  def __getitem__(self, key:str) -> Any:
    return self.attrs[key]

  def __setitem__(self, key:str, val:Any) -> None:
    self.attrs[key] = val

  def get(self, key:str, default:Any=None) -> Any:
    return self.attrs.get(key, default)


  def _add(self, c:Any) -> None:
    'Add a child, a number (formatted as text), or an iterable of these.'
    if isinstance(c, (str, Mu)): self.append(c)
    elif isinstance(c, (int, float)): self.append(fmt_num(c))
    else:
      for el in c: self._add(el)


  def append(self, child:_Child) -> _Child:
    if not isinstance(child, (str, Mu)): raise TypeError(child)
    self._.append(child)
    return child


  @property
  def text(self) -> str:
    'The concatenated text of this node and its descendants.'
    return ''.join(c if isinstance(c, str) else c.text for c in self._)


  def iter_nodes(self, tag:str='', *, cl:str='') -> Iterator['Mu']:
    'Yield this node and its descendants in document order, optionally filtered by tag and by class name.'
    if (not tag or self.tag == tag) and (not cl or cl in self.attrs.get('class', '').split()):
      yield self
    for c in self._:
      if isinstance(c, Mu): yield from c.iter_nodes(tag, cl=cl)


  def find_all(self, tag:str='', *, cl:str='') -> list['Mu']:
    return list(self.iter_nodes(tag, cl=cl))


  # Rendering.

  inline_tags:frozenset[str] = frozenset() # Tags whose children are not separated by newlines.

  def render(self, newline=True) -> Iterator[str]:
    yield from self._render()
    if newline: yield '\n'


  def render_str(self, newline=True) -> str:
    return ''.join(self.render(newline=newline))


  def _render(self) -> Iterator[str]:
    attrs = fmt_attrs(self.attrs)
    if not self._:
      yield f'<{self.tag}{attrs}/>'
      return
    yield f'<{self.tag}{attrs}>'
    sep = '\n' if self.tag not in self.inline_tags and any(isinstance(c, Mu) for c in self._) else ''
    yield sep
    for c in self._:
      if isinstance(c, str): yield esc_text(c)
      else: yield from c._render()
      yield sep
    yield f'</{self.tag}>'


def esc_text(text:str) -> str:
  return text.replace('&', '&amp;').replace('<', '&lt;').replace('>', '&gt;')


def esc_attr(text:str) -> str:
  return text.replace('&', '&amp;').replace('<', '&lt;').replace('"', '&quot;')


def fmt_attrs(attrs:dict[str,Any]) -> str:
  'Format attributes as a string with a leading space per item, skipping None values.'
  parts = []
  for k, v in sorted(attrs.items(), key=lambda item: _attr_ranks.get(item[0], 2)):
    if v is None: continue
    if isinstance(v, bool): v = 'true' if v else 'false'
    elif isinstance(v, (int, float)): v = fmt_num(v)
    parts.append(f' {k}="{esc_attr(str(v))}"')
  return ''.join(parts)


def fmt_num(v:int|float, places:int=float_places) -> str:
  '''
  Format a number for SVG output: floats are rounded to `places` decimals, and integral values print as integers.
  Values that round to zero print as "0", so there is no negative zero.
  '''
  if isinstance(v, bool): return 'true' if v else 'false'
  if isinstance(v, int): return str(v)
  if not isfinite(v): raise ValueError(f'cannot format non-finite number: {v!r}')
  r = round(v, places)
  if r == 0: return '0'
  i = int(r)
  return str(i) if i == r else str(r)
