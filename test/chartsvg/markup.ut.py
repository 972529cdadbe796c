# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from chartsvg.markup import fmt_num, Mu
from chartsvg.svg import Circle, fmt_path, fmt_points, G, Polygon, Polyline, rotate, Svg, Text
from utest import utest, utest_exc, utest_val


def render(mu:Mu) -> str: return mu.render_str(newline=False)


# Attributes.

utest('<p>a&lt;b &amp; c</p>', render, Mu(tag='p', _='a<b & c'))

utest('<x b-c="1"/>', render, Mu(tag='x', a=None, b_c=1))

utest('<x id="i" class="k" z="1"/>', render, Mu(tag='x', z=1, id='i', cl='k'))

utest('<x class="a b"/>', render, Mu(tag='x', cl=['a', '', 'b']))

utest('<x a="true" q="&quot;"/>', render, Mu(tag='x', a=True, q='"'))

utest_exc(ValueError, Circle, tag='rect')


# Numbers.

utest('1.235', fmt_num, 1.23456)
utest('2', fmt_num, 2.0)
utest('0', fmt_num, -0.0001)
utest('-3.5', fmt_num, -3.5)
utest('7', fmt_num, 7)
utest_exc(ValueError, fmt_num, float('nan'))


# SVG elements.

g = G(cl='grid')
g.line(x1=0, y1=0.5, x2=10, y2=0.5, stroke='#ccc')
utest('<g class="grid">\n<line x1="0" y1="0.5" x2="10" y2="0.5" stroke="#ccc"/>\n</g>', render, g)

utest('<svg xmlns="http://www.w3.org/2000/svg" width="100" height="50" viewBox="0 0 100 50"/>',
  render, Svg(width=100, height=50).viewbox(0, 0, 100, 50))

utest('<text x="1" y="2" text-anchor="middle">A</text>', render, G().label('A', x=1, y=2, text_anchor='middle'))
utest('<text x="0" y="0">a<tspan>b</tspan></text>', render, Text('a', Mu(tag='tspan', _='b'), x=0, y=0))

utest_val('0,0 1.5,2', Polygon(points=[(0, 0), (1.5, 2)]).attrs['points'])

utest('<rect x="1" y="2" width="3" height="4" rx="2" ry="2"/>', render, G().rect(x=1, y=2, width=3, height=4, r=2))

# A None transform leaves the group unchanged.
utest('<g/>', render, G().g(transform=None))
utest('<g transform="rotate(45)"/>', render, G().g(transform=rotate(45)))


parent = G()
child = parent.g(cl='series')
child.circle(cx=1, cy=1, r=1)
utest_val(1, len(parent.find_all('circle')))
utest_val(1, len(parent.find_all(cl='series')))


# Paths and transforms.

utest('M0,0 L10,5.5 Z', fmt_path, [('M', 0, 0), ('L', 10, 5.5), 'Z'])
utest('M1,1 A5,5,0,1,1,2,2', fmt_path, [('M', 1, 1), (), '', ('A', 5, 5, 0, 1, 1, 2, 2)])
utest_exc(ValueError, fmt_path, [('L', 1)])
utest_exc(ValueError, fmt_path, [('K', 1, 2)])
utest('M0,0 v6 l2,-1', fmt_path, [('M', 0, 0), ('v', 6), ('l', 2, -1)])

utest('rotate(45)', rotate, 45)
utest('rotate(-90,10,20)', rotate, -90, 10, 20)
utest('1,2 3.5,-4', fmt_points, [(1, 2), (3.5, -4)])
utest_val('0,0 1,1', Polyline(points='0,0 1,1')['points'])
