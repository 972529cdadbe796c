# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from math import pi

from chartsvg.axis import PlotArea
from chartsvg.config import (BubbleConfig, load_chart, MultipieConfig, PointConfig, RadarConfig, SankeyConfig, SankeyLinkConfig,
  SankeyNodeConfig, SeriesConfig)
from chartsvg.series import group_by_renderer, renderers
from chartsvg.series.base import draw_point, fill_opacity, fill_template, PlotPoint, points_enabled, split_runs
from chartsvg.series.pie import group_cells, inner_radius, pie_angles, pie_slices, PieSlice, polar_point, ring_layout, slice_path
from chartsvg.series.radar import category_values, polar_points, radar_categories, radar_max, spoke_angle
from chartsvg.series.sankey import link_color, node_color
from chartsvg.series.scatter import bubble_size
from chartsvg.series.waterfall import kind_color
from chartsvg.svg import Circle, fmt_path, G, Polygon, Rect
from utest import utest, utest_approx, utest_seq, utest_seq_approx, utest_val, utest_val_approx


# Shared helpers.

p0, p2, p3 = PlotPoint(0, 0, 0, 1), PlotPoint(2, 2, 0, 1), PlotPoint(3, 3, 0, 1)
utest_seq([[p0], [p2, p3]], split_runs, [p0, None, p2, p3], False)
utest_seq([[p0, p2, p3]], split_runs, [p0, None, p2, p3], True)
utest_seq([[p0]], split_runs, [None, p0, None], False)
utest_seq([], split_runs, [None], False)

utest('1 of a {z}', fill_template, '{y} of {x} {z}', y=1, x='a')
utest('{y}', fill_template, '{y}')

utest(False, points_enabled, SeriesConfig(type='bar'))
utest(True, points_enabled, SeriesConfig(type='line'))
utest(True, points_enabled, SeriesConfig(type='polar'))
utest(True, points_enabled, SeriesConfig(type='bar', point=PointConfig(enabled=True)))
utest(False, points_enabled, SeriesConfig(type='line', point=PointConfig(enabled=False)))

utest(0.8, fill_opacity, SeriesConfig())
utest(0.7, fill_opacity, SeriesConfig(), 0.7)
utest(0.3, fill_opacity, SeriesConfig(fill_opacity=0.3), 0.7)

g = G()
square = draw_point(g, 'square', 10, 10, 4, 'red')
utest_val(Rect, type(square))
utest_val((8, 8), (square['x'], square['y']))
utest_val(Polygon, type(draw_point(g, 'diamond', 10, 10, 4, 'red')))
utest_val(Polygon, type(draw_point(g, 'triangle', 10, 10, 4, 'red')))
circle = draw_point(g, 'star', 10, 10, 4, 'red', border_color='#000', border_width=2)
utest_val(Circle, type(circle))
utest_val((2, '#000', 2), (circle['r'], circle['stroke'], circle['stroke-width']))
utest_val(4, len(g._))


# Renderer dispatch.

mixed = [SeriesConfig(name='l', type='line'), SeriesConfig(name='b', type='bar'), SeriesConfig(name='s', type='spline'),
  SeriesConfig(name='p', type='pie')]
groups = group_by_renderer(mixed)
utest_val([renderers['line'], renderers['bar'], renderers['pie']], [render for render, _ in groups])
utest_val([['l', 's'], ['b'], ['p']], [[s.name for s in members] for _, members in groups])
utest_val(renderers['scatter'], renderers['bubble'])


# Pie geometry.

utest((0.0, 360.0), pie_angles, 0, 360)
utest((180, 360), pie_angles, 0, 180)
utest((90, 270), pie_angles, -90, 90)

utest_seq([PieSlice(0, 1.0, 0.0, 90.0), PieSlice(1, 3.0, 90.0, 360.0)], pie_slices, [1, 3, None, -2], 0, 360)
utest_seq([], pie_slices, [0, None, 'x'], 0, 360)
utest_val((90, 45), (PieSlice(0, 1, 0, 90).sweep, PieSlice(0, 1, 0, 90).mid))

utest_seq_approx([-10, 0], polar_point, 0, 0, 10, 180)

utest('M0,0 L10,0 A10,10,0,0,1,0,10 Z', lambda: fmt_path(slice_path(0, 0, 10, 0, 0, 90)))
utest('M10,0 A10,10,0,0,1,0,10 L0,5 A5,5,0,0,0,5,0 Z', lambda: fmt_path(slice_path(0, 0, 10, 5, 0, 90)))
full = slice_path(0, 0, 10, 0, 0, 360)
utest_val(1, full[2][4], 'full circle uses the large arc')
utest_val(False, full[1][1:] == full[2][-2:], 'full circle arc does not end where it starts')

utest(50.0, inner_radius, '50%', 100)
utest(20.0, inner_radius, 20, 100)
utest(12.0, inner_radius, '12', 100)
utest(0.0, inner_radius, 'bad', 100)

utest_seq([PlotArea(10, 5, 80, 40), PlotArea(110, 5, 80, 40), PlotArea(10, 55, 80, 40)], group_cells, PlotArea(0, 0, 200, 100), 3)
utest_seq([], group_cells, PlotArea(0, 0, 200, 100), 0)

inner_s = SeriesConfig(name='inner', type='multipie', data=[1, 2, 3], multipie=MultipieConfig(ring_position=0))
outer_s = SeriesConfig(name='outer', type='multipie', data=[1, 2], multipie=MultipieConfig(ring_position=1))
rings = ring_layout([inner_s, outer_s], PlotArea(0, 0, 200, 200))
outer_thickness = 2 / 6.5 * 85 * 0.9
utest_val(['outer', 'inner'], [r.series.name for r in rings])
utest_val_approx(85, rings[0].outer)
utest_val_approx(85 - outer_thickness, rings[0].inner)
utest_val_approx(85 - outer_thickness - 5, rings[1].outer)
utest_val(0.0, rings[1].inner)


# Radar and polar geometry.

utest_approx(-pi / 2, spoke_angle, 0, 4)
utest_approx(0, spoke_angle, 1, 4)
utest_approx(pi / 2, spoke_angle, 2, 4)

radar_config = load_chart({
  'xValues': {'default': ['x', 'y', 'z'], 's': ['z', 'x']},
  'series': [{'name': 's', 'type': 'radar', 'data': [5, '7']}, {'name': 't', 'type': 'radar', 'data': [1]}],
})
s, t = radar_config.series
utest(['x', 'y', 'z'], radar_categories, radar_config, radar_config.series)
utest([7.0, 0.0, 5.0], category_values, radar_config, s, ['x', 'y', 'z'])
utest([1.0, 0.0, 0.0], category_values, radar_config, t, ['x', 'y', 'z'])

union_config = load_chart({'xValues': {'a': ['p', 'q'], 'b': ['q', 'r']},
  'series': [{'name': 'a', 'type': 'radar'}, {'name': 'b', 'type': 'radar'}]})
utest(['p', 'q', 'r'], radar_categories, union_config, union_config.series)

bare_config = load_chart({'series': [{'type': 'radar', 'data': [1, 2, 3]}]})
utest(['1', '2', '3'], radar_categories, bare_config, bare_config.series)
utest([1.0, 2.0, 3.0], category_values, bare_config, bare_config.series[0], ['1', '2', '3'])

stacked_config = load_chart({'xValues': {'default': ['a', 'b']}, 'series': [
  {'type': 'radar', 'stacked': True, 'data': [4, 6]},
  {'type': 'radar', 'stacked': True, 'data': [2, 3]},
]})
utest(9.0, radar_max, stacked_config, stacked_config.series, ['a', 'b'])
utest(6.0, radar_max, stacked_config, stacked_config.series[:1], ['a', 'b'])
utest(1.0, radar_max, stacked_config, [SeriesConfig(type='radar', data=[0, -2])], ['a', 'b'])
utest(20, radar_max, stacked_config, [SeriesConfig(type='radar', data=[4], radar=RadarConfig(max=20))], ['a', 'b'])

polar_config = load_chart({'xValues': {'default': [0, 90, None]}, 'series': [{'type': 'polar', 'data': [10, 5, 3]}]})
points = polar_points(polar_config, polar_config.series[0], 0, 0, 100)
utest_val([0, 1], [p.index for p in points])
utest_seq_approx([100, 0], lambda: points[0][1:3])
utest_seq_approx([0, 50], lambda: points[1][1:3])


# Series colors.

utest(5.0, bubble_size, None, (0, 10), BubbleConfig(min_size=5, default_size=5))
utest(27.5, bubble_size, 5, (0, 10), BubbleConfig())
utest(20, bubble_size, 5, (5, 5), BubbleConfig())

wf = SeriesConfig(type='waterfall', color='#abcdef')
utest('#abcdef', kind_color, wf, 'initial')
utest('#F44336', kind_color, wf, 'negative')
utest('#9C27B0', kind_color, wf, 'subtotal')

sankey_opts = SankeyConfig(node_colors={'A': '#111111'}, link_colors={'A->C': '#333333'})
utest('#111111', node_color, sankey_opts, SankeyNodeConfig(id='A', color='#222222'))
utest('#222222', node_color, sankey_opts, SankeyNodeConfig(id='B', color='#222222'))
utest('#1f77b4', node_color, sankey_opts, SankeyNodeConfig(id='B'))
utest('#333333', link_color, sankey_opts, SankeyLinkConfig(source='A', target='C', color='#444444'))
utest('#444444', link_color, sankey_opts, SankeyLinkConfig(source='A', target='B', color='#444444'))
utest('#111111', link_color, sankey_opts, SankeyLinkConfig(source='A', target='B'))
utest('#999999', link_color, sankey_opts, SankeyLinkConfig(source='B', target='C'))
