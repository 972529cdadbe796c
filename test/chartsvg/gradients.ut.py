# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from chartsvg.color import alpha_blend, contrast_color, hex_to_rgb, interpolate_color, rgb_to_hex
from chartsvg.config import GradientConfig
from chartsvg.gradients import gradient_stops, GradientDefs, linear_gradient_coords
from chartsvg.svg import LinearGradient, RadialGradient
from utest import utest, utest_seq, utest_val


# Colors.

utest((170, 187, 204), hex_to_rgb, '#abc')
utest((18, 52, 86), hex_to_rgb, '123456')
utest((0, 0, 0), hex_to_rgb, 'zzz')
utest((0, 0, 0), hex_to_rgb, '#12345')
utest('#ff0080', rgb_to_hex, 300, -5, 127.6)
utest('#ff8080', alpha_blend, '#ff0000', 0.5)
utest('#808080', interpolate_color, '#000000', '#ffffff', 0.5)
utest('#000000', contrast_color, '#ffffff')
utest('#ffffff', contrast_color, '#000080')


# Stops.

utest_seq([('0%', '#ff0000'), ('100%', '#ff8080')], gradient_stops, GradientConfig(enabled=True), '#ff0000')
utest_seq([('0%', '#111111'), ('100%', '#222222')],
  gradient_stops, GradientConfig(enabled=True, start_color='#111111', end_color='#222222'), '#ff0000')
utest_seq([('0%', '#000'), ('50%', '#111'), ('100%', '#222')],
  gradient_stops, GradientConfig(colors=['#000', '#111', '#222']), '#ff0000')
utest_seq([('10%', '#000'), ('40%', '#111'), ('100%', '#222')],
  gradient_stops, GradientConfig(colors=['#000', '#111', '#222'], stops=[10, '40%']), '#ff0000')

utest(('50%', '0%', '50%', '100%'), linear_gradient_coords, 90)
utest(('0%', '50%', '100%', '50%'), linear_gradient_coords, 0)


# Definitions.

defs = GradientDefs()
utest('#f00', defs.fill, 'a', GradientConfig(), '#f00')
utest_val(0, len(defs))
utest_val(None, defs.defs())

enabled = GradientConfig(enabled=True)
utest('url(#gradient_s_1_0)', defs.fill, 's 1', enabled, '#f00')
utest('url(#gradient_s_1_1)', defs.fill, 's 1', enabled, '#f00')
utest('url(#gradient_r_2)', defs.fill, 'r', GradientConfig(enabled=True, type='radial'), '#f00')
utest_val(3, len(defs))
utest_val([LinearGradient, LinearGradient, RadialGradient], [type(g) for g in defs.gradients])

vertical = defs.gradients[0]
utest_val(('50%', '0%', '50%', '100%'), (vertical['x1'], vertical['y1'], vertical['x2'], vertical['y2']))
utest_val(2, len(vertical._))

defs.add('h', enabled, '#f00', horizontal=True)
horizontal = defs.gradients[-1]
utest_val(('0%', '50%'), (horizontal['x1'], horizontal['y1']))

angled = GradientDefs()
angled.add('a', GradientConfig(enabled=True, angle=0), '#f00', horizontal=False)
utest_val('0%', angled.gradients[0]['x1'])

rendered = defs.defs()
utest_val(True, rendered is not None and 'linearGradient' in rendered.render_str())
utest_val(True, rendered is not None and 'stop-color="#f00"' in rendered.render_str())
