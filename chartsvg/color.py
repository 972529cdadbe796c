# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Color utilities for hex color strings.
'''


default_colors = (
  '#4572A7', '#AA4643', '#89A54E', '#80699B', '#3D96AE',
  '#DB843D', '#92A8CD', '#A47D7C', '#B5CA92', '#5F9EB7',
)

default_pie_colors = (
  '#5BC9AD', '#DC5244', '#468DF3', '#A0A0A0', '#DDDDDD',
  '#90E1D2', '#E68C86', '#F8D871', '#7F7F7F', '#333438',
)


def hex_to_rgb(color:str) -> tuple[int,int,int]:
  '''
  Parse '#rgb' or '#rrggbb' (the leading '#' is optional).
  Unparseable strings yield black, so that a bad color never aborts a render.
  '''
  h = color.strip().lstrip('#')
  if len(h) == 3: h = ''.join(c*2 for c in h)
  if len(h) != 6: return (0, 0, 0)
  try: return (int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16))
  except ValueError: return (0, 0, 0)


def rgb_to_hex(r:float, g:float, b:float) -> str:
  return '#{:02x}{:02x}{:02x}'.format(*(max(0, min(255, round(c))) for c in (r, g, b)))


def alpha_blend(color:str, alpha:float) -> str:
  'Blend `color` at opacity `alpha` over a white background, returning an opaque color.'
  r, g, b = hex_to_rgb(color)
  return rgb_to_hex(*(c * alpha + 255 * (1 - alpha) for c in (r, g, b)))


def interpolate_color(start:str, end:str, factor:float) -> str:
  r1, g1, b1 = hex_to_rgb(start)
  r2, g2, b2 = hex_to_rgb(end)
  return rgb_to_hex(r1 + factor*(r2-r1), g1 + factor*(g2-g1), b1 + factor*(b2-b1))


def contrast_color(color:str) -> str:
  'Black or white, whichever reads better on `color` (YIQ brightness).'
  r, g, b = hex_to_rgb(color)
  brightness = (r*299 + g*587 + b*114) / 1000
  return '#000000' if brightness > 128 else '#ffffff'
