# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

import json
from argparse import ArgumentParser
from sys import stderr, stdin

from .chart import render_chart
from .demos import demos
from .exceptions import ChartError
from .io import exit_error, outZ


def main() -> None:
  parser = ArgumentParser(prog='chartsvg', description='Render a JSON chart description to SVG.')
  parser.add_argument('path', nargs='?', default='', help='Path to a JSON chart description; reads std in if omitted.')
  parser.add_argument('-output', default='', help='Path to write the SVG document to; writes to std out if omitted.')
  parser.add_argument('-demo', choices=sorted(demos), help='Render a builtin demonstration chart instead of a file.')
  parser.add_argument('-list-demos', action='store_true', help='List the builtin demonstration charts.')
  parser.add_argument('-serve', action='store_true', help='Serve all demonstration charts on a local development web server.')
  parser.add_argument('-dbg', action='store_true', help='Print layout diagnostics to std err.')
  args = parser.parse_args()

  if args.list_demos:
    for name in sorted(demos): outZ(name, end='\n')
    return

  if args.serve:
    serve()
    return

  if args.demo:
    chart = demos[args.demo]
  else:
    try:
      if args.path:
        with open(args.path) as f: chart = json.load(f)
      else:
        chart = json.load(stdin)
    except OSError as e: exit_error(f'could not read chart description: {e}')
    except json.JSONDecodeError as e: exit_error(f'{args.path or "<stdin>"}: invalid JSON: {e}')

  try: svg = render_chart(chart, dbg=args.dbg)
  except ChartError as e: exit_error(e)

  if args.output:
    with open(args.output, 'w') as f: f.write(svg)
  else:
    outZ(svg)


def serve() -> None:
  import uvicorn
  import watchfiles  # This is an optional import for uvicorn but we want to make sure it is installed.
  _ = watchfiles
  print('Serving chart demos', file=stderr)
  uvicorn.run('chartsvg._webtest:app', host='localhost', port=8000, log_level='info', factory=True, reload=True)


if __name__ == '__main__': main()
