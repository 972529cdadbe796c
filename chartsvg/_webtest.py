# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import HTMLResponse
from starlette.routing import Route

from .chart import build_chart
from .demos import demos
from .markup import Mu


def app() -> Starlette:

  routes = [
    Route('/', home_page),
  ]
  return Starlette(routes=routes, debug=True)


async def home_page(request:Request) -> HTMLResponse:
  head = Mu(tag='head', _=[
    Mu(tag='meta', charset='utf-8'),
    Mu(tag='title', _='Chart Test'),
    Mu(tag='style', _='''
  body {
    display: flex;
    flex-wrap: wrap;
    gap: 2em;
    margin: 0;
    padding: 0.5em;
    font-family: monospace;
  }
  figure { margin: 0; }
  '''),
  ])
  body = Mu(tag='body')
  for name, demo in demos.items():
    body.append(Mu(tag='figure', _=[
      Mu(tag='figcaption', _=name),
      build_chart(demo, dbg=True),
    ]))

  html = Mu(tag='html', lang='en', _=[head, body])
  return HTMLResponse('<!DOCTYPE html>\n' + html.render_str())
