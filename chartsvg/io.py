# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Diagnostic output helpers.
The names follow a convention: the suffix letters describe the separator and terminator.
'''

from sys import exit, stderr, stdout
from typing import Any, NoReturn


def outZ(*items:Any, sep='', end='', flush=False) -> None:
  "Write items to std out; default sep='', end=''."
  print(*items, sep=sep, end=end, file=stdout, flush=flush)

def errL(*items:Any, sep='', flush=False) -> None:
  "Write items to std err; sep='', end='\\n'."
  print(*items, sep=sep, end='\n', file=stderr, flush=flush)

def errSL(*items:Any, flush=False) -> None:
  "Write items to std err; sep=' ', end='\\n'."
  print(*items, sep=' ', end='\n', file=stderr, flush=flush)


def exit_error(*items:Any, code=1) -> NoReturn:
  'Write an error message to std err and exit the process.'
  errL('chartsvg error: ', *items)
  exit(code)
