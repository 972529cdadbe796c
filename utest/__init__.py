# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
utest is a tiny unit testing library.
A test module is a plain script of `utest*` calls. Each failure is reported to stderr where it happens,
with the file and line of the failing call; if any test failed, the process exits with status 1.
'''

import atexit as _atexit
import inspect as _inspect
from math import isclose as _isclose
from os.path import relpath as _rel_path
from sys import stderr as _stderr
from traceback import format_exception as _format_exception
from typing import Any, Callable, Iterable


__all__ = [
  'utest',
  'utest_approx',
  'utest_exc',
  'utest_seq',
  'utest_seq_approx',
  'utest_val',
  'utest_val_approx',
]


_test_count = 0
_failure_count = 0

# Tolerances for the approximate variants; the absolute tolerance absorbs the rounding of pixel coordinates.
_rel_tol = 1e-9
_abs_tol = 1e-6


def utest(exp:Any, fn:Callable, *args:Any, _utest_depth=0, **kwargs:Any) -> None:
  'Call `fn(*args, **kwargs)`; fail if it raises or returns a value not equal to `exp`.'
  ok, ret = _call(_utest_depth, 'value', exp, fn, args, kwargs)
  if ok and exp != ret:
    _fail(_utest_depth, 'value', exp, ret=ret, subj=fn, args=args, kwargs=kwargs)


def utest_approx(exp:float, fn:Callable, *args:Any, _utest_depth=0, **kwargs:Any) -> None:
  'Like `utest`, but compare the returned number to `exp` with a small tolerance.'
  ok, ret = _call(_utest_depth, 'number', exp, fn, args, kwargs)
  if ok and not _approx_eq(exp, ret):
    _fail(_utest_depth, 'number', exp, ret=ret, subj=fn, args=args, kwargs=kwargs)


def utest_exc(exp_exc:Any, fn:Callable, *args:Any, _utest_depth=0, **kwargs:Any) -> None:
  '''
  Call `fn(*args, **kwargs)`; fail unless it raises an exception matching `exp_exc`, which can be:
  * a string, compared to `str(exc)`;
  * an exception type, matched with `isinstance`;
  * an exception instance, compared by type and args.
  '''
  global _test_count
  _test_count += 1
  try: ret = fn(*args, **kwargs)
  except Exception as exc:
    if not _exc_matches(exp_exc, exc):
      _fail(_utest_depth, 'exception', exp_exc, exc=exc, subj=fn, args=args, kwargs=kwargs)
  else:
    _fail(_utest_depth, 'exception', exp_exc, ret=ret, subj=fn, args=args, kwargs=kwargs)


def utest_seq(exp_seq:Iterable[Any], fn:Callable, *args:Any, _utest_depth=0, **kwargs:Any) -> None:
  'Call `fn(*args, **kwargs)` and convert the result to a list; fail if it raises or the items differ from `exp_seq`.'
  exp = list(exp_seq)
  ok, ret = _call(_utest_depth, 'sequence', exp, fn, args, kwargs, to_list=True)
  if ok and exp != ret:
    _fail(_utest_depth, 'sequence', exp, ret=ret, subj=fn, args=args, kwargs=kwargs)


def utest_seq_approx(exp_seq:Iterable[float], fn:Callable, *args:Any, _utest_depth=0, **kwargs:Any) -> None:
  'Like `utest_seq`, but compare the items as numbers with a small tolerance.'
  exp = list(exp_seq)
  ok, ret = _call(_utest_depth, 'sequence', exp, fn, args, kwargs, to_list=True)
  if ok and not (len(exp) == len(ret) and all(_approx_eq(e, r) for e, r in zip(exp, ret))):
    _fail(_utest_depth, 'sequence', exp, ret=ret, subj=fn, args=args, kwargs=kwargs)


def utest_val(exp_val:Any, act_val:Any, desc='<value>') -> None:
  'Fail if `act_val` does not equal `exp_val`. `desc` names the check in the failure report.'
  global _test_count
  _test_count += 1
  if exp_val != act_val:
    _fail(0, 'value', exp_val, ret=act_val, subj=repr(desc))


def utest_val_approx(exp_val:float, act_val:Any, desc='<value>') -> None:
  global _test_count
  _test_count += 1
  if not _approx_eq(exp_val, act_val):
    _fail(0, 'number', exp_val, ret=act_val, subj=repr(desc))


def _call(depth:int, exp_label:str, exp:Any, fn:Callable, args:tuple[Any,...], kwargs:dict[str,Any],
 to_list=False) -> tuple[bool,Any]:
  'Count and run one test; a raised exception is reported as a failure and gives (False, None).'
  global _test_count
  _test_count += 1
  try:
    ret = fn(*args, **kwargs)
    if to_list: ret = list(ret)
  except Exception as exc:
    _fail(depth + 1, exp_label, exp, exc=exc, subj=fn, args=args, kwargs=kwargs)
    return False, None
  return True, ret


def _approx_eq(exp:Any, act:Any) -> bool:
  if exp is None or act is None: return exp is act
  try: return _isclose(exp, act, rel_tol=_rel_tol, abs_tol=_abs_tol)
  except TypeError: return False


def _exc_matches(exp:Any, act:BaseException) -> bool:
  if isinstance(exp, str): return exp == str(act)
  if isinstance(exp, type): return isinstance(act, exp)
  return type(exp) == type(act) and exp.args == act.args


def _fail(depth:int, exp_label:str, exp:Any, *, ret:Any=None, exc:BaseException|None=None,
 subj:Any, args:tuple[Any,...]=(), kwargs:dict[str,Any]|None=None) -> None:
  '''
  Report a failure, located at the test script line that called the public utest function.
  `depth` counts the extra frames between that function and this one.
  '''
  global _failure_count
  _failure_count += 1

  caller = _inspect.getframeinfo(_inspect.stack()[2 + depth][0])
  path = _rel_path(caller.filename)
  if '/' not in path: path = './' + path
  name = getattr(subj, '__qualname__', None) or str(subj)
  lines = [f'\n{path}:{caller.lineno}: utest failure: {name}']
  lines.extend(f'  arg {i} = {a!r}' for i, a in enumerate(args))
  lines.extend(f'  arg {k} = {v!r}' for k, v in (kwargs or {}).items())

  exp_text = f'expected {exp_label}:'
  act_text, act = ('raised exception:', exc) if exc is not None else ('returned:', ret)
  width = max(len(exp_text), len(act_text))
  lines.append(f'  {exp_text:{width}} {exp!r}')
  lines.append(f'  {act_text:{width}} {act!r}')
  print(*lines, sep='\n', file=_stderr)
  if exc is not None:
    print(file=_stderr)
    _stderr.write(''.join(_format_exception(exc)))
  print(file=_stderr)


@_atexit.register
def _report() -> None:
  'If any test failed, print a summary and exit with status 1.'
  from os import _exit
  if _failure_count:
    print(f'\nutest ran: {_test_count}; failed: {_failure_count}', file=_stderr)
    _stderr.flush()
    _exit(1) # SystemExit raised from an atexit handler does not change the exit status.
