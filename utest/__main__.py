#!/usr/bin/env python3
# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

import os
from argparse import ArgumentParser
from os import environ, getcwd
from subprocess import run
from sys import executable


def main() -> None:
  arg_parser = ArgumentParser(description='Find and run utest unit tests with the extension ".ut.py", defaulting to "test/".')
  arg_parser.add_argument('paths', nargs='*', default=['test'])
  args = arg_parser.parse_args()
  paths = sorted(walk_tests(args.paths))

  env = dict(environ)
  work_dir = getcwd()
  env.setdefault('UTEST_WORK_DIR', work_dir)
  # Test scripts run from the build directory, so the project root must be importable explicitly.
  env['PYTHONPATH'] = os.pathsep.join(filter(None, [work_dir, env.get('PYTHONPATH', '')]))

  utest_cwd = '_build/_utest'
  os.makedirs(utest_cwd, exist_ok=True)
  ok = True
  for path in paths:
    print(path)
    exe_path = os.path.relpath(path, utest_cwd)
    c = run([executable, exe_path], cwd=utest_cwd, env=env).returncode
    if c != 0:
      ok = False
      print()

  exit(0 if ok else 1)


def walk_tests(roots:list[str]) -> list[str]:
  paths = []
  for root in roots:
    if os.path.isfile(root):
      paths.append(root)
      continue
    for dir_path, dir_names, file_names in os.walk(root):
      dir_names[:] = [n for n in dir_names if not n.startswith('.')]
      paths.extend(os.path.join(dir_path, n) for n in file_names if n.endswith('.ut.py'))
  return paths


if __name__ == '__main__': main()
