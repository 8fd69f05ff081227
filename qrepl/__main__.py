# --                                                            ; {{{1
#
# File        : qrepl/__main__.py
# Maintainer  : Felix C. Stegerman <flx@obfusk.net>
# Date        : 2026-10-19
#
# Copyright   : Copyright (C) 2026  Felix C. Stegerman
# Version     : v0.1.0
# License     : GPLv3+
#
# --                                                            ; }}}1

                                                                # {{{1
r"""
Command line interface.

>>> main("-e", "f(1, 2)")
f(1, 2)
0
>>> main("--evaluator", "nope")
1
>>> main("/nonexistent/script.q")
2
>>> main("--evaluator", "qrepl.eval:DEFAULT_EVALUATOR")
1

Scripts must be UTF-8 (exit 2); so must piped input (exit 3):

>>> import io, os, tempfile
>>> fd, path = tempfile.mkstemp(suffix = ".q"); os.close(fd)
>>> with open(path, "wb") as f: _ = f.write(b"x = \xff\xfe\n")
>>> main(path)
2
>>> os.remove(path)
>>> stdin = sys.stdin
>>> sys.stdin = io.TextIOWrapper(io.BytesIO(b"\xff\n"), encoding = "utf-8")
>>> main()
3
>>> sys.stdin = stdin
"""                                                             # }}}1

import argparse, sys

from . import __version__
from . import data as D
from . import eval as E
from . import repl as R

from .data import QreplError

_me   = "qrepl"
_desc = "interactive interpreter front end"

def main(*args):                                                # {{{1
  """Main program."""
  p = _argument_parser(); n = p.parse_args(args)
  if n.test: return test(verbose = n.verbose)
  config = D.config_from_env()
  try:
    evaluate = E.load_evaluator(n.evaluator, config)
  except QreplError as e:
    print(e, file = sys.stderr); return 1
  if n.script:
    try:
      E.eval_file(evaluate, n.script)
    except (OSError, UnicodeDecodeError) as e:
      print(e, file = sys.stderr); return 2
    except QreplError as e:
      print(e, file = sys.stderr); return 3
  elif n.eval:
    try:
      ret = E.eval_str(evaluate, n.eval)
    except QreplError as e:
      print(e, file = sys.stderr); return 3
    if ret is not E.UNDEFINED: print(ret)
  if n.interactive or not (n.script or n.eval):
    if not sys.stdin.isatty() and not n.interactive:
      try:
        E.eval_stream(evaluate, sys.stdin)
      except QreplError as e:
        print(e, file = sys.stderr); return 3
    else:
      print("{} v{}".format(_me, __version__))
      R.repl(evaluate, config)
  return 0
                                                                # }}}1

def _argument_parser():                                         # {{{1
  p = argparse.ArgumentParser(description = _desc, prog = _me)
  g = p.add_mutually_exclusive_group()
  g.add_argument("script", metavar = "SCRIPT", nargs = "?",
                 help = "script to run")
  g.add_argument("--eval", "-e", metavar = "CODE",
                 help = "code to run (instead of a script)")
  p.add_argument("--interactive", "-i", action = "store_true",
                 help = "force interactive mode")
  p.add_argument("--evaluator", metavar = "MODULE:FACTORY",
                 default = E.DEFAULT_EVALUATOR,
                 help = "evaluator to use (default: %(default)s)")
  p.add_argument("--version", action = "version",
                 version = "%(prog)s {}".format(__version__))
  p.add_argument("--test", action = "store_true",
                 help = "run tests (instead of the interpreter)")
  p.add_argument("--verbose", "-v", action = "store_true",
                 help = "run tests verbosely")
  return p
                                                                # }}}1

def test(verbose = False):                                      # {{{1
  """Run the doctests of every module in the package."""
  import doctest, importlib, pkgutil
  pkg, failed, attempted = sys.modules[__package__], 0, 0
  for info in pkgutil.iter_modules(pkg.__path__, __package__ + "."):
    if verbose: print("=== {} ===".format(info.name))
    r = doctest.testmod(importlib.import_module(info.name),
                        verbose = verbose)
    failed += r.failed; attempted += r.attempted
  if verbose or failed:
    print("{} examples, {} failed".format(attempted, failed))
  return 1 if failed else 0
                                                                # }}}1

def main_():
  """Entry point for main program."""
  return main(*sys.argv[1:])

if __name__ == "__main__":
  sys.exit(main_())

# vim: set tw=70 sw=2 sts=2 et fdm=marker :
