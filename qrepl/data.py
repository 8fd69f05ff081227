# --                                                            ; {{{1
#
# File        : qrepl/data.py
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
Exceptions, scanner state and configuration.

>>> ScanState()
ScanState(depth=0, in_raw=False)
"""                                                             # }}}1

import os, sys

from collections import namedtuple

# === Exceptions ===

class QreplError(Exception):
  """Base class for qrepl errors"""

class EvaluatorError(QreplError):
  """Evaluator could not be loaded."""
  def __init__(self, spec, msg):
    super().__init__("cannot load evaluator {!r}: {}".format(spec, msg))

class EvalError(QreplError):
  """Evaluation failed."""

# === Scanner State ===

class ScanState(namedtuple("ScanState", "depth in_raw".split())):
  """
  Brace depth and raw (`...`) string mode carried from one line of
  a statement to the next.

  >>> ScanState(1)
  ScanState(depth=1, in_raw=False)
  """

  __slots__ = ()

  def __new__(cls, depth = 0, in_raw = False):
    return super().__new__(cls, depth, in_raw)

# === Configuration ===

Config = namedtuple("Config", "history libs".split())

def config_from_env(environ = None):                            # {{{1
  """
  Configuration from the environment.

  >>> c = config_from_env(dict(HOME = "/home/me"))
  >>> c.history, c.libs
  ('/home/me/.qlang.history', '/home/me/qlang')
  >>> config_from_env(dict(HOME = "/x", QLANG_PATH = "/opt/ql")).libs
  '/opt/ql'
  """

  if environ is None: environ = os.environ
  home = environ.get("HOME", "")
  return Config(history = home + "/.qlang.history",
                libs    = environ.get("QLANG_PATH") or home + "/qlang")
                                                                # }}}1

if __name__ == "__main__":
  import doctest
  if doctest.testmod()[0]: sys.exit(1)

# vim: set tw=70 sw=2 sts=2 et fdm=marker :
