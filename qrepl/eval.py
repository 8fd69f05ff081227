# --                                                            ; {{{1
#
# File        : qrepl/eval.py
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
Evaluator plumbing.  The language engine itself lives elsewhere; an
evaluator is loaded from a "module:factory" spec, and the factory,
called with a Config, returns a function that takes a (complete)
statement and returns its value (or UNDEFINED).

>>> from qrepl.data import config_from_env
>>> ev = load_evaluator(DEFAULT_EVALUATOR, config_from_env({}))
>>> eval_str(ev, "1 + 2")
'1 + 2'
"""                                                             # }}}1

import importlib, sys

from .data import QreplError, EvalError, EvaluatorError

DEFAULT_EVALUATOR = "qrepl.eval:echo"

class _Undefined:
  def __repr__(self): return "UNDEFINED"

UNDEFINED = _Undefined()

def echo(config):
  """Evaluator factory that returns each statement unchanged."""
  return lambda code: code

def load_evaluator(spec, config):                               # {{{1
  """
  Import module:factory and call factory(config).

  >>> from qrepl.data import config_from_env
  >>> c = config_from_env({})
  >>> load_evaluator("qrepl.eval", c)
  Traceback (most recent call last):
    ...
  qrepl.data.EvaluatorError: cannot load evaluator 'qrepl.eval': expected module:factory
  >>> load_evaluator("qrepl.eval:nope", c)
  Traceback (most recent call last):
    ...
  qrepl.data.EvaluatorError: cannot load evaluator 'qrepl.eval:nope': module 'qrepl.eval' has no attribute 'nope'
  >>> load_evaluator("qrepl.nope:echo", c)
  Traceback (most recent call last):
    ...
  qrepl.data.EvaluatorError: cannot load evaluator 'qrepl.nope:echo': No module named 'qrepl.nope'
  >>> load_evaluator("qrepl.eval:DEFAULT_EVALUATOR", c)
  Traceback (most recent call last):
    ...
  qrepl.data.EvaluatorError: cannot load evaluator 'qrepl.eval:DEFAULT_EVALUATOR': 'str' object is not callable

  The factory itself may fail too:

  >>> import sys, types
  >>> def broken(config): raise RuntimeError("engine init failed")
  >>> sys.modules["qrepl_engine"] = types.SimpleNamespace(broken = broken)
  >>> load_evaluator("qrepl_engine:broken", c)
  Traceback (most recent call last):
    ...
  qrepl.data.EvaluatorError: cannot load evaluator 'qrepl_engine:broken': engine init failed
  >>> del sys.modules["qrepl_engine"]
  """

  mod, _, name = spec.partition(":")
  if not mod or not name:
    raise EvaluatorError(spec, "expected module:factory")
  try:
    return getattr(importlib.import_module(mod), name)(config)
  except QreplError:
    raise
  except Exception as e:
    raise EvaluatorError(spec, e) from e
                                                                # }}}1

def eval_str(evaluate, s):                                      # {{{1
  """
  Evaluate string; failures are raised as EvalError.

  >>> def boom(code): raise ValueError("bad " + code)
  >>> eval_str(boom, "x")
  Traceback (most recent call last):
    ...
  qrepl.data.EvalError: bad x
  """

  try:
    return evaluate(s)
  except QreplError:
    raise
  except Exception as e:
    raise EvalError(str(e)) from e
                                                                # }}}1

def eval_stream(evaluate, s):                                   # {{{1
  r"""
  Evaluate stream contents (as a whole); undecodable input is an
  EvalError.

  >>> import io
  >>> eval_stream(echo(None), io.StringIO("x = {\n}\n"))
  'x = {\n}\n'
  >>> bad = io.TextIOWrapper(io.BytesIO(b"x = \xff\xfe\n"), encoding = "utf-8")
  >>> eval_stream(echo(None), bad)
  Traceback (most recent call last):
    ...
  qrepl.data.EvalError: 'utf-8' codec can't decode byte 0xff in position 4: invalid start byte
  """

  try:
    code = "".join(s)
  except UnicodeDecodeError as e:
    raise EvalError(str(e)) from e
  return eval_str(evaluate, code)
                                                                # }}}1

def eval_file(evaluate, name):
  """Evaluate (UTF-8) file contents; OSError and UnicodeDecodeError
  propagate."""
  with open(name, encoding = "utf-8") as f:
    code = f.read()
  return eval_str(evaluate, code)

if __name__ == "__main__":
  import doctest
  if doctest.testmod()[0]: sys.exit(1)

# vim: set tw=70 sw=2 sts=2 et fdm=marker :
