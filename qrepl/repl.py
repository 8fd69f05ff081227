# --                                                            ; {{{1
#
# File        : qrepl/repl.py
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
Read-Eval-Print loop.

>>> lines = iter(["x := {", "  1 +", "  2", "}", "", "  y  "])
>>> def read_line(p):
...   try: return next(lines)
...   except StopIteration: raise EOFError
>>> repl(lambda code: "=> " + repr(code), read_line = read_line)
=> 'x := {\n  1 +\n  2\n}'
=> 'y'
^D
"""                                                             # }}}1

import sys

from . import eval as E
from . import scan as S

from .data import QreplError

PS1, PS2 = ">>> ", "... "

def repl(evaluate, config = None, read_line = None):            # {{{1
  """
  Read-Eval-Print loop.  Lines are read until the statement is
  complete; the (stripped) statement is then evaluated and its
  value printed unless UNDEFINED.  Errors, and interrupts during
  evaluation, are reported and the loop goes on; EOF or an interrupt
  at the prompt ends it.

  >>> from qrepl.eval import UNDEFINED
  >>> lines = iter(["a +", "b", "fail", "quiet", "slow", "after"])
  >>> def read_line(p):
  ...   try: return next(lines)
  ...   except StopIteration: raise KeyboardInterrupt
  >>> def ev(code):
  ...   if code == "fail": raise QreplError("oops")
  ...   if code == "quiet": return UNDEFINED
  ...   if code == "slow": raise KeyboardInterrupt
  ...   return code.split()
  >>> repl(ev, read_line = read_line)
  ['a', '+', 'b']
  ['after']
  <BLANKLINE>
  """

  save = None
  if read_line is None:
    read_line = input
    if sys.stdin.isatty() and config is not None:
      save = _setup_readline(config.history)
  tracker = S.ContinuationTracker()
  try:
    while True:
      try:
        expr = S.read_statement(tracker, read_line, PS1, PS2).strip()
      except EOFError:
        print("^D"); break
      except KeyboardInterrupt:
        print(); break
      if not expr: continue
      try:
        ret = E.eval_str(evaluate, expr)
      except KeyboardInterrupt:
        print("KeyboardInterrupt", file = sys.stderr); continue
      except QreplError as e:
        print(e, file = sys.stderr); continue
      if ret is not E.UNDEFINED: print(ret)
  finally:
    if save: save()
                                                                # }}}1

def _setup_readline(history):                                   # {{{1
  """Enable line editing; returns a function that saves history."""
  try:
    import readline
  except ImportError:
    return None
  try:
    readline.read_history_file(history)
  except OSError:
    pass
  # tab indents
  readline.set_completer(lambda text, n: text + "  " if n == 0
                                         else None)
  readline.parse_and_bind("tab: complete")
  def save():
    try:
      readline.write_history_file(history)
    except OSError:
      pass
  return save
                                                                # }}}1

if __name__ == "__main__":
  import doctest
  if doctest.testmod()[0]: sys.exit(1)

# vim: set tw=70 sw=2 sts=2 et fdm=marker :
