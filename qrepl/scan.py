# --                                                            ; {{{1
#
# File        : qrepl/scan.py
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
Line continuation: decide whether a statement typed so far needs
more input before it can be evaluated.

>>> t = ContinuationTracker()
>>> buf, more = t.read_more("", "if x > 0 {")
>>> more, t.depth
(True, 1)
>>> buf, more = t.read_more(buf, "  y = 1")
>>> more
True
>>> buf, more = t.read_more(buf, "}")
>>> more, t.depth
(False, 0)
>>> buf
'if x > 0 {\n  y = 1\n}\n'
"""                                                             # }}}1

import sys

from . import misc as M

from .data import ScanState

def scan(state, accumulated, line):                             # {{{1
  r"""
  Scan one line; returns the new state, the accumulated buffer
  (line + newline appended) and whether more input is needed.

  >>> st0 = ScanState()
  >>> scan(st0, "", "a + b +")
  (ScanState(depth=0, in_raw=False), 'a + b +\n', True)
  >>> scan(st0, "", "a + b ++")
  (ScanState(depth=0, in_raw=False), 'a + b ++\n', False)
  >>> st1, buf, more = scan(st0, "", "if x > 0 {"); st1, more
  (ScanState(depth=1, in_raw=False), True)
  >>> scan(st1, buf, "}")
  (ScanState(depth=0, in_raw=False), 'if x > 0 {\n}\n', False)

  Raw strings may span lines:

  >>> st, buf, more = scan(st0, "", "x = `multi"); st, more
  (ScanState(depth=0, in_raw=True), True)
  >>> st, buf, more = scan(st, buf, "more"); st, more
  (ScanState(depth=0, in_raw=True), True)
  >>> scan(st, buf, "line`")
  (ScanState(depth=0, in_raw=False), 'x = `multi\nmore\nline`\n', False)
  >>> scan(st0, "", "x = `a` + `b")[::2]
  (ScanState(depth=0, in_raw=True), True)
  >>> scan(st0, "", "x = `{`")
  (ScanState(depth=0, in_raw=False), 'x = `{`\n', False)
  >>> scan(st0, "", "x = `'` + y")[::2]
  (ScanState(depth=0, in_raw=False), False)
  >>> scan(st0, "", "x = `a` {")[::2]
  (ScanState(depth=1, in_raw=False), True)

  Quoted strings must close on the same line:

  >>> scan(st0, "", 's := "unterminated')[::2]
  (ScanState(depth=0, in_raw=False), True)
  >>> scan(st0, "", 's := "}{" +')[::2]
  (ScanState(depth=0, in_raw=False), True)
  >>> scan(st0, "", "c := '\"'")[::2]
  (ScanState(depth=0, in_raw=False), False)
  >>> scan(ScanState(2), "", "f(x)")[::2]
  (ScanState(depth=2, in_raw=False), True)

  Excess closers are not rejected; depth goes negative and, like any
  unbalanced depth, asks for more until a later { evens it out:

  >>> st, buf, more = scan(st0, "", "}}"); st, more
  (ScanState(depth=-2, in_raw=False), True)
  >>> st, buf, more = scan(ScanState(-1), "", "if x > 0 {"); st, more
  (ScanState(depth=0, in_raw=False), False)

  The heuristic only sees what follows the last brace or string,
  minus trailing blanks:

  >>> scan(st0, "", "x := {a: 1} + \t ")[::2]
  (ScanState(depth=0, in_raw=False), True)
  >>> scan(st0, "", "")
  (ScanState(depth=0, in_raw=False), '\n', False)

  Any line, in any state, is scanned to a verdict:

  >>> lines = ["'", '"', "`", "{", "}", "'''", "'`{\"}",
  ...          "` ' ` \" { } `", "}" * 50 + "{" * 49, " " * 100000 + "+",
  ...          "a" + " \t" * 50000 + "b", "{" + " " * 100000]
  >>> states = [st0, ScanState(1), ScanState(-1), ScanState(0, True)]
  >>> all(type(scan(st, "", l)[2]) is bool for st in states for l in lines)
  True
  """

  acc           = accumulated + line + "\n"
  depth, in_raw = state
  i             = 0                         # unscanned suffix: line[i:]
  while True:
    if in_raw:
      pos = line.find("`", i)
      if pos < 0: return ScanState(depth, True), acc, True
      i, in_raw = pos + 1, False
    pos = M.find_structural(line, i)
    if pos < 0:
      if depth != 0: return ScanState(depth, False), acc, True
      more = M.read_more(M.rstrip_blank(line[i:]))
      return ScanState(depth, False), acc, more
    c = line[pos]
    if   c == "{": depth += 1
    elif c == "}": depth -= 1
    elif c == "`": in_raw = True
    else:                                   # ' or "
      pos = line.find(c, pos + 1)
      if pos < 0: return ScanState(depth, False), acc, True
    i = pos + 1
                                                                # }}}1

class ContinuationTracker:                                      # {{{1
  """
  Per-session scanner state; read_more() updates it in place.

  >>> t = ContinuationTracker()
  >>> t.read_more("", "x = `multi")
  ('x = `multi\\n', True)
  >>> t.in_raw
  True
  >>> t.read_more('x = `multi\\n', "line`")
  ('x = `multi\\nline`\\n', False)
  >>> t.in_raw
  False

  A complete statement stays complete on an empty line:

  >>> t.read_more("", "a + b")
  ('a + b\\n', False)
  >>> t.read_more("a + b\\n", "")
  ('a + b\\n\\n', False)
  >>> t
  ContinuationTracker(depth=0, in_raw=False)

  A stray closer keeps the session waiting for its opener:

  >>> t.read_more("", "}")
  ('}\\n', True)
  >>> t.read_more('}\\n', "if x > 0 {")
  ('}\\nif x > 0 {\\n', False)
  >>> t
  ContinuationTracker(depth=0, in_raw=False)
  """

  def __init__(self, state = None):
    self.state = state or ScanState()

  def __repr__(self):
    return "ContinuationTracker(depth={}, in_raw={})" \
      .format(self.depth, self.in_raw)

  @property
  def depth(self): return self.state.depth

  @property
  def in_raw(self): return self.state.in_raw

  def read_more(self, accumulated, line):
    """Scan line; returns new accumulated buffer and need-more flag."""
    self.state, acc, more = scan(self.state, accumulated, line)
    return acc, more
                                                                # }}}1

def read_statement(tracker, read_line, ps1 = ">>> ",            # {{{1
                   ps2 = "... "):
  """
  Read lines (prompting w/ ps1, then ps2) until the tracker says the
  statement is complete; returns the accumulated buffer.  EOFError
  from read_line propagates.

  >>> lines = iter(["f(a,", "  b) {", "}", "next"])
  >>> def read_line(p): print(repr(p)); return next(lines)
  >>> t = ContinuationTracker()
  >>> read_statement(t, read_line)
  '>>> '
  '... '
  '... '
  'f(a,\\n  b) {\\n}\\n'
  >>> read_statement(t, lambda p: next(lines))
  'next\\n'
  >>> def eof(p): raise EOFError
  >>> read_statement(t, eof)
  Traceback (most recent call last):
    ...
  EOFError
  """

  acc, prompt = "", ps1
  while True:
    acc, more = tracker.read_more(acc, read_line(prompt))
    if not more: return acc
    prompt = ps2
                                                                # }}}1

if __name__ == "__main__":
  import doctest
  if doctest.testmod()[0]: sys.exit(1)

# vim: set tw=70 sw=2 sts=2 et fdm=marker :
