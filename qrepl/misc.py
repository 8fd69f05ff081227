# --                                                            ; {{{1
#
# File        : qrepl/misc.py
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
Character classes and the trailing-operator heuristic.

>>> read_more("a + b +")
True
>>> read_more("a + b")
False
"""                                                             # }}}1

import regex, sys

                                                                # {{{1
S_DONT_READ_MORE  = "+-})];"
S_PUNCTS          = "([=,*/%|&<>^.:"
S_STRUCTURAL      = "{}`'\""
S_BLANK           = " \t"

RX_STRUCTURAL_C   = regex.compile("[" + regex.escape(S_STRUCTURAL) + "]")
                                                                # }}}1

def find_structural(s, i = 0):                                  # {{{1
  """
  Index of the first brace or string delimiter in s at or after i,
  or -1.

  >>> find_structural("if x > 0 {")
  9
  >>> find_structural('s := "foo"')
  5
  >>> find_structural("a + b")
  -1
  >>> find_structural("{ x }", 1)
  4
  """

  m = RX_STRUCTURAL_C.search(s, i)
  return m.start() if m else -1
                                                                # }}}1

def rstrip_blank(s):
  """
  Strip trailing spaces and tabs (but nothing else).

  >>> rstrip_blank("a +  \\t ")
  'a +'
  >>> rstrip_blank("a +\\n")
  'a +\\n'
  >>> len(rstrip_blank("a" + " " * 100000 + "b"))
  100002
  """
  return s.rstrip(S_BLANK)

def read_more(line):                                            # {{{1
  """
  Does a (trimmed) line that closes no brace or string clearly ask
  for more input?  A trailing binary operator or opening delimiter
  does; a trailing closer does not.

  NB: a single trailing + or - continues the expression, but a
  doubled one (++, --) is read as a postfix operator; only the
  preceding character is inspected, so "a+-" continues.

  >>> read_more("")
  False
  >>> read_more("a + b +")
  True
  >>> read_more("a + b ++")
  False
  >>> read_more("x--")
  False
  >>> read_more("a+-")
  True
  >>> read_more("+")
  False
  >>> read_more("f(x)")
  False
  >>> read_more("xs[0];")
  False
  >>> [ read_more("x " + c) for c in S_PUNCTS ] == [True]*len(S_PUNCTS)
  True
  >>> read_more("println(x")
  False
  >>> read_more("foo(")
  True
  """

  if not line: return False
  last = line[-1]
  if last in "+-":
    return len(line) >= 2 and line[-2] != last
  return last not in S_DONT_READ_MORE and last in S_PUNCTS
                                                                # }}}1

if __name__ == "__main__":
  import doctest
  if doctest.testmod()[0]: sys.exit(1)

# vim: set tw=70 sw=2 sts=2 et fdm=marker :
