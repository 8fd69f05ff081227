# --                                                            ; {{{1
#
# File        : qrepl/__init__.py
# Maintainer  : Felix C. Stegerman <flx@obfusk.net>
# Date        : 2026-10-19
#
# Copyright   : Copyright (C) 2026  Felix C. Stegerman
# Version     : v0.1.0
# License     : GPLv3+
#
# --                                                            ; }}}1

"""Interactive front end w/ multi-line statement detection."""

__version__ = "0.1.0"

def main_():
  """Entry point for main program."""
  from .__main__ import main_
  return main_()

# vim: set tw=70 sw=2 sts=2 et fdm=marker :
