"""Console front end for cvterm.

An interactive, line-based terminal that feeds each submitted line to the
dispatcher and renders the result.
"""

from cvterm.console.session import TerminalSession

__all__ = ["TerminalSession"]
