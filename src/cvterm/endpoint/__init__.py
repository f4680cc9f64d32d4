"""HTTP endpoint module for cvterm.

Serves the command dispatcher over HTTP so a web page can act as the
terminal front end.
"""
