"""
Node parameter resolution.

Turns the short textual selectors an operator passes on the command line
into typed startup parameters, checked against the choices persisted by
the previous run.
"""

from .version import __version__

__all__ = ["__version__"]
