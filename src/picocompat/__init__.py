"""
picocompat: keeps API version 0 CMS plugins working on a current host.

Canonical lifecycle events fired by the host are translated into the
legacy event names and calling conventions that old plugins expect.
"""

__version__ = "0.1.0"
