"""Pattern Gallery - Root Package.

Runnable demonstrations of classic object-oriented design patterns. Each
pattern is an isolated class hierarchy; a demo catalog ties them to a small
command-line driver.

Key Components:
    - domain: the pattern implementations, grouped by category
    - application: demo scenarios and the catalog that runs them
    - infrastructure: logging and the shared-instance registry
    - config: configuration schemas and loading
    - cli: command-line interface

Usage:
    >>> pattern-gallery list
    >>> pattern-gallery run composite flyweight proxy
"""

from ._version import __version__

__package_name__ = "pattern-gallery"
