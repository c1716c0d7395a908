"""Documentation site configuration model.

This package validates the two declarative descriptors a documentation build
hands to its site generator: the site configuration (content plugin
registrations and static directories) and the named sidebar trees.

Exports
-------
- ``app``: Cyclopts application behind the ``docsite`` console script.
- ``main``: Convenience function that invokes the app.
- ``load_descriptors``: Load and resolve both descriptors from YAML files.

Examples
--------
>>> from docsite import main
>>> main()  # doctest: +SKIP
>>> from docsite import load_descriptors
>>> from pathlib import Path
>>> loaded = load_descriptors(Path("documentation/site.yaml"))  # doctest: +SKIP
>>> loaded.sidebars.names()  # doctest: +SKIP
['mySidebar']
"""

from __future__ import annotations

from .cli import app, main
from .descriptors import Descriptors, load_descriptors

__all__ = ["Descriptors", "app", "load_descriptors", "main"]
