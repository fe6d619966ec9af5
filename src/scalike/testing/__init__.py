"""Testing support – hypothesis strategies and instrumented sources.

Import the fixtures in your ``conftest.py``::

    pytest_plugins = ["scalike.testing.fixtures"]
"""

from scalike.testing.sources import CountingSource
from scalike.testing.strategies import maps, seqs

__all__ = ["CountingSource", "maps", "seqs"]
