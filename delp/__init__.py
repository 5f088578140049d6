"""
DeLP - Defeasible Logic Programming

Warrant reasoning over defeasible logic programs: arguments, generalized
specificity and dialectical trees.
"""

__version__ = "0.1.0"

# Configuration is available at top level for convenience
from delp.config import config

__all__ = ["config", "__version__"]
