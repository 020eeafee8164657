"""tbxinit -- scaffold a standard MATLAB toolbox project.

Creates the folder layout recommended by the MathWorks toolbox design
guidelines and fills it with README, license, build and packaging files, a
stub function and its test class.
"""

from tbxinit.config import Config
from tbxinit.scaffolder import ScaffoldError, ScaffoldRequest, ScaffoldResult, Scaffolder, initialize

__version__ = "1.0.0"

__all__ = [
    "Config",
    "ScaffoldError",
    "ScaffoldRequest",
    "ScaffoldResult",
    "Scaffolder",
    "initialize",
]
