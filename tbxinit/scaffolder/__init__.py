"""tbxinit scaffolder -- creates a MATLAB toolbox project from templates.

Quick usage::

    from tbxinit.scaffolder import ScaffoldRequest, Scaffolder

    request = ScaffoldRequest(root_name="banana", output_folder="/tmp/work")
    result = Scaffolder().initialize(request)
    print(result.root)  # /tmp/work/banana
"""

from tbxinit.scaffolder.errors import (
    DirectoryCreationFailed,
    FileCopyFailed,
    FileTransformFailed,
    ScaffoldError,
    UnsupportedEnvironment,
)
from tbxinit.scaffolder.generator import Scaffolder, initialize
from tbxinit.scaffolder.models import (
    DirectoryPlan,
    ScaffoldRequest,
    ScaffoldResult,
    TemplateFile,
)
from tbxinit.scaffolder.templates import TemplateCatalog, apply_replacements

__all__ = [
    "DirectoryCreationFailed",
    "DirectoryPlan",
    "FileCopyFailed",
    "FileTransformFailed",
    "ScaffoldError",
    "ScaffoldRequest",
    "ScaffoldResult",
    "Scaffolder",
    "TemplateCatalog",
    "TemplateFile",
    "UnsupportedEnvironment",
    "apply_replacements",
    "initialize",
]
