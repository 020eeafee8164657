"""Main scaffolding orchestrator.

Takes a ``ScaffoldRequest`` and materialises a MATLAB toolbox project: four
folders and twelve files copied from the bundled template catalog, with
placeholder tokens substituted in the manifest, the stub function and its
test class.

The run is strictly linear and stops at the first failure.  Nothing that was
already created is removed, and a root folder that already exists is an
error rather than something to update.
"""

from __future__ import annotations

import shutil
import uuid
from pathlib import Path
from typing import TYPE_CHECKING, Any, Optional

from tbxinit.utils import print_step

from .environment import detect_release, is_release_supported
from .errors import (
    DirectoryCreationFailed,
    FileCopyFailed,
    FileTransformFailed,
    UnsupportedEnvironment,
)
from .models import DirectoryPlan, ScaffoldRequest, ScaffoldResult, TemplateFile
from .templates import TemplateCatalog, apply_replacements

if TYPE_CHECKING:
    from tbxinit.config import Config


# ---------------------------------------------------------------------------
# Main generator
# ---------------------------------------------------------------------------


class Scaffolder:
    """Creates a toolbox project from the template catalog.

    Produces::

        root/
        ├─── README.md, LICENSE.md, CHECKLIST.md
        ├─── buildfile.m, packageToolbox.m, toolboxOptions.m
        ├─── .gitignore, .gitattributes
        ├─── toolbox/
        │    ├─── <function_name>.m
        │    ├─── gettingStarted.mlx
        │    └─── examples/
        │         └─── HelpfulExample.mlx
        └─── tests/
             └─── <function_name>_test.m
    """

    def __init__(self, config: Optional["Config"] = None) -> None:
        if config is None:
            from tbxinit.config import Config

            config = Config()
        self.config = config
        self.catalog = TemplateCatalog(config.template_dir)

    # -- Public API --------------------------------------------------------

    def initialize(self, request: ScaffoldRequest) -> ScaffoldResult:
        """Generate the project described by *request*.

        Returns:
            A ``ScaffoldResult`` listing the created folders and files.

        Raises:
            UnsupportedEnvironment: The host MATLAB release is unknown or too
                old.  Raised before anything is written.
            DirectoryCreationFailed: A folder could not be created, including
                because it already exists.
            FileCopyFailed: A template could not be copied.
            FileTransformFailed: Token substitution could not read or
                rewrite a copied file.
        """
        # 1. Resolve the plan and the per-run values
        plan = DirectoryPlan.for_request(request)
        toolbox_identifier = str(uuid.uuid4())
        entries = self.catalog.entries(
            plan,
            function_name=request.function_name,
            test_class_name=request.test_class_name,
            toolbox_name=request.toolbox_name,
            toolbox_version=request.toolbox_version,
            toolbox_identifier=toolbox_identifier,
        )

        # 2. Host capability
        self._check_environment()

        # 3. Folders, parents first
        directories = self._create_directories(plan)

        # 4. Files, in catalog order
        files: list[Path] = []
        for entry in entries:
            self._place(entry)
            if entry.output_path not in files:
                files.append(entry.output_path)

        return ScaffoldResult(
            root=plan.root,
            directories=directories,
            files=files,
            function_name=request.function_name,
            toolbox_identifier=toolbox_identifier,
        )

    # -- Steps -------------------------------------------------------------

    def _check_environment(self) -> None:
        if not self.config.check_environment:
            return
        minimum = self.config.minimum_release
        found = detect_release(self.config.matlab_release)
        if not is_release_supported(found, minimum):
            raise UnsupportedEnvironment(minimum, found)

    def _create_directories(self, plan: DirectoryPlan) -> list[Path]:
        created: list[Path] = []
        for index, directory in enumerate(plan.ordered()):
            try:
                # Only the root may need its parents (the output folder).
                directory.mkdir(parents=index == 0, exist_ok=False)
            except OSError as exc:
                raise DirectoryCreationFailed(directory, exc) from exc
            created.append(directory)
            self._report(f"created  {directory}")
        return created

    def _place(self, entry: TemplateFile) -> None:
        source = self.catalog.path_for(entry.template_id)
        target = entry.output_path
        try:
            shutil.copyfile(source, target)
        except OSError as exc:
            raise FileCopyFailed(entry.template_id, target, exc) from exc

        if entry.replacements:
            _rewrite(target, entry.replacements)
        self._report(f"placed   {target}")

    def _report(self, message: str) -> None:
        if self.config.verbose:
            print_step(message)


# ---------------------------------------------------------------------------
# Convenience entry point
# ---------------------------------------------------------------------------


def initialize(
    root_name: str,
    *,
    config: Optional["Config"] = None,
    **options: Any,
) -> ScaffoldResult:
    """Scaffold a toolbox named *root_name*.

    *options* are the optional ``ScaffoldRequest`` fields
    (``output_folder``, ``function_name``, ``toolbox_name``,
    ``toolbox_version``).  Options passed as ``None`` take their default.
    """
    request = ScaffoldRequest(
        root_name=root_name,
        **{k: v for k, v in options.items() if v is not None},
    )
    return Scaffolder(config).initialize(request)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _rewrite(path: Path, replacements: dict[str, str]) -> None:
    """Apply *replacements* to the text file at *path*, in place."""
    try:
        with path.open("r", encoding="utf-8", newline="") as fh:
            lines = fh.read().splitlines(keepends=True)
        lines = apply_replacements(lines, replacements)
        with path.open("w", encoding="utf-8", newline="") as fh:
            fh.writelines(lines)
    except (OSError, UnicodeDecodeError) as exc:
        raise FileTransformFailed(path, exc) from exc
