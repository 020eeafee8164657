"""Bundled template catalog for toolbox scaffolding.

Templates live as plain files named ``<template_id>_TEMPLATE`` under a
template directory (by default ``tbxinit/scaffolder/templates/``).  The
catalog knows where each template goes and which placeholder tokens are
substituted in it; it never modifies the templates themselves.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from pathlib import Path

from .models import SOURCE_EXTENSION, DirectoryPlan, TemplateFile


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"
TEMPLATE_SUFFIX = "_TEMPLATE"

# Placeholder tokens
TOOLBOX_NAME_TOKEN = "<toolbox_name>"
TOOLBOX_VERSION_TOKEN = "<toolbox_version>"
TOOLBOX_IDENTIFIER_TOKEN = "<toolbox_identifier>"
FUNCTION_NAME_TOKEN = "<function_name>"
TEST_CLASS_NAME_TOKEN = "<test_class_name>"


# ---------------------------------------------------------------------------
# Token substitution
# ---------------------------------------------------------------------------


def apply_replacements(lines: list[str], replacements: Mapping[str, str]) -> list[str]:
    """Replace every occurrence of each token on every line.

    Tokens are applied in the mapping's order and each pass runs over the
    output of the previous one, so a value that happens to contain a later
    token will have that token replaced too.
    """
    for token, value in replacements.items():
        lines = [line.replace(token, value) for line in lines]
    return lines


# ---------------------------------------------------------------------------
# TemplateCatalog
# ---------------------------------------------------------------------------


class TemplateCatalog:
    """Locates bundled templates and lists the files a run places.

    The template directory is supplied at construction time; nothing here
    looks up where the package is installed at run time.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)

    # -- Lookup -------------------------------------------------------------

    def path_for(self, template_id: str) -> Path:
        """Return the on-disk path of the template named *template_id*."""
        return self.template_dir / f"{template_id}{TEMPLATE_SUFFIX}"

    def list_templates(self) -> list[str]:
        """Return the sorted logical ids of every template on disk."""
        if not self.template_dir.is_dir():
            return []
        return sorted(
            p.name[: -len(TEMPLATE_SUFFIX)]
            for p in self.template_dir.iterdir()
            if p.is_file() and p.name.endswith(TEMPLATE_SUFFIX)
        )

    def missing(self, entries: Iterable[TemplateFile]) -> list[str]:
        """Return the ids referenced by *entries* that have no template file."""
        return [e.template_id for e in entries if not self.path_for(e.template_id).is_file()]

    # -- Catalog ------------------------------------------------------------

    def entries(
        self,
        plan: DirectoryPlan,
        *,
        function_name: str,
        test_class_name: str,
        toolbox_name: str,
        toolbox_version: str,
        toolbox_identifier: str,
    ) -> list[TemplateFile]:
        """Return the ordered catalog entries for one run.

        Root folder first, then ``toolbox/``, ``toolbox/examples/`` and
        ``tests/``.  ``.gitignore`` is written twice on purpose: the
        MathWorks ignore list placed last replaces the generic MATLAB one.
        """
        return [
            # root/
            TemplateFile("MATLAB.gitignore", plan.root, output_name=".gitignore"),
            TemplateFile("README.md", plan.root),
            TemplateFile("LICENSE.md", plan.root),
            TemplateFile("CHECKLIST.md", plan.root),
            TemplateFile(
                "toolboxOptions.m",
                plan.root,
                replacements={
                    TOOLBOX_NAME_TOKEN: toolbox_name,
                    TOOLBOX_VERSION_TOKEN: toolbox_version,
                    TOOLBOX_IDENTIFIER_TOKEN: toolbox_identifier,
                },
            ),
            TemplateFile("packageToolbox.m", plan.root),
            TemplateFile("buildfile.m", plan.root),
            TemplateFile("mwgitignore", plan.root, output_name=".gitignore"),
            TemplateFile("mwgitattributes", plan.root, output_name=".gitattributes"),
            # root/toolbox/
            TemplateFile(
                "myfunc.m",
                plan.toolbox,
                output_name=function_name + SOURCE_EXTENSION,
                replacements={FUNCTION_NAME_TOKEN: function_name},
            ),
            TemplateFile("gettingStarted.mlx", plan.toolbox),
            # root/toolbox/examples/
            TemplateFile("HelpfulExample.mlx", plan.examples),
            # root/tests/
            TemplateFile(
                "myfunc_test.m",
                plan.tests,
                output_name=test_class_name + SOURCE_EXTENSION,
                replacements={TEST_CLASS_NAME_TOKEN: test_class_name},
            ),
        ]
