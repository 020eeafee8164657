"""Data model for a scaffolding run.

``ScaffoldRequest`` resolves every default when it is constructed, so a run
never starts touching the filesystem with half-defaulted options.
``DirectoryPlan`` and ``TemplateFile`` describe what will be created;
``ScaffoldResult`` describes what was.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


FALLBACK_FUNCTION_NAME = "myfunction"
SOURCE_EXTENSION = ".m"
TEST_SUFFIX = "_test"
DEFAULT_TOOLBOX_VERSION = "1.0.0"

# MATLAB's namelengthmax
MAX_IDENTIFIER_LENGTH = 63

MATLAB_KEYWORDS: frozenset[str] = frozenset({
    "break", "case", "catch", "classdef", "continue", "else", "elseif",
    "end", "for", "function", "global", "if", "otherwise", "parfor",
    "persistent", "return", "spmd", "switch", "try", "while",
})

_IDENTIFIER_RE = re.compile(r"^[A-Za-z][A-Za-z0-9_]*$")
_VERSION_RE = re.compile(r"^\d+(\.\d+){0,3}$")


# ---------------------------------------------------------------------------
# Name helpers
# ---------------------------------------------------------------------------


def is_valid_identifier(name: str) -> bool:
    """Return ``True`` if *name* is a valid MATLAB variable/function name.

    Mirrors MATLAB's ``isvarname``: starts with a letter, continues with
    letters, digits or underscores, is at most 63 characters long and is not
    a keyword.
    """
    return (
        bool(_IDENTIFIER_RE.match(name))
        and len(name) <= MAX_IDENTIFIER_LENGTH
        and name not in MATLAB_KEYWORDS
    )


def default_function_name(root_name: str) -> str:
    """Use *root_name* as the function name when it is a valid identifier.

    Examples::

        default_function_name("banana")    -> "banana"
        default_function_name("2bad-name") -> "myfunction"
    """
    if is_valid_identifier(root_name):
        return root_name
    return FALLBACK_FUNCTION_NAME


def strip_source_extension(name: str) -> str:
    """Remove one trailing ``.m`` so the stub file gets exactly one extension.

    ``"foo.m"`` becomes ``"foo"`` and ``"foo.m.m"`` becomes ``"foo.m"``.
    """
    if name.endswith(SOURCE_EXTENSION):
        return name[: -len(SOURCE_EXTENSION)]
    return name


# ---------------------------------------------------------------------------
# Request / result
# ---------------------------------------------------------------------------


class ScaffoldRequest(BaseModel):
    """Options for a single scaffolding run.

    Defaults are filled in before validation and the model is frozen, so a
    request never changes once built.
    """

    model_config = ConfigDict(frozen=True)

    root_name: str = Field(..., min_length=1, description="Name of the root folder")
    output_folder: Path = Field(
        default_factory=Path.cwd,
        description="Parent folder of the new root folder",
    )
    function_name: Optional[str] = Field(
        default=None,
        description="Base name of the stub function and its test class",
    )
    toolbox_name: Optional[str] = Field(
        default=None, description="Display name written to toolboxOptions.m"
    )
    toolbox_version: str = Field(
        default=DEFAULT_TOOLBOX_VERSION, description="Version written to toolboxOptions.m"
    )

    @field_validator("root_name")
    @classmethod
    def _root_name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("root_name must not be blank")
        # The root folder always lands directly inside output_folder.
        if "/" in value or "\\" in value or Path(value).drive:
            raise ValueError(f"root_name {value!r} must be a folder name, not a path")
        if value in (".", ".."):
            raise ValueError(f"root_name {value!r} is not a usable folder name")
        return value

    @field_validator("function_name")
    @classmethod
    def _strip_extension(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        stripped = strip_source_extension(value)
        if not stripped:
            raise ValueError(f"function_name {value!r} is empty once '.m' is removed")
        if "/" in stripped or "\\" in stripped:
            raise ValueError(f"function_name {value!r} must not contain path separators")
        return stripped

    @field_validator("toolbox_version")
    @classmethod
    def _version_shape(cls, value: str) -> str:
        if not _VERSION_RE.match(value):
            raise ValueError(
                f"toolbox_version {value!r} must be 1-4 dot-separated numbers, e.g. '1.0.0'"
            )
        return value

    @model_validator(mode="before")
    @classmethod
    def _resolve_defaults(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        root_name = data.get("root_name")
        if not isinstance(root_name, str):
            return data
        data = dict(data)
        if data.get("function_name") is None:
            data["function_name"] = default_function_name(root_name)
        if data.get("toolbox_name") is None:
            data["toolbox_name"] = root_name + " Toolbox"
        return data

    @property
    def test_class_name(self) -> str:
        """Name of the generated test class, e.g. ``banana_test``."""
        return f"{self.function_name}{TEST_SUFFIX}"


class ScaffoldResult(BaseModel):
    """Everything a successful run produced."""

    model_config = ConfigDict(frozen=True)

    root: Path = Field(..., description="The generated root folder")
    directories: list[Path] = Field(default_factory=list, description="Created directories, in order")
    files: list[Path] = Field(default_factory=list, description="Placed files, in order, without duplicates")
    function_name: str = Field(..., description="Resolved stub function name")
    toolbox_identifier: str = Field(..., description="UUID written to toolboxOptions.m")


# ---------------------------------------------------------------------------
# Plan
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class DirectoryPlan:
    """The four folders of a toolbox project::

        root/
        ├─── toolbox/
        │       └─── examples/
        └─── tests/
    """

    root: Path
    toolbox: Path
    examples: Path
    tests: Path

    @classmethod
    def for_request(cls, request: ScaffoldRequest) -> "DirectoryPlan":
        root = Path(request.output_folder).absolute() / request.root_name
        toolbox = root / "toolbox"
        return cls(
            root=root,
            toolbox=toolbox,
            examples=toolbox / "examples",
            tests=root / "tests",
        )

    def ordered(self) -> list[Path]:
        """Parents before children."""
        return [self.root, self.toolbox, self.examples, self.tests]


@dataclass(frozen=True)
class TemplateFile:
    """One catalog entry: which template goes where, under which name."""

    template_id: str
    destination: Path
    output_name: Optional[str] = None
    replacements: dict[str, str] = field(default_factory=dict)

    @property
    def output_path(self) -> Path:
        return self.destination / (self.output_name or self.template_id)
