"""tbxinit configuration.

Settings that shape how the scaffolder runs rather than what it generates.
They use a Pydantic v2 model so they are validated at construction time and
can be read from environment variables without boiler-plate.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator

DEFAULT_MINIMUM_RELEASE = "R2023b"

_TRUTHY = {"1", "true", "yes", "on"}


class Config(BaseModel):
    """Global tbxinit configuration.

    Created once by the CLI (or by the caller of :func:`tbxinit.initialize`)
    and handed to the :class:`~tbxinit.scaffolder.Scaffolder`.
    """

    template_dir: Optional[Path] = Field(
        default=None,
        description="Folder holding the *_TEMPLATE files (None = bundled templates)",
    )
    check_environment: bool = Field(
        default=True, description="Refuse to run on an unknown or too old MATLAB release"
    )
    minimum_release: str = Field(
        default=DEFAULT_MINIMUM_RELEASE, description="Oldest supported MATLAB release"
    )
    matlab_release: Optional[str] = Field(
        default=None,
        description="Host MATLAB release; detected from MATLAB_RELEASE or the install if None",
    )
    verbose: bool = Field(default=True, description="Report each directory and file as it is created")

    @field_validator("minimum_release")
    @classmethod
    def _release_shape(cls, value: str) -> str:
        from tbxinit.scaffolder.environment import parse_release

        if parse_release(value) is None:
            raise ValueError(f"minimum_release {value!r} must look like 'R2023a'")
        return value

    @classmethod
    def from_env(cls, **overrides: Any) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            TBXINIT_TEMPLATE_DIR, TBXINIT_MINIMUM_RELEASE,
            TBXINIT_SKIP_ENV_CHECK.

        Keyword arguments whose value is not ``None`` take precedence over
        the environment.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("TBXINIT_TEMPLATE_DIR"):
            kwargs["template_dir"] = Path(os.environ["TBXINIT_TEMPLATE_DIR"])
        if os.environ.get("TBXINIT_MINIMUM_RELEASE"):
            kwargs["minimum_release"] = os.environ["TBXINIT_MINIMUM_RELEASE"]
        if os.environ.get("TBXINIT_SKIP_ENV_CHECK", "").strip().lower() in _TRUTHY:
            kwargs["check_environment"] = False

        kwargs.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**kwargs)
