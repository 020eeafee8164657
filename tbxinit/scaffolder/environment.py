"""Host capability probe.

The generated ``toolboxOptions.m`` and ``buildfile.m`` rely on MATLAB
features that older releases do not have, so scaffolding refuses to run
unless the host MATLAB release is known and recent enough.  An unknown
release counts as unsupported.

The release is taken from, in order:

1. an explicit value (usually from :class:`tbxinit.config.Config`),
2. the ``MATLAB_RELEASE`` environment variable,
3. ``VersionInfo.xml`` in the installation root of the ``matlab``
   executable found on ``PATH``.

No process is spawned to find out.
"""

from __future__ import annotations

import os
import re
import shutil
from pathlib import Path

_RELEASE_RE = re.compile(r"^R(\d{4})([ab])$")
_VERSION_INFO_RE = re.compile(r"<release>\s*(R\d{4}[ab])\s*</release>")

RELEASE_ENV_VAR = "MATLAB_RELEASE"


def parse_release(release: str | None) -> tuple[int, str] | None:
    """Split a release name such as ``"R2023a"`` into ``(2023, "a")``.

    Returns ``None`` for anything that is not shaped like a release name.
    """
    if not release:
        return None
    match = _RELEASE_RE.match(release.strip())
    if match is None:
        return None
    return int(match.group(1)), match.group(2)


def is_release_supported(found: str | None, minimum: str) -> bool:
    """Return ``True`` if *found* is the same as or newer than *minimum*."""
    found_key = parse_release(found)
    minimum_key = parse_release(minimum)
    if found_key is None or minimum_key is None:
        return False
    return found_key >= minimum_key


def read_version_info(matlab_root: str | Path) -> str | None:
    """Read the release name from ``<matlab_root>/VersionInfo.xml``."""
    version_file = Path(matlab_root) / "VersionInfo.xml"
    try:
        text = version_file.read_text(encoding="utf-8", errors="replace")
    except OSError:
        return None
    match = _VERSION_INFO_RE.search(text)
    return match.group(1) if match else None


def find_matlab_root() -> Path | None:
    """Locate the MATLAB installation root from the executable on ``PATH``.

    The executable lives in ``<root>/bin/matlab``; symlinks (as installed
    into ``/usr/local/bin`` by some setups) are resolved first.
    """
    executable = shutil.which("matlab")
    if executable is None:
        return None
    return Path(executable).resolve().parent.parent


def detect_release(explicit: str | None = None) -> str | None:
    """Return the host MATLAB release name, or ``None`` if unknown."""
    if explicit:
        return explicit.strip()

    from_env = os.environ.get(RELEASE_ENV_VAR, "").strip()
    if from_env:
        return from_env

    root = find_matlab_root()
    if root is None:
        return None
    return read_version_info(root)


def check_environment(minimum: str, explicit: str | None = None) -> bool:
    """Return ``True`` when the host MATLAB release satisfies *minimum*."""
    return is_release_supported(detect_release(explicit), minimum)
