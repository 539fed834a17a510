"""
Resolution of the ``OCPAY_*`` settings from the process environment, a
``.env`` file and explicit overrides.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Dict, Mapping, Optional

__all__ = ["build_environment", "read_env_file"]

_EXPORT_PREFIX = "export "


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
        return value[1:-1]
    return value


def read_env_file(path: Path) -> Dict[str, str]:
    """
    Parse ``KEY=VALUE`` lines from ``path``; a missing file yields ``{}``.

    Comments, blank lines and lines without ``=`` are skipped. An ``export``
    prefix and matching surrounding quotes are stripped.
    """
    if not path.is_file():
        return {}

    values: Dict[str, str] = {}
    for line in (raw.strip() for raw in path.read_text(encoding="utf-8").splitlines()):
        if line.startswith(_EXPORT_PREFIX):
            line = line[len(_EXPORT_PREFIX):].lstrip()
        key, sep, value = line.partition("=")
        if not sep or not key or key.startswith("#"):
            continue
        values[key.strip()] = _unquote(value.strip())
    return values


def build_environment(
    *,
    env_file: Optional[str] = ".env",
    base: Optional[Mapping[str, str]] = None,
    overrides: Optional[Mapping[str, str]] = None,
) -> Dict[str, str]:
    """
    Merge ``base`` (default :data:`os.environ`), ``env_file`` and ``overrides``.

    File values only fill keys missing from ``base``; ``overrides`` always win.
    Pass ``env_file=None`` to skip the file.
    """
    settings: Dict[str, str] = dict(os.environ if base is None else base)
    if env_file is not None:
        for key, value in read_env_file(Path(env_file)).items():
            settings.setdefault(key, value)
    settings.update(overrides or {})
    return settings
