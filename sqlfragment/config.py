from __future__ import annotations

from dataclasses import dataclass
import os
from typing import Mapping

from dotenv import load_dotenv

from sqlfragment.fragment.models import DEFAULT_PLACEHOLDER_PREFIX

# ==================================================
# Rendering Settings
# ==================================================

PLACEHOLDER_PREFIX_ENV = "SQLFRAGMENT_PLACEHOLDER_PREFIX"
PRETTY_ENV = "SQLFRAGMENT_PRETTY"

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True, slots=True)
class FragmentSettings:
    """
    How fragments are compiled into SQL text.
    """

    placeholder_prefix: str = DEFAULT_PLACEHOLDER_PREFIX
    pretty: bool = False

    def __post_init__(self) -> None:
        if len(self.placeholder_prefix) != 1:
            raise ValueError("placeholder_prefix must be a single character")
        if self.placeholder_prefix.isalnum() or self.placeholder_prefix.isspace():
            raise ValueError("placeholder_prefix must not be alphanumeric or whitespace")


def load_settings(
    dotenv_path: str | os.PathLike[str] | None = None,
    environ: Mapping[str, str] | None = None,
) -> FragmentSettings:
    """
    Reads FragmentSettings from the environment, loading a .env file first.

    Pass ``environ`` to read from a mapping instead of the process environment;
    the .env file is not loaded in that case.
    """
    if environ is None:
        load_dotenv(dotenv_path)
        environ = os.environ

    prefix = environ.get(PLACEHOLDER_PREFIX_ENV) or DEFAULT_PLACEHOLDER_PREFIX
    pretty = environ.get(PRETTY_ENV, "").strip().lower() in _TRUTHY
    return FragmentSettings(placeholder_prefix=prefix, pretty=pretty)
