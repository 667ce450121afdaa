"""Text helpers for expanding path templates."""

from __future__ import annotations

import os
from typing import Tuple

PATH_SEPARATOR = ":"


def replace_placeholder(template: str, placeholder: str, value: str) -> str:
    """Replace every occurrence of `placeholder` in `template` with `value`."""
    return template.replace(placeholder, value)


def expand_home(value: str) -> str:
    """Turn a leading ``~`` in each colon-separated entry into ``$HOME``.

    Only the shorthand is rewritten here; the variable itself is expanded
    afterwards by :func:`expand_vars` like any other reference.
    """
    entries = []
    for entry in value.split(PATH_SEPARATOR):
        if entry == "~" or entry.startswith("~/"):
            entry = "$HOME" + entry[1:]
        entries.append(entry)
    return PATH_SEPARATOR.join(entries)


def expand_vars(value: str) -> str:
    """Expand ``$VAR`` and ``${VAR}`` references.

    Unknown variables are left untouched rather than replaced by an empty string.
    """
    return os.path.expandvars(value)


def split_search_path(value: str) -> Tuple[str, ...]:
    return tuple(value.split(PATH_SEPARATOR))
