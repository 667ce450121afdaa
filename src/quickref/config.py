"""Application configuration defaults and assembly."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Tuple

from quickref.utils.text import (
    expand_home,
    expand_vars,
    replace_placeholder,
    split_search_path,
)

CACHE_DIR_PLACEHOLDER = "(cache-dir)"
DEFAULT_CACHE_DIR = "$HOME/.local/share/quickref"
DEFAULT_PATHS = f"~/.quickref:{CACHE_DIR_PLACEHOLDER}"
DEFAULT_LISTING_URL = (
    "https://api.github.com/repos/chrisallenlane/cheat/contents/cheat/cheatsheets"
)
DEFAULT_TIMEOUT = 60.0


@dataclass(frozen=True, slots=True)
class AppConfig:
    sync: bool = False
    cache_dir: Path = field(default_factory=lambda: Path(expand_vars(DEFAULT_CACHE_DIR)))
    search_path: Tuple[str, ...] = ()
    listing_url: str = DEFAULT_LISTING_URL
    timeout: Optional[float] = DEFAULT_TIMEOUT
    fail_fast: bool = False


def assemble_paths(cache_dir: str, paths: str) -> Tuple[str, str]:
    """Return the expanded cache directory and search path strings.

    The placeholder is substituted with the raw cache directory template
    first, so variables it references are expanded together with the rest
    of the search path.
    """
    paths = replace_placeholder(paths, CACHE_DIR_PLACEHOLDER, cache_dir)
    return expand_vars(expand_home(cache_dir)), expand_vars(expand_home(paths))


def build_config(
    *,
    sync: bool = False,
    cache_dir: str = DEFAULT_CACHE_DIR,
    paths: str = DEFAULT_PATHS,
    listing_url: str = DEFAULT_LISTING_URL,
    timeout: Optional[float] = DEFAULT_TIMEOUT,
    fail_fast: bool = False,
) -> AppConfig:
    resolved_cache_dir, resolved_paths = assemble_paths(cache_dir, paths)
    return AppConfig(
        sync=sync,
        cache_dir=Path(resolved_cache_dir),
        search_path=split_search_path(resolved_paths),
        listing_url=listing_url,
        timeout=timeout,
        fail_fast=fail_fast,
    )
