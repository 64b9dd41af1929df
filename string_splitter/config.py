from __future__ import annotations

import os
import pathlib
import warnings
from functools import reduce
from importlib import import_module
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple, Union, cast

from pydantic import BaseModel, Field

from string_splitter.options import SplitConfig

yaml = cast(Any, import_module("yaml"))

ENV_PREFIX = "STRING_SPLITTER__"


class SplitterSpec(BaseModel):
    """Declarative description of a splitter run."""

    splitters: List[str] = Field(default_factory=list)
    delimiters: List[Union[str, Tuple[str, str]]] = Field(default_factory=list)
    remove_splitters: bool = True
    trim_parts: bool = False
    legacy_boundary: bool = False
    chunk_size: Optional[int] = Field(default=None, gt=0)
    encoding: str = "utf-8"

    def to_config(self) -> SplitConfig:
        return SplitConfig.build(
            self.splitters,
            self.delimiters,
            remove_splitters=self.remove_splitters,
            trim_parts=self.trim_parts,
            legacy_boundary=self.legacy_boundary,
        )


def _read_yaml(path: str | os.PathLike | None) -> Dict[str, Any]:
    """Return a dict from YAML or {} if path is None/missing/empty."""
    if not path:
        return {}
    p = pathlib.Path(path)
    if not p.exists():
        return {}
    data = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise TypeError("splitter spec must contain a top-level mapping")
    return data


def _env_overrides() -> Dict[str, Any]:
    """
    Map STRING_SPLITTER__KEY=value -> options[key]=value (key lower-cased).
    Values are YAML-coerced (so 'true', '42', '[",", ";"]' become native types).
    """
    out: Dict[str, Any] = {}
    for k, v in os.environ.items():
        if not k.upper().startswith(ENV_PREFIX):
            continue
        key = k[len(ENV_PREFIX) :].lower()
        try:
            val = yaml.safe_load(v)
        except yaml.YAMLError:
            val = v
        out[key] = val
    return out


def _merge_options(base: Dict[str, Any], override: Mapping[str, Any]) -> Dict[str, Any]:
    """Shallow-merge options; override wins."""
    return {**base, **override}


def _warn_unknown_options(opts: Iterable[str]) -> None:
    """Emit a warning when options contain keys SplitterSpec does not define."""

    unknown = [key for key in opts if key not in SplitterSpec.model_fields]
    if unknown:
        warnings.warn(
            f"Unknown splitter options: {', '.join(sorted(unknown))}",
            stacklevel=3,
        )


def load_spec(
    path: str | os.PathLike | None = "splitter.yaml",
    overrides: Mapping[str, Any] | None = None,
) -> SplitterSpec:
    """Load YAML + env/CLI overrides into a validated SplitterSpec."""
    sources = (d for d in (_read_yaml(path), _env_overrides(), overrides) if d)
    merged = reduce(_merge_options, sources, {})
    _warn_unknown_options(merged)
    known = {k: v for k, v in merged.items() if k in SplitterSpec.model_fields}
    return SplitterSpec.model_validate(known)


__all__ = ["ENV_PREFIX", "SplitterSpec", "load_spec"]
