from __future__ import annotations
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional

_TRUTHY = {"1", "true", "yes", "on"}

DEFAULT_LOG_LEVEL = "WARNING"


def paths_from_env(var: str, defaults: Iterable[Path]) -> List[Path]:
    raw = os.environ.get(var)
    if not raw:
        return [Path(p) for p in defaults]
    return [Path(p.strip()) for p in raw.split(os.pathsep) if p.strip()]


def flag_from_env(var: str, default: bool = False) -> bool:
    raw = os.environ.get(var)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUTHY


def get_load_path() -> List[Path]:
    return paths_from_env('MINILISP_LOAD_PATH', [Path('.')])


def get_log_level() -> str:
    return os.environ.get('MINILISP_LOG_LEVEL', DEFAULT_LOG_LEVEL).upper()


@dataclass
class Settings:
    """Per-context interpreter settings.

    strict_set: when true, (set! name ...) on an unbound name raises instead of
    silently creating a global binding.
    load_path: directories searched by `load` for relative file names.
    """
    strict_set: bool = False
    load_path: List[Path] = field(default_factory=lambda: [Path('.')])
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(
        cls,
        strict_set: Optional[bool] = None,
        load_path: Optional[Iterable[Path]] = None,
        log_level: Optional[str] = None,
    ) -> Settings:
        return cls(
            strict_set=flag_from_env('MINILISP_STRICT_SET') if strict_set is None else strict_set,
            load_path=get_load_path() if load_path is None else [Path(p) for p in load_path],
            log_level=get_log_level() if log_level is None else log_level.upper(),
        )
