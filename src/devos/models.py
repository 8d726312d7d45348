"""Shared domain models for devos."""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class ProjectConfig:
    """One registered Odoo project as read from projects.json."""

    name: str
    python: str
    odoo_bin: str
    config_file: str
    args: Tuple[str, ...]
    work_dir: str
