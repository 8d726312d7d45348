"""Project registry loader for devos."""

import json
import sys
from pathlib import Path
from typing import Any, Dict, List

from devos.errors import ConfigNotFound, ConfigParseError
from devos.errors_catalog import actionable_error
from devos.models import ProjectConfig

CONFIG_FILE_NAME = "projects.json"


def default_config_path() -> Path:
    """Return the projects.json path sitting next to the running executable."""
    return Path(sys.argv[0]).resolve().parent / CONFIG_FILE_NAME


class ConfigLoader:
    """Loads the JSON array of project records."""

    STRING_FIELDS = ("name", "python", "odoo_bin", "config_file", "work_dir")

    def load(self, config_path) -> List[ProjectConfig]:
        path = Path(config_path)
        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise ConfigNotFound(actionable_error("config_not_found", path=str(path))) from exc

        try:
            parsed = json.loads(content)
        except json.JSONDecodeError as exc:
            raise self._invalid(path, str(exc)) from exc

        if not isinstance(parsed, list):
            raise self._invalid(path, "expected a JSON array of projects at the root")

        return [self._parse_entry(path, index, entry) for index, entry in enumerate(parsed)]

    def _parse_entry(self, path: Path, index: int, entry: Any) -> ProjectConfig:
        if not isinstance(entry, dict):
            raise self._invalid(path, f"entry {index} must be an object")

        values: Dict[str, Any] = {}
        for field_name in self.STRING_FIELDS:
            if field_name not in entry:
                raise self._invalid(path, f"entry {index} is missing field '{field_name}'")
            if not isinstance(entry[field_name], str):
                raise self._invalid(path, f"entry {index} field '{field_name}' must be a string")
            values[field_name] = entry[field_name]

        if "args" not in entry:
            raise self._invalid(path, f"entry {index} is missing field 'args'")
        args = entry["args"]
        if not isinstance(args, list) or not all(isinstance(arg, str) for arg in args):
            raise self._invalid(path, f"entry {index} field 'args' must be a list of strings")

        return ProjectConfig(args=tuple(args), **values)

    @staticmethod
    def _invalid(path: Path, detail: str) -> ConfigParseError:
        return ConfigParseError(actionable_error("config_invalid", path=str(path), detail=detail))
