"""Actionable error catalog for devos."""

from typing import Dict

_ERROR_MESSAGES: Dict[str, Dict[str, str]] = {
    "config_not_found": {
        "what": "Could not find 'projects.json' at {path}",
        "next": "Create the file next to the devos executable or run `devos edit`.",
    },
    "config_invalid": {
        "what": "Invalid JSON in projects.json ({path}): {detail}",
        "next": (
            "Fix the file with `devos edit`. Each entry needs name, python, odoo_bin, "
            "config_file, args and work_dir."
        ),
    },
    "project_not_found": {
        "what": "Project '{name}' not found in projects.json",
        "next": "Use `devos list` to see available projects.",
    },
    "spawn_failed": {
        "what": "Failed to start python: {python}",
        "next": "Check the `python` and `work_dir` entries of this project in projects.json.",
    },
    "editor_unavailable": {
        "what": "Could not launch an editor for {path}",
        "next": "Open the file manually with any text editor.",
    },
}


def actionable_error(code: str, **kwargs: str) -> str:
    if code not in _ERROR_MESSAGES:
        raise KeyError(f"Unknown error catalog key: {code}")

    template = _ERROR_MESSAGES[code]
    what = template["what"].format(**kwargs)
    next_step = template["next"].format(**kwargs)
    return f"{what} Suggested action: {next_step}"
