"""Interpreter argument construction for Odoo runs."""

from typing import List, Sequence

from devos.models import ProjectConfig


class CommandBuilder:
    """Builds the argument vector passed to the project's interpreter."""

    DEBUG_PORT = 5678
    DEBUG_LISTEN = f"0.0.0.0:{DEBUG_PORT}"

    def debug_args(self) -> List[str]:
        return ["-m", "debugpy", "--listen", self.DEBUG_LISTEN, "--wait-for-client"]

    def build(
        self,
        project: ProjectConfig,
        debug: bool = False,
        extra_args: Sequence[str] = (),
    ) -> List[str]:
        args: List[str] = []
        if debug:
            args.extend(self.debug_args())

        args.append(project.odoo_bin)
        args.extend(["-c", project.config_file])
        # Duplicated flags are kept; odoo-bin resolves them itself.
        args.extend(project.args)
        args.extend(extra_args)
        return args
