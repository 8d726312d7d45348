import logging

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from .errors import DevosError, ProjectNotFound, SpawnError
from .services.cache_cleaner import CacheCleaner
from .services.command_builder import CommandBuilder
from .services.config_loader import ConfigLoader, default_config_path
from .services.editor import EditorLauncher
from .services.process_runner import ProcessRunner
from .services.project_resolver import ProjectResolver

console = Console()
logger = logging.getLogger("devos")

logging.basicConfig(
    level="INFO",
    format="%(message)s",
    datefmt="[%X]",
    handlers=[RichHandler(rich_tracebacks=True, show_level=False, show_path=False)],
)


class PassthroughCommand(click.Command):
    """Stops option parsing at the first token meant for odoo-bin.

    Once the project name has been read, the first argument that is not one
    of this command's own options starts the extra args, so odoo-bin flags
    such as ``-d <db>`` that follow it are never taken as devos flags.
    """

    def parse_args(self, ctx, args):
        known = set()
        for param in self.get_params(ctx):
            if isinstance(param, click.Option):
                known.update(param.opts)
                known.update(param.secondary_opts)

        args = list(args)
        name_seen = False
        for index, arg in enumerate(args):
            if arg == "--":
                break
            if arg in known or self._is_flag_group(arg, known):
                continue
            if not name_seen:
                name_seen = not arg.startswith("-")
                continue
            args.insert(index, "--")
            break

        return super().parse_args(ctx, args)

    @staticmethod
    def _is_flag_group(arg, known):
        # e.g. -cd
        if not arg.startswith("-") or arg.startswith("--") or len(arg) < 3:
            return False
        return all(f"-{char}" in known for char in arg[1:])


def _load_projects(config_path):
    logger.debug("Loading projects from %s", config_path)
    try:
        return ConfigLoader().load(config_path)
    except DevosError as exc:
        raise click.ClickException(str(exc)) from exc


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.pass_context
def main(ctx, verbose):
    """Odoo Developer Operation System: start local Odoo projects from projects.json."""
    ctx.ensure_object(dict)
    ctx.obj.setdefault("config_path", default_config_path())

    logger.setLevel(logging.DEBUG if verbose else logging.INFO)


@main.command(cls=PassthroughCommand)
@click.argument("project_name")
@click.option("--clean", "-c", is_flag=True, help="Clean cache (ir_attachment js/css) before starting")
@click.option("--debug", "-d", is_flag=True, help="Enable Python debugger (debugpy) on port 5678")
@click.argument("extra_args", nargs=-1, type=click.UNPROCESSED)
@click.pass_obj
def run(obj, project_name, clean, debug, extra_args):
    """Start an Odoo project.

    Everything from the first argument devos does not recognise after the
    project name, or after `--`, is passed to odoo-bin (e.g. --dev=all).
    """
    projects = _load_projects(obj["config_path"])

    try:
        project = ProjectResolver().require(projects, project_name)
    except ProjectNotFound as exc:
        console.print(f"[red]❌ ERROR:[/red] {escape(str(exc))}")
        return

    console.print(f"[bold]🚀 TARGET:[/bold] {escape(project.name)}")

    if clean:
        CacheCleaner(logger=logger, console=console).clean(project)

    builder = CommandBuilder()
    if debug:
        console.print("[magenta]🐞 DEBUG MODE ENABLED[/magenta]")
        console.print(f"📡 Debugger will listen on localhost:{builder.DEBUG_PORT}")
        console.print("⏸️  Waiting for VS Code to attach...")
        console.print("   (Open VS Code -> Run -> 'Attach to Odoo')")

    console.print("[bold red]🔥 STARTING ODOO...[/bold red]")
    if extra_args:
        console.print(f"➕ Extra Args: {escape(' '.join(extra_args))}")
    console.print("-" * 32)

    args = builder.build(project, debug=debug, extra_args=extra_args)
    try:
        returncode = ProcessRunner(logger=logger).run(project.python, args, project.work_dir)
    except SpawnError as exc:
        raise click.ClickException(str(exc)) from exc

    # The child's exit code is reported but not propagated.
    logger.debug("Odoo exited with code %s", returncode)
    console.print("\n[bold]🛑 ODOO STOPPED.[/bold]")


@main.command("list")
@click.pass_obj
def list_projects(obj):
    """List available projects."""
    projects = _load_projects(obj["config_path"])

    console.print("[bold]📂 AVAILABLE PROJECTS:[/bold]")
    console.print("-" * 22)
    if not projects:
        console.print("[dim]No projects registered. Use `devos edit` to add one.[/dim]")
        return

    for project in projects:
        console.print(f"- {escape(project.name)}  (Dir: {escape(project.work_dir)})")


@main.command()
@click.pass_obj
def edit(obj):
    """Edit the projects.json configuration."""
    # Never parses the file, so a broken projects.json can still be fixed.
    config_path = obj["config_path"]
    console.print("📝 Opening projects.json in VS Code...")

    try:
        editor = EditorLauncher(logger=logger, console=console).open(config_path)
    except DevosError as exc:
        raise click.ClickException(str(exc)) from exc

    if editor == EditorLauncher.PRIMARY_EDITOR:
        console.print("[green]✅ VS Code launched![/green]")
    else:
        console.print(f"[green]✅ {escape(editor)} launched![/green]")


if __name__ == "__main__":
    main()
