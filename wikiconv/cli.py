"""CLI entry point for wikiconv."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
import yaml
from rich import print as rprint
from rich.markup import escape
from rich.syntax import Syntax
from rich.table import Table

from wikiconv_core.config import WikiconvConfig, load_config
from wikiconv_core.config.loader import CONFIG_FILENAME, DEFAULT_CONFIG_TEMPLATE
from wikiconv_core.controller import ConversionController
from wikiconv_core.logging_setup import configure_logging
from wikiconv_obsidian import (
    PluginDataStore,
    RichNotifier,
    ScopeEditor,
    StaticWorkspace,
    VaultStore,
    VaultWatcher,
    all_folders,
    suggest_folders,
)

app = typer.Typer(
    name="wikiconv",
    help="Rewrite [[wikilinks]] in an Obsidian vault as Markdown links.",
)

settings_app = typer.Typer(help="Show and change converter settings.")
app.add_typer(settings_app, name="settings")

scopes_app = typer.Typer(help="Manage folders converted automatically.")
app.add_typer(scopes_app, name="scopes")

config_app = typer.Typer(help="Manage wikiconv configuration.")
app.add_typer(config_app, name="config")

# Global state
_config: WikiconvConfig | None = None

VaultOption = Annotated[str, typer.Option("--vault", "-v", help="Path to Obsidian vault")]


def _get_config() -> WikiconvConfig:
    if _config is None:
        return load_config()
    return _config


@app.callback()
def main(
    config: Annotated[
        str | None, typer.Option("--config", "-c", help="Path to wikiconv.yaml")
    ] = None,
) -> None:
    """Global options."""
    global _config
    try:
        _config = load_config(config)
    except ValueError as e:
        typer.echo(f"Error: {e}")
        raise typer.Exit(1)
    configure_logging(_config.log_level, _config.log_format)


def _resolve_vault(vault: str) -> Path:
    vault_path = vault or _get_config().vault_path
    if not vault_path:
        typer.echo("Error: --vault is required or set vault_path in config")
        raise typer.Exit(1)
    path = Path(vault_path).expanduser()
    if not path.is_dir():
        typer.echo(f"Error: vault directory not found: {path}")
        raise typer.Exit(1)
    return path


def _scope_editor(vault: str) -> ScopeEditor:
    vault_path = _resolve_vault(vault)
    return ScopeEditor(PluginDataStore(vault_path, _get_config().plugin_id))


def _on_off(enabled: bool) -> str:
    return "[green]on[/green]" if enabled else "[red]off[/red]"


# ---------------------------------------------------------------------------
# Conversion commands
# ---------------------------------------------------------------------------


@app.command()
def convert(
    file: Annotated[str, typer.Argument(help="Note to convert, vault-relative or absolute")],
    vault: VaultOption = "",
) -> None:
    """Convert the wikilinks of one note, whatever folder it is in."""
    cfg = _get_config()
    vault_path = _resolve_vault(vault)
    store = VaultStore(vault_path, ignore_dirs=cfg.watch.ignore_dirs)

    target = Path(file)
    if not target.is_absolute() and not (vault_path / target).exists():
        target = target.resolve()
    try:
        doc = store.document_for(target)
    except ValueError as e:
        typer.echo(f"Error: {e}")
        raise typer.Exit(1)
    if not (vault_path / doc.path).is_file():
        typer.echo(f"Error: note not found: {doc.path}")
        raise typer.Exit(1)

    settings = PluginDataStore(vault_path, cfg.plugin_id).load()
    controller = ConversionController(store, RichNotifier(), StaticWorkspace(doc))
    if not controller.convert_active(settings):
        rprint(f"[dim]No changes to {escape(doc.path)}[/dim]")


@app.command()
def watch(vault: VaultOption = "") -> None:
    """Convert wikilinks automatically as notes in the configured folders change."""
    cfg = _get_config()
    vault_path = _resolve_vault(vault)
    store = VaultStore(vault_path, ignore_dirs=cfg.watch.ignore_dirs)
    settings_store = PluginDataStore(vault_path, cfg.plugin_id)

    settings = settings_store.load()
    if not settings.auto_convert:
        rprint("[yellow]Automatic conversion is off.[/yellow] Enable it with `wikiconv settings auto-convert on`.")
    if not settings.scopes:
        rprint("[yellow]No folders configured.[/yellow] Add one with `wikiconv scopes add FOLDER`.")

    controller = ConversionController(store, RichNotifier())
    watcher = VaultWatcher(store, controller, settings_store, cfg.watch)
    rprint(f"[bold]Watching[/bold] {vault_path} (Ctrl+C to stop)")
    watcher.run_forever()


# ---------------------------------------------------------------------------
# Settings commands
# ---------------------------------------------------------------------------


@settings_app.command("show")
def settings_show(vault: VaultOption = "") -> None:
    """Show the converter settings stored in the vault."""
    settings = _scope_editor(vault).settings()
    table = Table(title="Converter Settings")
    table.add_column("Setting", style="cyan")
    table.add_column("Value")
    table.add_row("Auto convert", _on_off(settings.auto_convert))
    table.add_row("Link format", escape(settings.link_format))
    table.add_row("Success notices", _on_off(settings.show_success_notice))
    table.add_row("Folders", escape(", ".join(settings.scopes)) if settings.scopes else "[dim]none[/dim]")
    rprint(table)


@settings_app.command("link-format")
def settings_link_format(
    template: Annotated[str, typer.Argument(help="Link target template, e.g. @/blog/{}.md")],
    vault: VaultOption = "",
) -> None:
    """Set the link format; {} is replaced by the note name."""
    warning = _scope_editor(vault).set_link_format(template)
    if warning:
        rprint(f"[yellow]warning:[/yellow] {escape(warning)}")
    rprint(f"[green]Link format set to[/green] {escape(template)}")


@settings_app.command("auto-convert")
def settings_auto_convert(
    enabled: Annotated[bool, typer.Argument(help="on/off")],
    vault: VaultOption = "",
) -> None:
    """Turn automatic conversion on or off."""
    _scope_editor(vault).set_auto_convert(enabled)
    rprint(f"Auto convert: {_on_off(enabled)}")


@settings_app.command("notices")
def settings_notices(
    enabled: Annotated[bool, typer.Argument(help="on/off")],
    vault: VaultOption = "",
) -> None:
    """Show or hide the notice printed after a successful conversion."""
    _scope_editor(vault).set_show_success_notice(enabled)
    rprint(f"Success notices: {_on_off(enabled)}")


# ---------------------------------------------------------------------------
# Scope commands
# ---------------------------------------------------------------------------


@scopes_app.command("list")
def scopes_list(vault: VaultOption = "") -> None:
    """List the folders converted automatically."""
    scopes = _scope_editor(vault).scopes()
    if not scopes:
        rprint("[yellow]No folders configured.[/yellow]")
        return
    table = Table(title=f"Folders ({len(scopes)})")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Folder", style="cyan")
    for i, folder in enumerate(scopes):
        table.add_row(str(i), escape(folder) if folder else "[dim](empty)[/dim]")
    rprint(table)


@scopes_app.command("add")
def scopes_add(
    folder: Annotated[str, typer.Argument(help='Folder path, or "/" for the whole vault')] = "",
    vault: VaultOption = "",
) -> None:
    """Add a folder."""
    scopes = _scope_editor(vault).add_scope(folder)
    rprint(f"[green]Added[/green] #{len(scopes) - 1}: {escape(folder) or '(empty)'}")


@scopes_app.command("remove")
def scopes_remove(
    index: Annotated[int, typer.Argument(help="Index shown by `scopes list`")],
    vault: VaultOption = "",
) -> None:
    """Remove a folder by index."""
    try:
        _scope_editor(vault).remove_scope(index)
    except IndexError as e:
        typer.echo(f"Error: {e}")
        raise typer.Exit(1)
    rprint(f"[green]Removed[/green] #{index}")


@scopes_app.command("set")
def scopes_set(
    index: Annotated[int, typer.Argument(help="Index shown by `scopes list`")],
    folder: Annotated[str, typer.Argument(help="New folder path")],
    vault: VaultOption = "",
) -> None:
    """Replace the folder at an index."""
    try:
        _scope_editor(vault).set_scope(index, folder)
    except IndexError as e:
        typer.echo(f"Error: {e}")
        raise typer.Exit(1)
    rprint(f"[green]Set[/green] #{index}: {escape(folder)}")


@scopes_app.command("suggest")
def scopes_suggest(
    query: Annotated[str, typer.Argument(help="Part of a folder name")] = "",
    vault: VaultOption = "",
) -> None:
    """List vault folders matching a query."""
    cfg = _get_config()
    vault_path = _resolve_vault(vault)
    store = VaultStore(vault_path, ignore_dirs=cfg.watch.ignore_dirs)
    for folder in suggest_folders(query, all_folders(store.list_all())):
        typer.echo(folder)


# ---------------------------------------------------------------------------
# Config commands
# ---------------------------------------------------------------------------


@config_app.command("show")
def config_show() -> None:
    """Show current resolved configuration."""
    cfg = _get_config()
    rprint(Syntax(yaml.dump(cfg.model_dump(), default_flow_style=False), "yaml"))


@config_app.command("init")
def config_init(
    force: bool = typer.Option(False, "--force", help="Overwrite existing config"),
) -> None:
    """Create default wikiconv.yaml in current directory."""
    target = Path(CONFIG_FILENAME)
    if target.exists() and not force:
        rprint("[yellow]wikiconv.yaml already exists.[/yellow] Use --force to overwrite.")
        raise typer.Exit(1)
    target.write_text(DEFAULT_CONFIG_TEMPLATE)
    rprint(f"[green]Created[/green] {target}")


if __name__ == "__main__":
    app()
