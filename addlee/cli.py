#!/usr/bin/env python3
"""
Addlee CLI - Main command-line interface for creator/hotel matching.
"""

import logging

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from . import __version__

console = Console()


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _load_collections(creators_file, hotels_file):
    """Profiles from the given JSON files, falling back to the sample datasets."""
    from .profiles import load_profiles
    from .samples import sample_creators, sample_hotels

    creators = load_profiles(creators_file) if creators_file else sample_creators()
    hotels = load_profiles(hotels_file) if hotels_file else sample_hotels()
    return creators, hotels


def _score_style(score: int) -> str:
    if score >= 80:
        return "bold green"
    if score >= 65:
        return "yellow"
    return "dim"


@click.group()
@click.version_option(version=__version__)
def main():
    """Addlee - Creator/hotel matching with TF-IDF similarity scoring."""
    from .config import get_config_manager

    config_manager = get_config_manager()
    if not config_manager.get('cli', 'color_output'):
        console.no_color = True
    _setup_logging(config_manager.get('logging', 'level') or "WARNING")


@main.group()
def match():
    """Run matching and export ranked results."""
    pass


@match.command("run")
@click.option("--creators", "creators_file", type=click.Path(exists=True, dir_okay=False),
              help="JSON file of creator profiles (default: sample creators)")
@click.option("--hotels", "hotels_file", type=click.Path(exists=True, dir_okay=False),
              help="JSON file of hotel profiles (default: sample hotels)")
@click.option("--min-score", type=click.IntRange(0, 99), help="Hide matches scoring below this")
@click.option("--tier", type=click.Choice(["all", "top", "good"]),
              help="Show only top (80+) or good (65-79) matches")
@click.option("--limit", type=click.IntRange(min=1), help="Maximum matches to display")
@click.option("--explain/--no-explain", default=None, help="Show the explanation for each match")
def run_matching(creators_file, hotels_file, min_score, tier, limit, explain):
    """Score every creator against every hotel and show the ranking."""
    from .config import check_value, get_config_manager
    from .matching import Matcher, match as match_profiles

    try:
        config = get_config_manager()
        if limit is None:
            limit = check_value('cli', 'default_table_limit', config.get('cli', 'default_table_limit'))
        if explain is None:
            explain = config.get('cli', 'show_explanations')

        matcher = Matcher(min_score=min_score, tier=tier)
        creators, hotels = _load_collections(creators_file, hotels_file)

        all_results = match_profiles(creators, hotels)
        results = matcher.apply(all_results)

        console.print(f"[cyan]{len(results)} matches found from {len(all_results)} total pairs[/cyan]")

        if not results:
            console.print("[yellow]No matches meet the current filters[/yellow]")
            return

        display_results = results[:limit]

        table = Table(title=f"Top Matches ({len(display_results)} of {len(results)})")
        table.add_column("Rank", style="dim", width=6)
        table.add_column("Score", width=7)
        table.add_column("Creator", style="cyan")
        table.add_column("Hotel", style="bold")
        table.add_column("Text", style="magenta", width=6)
        table.add_column("Tags", style="blue", width=6)
        if explain:
            table.add_column("Why", style="green")

        for rank, result in enumerate(display_results, 1):
            row = [
                str(rank),
                f"[{_score_style(result.score)}]{result.score}%[/]",
                result.source.name or "N/A",
                result.target.name or "N/A",
                f"{result.text_similarity}%",
                f"{result.tag_overlap}%",
            ]
            if explain:
                row.append(result.explanation)
            table.add_row(*row)

        console.print(table)

        if len(results) > limit:
            console.print(f"[dim]Showing top {limit} matches. Use --limit to see more.[/dim]")

    except (ValueError, OSError) as e:
        console.print(f"[red]Error during matching: {e}[/red]")
        raise click.Abort()


@match.command("export")
@click.option("--creators", "creators_file", type=click.Path(exists=True, dir_okay=False),
              help="JSON file of creator profiles (default: sample creators)")
@click.option("--hotels", "hotels_file", type=click.Path(exists=True, dir_okay=False),
              help="JSON file of hotel profiles (default: sample hotels)")
@click.option("--format", type=click.Choice(["csv", "json", "html"]), help="Export format")
@click.option("--output", "-o", help="Output file path")
@click.option("--min-score", type=click.IntRange(0, 99), help="Skip matches scoring below this")
@click.option("--tier", type=click.Choice(["all", "top", "good"]), help="Export only one tier")
def export_results(creators_file, hotels_file, format, output, min_score, tier):
    """Export ranked matches to CSV, JSON, or HTML."""
    from .config import get_config_manager
    from .export import get_export_manager
    from .matching import Matcher

    try:
        if format is None:
            format = get_config_manager().get('export', 'default_format')

        creators, hotels = _load_collections(creators_file, hotels_file)
        results = Matcher(min_score=min_score, tier=tier).run(creators, hotels)

        output_path = get_export_manager().export_match_results(results, format, output)
        if output_path:
            console.print(f"[green]✓ Export complete: {output_path}[/green]")

    except (ValueError, OSError) as e:
        console.print(f"[red]Error exporting results: {e}[/red]")
        raise click.Abort()


@main.group()
def samples():
    """Inspect the built-in sample profiles."""
    pass


@samples.command("list")
@click.option("--set", "which", type=click.Choice(["creators", "hotels", "all"]), default="all",
              help="Which sample set to show")
@click.option("--json", "as_json", is_flag=True,
              help="Print profiles as JSON in the layout --creators/--hotels accept")
def list_samples(which, as_json):
    """List the sample creators and hotels."""
    from .samples import sample_creators, sample_hotels

    sets = []
    if which in ("creators", "all"):
        sets.append(("creators", "Sample Creators", sample_creators(), "Engagement", lambda p: p.engagement))
    if which in ("hotels", "all"):
        sets.append(("hotels", "Sample Hotels", sample_hotels(), "Rating", lambda p: p.rating))

    if as_json:
        documents = {key: [profile.to_dict() for profile in profiles] for key, _, profiles, _, _ in sets}
        console.print_json(data=documents[which] if which in documents else documents)
        return

    for _, title, profiles, extra_column, extra_value in sets:
        table = Table(title=f"{title} ({len(profiles)})")
        table.add_column("ID", style="cyan", width=4)
        table.add_column("Name", style="bold")
        table.add_column("Niche", style="yellow")
        table.add_column("Location", style="magenta")
        table.add_column("Tags", style="green")
        table.add_column(extra_column, style="dim")

        for profile in profiles:
            table.add_row(
                profile.id or "",
                profile.name,
                profile.niche or "N/A",
                profile.location or "N/A",
                ", ".join(profile.tags),
                extra_value(profile) or "N/A"
            )

        console.print(table)


@main.group()
def config():
    """Configure system settings."""
    pass


@config.command("show")
@click.option("--section", help="Show specific configuration section only")
def show_config(section):
    """Display current configuration."""
    from .config import get_config_manager

    config_manager = get_config_manager()

    if section:
        section_data = config_manager.get(section)
        if section_data:
            console.print(f"[bold cyan]{section.title()} Configuration:[/bold cyan]")
            for key, value in section_data.items():
                console.print(f"  {key}: {value}")
        else:
            console.print(f"[red]Configuration section '{section}' not found[/red]")
    else:
        config_manager.display_config()


@config.command("set")
@click.argument("section")
@click.argument("key")
@click.argument("value")
def set_config(section, key, value):
    """Set configuration value (format: section key value)."""
    from .config import ConfigError, get_config_manager

    try:
        saved = get_config_manager().set(section, key, value)
    except ConfigError as e:
        console.print(f"[red]{e}[/red]")
        raise click.Abort()

    if saved:
        console.print(f"[green]✓ Set {section}.{key} = {value}[/green]")
    else:
        console.print("[red]✗ Failed to set configuration[/red]")


@config.command("env")
@click.argument("key")
@click.argument("value")
def set_env_var(key, value):
    """Set an ADDLEE_* variable in the .env file."""
    from .config import ConfigError, get_config_manager

    try:
        saved = get_config_manager().set_env_var(key, value)
    except ConfigError as e:
        console.print(f"[red]{e}[/red]")
        raise click.Abort()

    if saved:
        console.print(f"[green]✓ Set environment variable {key} = {value}[/green]")
        console.print("[dim]Configuration reloaded with new environment variable[/dim]")
    else:
        console.print("[red]✗ Failed to set environment variable[/red]")


@config.command("unset")
@click.argument("key")
def unset_env_var(key):
    """Remove an ADDLEE_* variable from the .env file."""
    from .config import ConfigError, get_config_manager

    try:
        removed = get_config_manager().unset_env_var(key)
    except ConfigError as e:
        console.print(f"[red]{e}[/red]")
        raise click.Abort()

    if removed:
        console.print(f"[green]✓ Removed environment variable {key}[/green]")
    else:
        console.print("[red]✗ Failed to remove environment variable[/red]")


@config.command("validate")
def validate_config():
    """Validate current configuration."""
    from .config import get_config_manager

    issues = get_config_manager().validate_config()

    if not issues:
        console.print("[green]✓ Configuration validation passed[/green]")
    else:
        console.print("[red]Configuration validation failed:[/red]")
        for issue in issues:
            console.print(f"[red]• {issue}[/red]")
        raise click.Abort()


@config.command("reset")
@click.option("--confirm", is_flag=True, help="Skip confirmation prompt")
def reset_config(confirm):
    """Reset configuration to default values."""
    from .config import get_config_manager

    if not confirm and not click.confirm("Reset all configuration to defaults?"):
        console.print("[yellow]Reset cancelled[/yellow]")
        return

    if get_config_manager().reset_to_defaults():
        console.print("[green]✓ Configuration reset to defaults[/green]")
    else:
        console.print("[red]✗ Failed to reset configuration[/red]")


if __name__ == "__main__":
    main()
