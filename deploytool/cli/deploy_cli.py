"""
CLI for building and deploying changed project directories.
Thin wrapper over ReleaseManager.
"""
import asyncio
import click
import logging
from typing import Optional

from ..build.manager import ReleaseManager
from ..build.models import RunStatus
from ..config.global_config_loader import GlobalConfig, load_global_config
from ..core.exceptions import DeployToolError, PersistenceError


def setup_logging(log_level: str):
    """Set up logging configuration."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def _load_config(
    global_config: Optional[str],
    registry: Optional[str] = None,
    namespace: Optional[str] = None
) -> GlobalConfig:
    if global_config:
        cfg = load_global_config(global_config)
    else:
        cfg = load_global_config()
    return cfg.with_overrides(registry=registry, namespace=namespace)


@click.group()
def cli():
    """Build changed directories into images and roll them out to Kubernetes"""
    pass


@cli.command()
@click.option('--registry', '-r', default=None, help='Registry address (default: from config)')
@click.option('--namespace', '-n', default=None, help='Kubernetes namespace (default: from config)')
@click.option('--force', '-f', is_flag=True, help='Force rebuild all images regardless of changes')
@click.option('--clean', is_flag=True, help='Remove stored checksums before running')
@click.option('--dry-run', is_flag=True, help='Only show which directories would be built')
@click.option('--config', 'global_config', default=None, help='Path to deploytool YAML config')
@click.option('--log-level', default='INFO', help='Log level')
def run(
    registry: Optional[str],
    namespace: Optional[str],
    force: bool,
    clean: bool,
    dry_run: bool,
    global_config: Optional[str],
    log_level: str
):
    """Build, push and deploy every changed directory"""

    setup_logging(log_level)
    logger = logging.getLogger(__name__)

    try:
        cfg = _load_config(global_config, registry, namespace)
        manager = ReleaseManager(cfg)

        if dry_run:
            manager.validate_directories()
            _, changes = manager.detect_changes(force=force or clean)
            plan = manager.plan_run(changes)

            click.echo(f"\n{'='*80}")
            click.echo("Dry run: no images will be built")
            click.echo(f"{'='*80}")
            for check in changes.checks:
                click.echo(f"  {check.directory}: {check.change_type.value}")
            if plan.is_empty:
                click.echo("\nNo changes detected in any directory. No builds necessary.")
            else:
                click.echo(f"\nWould build: {', '.join(p.directory for p in plan.to_build)}")
            click.echo(f"{'='*80}\n")
            return

        outcome = asyncio.run(manager.run(force=force, clean=clean))

    except DeployToolError as e:
        logger.error(f"Run failed: {e.describe()}")
        if e.outcome is not None:
            e.outcome.print_summary()
        raise click.ClickException(e.describe())

    outcome.print_summary()

    if outcome.status == RunStatus.COMPLETED:
        click.echo("✅ Script completed successfully!")


@cli.command()
@click.option('--force', '-f', is_flag=True, help='Report every directory as changed')
@click.option('--config', 'global_config', default=None, help='Path to deploytool YAML config')
@click.option('--log-level', default='WARNING', help='Log level')
def status(force: bool, global_config: Optional[str], log_level: str):
    """Show stored and current checksums of every directory"""

    setup_logging(log_level)

    try:
        cfg = _load_config(global_config)
        manager = ReleaseManager(cfg)
        manager.validate_directories()
        _, changes = manager.detect_changes(force=force)
    except DeployToolError as e:
        raise click.ClickException(e.describe())

    click.echo(f"\n{'='*80}")
    click.echo("Directory Status")
    click.echo(f"{'='*80}")
    click.echo(f"Checksum file: {manager.store.path}")
    click.echo(f"{'='*80}\n")

    for project, check in zip(manager.projects, changes.checks):
        marker = "📦" if check.changed else "✅"
        click.echo(f"  {marker} {check.directory} -> {project.deployment}")
        click.echo(f"     State: {check.change_type.value}")
        click.echo(f"     Stored: {check.stored_fingerprint or '-'}")
        click.echo(f"     Current: {check.current_fingerprint}")
        click.echo()

    pending = changes.get_directories_to_build()
    if pending:
        click.echo(f"{len(pending)} director{'y' if len(pending) == 1 else 'ies'} would be rebuilt\n")
    else:
        click.echo("✅ All directories are up to date\n")


@cli.command()
@click.option('--config', 'global_config', default=None, help='Path to deploytool YAML config')
@click.option('--log-level', default='INFO', help='Log level')
def clean(global_config: Optional[str], log_level: str):
    """Remove the stored checksums so every directory rebuilds next run"""

    setup_logging(log_level)

    try:
        cfg = _load_config(global_config)
        manager = ReleaseManager(cfg)
    except DeployToolError as e:
        raise click.ClickException(e.describe())

    try:
        removed = manager.store.clear()
    except OSError as e:
        error = PersistenceError(f"Could not remove checksum file: {e}", str(manager.store.path))
        raise click.ClickException(error.describe())

    if removed:
        click.echo(f"Removed {manager.store.path}")
    else:
        click.echo(f"No checksum file at {manager.store.path}")


if __name__ == '__main__':
    cli()
