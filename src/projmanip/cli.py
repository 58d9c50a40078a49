"""
Command Line Interface for projmanip.
"""

import click
from pathlib import Path
from .version import VERSION
from .config import (
    load_config,
    load_available_versions,
    merge_cli_overrides,
    parse_assignments,
)
from .manipulation import ManipulationManager
from .models import VersionOptions
from .npm import NpmManipulationSession, VersionSuffixGenerator
from .npm.result import build_result, write_result
from .recovery import ManipulationError


def version_options(func):
    """Options shared by every command that generates versions."""
    options = [
        click.option('--version-suffix', help='Qualifier label, e.g. "redhat" for 1.0.0-redhat-00001'),
        click.option('--version-padding', type=int, help='Zero-pad width of the incremental number (default: 5)'),
        click.option('--version-suffix-override', help='Label to use instead of the configured suffix'),
        click.option('--version-override', help='Complete version to set, ignoring everything else'),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def _version_values(version_suffix, version_padding, version_suffix_override, version_override):
    return {
        'incremental_suffix': version_suffix,
        'padding': version_padding,
        'suffix_override': version_suffix_override,
        'override': version_override,
    }


@click.group()
@click.version_option(version=VERSION, prog_name="projmanip")
def main():
    """
    projmanip - rewrites project manifests for rebuilds.

    Applies manipulators (version suffixing, dependency overrides) to npm
    packages in dependency order and saves the manifests that changed.
    """
    pass


@main.command()
@click.argument('paths', nargs=-1, type=click.Path(exists=True, path_type=Path))
@click.option('-c', '--config', 'config_file', type=click.Path(dir_okay=False, path_type=Path),
              help='YAML configuration file')
@version_options
@click.option('-d', '--dependency', multiple=True, help='Override a dependency version, NAME=VERSION')
@click.option('-D', '--dev-dependency', multiple=True, help='Override a devDependency version, NAME=VERSION')
@click.option('--available-versions', type=click.Path(dir_okay=False, path_type=Path),
              help='YAML map of package name to versions already used')
@click.option('-r', '--result', 'result_file', type=click.Path(dir_okay=False, path_type=Path),
              help='Write a JSON report of the final package versions')
def apply(paths, config_file, version_suffix, version_padding, version_suffix_override,
          version_override, dependency, dev_dependency, available_versions, result_file):
    """Manipulate the package.json files at PATHS (default: current directory)."""
    if not paths:
        paths = (Path.cwd(),)

    try:
        config = merge_cli_overrides(
            load_config(config_file),
            version=_version_values(version_suffix, version_padding,
                                    version_suffix_override, version_override),
            dependencies=parse_assignments(dependency),
            dev_dependencies=parse_assignments(dev_dependency),
            available_versions=load_available_versions(available_versions) if available_versions else None,
        )

        session = NpmManipulationSession(config, paths)
        manager = ManipulationManager()
        manager.init(session)
        if not manager.manipulators:
            click.echo("Nothing to do: no manipulator is configured")
        manager.scan_and_apply(session)

        for project in manager.changed:
            click.echo(f"Updated {project.get_name()} ({project.get_version()})")
        if not manager.changed:
            click.echo("No changes")

        if result_file:
            write_result(build_result(session.get_projects(), manager.changed), result_file)
            click.echo(f"Result written to {result_file}")

    except ManipulationError as e:
        raise click.ClickException(str(e))


@main.command('next-version')
@click.argument('current')
@version_options
@click.option('-a', '--available', multiple=True, help='A version already in use (repeatable)')
def next_version(current, version_suffix, version_padding, version_suffix_override,
                 version_override, available):
    """Print the version a rebuild of CURRENT would get."""
    values = {k: v for k, v in _version_values(version_suffix, version_padding,
                                               version_suffix_override, version_override).items()
              if v is not None}
    try:
        options = VersionOptions(**values)
    except ValueError as e:
        raise click.BadParameter(str(e))

    try:
        click.echo(VersionSuffixGenerator.from_options(options).get_new_version(current, set(available)))
    except ManipulationError as e:
        raise click.ClickException(str(e))


if __name__ == "__main__":
    main()
