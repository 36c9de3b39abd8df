"""Version XML command - print versionMetadata for an object history."""

from pathlib import Path

import click

from ...infrastructure.io.exceptions import CocinaFileError
from ...infrastructure.io.version_metadata_writer import version_xml
from ...infrastructure.repositories.repository_object_loader import load_repository_object


@click.command()
@click.argument("history_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def version_xml_command(history_file: Path) -> None:
    """Print the versionMetadata XML for a JSON object history.

    \b
        cocina-transpiler version-xml history.json
    """
    try:
        repository_object = load_repository_object(history_file)
    except CocinaFileError as e:
        raise click.ClickException(str(e)) from e
    click.echo(version_xml(repository_object))
