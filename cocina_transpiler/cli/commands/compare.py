"""Compare command - check two MODS documents for equivalence."""

from pathlib import Path
from xml.etree import ElementTree as ET

import click
from rich.console import Console

from ...infrastructure.io.mods.equivalence import ModsEquivalence
from ..presenters.differences import DifferencesPresenter, DifferencesRequest

console = Console()


@click.command()
@click.argument("expected", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("actual", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def compare_command(expected: Path, actual: Path) -> None:
    """Compare two MODS files, ignoring whitespace and group numbering.

    Exits with status 1 when the documents are not equivalent.

    \b
        cocina-transpiler compare expected.xml actual.xml
    """
    try:
        differences = ModsEquivalence().compare(
            expected.read_text(encoding="utf-8"), actual.read_text(encoding="utf-8")
        )
    except ET.ParseError as e:
        raise click.ClickException(f"Could not parse MODS: {e}") from e

    DifferencesPresenter(console).present(
        DifferencesRequest(expected=expected, actual=actual, differences=differences)
    )
    if differences:
        raise click.ClickException(f"{len(differences)} difference(s) found")
