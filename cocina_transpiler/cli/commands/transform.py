"""Transform command - map a Cocina JSON document to MODS XML.

A thin adapter between click and ``TransformUseCase``: it parses arguments,
builds the request, runs the use case and reports the response.
"""

from pathlib import Path

import click
from rich.console import Console

from ...application.models import TransformRequest
from ...config import ConfigLoader
from ...infrastructure.container import DependencyContainer

# Status output goes to stderr so that MODS written to stdout stays clean.
console = Console(stderr=True)


@click.command()
@click.argument("input_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "-o",
    "--output",
    "output_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write MODS to this file instead of stdout",
)
@click.option("--druid", help="Object identifier (default: the document's externalIdentifier)")
@click.option("--purl", help="Public URL written as the primary display location")
@click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to a cocina_transpiler.toml config file (default: ./cocina_transpiler.toml)",
)
@click.option(
    "-v", "--verbose", count=True, help="Increase verbosity level (e.g., -v, -vv)"
)
def transform_command(
    input_file: Path,
    output_path: Path | None,
    druid: str | None,
    purl: str | None,
    config_file: Path | None,
    verbose: int,
) -> None:
    """Transform a Cocina JSON file into a MODS 3.6 document.

    INPUT_FILE may hold a whole Cocina object or just its description.

    \b
        cocina-transpiler transform bc123df4567.json
        cocina-transpiler transform bc123df4567.json -o mods.xml --purl https://purl.stanford.edu/bc123df4567
    """
    config = ConfigLoader.load(config_file=config_file)
    container = DependencyContainer(verbose=verbose, console=console, config=config)
    use_case = container.create_transform_use_case()

    response = use_case.execute(
        TransformRequest(
            input_path=input_file,
            output_path=output_path,
            druid=druid,
            purl=purl,
        )
    )
    container.create_logger().log_final_stats()

    if not response.success:
        raise click.ClickException(response.error or "Transform failed")
    if response.mods_xml is not None:
        click.echo(response.mods_xml)
