import click

from .commands.compare import compare_command
from .commands.transform import transform_command
from .commands.version_xml import version_xml_command


@click.group()
def app() -> None:
    pass


app.add_command(transform_command, name="transform")
app.add_command(compare_command, name="compare")
app.add_command(version_xml_command, name="version-xml")
__all__ = ["app"]
