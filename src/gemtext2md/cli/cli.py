"""CLI entrypoint: Typer app definition and command registration"""

import typer

from gemtext2md.cli.commands import convert_cmd


app = typer.Typer(
    name="gemtext2md",
    add_completion=False,
    help="Convert gemtext on stdin to CommonMark Markdown on stdout",
)

app.command(name="convert")(convert_cmd)
