import logging

import typer

from nuru.image import runner as image
from nuru.palette import runner as palette

app = typer.Typer()
app.add_typer(image.app, name='image')
app.add_typer(palette.app, name='palette')


@app.callback()
def main(
    verbose: bool = typer.Option(False, '--verbose', '-v', help='Log decoding details'),
) -> None:
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)


if __name__ == "__main__":
    app()
