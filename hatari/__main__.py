"""Allow hatari to be executable through `python -m hatari`."""
from hatari.cli import cli_app


if __name__ == "__main__":  # pragma: no cover
    cli_app(prog_name="hatari")
