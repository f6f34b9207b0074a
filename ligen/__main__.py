"""Allow ligen to be executable through `python -m ligen`."""
from ligen.cli import cli


if __name__ == "__main__":  # pragma: no cover
    cli(prog_name="ligen")
