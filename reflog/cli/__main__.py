"""Allow ``python -m reflog.cli``."""
from reflog.cli import cli

if __name__ == "__main__":
    cli(obj={})
