"""Entry point for running a distribution job as a module."""

from .job import run_cli

if __name__ == "__main__":
    run_cli()
