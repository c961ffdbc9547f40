# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Console script entry point: ``scheduler <command> [arguments]``."""
import sys

from scheduler.controllers.command_controller import run


def main() -> None:
    sys.exit(run(sys.argv[1:]))


if __name__ == "__main__":
    main()
