# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Schedule Manager
================
Command-line appointment book backed by a single JSON file
(``schedules.json`` in the working directory).

    scheduler add <title> <time> [details]
    scheduler list
    scheduler delete <id>
    scheduler edit <id> <title> <time> [details]

Each invocation loads the whole file, applies one change and rewrites it.
Exit code 1 on any storage failure or bad arguments, 0 otherwise.
Run from a source checkout with ``python main.py``; installs get the
``scheduler`` console script from ``scheduler.cli``.
"""
from scheduler.cli import main

if __name__ == "__main__":
    main()
