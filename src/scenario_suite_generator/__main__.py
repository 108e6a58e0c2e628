"""Module entry point for `python -m scenario_suite_generator`."""

from .cli import main

if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
