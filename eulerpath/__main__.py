"""Allow ``python -m eulerpath``."""

from eulerpath.cli import main

main()
