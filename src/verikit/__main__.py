"""Allow running as `python -m verikit`."""

from verikit.cli import main

main()
