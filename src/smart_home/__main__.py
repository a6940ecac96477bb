"""Allow running as python -m smart_home."""

from .cli import main

main()
