"""Allow running with ``python -m iss_passes``."""

from iss_passes.main import run

run()
