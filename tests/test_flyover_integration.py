"""End-to-end integration test against the live upstream services."""

import pytest

from iss_passes.adapters.config import AppConfig
from iss_passes.main import fetch_passes


@pytest.mark.integration
@pytest.mark.asyncio
async def test_next_passes_for_current_location() -> None:
    """Test that the full chain returns pass events for this machine's location."""
    passes = await fetch_passes(AppConfig())

    print(f"Found {len(passes)} pass(es)")
    for pass_event in passes:
        assert pass_event.risetime > 0
        assert pass_event.duration >= 0
        print(f"  {pass_event.rise_datetime.isoformat()} for {pass_event.duration}s")
