"""Main entry point for the ISS passes application."""

import asyncio
import logging
import sys

import aiohttp

from iss_passes.adapters.config import AppConfig
from iss_passes.adapters.flyover_api import FlyoverPassPredictor
from iss_passes.adapters.formatters import PassFormatter
from iss_passes.adapters.ipify_api import IpifyAddressResolver
from iss_passes.adapters.ipwhois_api import IpWhoisCoordinateResolver
from iss_passes.application.services import PassPredictionService
from iss_passes.domain.errors import PassLookupError
from iss_passes.domain.models import PassEvent

logger = logging.getLogger(__name__)


def configure_logging(config: AppConfig) -> None:
    """Configure root logging to stderr."""
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def build_service(config: AppConfig, session: aiohttp.ClientSession) -> PassPredictionService:
    """Wire the resolvers to a shared session."""
    return PassPredictionService(
        IpifyAddressResolver(
            session=session, url=config.ip_lookup_url, log_requests=config.log_requests
        ),
        IpWhoisCoordinateResolver(
            session=session,
            url=config.geolocation_url,
            log_requests=config.log_requests,
            validate=config.validate_responses,
        ),
        FlyoverPassPredictor(
            session=session,
            url=config.flyover_url,
            log_requests=config.log_requests,
            validate=config.validate_responses,
        ),
    )


async def fetch_passes(config: AppConfig) -> list[PassEvent]:
    """Look up upcoming passes using a session that lives for one run."""
    timeout = aiohttp.ClientTimeout(total=config.request_timeout_seconds)
    async with aiohttp.ClientSession(timeout=timeout) as session:
        service = build_service(config, session)
        return await service.next_passes_for_current_location()


async def main(config: AppConfig | None = None) -> int:
    """Print upcoming passes; returns the process exit code."""
    config = config or AppConfig()
    formatter = PassFormatter(config)

    try:
        passes = await fetch_passes(config)
        lines = [formatter.format_pass(pass_event) for pass_event in passes]
    except (
        PassLookupError,
        aiohttp.ClientError,
        asyncio.TimeoutError,
        ValueError,
        TypeError,
        OverflowError,
        OSError,
    ) as e:
        logger.debug("Pass lookup failed", exc_info=True)
        print("It didn't work: ", e)
        return 1

    for line in lines:
        print(line)
    return 0


def run() -> None:
    """Console script entry point."""
    config = AppConfig()
    configure_logging(config)
    sys.exit(asyncio.run(main(config)))


if __name__ == "__main__":
    run()
