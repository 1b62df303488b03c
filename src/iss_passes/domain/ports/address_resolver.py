"""Address resolver port."""

from typing import Protocol


class AddressResolver(Protocol):
    """Port for finding the caller's public IP address."""

    async def resolve(self) -> str | None:
        """Return the public IP address of this host."""
        ...
