"""Factory for creating the quote backend.

Creates the upstream 0x quoter outside dry-run mode, otherwise
falls back to the simulated quoter.
"""

import logging
from typing import Optional

from swapquote.config import Settings, get_settings
from swapquote.quoting.base import SwapQuoter

logger = logging.getLogger(__name__)


def create_swap_quoter(settings: Optional[Settings] = None) -> SwapQuoter:
    """Create the quoter configured for this deployment."""
    settings = settings or get_settings()

    if not settings.dry_run:
        from swapquote.quoting.zeroex import ZeroExSwapQuoter

        logger.info(f"Using 0x quoter at {settings.quoter_api_url}")
        return ZeroExSwapQuoter(
            api_url=settings.quoter_api_url,
            api_key=settings.quoter_api_key,
            timeout=settings.quoter_timeout,
        )

    from swapquote.quoting.dry_run import SimulatedSwapQuoter

    logger.warning("DRY_RUN enabled - serving simulated quotes")
    return SimulatedSwapQuoter(chain_id=settings.chain_id)
