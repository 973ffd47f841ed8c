"""Pool invariant verification before a trade is committed."""

import logging

logger = logging.getLogger(__name__)


def verify_reserves_after_trade(
    market_id: int, k_before: int, new_yes: int, new_no: int
) -> None:
    """Verify critical pool invariants for a computed trade. Raises AssertionError if violated.

    INV-1: both reserves stay strictly positive
    INV-2: new_yes * new_no <= k_before (floor rounding never mints value)
    """
    assert new_yes > 0 and new_no > 0, (
        f"INV-1 violated: market={market_id} reserves yes={new_yes} no={new_no}"
    )
    k_after = new_yes * new_no
    assert k_after <= k_before, (
        f"INV-2 violated: market={market_id} k_after={k_after} > k_before={k_before}"
    )

    logger.debug(
        "Invariants OK: market=%s, k_before=%d, k_after=%d", market_id, k_before, k_after
    )
