"""
Net balance calculation.

Every win collects the stake from each of the other players; every loss
pays the stake to each of them.
"""

from typing import Optional

from ..core.league import STAKE
from .models import Player


def net_balance(player: Player, total_players: int, stake: int = STAKE) -> int:
    """
    Signed dollar balance for a player.

    Args:
        player: Player whose wins/losses are settled
        total_players: Roster size (at least 1; a solo roster always nets 0)
        stake: Amount exchanged with each opponent per decided pick

    Returns:
        ``stake * (total_players - 1) * (wins - losses)``
    """
    opponents = total_players - 1
    win_amount = player.wins * stake * opponents
    loss_amount = player.losses * stake * opponents
    return win_amount - loss_amount


def share_cents(player: Player, total_players: int, stake: int = STAKE) -> Optional[int]:
    """
    Per-opponent share of a player's balance in whole cents, rounded half up.

    Returns None for a solo roster, where there is no one to share with.
    """
    opponents = total_players - 1
    if opponents < 1:
        return None

    cents = net_balance(player, total_players, stake) * 100
    # Half-up on magnitude so positive and negative shares round symmetrically
    magnitude = (abs(cents) * 2 + opponents) // (2 * opponents)
    return magnitude if cents >= 0 else -magnitude
