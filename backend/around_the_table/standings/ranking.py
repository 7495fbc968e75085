"""
Standings order and payout settlement.

Ranking rules:
1. Net balance, highest first
2. Roster order (the sort is stable, so equal balances never swap)
"""

from typing import List, Sequence

from ..core.league import STAKE
from .balance import net_balance, share_cents
from .models import Player, PayoutMatrix


def rank_players(players: Sequence[Player], stake: int = STAKE) -> List[Player]:
    """
    Order players by net balance, descending.

    Args:
        players: Roster in seating order
        stake: Stake used for the balance calculation

    Returns:
        New list of the same Player objects in ranked order
    """
    total = len(players)
    return sorted(players, key=lambda p: net_balance(p, total, stake), reverse=True)


def compute_payouts(players: Sequence[Player], stake: int = STAKE) -> PayoutMatrix:
    """
    Build the "who owes whom" matrix.

    For each ordered pair (debtor, creditor) the debtor owes
    ``share(creditor) - share(debtor)`` when that is positive, where a share is
    the balance divided across the other players. Shares are rounded to whole
    cents before the difference is taken, so a pair can never owe in both
    directions and sub-cent differences are no payment.

    Rows and columns follow roster order; self-pairs are always empty.
    """
    total = len(players)
    shares = [share_cents(p, total, stake) for p in players]

    cells = []
    for i, debtor in enumerate(players):
        row = []
        for j, creditor in enumerate(players):
            if i == j:
                row.append(None)
                continue
            owed = shares[j] - shares[i]
            row.append(owed if owed > 0 else None)
        cells.append(row)

    return PayoutMatrix(players=[p.name for p in players], cells=cells)
