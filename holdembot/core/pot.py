"""
Pot partitioning and splitting.

When players are all-in for different amounts the chips committed in a
hand are cut into tiers bounded by each contribution level. Every tier is
a pot contested only by the players who are still in the hand and paid
into it.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Sequence


@dataclass
class Pot:
    """Represents a pot (main pot or side pot)."""
    amount: int = 0
    eligible_players: List[str] = field(default_factory=list)

    def add(self, amount: int) -> None:
        self.amount += amount


def build_pots(contributions: Mapping[str, int], contenders: Sequence[str]) -> List[Pot]:
    """
    Partition hand contributions into a main pot and side pots.

    Args:
        contributions: Total chips put in this hand, per player id. Folded
                       players are included; their chips stay in play.
        contenders: Ids of players still in the hand, in seat order

    Returns:
        Pots from the lowest tier upward. Chips from a tier nobody still
        in the hand reached are added to the pot below it.
    """
    levels = sorted({amount for amount in contributions.values() if amount > 0})
    pots: List[Pot] = []
    carry = 0
    prev_level = 0

    for level in levels:
        payers = [pid for pid, amount in contributions.items() if amount >= level]
        tier_amount = (level - prev_level) * len(payers)
        prev_level = level

        eligible = [pid for pid in contenders if contributions.get(pid, 0) >= level]
        if not eligible:
            if pots:
                pots[-1].add(tier_amount)
            else:
                carry += tier_amount
            continue

        if pots and pots[-1].eligible_players == eligible:
            pots[-1].add(tier_amount + carry)
        else:
            pots.append(Pot(amount=tier_amount + carry, eligible_players=eligible))
        carry = 0

    if carry and pots:
        pots[-1].add(carry)

    return pots


def split_pot(amount: int, winners: Sequence[str]) -> Dict[str, int]:
    """
    Divide a pot among winners.

    Each winner gets ``amount // len(winners)``; the remaining odd chips go
    one at a time to winners in the order given, which callers arrange as
    seat order starting left of the dealer.
    """
    if not winners:
        raise ValueError("Cannot split a pot with no winners")

    share, remainder = divmod(amount, len(winners))
    shares = {pid: share for pid in winners}
    for pid in winners[:remainder]:
        shares[pid] += 1
    return shares
