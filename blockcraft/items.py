"""Inventory stacks and furnace state, with their whitespace-separated save format."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator


def _next_int(tokens: Iterator[str]) -> int:
    try:
        token = next(tokens)
    except StopIteration:
        raise ValueError("unexpected end of saved data") from None
    return int(token)


@dataclass
class InvBlock:
    """A stack of one kind of block or item."""

    id: int = 0
    amount: int = 0

    def dumps(self) -> str:
        """Serialise as ``"<id> <amount> "``."""
        return f"{self.id} {self.amount} "

    @classmethod
    def parse(cls, tokens: Iterable[str]) -> InvBlock:
        """Read a stack from a token stream, consuming two tokens."""
        it = iter(tokens)
        block_id = _next_int(it)
        amount = _next_int(it)
        return cls(block_id, amount)


@dataclass
class Furnace:
    """State of one furnace: its three slots and burning progress."""

    in_use: bool = False
    source: InvBlock = field(default_factory=InvBlock)
    fuel: InvBlock = field(default_factory=InvBlock)
    result: InvBlock = field(default_factory=InvBlock)
    fuel_amount: int = 0
    time_till_fuel_burn: int = 0
    fuel_till_complete: int = 0
    particle_x: int = 0

    def dumps(self) -> str:
        """Serialise the furnace in the saved-world format."""
        head = (f"{int(self.in_use)} {self.fuel_amount} "
                f"{self.time_till_fuel_burn} {self.fuel_till_complete} ")
        return head + self.source.dumps() + self.fuel.dumps() + self.result.dumps()

    @classmethod
    def parse(cls, tokens: Iterable[str]) -> Furnace:
        """Read a furnace from a token stream, consuming ten tokens."""
        it = iter(tokens)
        in_use = bool(_next_int(it))
        fuel_amount = _next_int(it)
        time_till_fuel_burn = _next_int(it)
        fuel_till_complete = _next_int(it)
        source = InvBlock.parse(it)
        fuel = InvBlock.parse(it)
        result = InvBlock.parse(it)
        return cls(
            in_use=in_use,
            source=source,
            fuel=fuel,
            result=result,
            fuel_amount=fuel_amount,
            time_till_fuel_burn=time_till_fuel_burn,
            fuel_till_complete=fuel_till_complete,
        )