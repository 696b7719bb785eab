"""The full collection published after every store mutation."""

from dataclasses import dataclass, field

from .property import Property
from .record import Record


@dataclass(frozen=True)
class StoreSnapshot:
    """Properties and records as last loaded, newest first."""

    properties: list[Property] = field(default_factory=list)
    records: list[Record] = field(default_factory=list)

    def detached(self) -> "StoreSnapshot":
        return StoreSnapshot(
            properties=[p.detached() for p in self.properties],
            records=[r.detached() for r in self.records],
        )
