import datetime
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class Tier(str, Enum):
    NORMAL = "Normal"
    BUSY = "Busy"
    HIGH_LOAD = "High Load"
    OFFLINE = "Offline"


@dataclass(frozen=True)
class ServerEntry:
    label: str
    endpoint: str


@dataclass(frozen=True)
class ServerStatus:
    """Outcome of polling one endpoint.

    A reachable server always carries ``online_count``; an unreachable one
    carries ``error`` instead and is classified OFFLINE.
    """
    label: str
    endpoint: str
    reachable: bool
    tier: Tier
    online_count: Optional[int] = None
    raw_response: Optional[str] = None
    error: Optional[str] = None

    @classmethod
    def online(cls, entry: ServerEntry, count: int, tier: Tier, raw: str) -> "ServerStatus":
        return cls(label=entry.label, endpoint=entry.endpoint, reachable=True,
                   tier=tier, online_count=count, raw_response=raw)

    @classmethod
    def offline(cls, entry: ServerEntry, error: str, raw: Optional[str] = None) -> "ServerStatus":
        return cls(label=entry.label, endpoint=entry.endpoint, reachable=False,
                   tier=Tier.OFFLINE, raw_response=raw, error=error)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.label,
            "url": self.endpoint,
            "reachable": self.reachable,
            "online_count": self.online_count,
            "tier": self.tier.value,
            "raw_response": self.raw_response,
            "error": self.error,
        }


@dataclass(frozen=True)
class AggregateResult:
    servers: List[ServerStatus]
    total_online_count: int
    total_tier: Tier
    checked_at: datetime.datetime = field(
        default_factory=lambda: datetime.datetime.now(datetime.timezone.utc))

    @property
    def server_count(self) -> int:
        return len(self.servers)

    @property
    def online_servers(self) -> int:
        return len([s for s in self.servers if s.reachable])

    def to_dict(self) -> Dict[str, Any]:
        return {
            "timestamp": self.checked_at.isoformat(),
            "status": "success",
            "data": [s.to_dict() for s in self.servers],
            "total_servers": self.server_count,
            "online_servers": self.online_servers,
            "offline_servers": self.server_count - self.online_servers,
            "total_online_count": self.total_online_count,
            "total_tier": self.total_tier.value,
        }
