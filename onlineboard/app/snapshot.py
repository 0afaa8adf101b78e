"""
One-shot status snapshot for the terminal.

Usage:
    python -m onlineboard.app.snapshot [servers.yaml]
"""
import sys, asyncio, logging
from typing import List, Optional
import httpx
from .config import Settings, LOG_FORMAT
from .endpoints import ConfigError, load_servers
from .aggregator import StatusAggregator
from .models import AggregateResult, ServerEntry


async def take_snapshot(servers: List[ServerEntry], user_agent: str,
                        transport: Optional[httpx.AsyncBaseTransport] = None) -> AggregateResult:
    async with httpx.AsyncClient(transport=transport) as client:
        return await StatusAggregator(client, user_agent=user_agent).aggregate(servers)


def format_snapshot(result: AggregateResult) -> str:
    width = max([len(s.label) for s in result.servers] + [len("Server")])
    lines = [f"{'Server':<{width}}  Status"]
    for s in result.servers:
        if s.reachable:
            lines.append(f"{s.label:<{width}}  Online {s.online_count} people ({s.tier.value})")
        else:
            lines.append(f"{s.label:<{width}}  Unable to connect ({s.error})")
    lines.append(f"Total online users: {result.total_online_count} people ({result.total_tier.value})")
    return "\n".join(lines)


def main(argv: Optional[List[str]] = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    settings = Settings()
    logging.basicConfig(level=settings.LOG_LEVEL.upper(), format=LOG_FORMAT)
    path = argv[0] if argv else settings.SERVERS_PATH
    try:
        servers = load_servers(path)
    except ConfigError as e:
        print(f"Invalid server list: {e}", file=sys.stderr)
        return 2
    result = asyncio.run(take_snapshot(servers, settings.UA))
    print(format_snapshot(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
