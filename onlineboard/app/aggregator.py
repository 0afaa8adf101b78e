import asyncio, json, logging, re, time
from typing import Optional, Sequence
import httpx
from .models import AggregateResult, ServerEntry, ServerStatus, Tier

logger = logging.getLogger(__name__)

# hard cap on one whole request; httpx.Timeout only bounds each phase
REQUEST_TIMEOUT_S = 5.0

# a valid body is a handful of digits; anything longer is read no further
MAX_BODY_BYTES = 64
MAX_COUNT_DIGITS = 18

# per-server thresholds (strict >)
HIGH_LOAD_ABOVE = 300
BUSY_ABOVE = 200

# total thresholds, multiplied by the configured server count
TOTAL_HIGH_LOAD_PER_SERVER = 400
TOTAL_BUSY_PER_SERVER = 300

_DIGITS = re.compile(r"[0-9]+")


class BodyTooLarge(Exception):
    pass


def parse_online_count(body: Optional[str]) -> Optional[int]:
    """Return the count for a bare decimal body, otherwise None."""
    if body is None:
        return None
    text = body.strip()
    if len(text) > MAX_COUNT_DIGITS or not _DIGITS.fullmatch(text):
        return None
    return int(text)


def classify_count(count: int) -> Tier:
    if count > HIGH_LOAD_ABOVE:
        return Tier.HIGH_LOAD
    if count > BUSY_ABOVE:
        return Tier.BUSY
    return Tier.NORMAL


def classify_total(total: int, server_count: int) -> Tier:
    # server_count is the configured count, offline servers included
    if total > TOTAL_HIGH_LOAD_PER_SERVER * server_count:
        return Tier.HIGH_LOAD
    if total > TOTAL_BUSY_PER_SERVER * server_count:
        return Tier.BUSY
    return Tier.NORMAL


def summarize(statuses: Sequence[ServerStatus]) -> AggregateResult:
    total = sum(s.online_count for s in statuses if s.reachable)
    return AggregateResult(servers=list(statuses), total_online_count=total,
                           total_tier=classify_total(total, len(statuses)))


class StatusAggregator:
    def __init__(self, client: httpx.AsyncClient, user_agent: str = "OnlineBoard/1.0"):
        self.client = client
        self.user_agent = user_agent

    async def _get_body(self, url: str) -> str:
        async with self.client.stream(
            "GET", url,
            headers={"User-Agent": self.user_agent, "Accept": "text/plain,*/*"},
            follow_redirects=True,
            timeout=httpx.Timeout(REQUEST_TIMEOUT_S),
        ) as r:
            r.raise_for_status()
            buf = b""
            async for chunk in r.aiter_bytes():
                buf += chunk
                if len(buf) > MAX_BODY_BYTES:
                    raise BodyTooLarge(f"response larger than {MAX_BODY_BYTES} bytes")
            return buf.decode(r.encoding or "utf-8", errors="replace")

    async def check_one(self, entry: ServerEntry) -> ServerStatus:
        started = time.monotonic()
        try:
            body = await asyncio.wait_for(self._get_body(entry.endpoint), REQUEST_TIMEOUT_S)
        except httpx.HTTPStatusError as e:
            status = ServerStatus.offline(entry, f"HTTP {e.response.status_code}")
        except (httpx.TimeoutException, asyncio.TimeoutError):
            status = ServerStatus.offline(entry, "request timeout")
        except BodyTooLarge as e:
            status = ServerStatus.offline(entry, str(e))
        except Exception as e:
            status = ServerStatus.offline(entry, str(e) or e.__class__.__name__)
        else:
            count = parse_online_count(body)
            if count is None:
                status = ServerStatus.offline(entry, "non-numeric response", raw=body)
            else:
                status = ServerStatus.online(entry, count, classify_count(count), raw=body)

        level = logging.INFO if status.reachable else logging.WARNING
        logger.log(level, json.dumps({
            "label": entry.label,
            "url": entry.endpoint,
            "outcome": status.tier.value,
            "online_count": status.online_count,
            "error": status.error,
            "elapsed_ms": int((time.monotonic() - started) * 1000),
        }, ensure_ascii=False))
        return status

    async def aggregate(self, entries: Sequence[ServerEntry]) -> AggregateResult:
        statuses = []
        for entry in entries:
            statuses.append(await self.check_one(entry))
        result = summarize(statuses)
        logger.info(f"Polled {result.server_count} servers: {result.online_servers} online, "
                    f"total {result.total_online_count} ({result.total_tier.value})")
        return result
