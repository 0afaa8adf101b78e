from typing import List
from pathlib import Path
from urllib.parse import urlparse
import yaml
from .models import ServerEntry


class ConfigError(ValueError):
    """Raised when the server list cannot be used."""


def _entry_from(item, idx: int) -> ServerEntry:
    if not isinstance(item, dict):
        raise ConfigError(f"servers[{idx}] must be a mapping with name and url")
    name = str(item.get("name") or "").strip()
    url = str(item.get("url") or "").strip()
    if not name:
        raise ConfigError(f"servers[{idx}] is missing a name")
    if not url:
        raise ConfigError(f"servers[{idx}] ({name}) is missing a url")
    u = urlparse(url)
    if u.scheme not in ("http", "https") or not u.netloc:
        raise ConfigError(f"servers[{idx}] ({name}) has an invalid url: {url}")
    return ServerEntry(label=name, endpoint=url)


def load_servers(path: str | Path) -> List[ServerEntry]:
    """Read the ordered server list from YAML.

    Duplicate names are allowed; file order is kept.
    """
    p = Path(path)
    try:
        data = yaml.safe_load(p.read_text(encoding="utf-8"))
    except FileNotFoundError:
        raise ConfigError(f"server list not found: {p}")
    except yaml.YAMLError as e:
        raise ConfigError(f"server list is not valid YAML: {e}")

    servers = (data or {}).get("servers") if isinstance(data, dict) else None
    if not servers:
        raise ConfigError(f"no servers configured in {p}")
    if not isinstance(servers, list):
        raise ConfigError("servers must be a list")
    return [_entry_from(item, i) for i, item in enumerate(servers)]
