import os
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv()

APP_DIR = os.path.dirname(__file__)
ROOT_DIR = os.path.dirname(os.path.dirname(APP_DIR))
DEFAULT_SERVERS_PATH = os.path.join(ROOT_DIR, "res", "servers.yaml")

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

@dataclass(frozen=True)
class Settings:
    SERVERS_PATH: str = os.getenv("OB_SERVERS_PATH", DEFAULT_SERVERS_PATH)
    UA: str = os.getenv("OB_UA", "OnlineBoard/1.0")
    SITE_TITLE: str = os.getenv("OB_SITE_TITLE", "PUKANG VPN")
    LOGO_URL: str = os.getenv("OB_LOGO_URL", "")
    LOG_LEVEL: str = os.getenv("OB_LOG_LEVEL", "INFO")
    HOST: str = os.getenv("OB_HOST", "0.0.0.0")
    PORT: int = int(os.getenv("OB_PORT", "8000"))
