import os
import logging
from typing import Mapping, Optional

from dotenv import load_dotenv
from pydantic import BaseModel

from heelix.feeds.entity_info import DEFAULT_FEED_URL

PACKAGE_DIR = os.path.dirname(os.path.abspath(__file__))
WEB_DIR = os.path.join(PACKAGE_DIR, "web")

DEFAULT_ADMIN_PORT = 3000


def _get_int(env: Mapping[str, str], name: str, default: int, minimum: int = 1) -> int:
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}")
    if value < minimum:
        raise ValueError(f"{name} must be >= {minimum}, got {value}")
    return value


_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")


def _get_bool(env: Mapping[str, str], name: str, default: bool) -> bool:
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be one of {_TRUE_VALUES + _FALSE_VALUES}, got {raw!r}")


class Settings(BaseModel):
    admin_host: str = "0.0.0.0"
    admin_port: int = DEFAULT_ADMIN_PORT
    public_dir: str = os.path.join(WEB_DIR, "public")
    index_file: str = os.path.join(WEB_DIR, "index.html")
    feed_url: str = DEFAULT_FEED_URL
    poll_interval_seconds: int = 10
    feed_batch_size: int = 20
    feed_max_items: int = 50
    keep_feed_order: bool = False
    log_level: str = "INFO"

    # ---------- Fábrica baseada em variáveis de ambiente / .env ----------
    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None, load_env: bool = True) -> "Settings":
        """Lê as variáveis HEELIX_* (carregando o .env antes, se `load_env`)."""
        if env is None:
            if load_env:
                load_dotenv()
            env = os.environ

        defaults = cls()
        log_level = (env.get("HEELIX_LOG_LEVEL") or defaults.log_level).strip().upper()
        if not isinstance(getattr(logging, log_level, None), int):
            raise ValueError(f"HEELIX_LOG_LEVEL is not a valid log level: {log_level!r}")

        return cls(
            admin_host=env.get("HEELIX_ADMIN_HOST") or defaults.admin_host,
            admin_port=_get_int(env, "HEELIX_ADMIN_PORT", defaults.admin_port, minimum=0),
            public_dir=env.get("HEELIX_PUBLIC_DIR") or defaults.public_dir,
            index_file=env.get("HEELIX_INDEX_FILE") or defaults.index_file,
            feed_url=env.get("HEELIX_FEED_URL") or defaults.feed_url,
            poll_interval_seconds=_get_int(env, "HEELIX_POLL_INTERVAL_SECONDS", defaults.poll_interval_seconds),
            feed_batch_size=_get_int(env, "HEELIX_FEED_BATCH_SIZE", defaults.feed_batch_size),
            feed_max_items=_get_int(env, "HEELIX_FEED_MAX_ITEMS", defaults.feed_max_items),
            keep_feed_order=_get_bool(env, "HEELIX_KEEP_FEED_ORDER", defaults.keep_feed_order),
            log_level=log_level,
        )
