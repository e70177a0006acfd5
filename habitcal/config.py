"""Configuration - loads environment variables with sensible defaults.

All tunables live here. Override via .env file or environment variables.
"""

import os
from pathlib import Path
from dotenv import load_dotenv

# Load .env from project root
_PROJECT_ROOT = Path(__file__).resolve().parent.parent
load_dotenv(_PROJECT_ROOT / ".env")

def _env(key: str, default: str = "") -> str:
    return os.getenv(key, default)

def _env_int(key: str, default: int) -> int:
    return int(os.getenv(key, str(default)))

def _env_optional_int(key: str) -> int | None:
    raw = os.getenv(key, "").strip()
    return int(raw) if raw else None

def _env_bool(key: str, default: bool = False) -> bool:
    return os.getenv(key, str(default)).lower() in ("1", "true", "yes")


# ═══════════════════════════════════════════════════════════════════════════
# Transport
# ═══════════════════════════════════════════════════════════════════════════

TELEGRAM_BOT_TOKEN = _env("TELEGRAM_BOT_TOKEN")

# ═══════════════════════════════════════════════════════════════════════════
# Owner
# ═══════════════════════════════════════════════════════════════════════════

OWNER_USER_ID = _env_int("OWNER_USER_ID", 0)


def set_owner_user_id(user_id: int) -> None:
    """Set OWNER_USER_ID at runtime and persist to .env for restart safety."""
    global OWNER_USER_ID
    OWNER_USER_ID = user_id
    _persist_owner(user_id)


def _persist_owner(user_id: int) -> None:
    """Write OWNER_USER_ID into .env so it survives restarts."""
    env_path = _PROJECT_ROOT / ".env"
    try:
        if env_path.exists():
            lines = env_path.read_text().splitlines()
            for i, line in enumerate(lines):
                if line.startswith("OWNER_USER_ID="):
                    lines[i] = f"OWNER_USER_ID={user_id}"
                    break
            else:
                lines.append(f"OWNER_USER_ID={user_id}")
            env_path.write_text("\n".join(lines) + "\n")
        else:
            env_path.write_text(f"OWNER_USER_ID={user_id}\n")
    except OSError:
        import logging
        logging.getLogger(__name__).warning(
            "Could not persist OWNER_USER_ID to .env - set it manually"
        )


# ═══════════════════════════════════════════════════════════════════════════
# Calendar
# ═══════════════════════════════════════════════════════════════════════════

# Unset = local system date. Set to pin "today" to a fixed UTC offset.
TIMEZONE_OFFSET_HOURS = _env_optional_int("TIMEZONE_OFFSET_HOURS")

# Off: un-completing any habit drops today from the completed-dates set.
# On: today stays colored while at least one completion is still counted.
KEEP_TODAY_WHILE_COUNTED = _env_bool("KEEP_TODAY_WHILE_COUNTED", False)

CALENDAR_COLUMNS = _env_int("CALENDAR_COLUMNS", 7)

# ═══════════════════════════════════════════════════════════════════════════
# Logging
# ═══════════════════════════════════════════════════════════════════════════

LOG_LEVEL = _env("LOG_LEVEL", "INFO").upper()
