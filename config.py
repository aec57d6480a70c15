from __future__ import annotations

from datetime import time
from decimal import Decimal
from functools import lru_cache
from types import MappingProxyType
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

# Point values for the scoring rules. Read-only once the module is imported.
CONFIG = MappingProxyType(
    {
        "retailerNameMultiplier": 1,
        "roundDollarBonus": 50,
        "multipleOf025Bonus": 25,
        "quarterCents": 25,
        "itemsBonusPerTwo": 5,
        "itemDescriptionLengthDivisor": 3,
        "itemDescriptionMultiplier": Decimal("0.2"),
        "oddDayBonus": 6,
        "timeBonus": 10,
        "timeBonusStart": time(14, 0),
        "timeBonusEnd": time(16, 0),
    }
)


class Settings(BaseSettings):
    """
    Process settings, read from the environment (prefix ``RECEIPT_``) or a ``.env`` file.

    Attributes:
        LOG_FILE_PATH (str): Where the rotating log file is written.
        LOG_LEVEL (str): Level of the ``ReceiptLogger`` logger.
        JWT_SECRET (str | None): HS256 signing secret. Authorization is disabled when unset.
        TOKEN_TTL_SECONDS (int): Lifetime of tokens issued by ``generate_token.py``.
    """

    LOG_FILE_PATH: str = "./logs/logs.out"
    LOG_LEVEL: str = "DEBUG"
    LOG_MAX_BYTES: int = 1024 * 1024
    LOG_BACKUP_COUNT: int = 3

    JWT_SECRET: Optional[str] = None
    TOKEN_TTL_SECONDS: int = 3600

    model_config = SettingsConfigDict(env_file=".env", env_prefix="RECEIPT_", extra="ignore")


@lru_cache
def getSettings() -> Settings:
    return Settings()
