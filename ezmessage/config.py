"""Process-wide defaults applied to every new `EmailBuilder`."""

import os
from dataclasses import dataclass, fields
from functools import lru_cache
from typing import Mapping, Optional

from dotenv import load_dotenv

load_dotenv()

ENV_PREFIX = "EZMESSAGE_"


@dataclass(frozen=True)
class Settings:
    DEFAULT_FROM_NAME: Optional[str] = None
    DEFAULT_FROM_ADDRESS: Optional[str] = None
    DEFAULT_REPLY_TO_NAME: Optional[str] = None
    DEFAULT_REPLY_TO_ADDRESS: Optional[str] = None
    DEFAULT_TO_NAME: Optional[str] = None
    DEFAULT_TO_ADDRESS: Optional[str] = None
    DEFAULT_CC_NAME: Optional[str] = None
    DEFAULT_CC_ADDRESS: Optional[str] = None
    DEFAULT_BCC_NAME: Optional[str] = None
    DEFAULT_BCC_ADDRESS: Optional[str] = None
    DEFAULT_SUBJECT: Optional[str] = None

    @classmethod
    def from_mapping(cls, values: Mapping[str, str], prefix: str = "") -> "Settings":
        """Builds settings from `values`, reading `prefix + FIELD` for each field.

        Blank values are treated as unset.
        """
        kwargs = {}
        for f in fields(cls):
            value = values.get(prefix + f.name)
            if value is not None and value.strip():
                kwargs[f.name] = value.strip()
        return cls(**kwargs)

    @classmethod
    def from_env(cls) -> "Settings":
        return cls.from_mapping(os.environ, prefix=ENV_PREFIX)

    @property
    def is_empty(self) -> bool:
        return not any(getattr(self, f.name) for f in fields(self))


@lru_cache()
def get_settings() -> Settings:
    return Settings.from_env()


__all__ = ["Settings", "get_settings", "ENV_PREFIX"]
