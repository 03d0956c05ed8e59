# spellgate/settings.py
"""
Process-wide configuration, read once from the environment (and ``.env``)
at startup.

Variables
---------
NODE_ENV            development | test | production   (default: development)
PORT                listen port                        (default: 3000)
COOKIE_KEY          name of the signed session cookie
COOKIE_SECRET       secret used to verify cookie signatures
COOKIE_PATH / COOKIE_EXP / COOKIE_DOMAIN / SECURE_COOKIE
JWT_SECRET          token-signing secret (carried, not used for verification here)
TEXTGEARS_API_KEY   key for the TextGears grammar API
TEXTGEARS_LANGUAGE  language tag sent to TextGears     (default: en-US)
TEXTGEARS_TIMEOUT   outbound timeout in seconds        (default: 10)
SYMSPELL_DICTIONARY optional JSON words file trained at startup
"""
from __future__ import annotations
from enum import Enum
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class NodeEnv(str, Enum):
    DEV  = "development"
    TEST = "test"
    PROD = "production"


CORS_ORIGINS = ("http://localhost:5173", "https://spellcheck-client.onrender.com")


class CookieProps(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="COOKIE_",
        env_file=".env",
        env_ignore_empty=True,
        extra="ignore",
        frozen=True,
        populate_by_name=True,
    )

    key:     str = "spellgate_session"
    secret:  str = ""
    path:    str = "/"
    expires: int = Field(default=0, validation_alias="COOKIE_EXP")   # ms; 0 = session cookie
    domain:  str = ""
    secure:  bool = Field(default=False, validation_alias="SECURE_COOKIE")


class EnvironmentConfig(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_ignore_empty=True,
        extra="ignore",
        frozen=True,
        populate_by_name=True,
    )

    node_env:            NodeEnv = Field(default=NodeEnv.DEV, validation_alias="NODE_ENV")
    port:                int = Field(default=3000, validation_alias="PORT")
    cookie:              CookieProps = Field(default_factory=CookieProps)
    jwt_secret:          str = Field(default="", validation_alias="JWT_SECRET")
    textgears_api_key:   str = Field(default="", validation_alias="TEXTGEARS_API_KEY")
    textgears_language:  str = Field(default="en-US", validation_alias="TEXTGEARS_LANGUAGE")
    textgears_timeout:   float = Field(default=10.0, gt=0, validation_alias="TEXTGEARS_TIMEOUT")
    symspell_dictionary: Optional[str] = Field(default=None, validation_alias="SYMSPELL_DICTIONARY")

    @property
    def is_dev(self) -> bool:
        return self.node_env is NodeEnv.DEV

    @property
    def is_test(self) -> bool:
        return self.node_env is NodeEnv.TEST

    @property
    def is_production(self) -> bool:
        return self.node_env is NodeEnv.PROD

    @classmethod
    def from_env(cls, env_file: str | None = ".env") -> "EnvironmentConfig":
        """Read the process environment; ``env_file=None`` skips the dotenv file."""
        return cls(cookie=CookieProps(_env_file=env_file), _env_file=env_file)
