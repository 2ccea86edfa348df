"""Account models for the persisted account slice, using Pydantic."""

from typing import Any, List, Mapping, Optional

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..Utils.log_sanitizer import sanitize_dict


class Account(BaseModel):
    """Stored credentials/identity for one realm the user has connected to."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    realm: Optional[str] = None
    email: Optional[str] = None
    api_key: Optional[str] = Field(default=None, alias="apiKey")

    @field_validator("realm", "email", "api_key", mode="before")
    @classmethod
    def absent_unless_string(cls, v):
        """Persisted data is untrusted; anything that isn't a string counts as absent."""
        return v if isinstance(v, str) else None

    @property
    def is_authenticated(self) -> bool:
        return bool(self.api_key)

    @classmethod
    def from_raw(cls, raw: Any) -> "Account":
        if isinstance(raw, Account):
            return raw
        if not isinstance(raw, Mapping):
            logger.warning(f"Ignoring malformed account entry of type {type(raw).__name__}")
            return cls()
        return cls.model_validate(dict(raw))


class RehydratePayload(BaseModel):
    """
    The persisted state handed back at startup.

    Only ``accounts`` is read here; other slices (users, realm, ...) are kept
    as extra fields for the collaborators that own them.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    accounts: List[Account] = Field(default_factory=list)

    @classmethod
    def parse_lenient(cls, raw: Any) -> "RehydratePayload":
        """
        Build a payload without ever raising.

        Args:
            raw: Whatever the storage layer produced, possibly None

        Returns:
            A payload whose ``accounts`` is empty when the input is missing
            or unusable
        """
        if isinstance(raw, RehydratePayload):
            return raw
        if raw is None:
            logger.debug("Rehydrate payload absent; treating accounts as empty")
            return cls()
        if not isinstance(raw, Mapping):
            logger.warning(f"Rehydrate payload of type {type(raw).__name__} is not a mapping; treating accounts as empty")
            return cls()

        raw_accounts = raw.get("accounts")
        if raw_accounts is None:
            accounts: List[Account] = []
        elif isinstance(raw_accounts, (list, tuple)):
            accounts = [Account.from_raw(entry) for entry in raw_accounts]
        else:
            logger.warning(f"Rehydrate 'accounts' of type {type(raw_accounts).__name__} is not a list; treating as empty")
            accounts = []

        extras = {k: v for k, v in raw.items() if k != "accounts" and isinstance(k, str)}
        try:
            return cls(accounts=accounts, **extras)
        except ValidationError as e:
            logger.warning(f"Rehydrate payload extras failed validation ({e.error_count()} errors); keeping accounts only")
            return cls(accounts=accounts)

    def describe(self) -> List[dict]:
        """Account data safe for logging."""
        return [sanitize_dict(account.model_dump(by_alias=True)) for account in self.accounts]
