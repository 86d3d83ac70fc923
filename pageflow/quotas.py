"""
Quotas — limits on resources such as users or published entries.

Host applications register quota classes by name. Requesting a quota that
nobody registered yields an UnlimitedQuota, so the engine can check quotas
unconditionally. Re-registering a name replaces the earlier quota class.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from pageflow.exceptions import QuotaExhaustedError
from pageflow.registry import DuplicatePolicy, Registry


class Quota(ABC):
    """
    Base class for quota implementations.

    Subclasses implement `available`. `state` is exposed to the editor
    so it can explain why an action is disabled.
    """

    def __init__(self, name: str, account: Any) -> None:
        self.name = name
        self.account = account

    @property
    @abstractmethod
    def available(self) -> bool: ...

    @property
    def exhausted(self) -> bool:
        return not self.available

    @property
    def state(self) -> str:
        return "available" if self.available else "exhausted"

    def verify_available(self) -> None:
        """Raise QuotaExhaustedError unless the quota is available."""
        if not self.available:
            raise QuotaExhaustedError(self.name)


class UnlimitedQuota(Quota):
    @property
    def available(self) -> bool:
        return True


class Quotas(Registry[type[Quota]]):
    def __init__(self) -> None:
        super().__init__("quota", policy=DuplicatePolicy.REPLACE)

    def for_account(self, name: str, account: Any) -> Quota:
        """Instantiate the quota registered under name for account."""
        quota_class = self.get(name) or UnlimitedQuota
        return quota_class(name, account)
