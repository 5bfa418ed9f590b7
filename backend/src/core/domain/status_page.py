from dataclasses import dataclass
from typing import Optional

from core.domain.theme import ThemeChoice


@dataclass
class StatusPage:
    id: Optional[int]
    slug: str
    app_name: str
    owner_account_id: int

    homepage: Optional[str] = None
    theme: Optional[ThemeChoice] = None

    last_status_code: Optional[int] = None
    ssl_days_until_expiry: Optional[int] = None

    def is_owned_by(self, account_id: Optional[int]) -> bool:
        return account_id is not None and account_id == self.owner_account_id
