from abc import ABC, abstractmethod
from typing import Optional


class AccountRepository(ABC):
    @abstractmethod
    async def get_plan(self, account_id: int) -> Optional[str]:
        raise NotImplementedError
