from typing import Optional


class NotStatusPageOwnerError(Exception):
    def __init__(self, slug: str, account_id: Optional[int]):
        self.slug = slug
        self.account_id = account_id
        super().__init__(f"Account {account_id} does not own status page '{slug}'")
