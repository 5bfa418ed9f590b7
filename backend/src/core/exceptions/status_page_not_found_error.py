class StatusPageNotFoundError(Exception):
    def __init__(self, slug: str):
        self.slug = slug
        super().__init__(f"Status page with slug='{slug}' not found")
