from core.domain.plan_policy import BadgePeriod
from infra.web.routers.schemas import CamelModel


class BadgeResponseDTO(CamelModel):
    image_url: str
    markdown_snippet: str
    html_snippet: str
    period: BadgePeriod
