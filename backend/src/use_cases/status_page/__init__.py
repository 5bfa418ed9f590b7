from use_cases.status_page.get_status_page_view_use_case import GetStatusPageViewUseCase, StatusPageView

__all__ = ["GetStatusPageViewUseCase", "StatusPageView"]
