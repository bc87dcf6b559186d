from playwright.sync_api import Browser, BrowserContext, Page
from typing import Optional


class SessionRegistry:
    """
    Holds the current scenario's browser, context and page.
    One registry belongs to exactly one running scenario; parallel workers
    must each own their own instance.
    """
    def __init__(self):
        self._engine: Optional[Browser] = None
        self._context: Optional[BrowserContext] = None
        self._page: Optional[Page] = None

    def get_engine(self) -> Optional[Browser]:
        return self._engine

    def set_engine(self, engine: Optional[Browser]):
        self._engine = engine

    def get_context(self) -> Optional[BrowserContext]:
        return self._context

    def set_context(self, context: Optional[BrowserContext]):
        self._context = context

    def get_page(self) -> Optional[Page]:
        return self._page

    def set_page(self, page: Optional[Page]):
        self._page = page

    def register(self, engine: Browser, context: BrowserContext, page: Page):
        """Stores all three resources at once."""
        self._engine = engine
        self._context = context
        self._page = page

    @property
    def is_active(self) -> bool:
        return self._page is not None

    def reset(self):
        """Clears all resources. Safe to call repeatedly."""
        self._engine = None
        self._context = None
        self._page = None
