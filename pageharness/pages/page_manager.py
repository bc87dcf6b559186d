from typing import Dict, List, Optional
import logging

from pageharness.browser_interaction.session_registry import SessionRegistry
from pageharness.pages.base_page import BasePage, DEFAULT_TIMEOUT_MS
from pageharness.pages.example_page import ExamplePage
from pageharness.pages.registry import get_page_class, known_pages
from pageharness.shared.errors import UninitializedSessionError, UnknownPageError

logger = logging.getLogger(__name__)


class PageObjectManager:
    """
    Per-scenario cache of page objects bound to the registry's current page.
    Holds at most one instance per logical name until reset().
    """
    def __init__(
        self,
        registry: SessionRegistry,
        timeout_ms: int = DEFAULT_TIMEOUT_MS,
        base_urls: Optional[Dict[str, str]] = None,
    ):
        self.registry = registry
        self.timeout_ms = timeout_ms
        self.base_urls = {name.lower(): url for name, url in (base_urls or {}).items()}
        self._pages: Dict[str, BasePage] = {}

    def resolve(self, page_name: str) -> BasePage:
        """Returns the cached page object for page_name, creating it on first use."""
        # Checked on every call: the registry may have been reset mid-scenario
        page = self.registry.get_page()
        if page is None:
            raise UninitializedSessionError()

        key = page_name.lower()
        cached = self._pages.get(key)
        if cached is not None:
            return cached

        page_cls = get_page_class(key)
        if page_cls is None:
            raise UnknownPageError(page_name)

        logger.debug(f"Creating {page_cls.__name__} for '{page_name}'")
        instance = page_cls(page, timeout_ms=self.timeout_ms, base_url=self.base_urls.get(key))
        self._pages[key] = instance
        return instance

    def known_pages(self) -> List[str]:
        return known_pages()

    def reset(self):
        """Drops every cached page object. The registry is left untouched."""
        self._pages = {}

    def example_page(self) -> ExamplePage:
        return self.resolve("example")
