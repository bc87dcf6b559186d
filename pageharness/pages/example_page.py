from playwright.sync_api import Locator, TimeoutError as PlaywrightTimeoutError
from typing import List, Optional

from pageharness.pages.base_page import BasePage
from pageharness.pages.registry import register_page
from pageharness.shared.errors import ElementNotFoundError

HEADING_SELECTOR = "h1"
LINK_SELECTOR = "a"
LEARN_MORE_SELECTOR = 'a[href="https://iana.org/domains/example"]'


@register_page("example")
class ExamplePage(BasePage):
    """Interactions with example.com."""

    URL = "https://example.com"

    # Locators
    @property
    def heading(self) -> Locator:
        return self.page.locator(HEADING_SELECTOR)

    @property
    def links(self) -> Locator:
        return self.page.locator(LINK_SELECTOR)

    @property
    def learn_more_link(self) -> Locator:
        return self.page.locator(LEARN_MORE_SELECTOR)

    def get_heading_text(self) -> str:
        """Text of the first h1. Raises ElementNotFoundError if none appears within the timeout."""
        heading = self.heading.first
        try:
            heading.wait_for(state="attached", timeout=self.timeout_ms)
        except PlaywrightTimeoutError as e:
            raise ElementNotFoundError(HEADING_SELECTOR) from e
        return heading.text_content(timeout=self.timeout_ms) or ""

    def get_all_links(self) -> List[Locator]:
        """Snapshot of the anchors currently in the DOM, in document order."""
        return self.links.all()

    def get_all_link_texts(self) -> List[str]:
        return [link.text_content(timeout=self.timeout_ms) or "" for link in self.get_all_links()]

    def has_link_with_text(self, link_text: str) -> bool:
        wanted = link_text.strip()
        return any(text and wanted in text for text in self.get_all_link_texts())

    def open(self):
        self.navigate_to(self.base_url)

    def get_learn_more_link(self) -> Locator:
        return self.learn_more_link

    def get_learn_more_link_text(self) -> str:
        return self.learn_more_link.text_content(timeout=self.timeout_ms) or ""

    def get_learn_more_link_href(self) -> Optional[str]:
        return self.learn_more_link.get_attribute("href", timeout=self.timeout_ms)

    def click_learn_more_link(self):
        """Clicking may navigate away from the page; not idempotent."""
        self.learn_more_link.click(timeout=self.timeout_ms)

    def is_learn_more_link_visible(self) -> bool:
        return self.learn_more_link.is_visible()
