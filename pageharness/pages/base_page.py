from playwright.sync_api import Page, Error as PlaywrightError
from typing import Optional

from pageharness.shared.errors import NavigationError

DEFAULT_TIMEOUT_MS = 30000


class BasePage:
    """
    Base page object. Site-specific pages subclass it, set URL and add their
    own locators and actions.
    """

    URL: Optional[str] = None

    def __init__(self, page: Page, timeout_ms: int = DEFAULT_TIMEOUT_MS, base_url: Optional[str] = None):
        self.page = page
        self.timeout_ms = timeout_ms
        self.base_url = base_url or self.URL

    def navigate_to(self, url: str):
        """Loads url and waits for the load event."""
        try:
            self.page.goto(url, wait_until="load", timeout=self.timeout_ms)
        except PlaywrightError as e:
            # TimeoutError is a subclass of Error, so both end up here
            raise NavigationError(url, str(e).split("\n")[0]) from e

    def get_title(self) -> str:
        return self.page.title()

    def get_url(self) -> str:
        return self.page.url

    def wait_for_load(self, state: str = "networkidle"):
        """Waits for the given load state. Driver timeouts propagate as-is."""
        self.page.wait_for_load_state(state, timeout=self.timeout_ms)

    def wait_for_dom_content(self):
        self.wait_for_load("domcontentloaded")

    def get_body_text(self) -> str:
        return self.page.locator("body").text_content(timeout=self.timeout_ms) or ""

    def contains_text(self, text: str) -> bool:
        """Case-sensitive substring match against the body text."""
        return text in self.get_body_text()
