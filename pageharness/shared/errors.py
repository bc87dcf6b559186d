"""Error taxonomy for session lifecycle and page-object resolution."""


class HarnessError(RuntimeError):
    """Base error for the harness."""


class UninitializedSessionError(HarnessError):
    """A page was requested before the session was created or after it was reset."""

    def __init__(self, message: str = "Page is not initialized. Make sure the browser is launched in before_scenario."):
        super().__init__(message)


class UnknownPageError(HarnessError):
    """No page object is registered under the requested logical name."""

    def __init__(self, page_name: str):
        self.page_name = page_name
        super().__init__(f'Page object "{page_name}" is not defined.')


class NavigationError(HarnessError):
    """goto failed: the driver timed out or the resource could not be reached."""

    def __init__(self, url: str, reason: str = ""):
        self.url = url
        message = f"Navigation to {url} failed"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class ElementNotFoundError(HarnessError):
    """A site-specific locator matched nothing on the page."""

    def __init__(self, selector: str):
        self.selector = selector
        super().__init__(f"No element matches selector {selector!r}")
