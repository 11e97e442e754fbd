"""
Browser session management.

Launches a Chromium instance through Playwright for a single scan and tears
it down again. A session is owned by exactly one scan.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, List, Optional

from playwright.async_api import async_playwright

logger = logging.getLogger(__name__)


@dataclass
class BrowserOptions:
    """Launch options for a scan browser."""

    headless: bool = True
    args: List[str] = field(
        default_factory=lambda: ["--no-sandbox", "--disable-setuid-sandbox"]
    )


class BrowserSession:
    """
    Handle on a launched browser.

    Attributes:
        browser: Playwright Browser used to open pages
    """

    def __init__(self, browser: Any, playwright: Optional[Any] = None):
        self.browser = browser
        self._playwright = playwright

    async def close(self) -> None:
        """Close the browser and stop the Playwright driver."""
        try:
            await self.browser.close()
        finally:
            if self._playwright is not None:
                await self._playwright.stop()


class BrowserLauncher(ABC):
    """Acquires and releases browser sessions."""

    @abstractmethod
    async def acquire(self, options: BrowserOptions) -> BrowserSession:
        """
        Launch a browser.

        Raises:
            Exception: Any launch failure (missing binary, sandbox errors)
        """
        pass

    @abstractmethod
    async def release(self, session: BrowserSession) -> None:
        """Tear down a browser previously returned by acquire()."""
        pass


class PlaywrightBrowserLauncher(BrowserLauncher):
    """Launches headless Chromium with Playwright's async API."""

    async def acquire(self, options: BrowserOptions) -> BrowserSession:
        playwright = await async_playwright().start()
        try:
            browser = await playwright.chromium.launch(
                headless=options.headless,
                args=list(options.args),
            )
        except BaseException:
            await playwright.stop()
            raise

        logger.debug(f"Launched Chromium {browser.version}")
        return BrowserSession(browser, playwright)

    async def release(self, session: BrowserSession) -> None:
        await session.close()
        logger.debug("Browser closed")
