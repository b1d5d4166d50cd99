"""Base page object shared by every application wrapper."""

import re
from typing import Pattern, Union
from urllib.parse import urljoin

from playwright.sync_api import Locator, Page, expect


class BasePage:
    """
    Thin wrapper over a Playwright ``Page``.

    Subclasses declare their locators in ``__init__`` and expose actions as
    methods; assertions go through ``playwright.sync_api.expect`` so they
    auto-wait.
    """

    URL = ""

    def __init__(self, page: Page, base_url: str = ""):
        self.page = page
        self.base_url = base_url or self.URL

    def url_for(self, path: str = "") -> str:
        if not self.base_url:
            return path
        return urljoin(self.base_url, path)

    def goto(self, path: str = "") -> None:
        self.page.goto(self.url_for(path))

    @property
    def current_url(self) -> str:
        return self.page.url

    def reload(self) -> None:
        self.page.reload()

    def locator(self, selector: str) -> Locator:
        return self.page.locator(selector)

    def by_test_id(self, test_id: str) -> Locator:
        return self.page.locator(f'[data-test="{test_id}"]')

    def expect_url(self, pattern: Union[str, Pattern[str]]) -> None:
        """Assert the URL; plain strings are treated as regular expressions."""
        if isinstance(pattern, str):
            pattern = re.compile(pattern)
        expect(self.page).to_have_url(pattern)
