"""Training demo app shell: navigation between sections."""

import os
from typing import Dict, Union

from playwright.sync_api import Page, expect

from ..base import BasePage


GITHUB_PAGES_URL = "https://pragmatictesters.github.io/playwright-advanced-training-2025/demo-app/"
LOCAL_URL = "http://localhost:8000"

SECTIONS = {
    "basics": "Basic Inputs",
    "forms": "Form Controls",
    "dynamic": "Dynamic Data",
    "interactive": "Interactive",
    "popups": "JS Popups",
    "async": "Async Behavior",
    "advanced": "Advanced",
    "auth": "Authentication",
}

VALID_CREDENTIALS = {"username": "demo", "password": "password123"}
INVALID_CREDENTIALS = {"username": "wronguser", "password": "wrongpass"}

DIALOG_MESSAGES = {
    "alert": "This is a simple alert dialog!",
    "confirm": "Do you want to proceed?",
    "prompt": "Please enter your name:",
    "random_alert": "Random delayed alert appeared!",
}


def demo_app_url() -> str:
    """``DEMO_APP_URL`` (or the older ``TEST_URL``), else the public build."""
    return os.getenv("DEMO_APP_URL") or os.getenv("TEST_URL") or GITHUB_PAGES_URL


def file_payload(
    name: str, content: Union[str, bytes], mime_type: str = "text/plain"
) -> Dict[str, Union[str, bytes]]:
    """In-memory file for ``Locator.set_input_files``."""
    buffer = content.encode("utf-8") if isinstance(content, str) else content
    return {"name": name, "mimeType": mime_type, "buffer": buffer}


class DemoAppPage(BasePage):
    """Entry point of the demo app; sections are opened by their tab label."""

    def __init__(self, page: Page, base_url: str = ""):
        super().__init__(page, base_url or demo_app_url())
        self.heading = page.locator("h1").first

    def open(self) -> None:
        self.page.goto(self.base_url)

    def open_section(self, key: str) -> None:
        """Click the navigation tab for a section key such as ``popups``."""
        if key not in SECTIONS:
            raise ValueError(f"Unknown section: {key}. Expected one of {sorted(SECTIONS)}")
        self.page.click(f"text={SECTIONS[key]}")

    def verify_loaded(self) -> None:
        expect(self.heading).to_be_visible()
