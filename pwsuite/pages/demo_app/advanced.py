"""Async behaviour, advanced elements and authentication sections."""

from typing import Dict, Optional

from playwright.sync_api import FrameLocator, Page, expect

from .app_page import VALID_CREDENTIALS
from .inputs import Section


class AsyncSection(Section):
    KEY = "async"

    def __init__(self, page: Page):
        super().__init__(page)
        self.delayed_content_button = self.test_id("delayed-content-btn")
        self.delayed_content = self.test_id("delayed-content")
        self.progress_button = self.test_id("progress-btn")
        self.progress_text = page.locator("#progress-text")
        self.enable_after_delay = self.test_id("enable-after-delay")
        self.api_success_button = self.test_id("api-success")
        self.api_error_button = self.test_id("api-error")
        self.api_result = self.test_id("api-result")

    def load_delayed_content(self) -> None:
        self.delayed_content_button.click()

    def start_progress(self) -> None:
        self.progress_button.click()

    def progress_value(self) -> int:
        text = self.progress_text.text_content() or "0"
        return int(text.replace("%", "").strip() or 0)

    def wait_for_progress_complete(self, timeout: float = 5000) -> None:
        expect(self.progress_text).to_contain_text("100%", timeout=timeout)

    def call_api(self, succeed: bool = True) -> None:
        (self.api_success_button if succeed else self.api_error_button).click()


class AdvancedSection(Section):
    KEY = "advanced"

    def __init__(self, page: Page):
        super().__init__(page)
        self.section_heading = page.locator("#advanced h2")
        self.shadow_host = self.test_id("shadow-host")
        # Playwright CSS locators pierce open shadow roots
        self.shadow_button = page.locator(".shadow-button")
        self.shadow_heading = page.locator(".shadow-content h4")
        self.shadow_result = page.locator(".shadow-result")
        self.canvas = self.test_id("demo-canvas")

    @property
    def iframe(self) -> FrameLocator:
        return self.page.frame_locator('[data-testid="demo-iframe"]')

    def click_iframe_button(self) -> None:
        button = self.iframe.locator("#iframe-btn")
        expect(button).to_be_visible()
        button.click()

    def click_shadow_button(self) -> None:
        self.shadow_button.click()

    def draw_on_canvas(self, start=(50, 50), end=(150, 150)) -> None:
        box = self.canvas.bounding_box()
        if box is None:
            raise AssertionError("Canvas is not rendered")
        mouse = self.page.mouse
        mouse.move(box["x"] + start[0], box["y"] + start[1])
        mouse.down()
        mouse.move(box["x"] + end[0], box["y"] + end[1])
        mouse.up()

    def canvas_size(self) -> Optional[Dict[str, float]]:
        box = self.canvas.bounding_box()
        if box is None:
            return None
        return {"width": box["width"], "height": box["height"]}


class AuthSection(Section):
    KEY = "auth"

    INVALID_CREDENTIALS_MESSAGE = "Invalid username or password"

    def __init__(self, page: Page):
        super().__init__(page)
        self.username_input = self.test_id("username")
        self.password_input = self.test_id("password")
        self.login_button = self.test_id("login-btn")
        self.login_form = self.test_id("login-form")
        self.login_error = self.test_id("login-error")
        self.dashboard = self.test_id("dashboard")
        self.dashboard_user = page.locator("#dashboard-user")
        self.logout_button = page.locator("#logout-btn")
        self.toggle_password_button = self.test_id("toggle-password")

    def login(self, username: str = "", password: str = "") -> None:
        if username:
            self.username_input.fill(username)
        if password:
            self.password_input.fill(password)
        self.login_button.click()

    def login_as_demo_user(self) -> None:
        self.login(VALID_CREDENTIALS["username"], VALID_CREDENTIALS["password"])
        expect(self.dashboard).to_be_visible()

    def logout(self) -> None:
        self.logout_button.click()
        expect(self.login_form).to_be_visible()

    def verify_error(self, message: str = INVALID_CREDENTIALS_MESSAGE) -> None:
        expect(self.login_error).to_be_visible()
        expect(self.login_error).to_contain_text(message)

    def toggle_password_visibility(self) -> bool:
        """Click the eye toggle if the build has one; returns whether it did."""
        if not self.toggle_password_button.is_visible():
            return False
        self.toggle_password_button.click()
        return True
