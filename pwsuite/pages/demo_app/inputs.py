"""Basic inputs, form controls and dynamic data sections."""

from typing import Dict, List, Optional, Union

from playwright.sync_api import Page, expect

from .app_page import file_payload


class Section:
    """A demo app section addressed through ``data-testid`` attributes."""

    KEY = ""

    def __init__(self, page: Page):
        self.page = page

    def test_id(self, value: str):
        return self.page.locator(f'[data-testid="{value}"]')


class BasicInputsSection(Section):
    KEY = "basics"

    def __init__(self, page: Page):
        super().__init__(page)
        self.text_input = self.test_id("text-input")
        self.primary_button = self.test_id("primary-button")
        self.secondary_button = page.locator("#secondary-btn")
        self.result = self.test_id("basics-result")
        self.disabled_input = self.test_id("disabled-input")
        self.readonly_input = self.test_id("readonly-input")

    def submit_text(self, text: str) -> None:
        self.text_input.fill(text)
        self.primary_button.click()

    def submit_with_enter(self, text: str) -> None:
        self.text_input.fill(text)
        self.text_input.press("Enter")

    def double_click_submit(self, text: str) -> None:
        self.text_input.fill(text)
        self.primary_button.dblclick()

    def click_secondary(self) -> None:
        self.secondary_button.click()

    def verify_result_contains(self, text: str) -> None:
        expect(self.result).to_contain_text(text)


class FormControlsSection(Section):
    KEY = "forms"

    def __init__(self, page: Page):
        super().__init__(page)
        self.dropdown = self.test_id("dropdown")
        self.result = self.test_id("forms-result")
        self.toggle = self.test_id("toggle-switch")
        self.toggle_slider = page.locator("label.switch .slider")
        self.toggle_status = page.locator("#toggle-status")
        self.file_input = self.test_id("file-upload")
        self.file_info = page.locator(".file-info")
        self.range_slider = self.test_id("range-slider")
        self.date_picker = self.test_id("date-picker")

    def radio(self, n: int):
        return self.test_id(f"radio-{n}")

    def checkbox(self, n: int):
        return self.test_id(f"checkbox-{n}")

    def select_option(self, value: str) -> None:
        self.dropdown.select_option(value)

    def choose_radio(self, n: int) -> None:
        self.radio(n).check()

    def set_checkbox(self, n: int, checked: bool = True) -> None:
        self.checkbox(n).set_checked(checked)

    def flip_toggle(self) -> None:
        self.toggle_slider.click()

    def upload_file(
        self, name: str, content: Union[str, bytes], mime_type: str = "text/plain"
    ) -> None:
        self.file_input.set_input_files(file_payload(name, content, mime_type))

    def upload_files(self, files: List[Dict[str, Union[str, bytes]]]) -> None:
        self.file_input.set_input_files(files)

    def clear_upload(self) -> None:
        self.file_input.set_input_files([])

    def verify_uploaded(self, name: str) -> None:
        expect(self.file_info).to_contain_text(name)


class DynamicDataSection(Section):
    KEY = "dynamic"

    def __init__(self, page: Page):
        super().__init__(page)
        self.search_input = self.test_id("search-input")
        self.suggestions = self.test_id("suggestions")
        self.suggestion_items = self.test_id("suggestion-item")
        self.table_rows = page.locator("#table-body tr")
        self.page_info = page.locator("#page-info")
        self.next_page_button = page.locator("#next-page")
        self.prev_page_button = page.locator("#prev-page")

    def search(self, term: str) -> None:
        self.search_input.fill(term)

    def pick_suggestion(self, index: int = 0) -> None:
        self.suggestion_items.nth(index).click()

    def sort_by(self, column: str) -> None:
        self.page.click(f'th[data-sort="{column}"]')

    def first_cell(self) -> Optional[str]:
        return self.page.locator("#table-body tr:first-child td:first-child").text_content()

    def next_page(self) -> None:
        self.next_page_button.click()

    def prev_page(self) -> None:
        self.prev_page_button.click()
