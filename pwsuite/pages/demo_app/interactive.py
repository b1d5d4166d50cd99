"""Interactive components and JavaScript dialog sections."""

import re
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, Tuple, Union

from playwright.sync_api import Dialog, Page, expect

from .inputs import Section


SHOW = re.compile(r"show")


class InteractiveSection(Section):
    KEY = "interactive"

    def __init__(self, page: Page):
        super().__init__(page)
        self.open_modal_button = self.test_id("open-modal")
        self.modal = self.test_id("modal")
        self.modal_close = self.test_id("modal-close")
        self.modal_confirm = self.test_id("modal-confirm")
        self.drop_zone = self.test_id("drop-zone")
        self.show_toast_button = self.test_id("show-toast")
        self.toast = self.test_id("toast")
        self.toast_message = page.locator("#toast-message")

    def open_modal(self) -> None:
        self.open_modal_button.click()
        expect(self.modal).to_have_class(SHOW)

    def close_modal(self) -> None:
        self.modal_close.click()
        expect(self.modal).not_to_have_class(SHOW)

    def confirm_modal(self) -> None:
        self.modal_confirm.click()

    def select_tab(self, n: int) -> None:
        self.page.click(f'button[data-tab="tab{n}"]')

    def tab_content(self, n: int):
        return self.test_id(f"tab-{n}-content")

    def toggle_accordion(self, n: int) -> None:
        self.test_id(f"accordion-{n}").click()

    def accordion_item(self, n: int):
        return self.test_id(f"accordion-{n}").locator("..")

    def drag_item(self, n: int):
        return self.test_id(f"drag-item-{n}")

    def drag_item_to_drop_zone(self, n: int) -> None:
        self.drag_item(n).drag_to(self.drop_zone)

    def verify_in_drop_zone(self, n: int) -> None:
        expect(self.drop_zone.locator(f'[data-testid="drag-item-{n}"]')).to_be_visible()

    def show_toast(self) -> None:
        self.show_toast_button.click()
        expect(self.toast).to_have_class(SHOW)


@dataclass
class CapturedDialog:
    type: str
    message: str
    default_value: str = ""


# Response for one dialog: "accept", "dismiss", or ("accept", prompt text)
DialogResponse = Union[str, Tuple[str, str]]


class PopupsSection(Section):
    """
    Alert, confirm and prompt dialogs.

    Dialogs must be handled before the click that opens them; Playwright
    dismisses any dialog that has no listener.
    """

    KEY = "popups"

    def __init__(self, page: Page):
        super().__init__(page)
        self.alert_button = self.test_id("alert-btn")
        self.alert_result = self.test_id("alert-result")
        self.confirm_button = self.test_id("confirm-btn")
        self.confirm_result = self.test_id("confirm-result")
        self.prompt_button = self.test_id("prompt-btn")
        self.prompt_result = self.test_id("prompt-result")
        self.random_alert_button = self.test_id("random-alert-btn")
        self.cancel_random_button = self.test_id("cancel-random-btn")
        self.countdown_text = page.locator("#countdown-text")
        self.sequence_button = self.test_id("sequence-btn")
        self.sequence_result = self.test_id("sequence-result")
        self.popup_on_load = self.test_id("popup-on-load")
        self.dialogs: List[CapturedDialog] = []

    def _record(self, dialog: Dialog) -> None:
        self.dialogs.append(CapturedDialog(dialog.type, dialog.message, dialog.default_value))

    def accept_next_dialog(self, text: Optional[str] = None) -> None:
        def handler(dialog: Dialog) -> None:
            self._record(dialog)
            if text is None:
                dialog.accept()
            else:
                dialog.accept(text)

        self.page.once("dialog", handler)

    def dismiss_next_dialog(self) -> None:
        def handler(dialog: Dialog) -> None:
            self._record(dialog)
            dialog.dismiss()

        self.page.once("dialog", handler)

    def capture_dialog(
        self, action: Callable[[], None], accept: bool = True, prompt_text: Optional[str] = None
    ) -> CapturedDialog:
        """
        Run ``action`` and answer the dialog it opens.

        The handler is registered before ``action`` runs, so the dialog is
        answered while the click that opened it is still pending.
        """
        if accept:
            self.accept_next_dialog(prompt_text)
        else:
            self.dismiss_next_dialog()
        with self.page.expect_event("dialog"):
            action()
        return self.dialogs[-1]

    def handle_sequence(self, responses: Sequence[DialogResponse]) -> Callable[[], None]:
        """
        Answer consecutive dialogs in order.

        Returns a callable that removes the listener. Dialogs past the end of
        ``responses`` are accepted.
        """
        answers = list(responses)

        def handler(dialog: Dialog) -> None:
            index = len(self.dialogs)
            self._record(dialog)
            response = answers[index] if index < len(answers) else "accept"
            if isinstance(response, tuple):
                dialog.accept(response[1])
            elif response == "dismiss":
                dialog.dismiss()
            else:
                dialog.accept()

        self.dialogs.clear()
        self.page.on("dialog", handler)
        return lambda: self.page.remove_listener("dialog", handler)
