"""Modal, tabs, accordion, drag-and-drop and toast components."""

import re

from playwright.sync_api import expect

from pwsuite.pages.demo_app.interactive import SHOW


ACTIVE = re.compile(r"active")


class TestModal:
    def test_open_modal(self, interactive):
        interactive.open_modal()

    def test_close_modal(self, interactive):
        interactive.open_modal()
        interactive.close_modal()

    def test_confirm_modal(self, interactive):
        interactive.open_modal()
        interactive.confirm_modal()

        expect(interactive.modal).not_to_have_class(SHOW)

    def test_modal_content(self, interactive, page):
        interactive.open_modal()

        expect(page.locator(".modal-content h2")).to_be_visible()
        expect(page.locator(".modal-content p")).to_be_visible()


class TestTabs:
    def test_switch_to_tab_2(self, interactive):
        interactive.select_tab(2)

        expect(interactive.tab_content(2)).to_be_visible()
        expect(interactive.tab_content(1)).not_to_be_visible()

    def test_active_tab_highlighted(self, interactive, page):
        interactive.select_tab(2)

        expect(page.locator('button[data-tab="tab2"]')).to_have_class(ACTIVE)

    def test_navigate_all_tabs(self, interactive):
        for n in (1, 2, 3, 1):
            interactive.select_tab(n)
            expect(interactive.tab_content(n)).to_be_visible()


class TestAccordion:
    def test_expand_and_collapse(self, interactive):
        interactive.toggle_accordion(1)
        expect(interactive.accordion_item(1)).to_have_class(ACTIVE)

        interactive.toggle_accordion(1)
        expect(interactive.accordion_item(1)).not_to_have_class(ACTIVE)

    def test_switch_sections(self, interactive):
        interactive.toggle_accordion(1)
        interactive.toggle_accordion(2)

        expect(interactive.accordion_item(2)).to_have_class(ACTIVE)


class TestDragAndDrop:
    def test_drag_item_to_drop_zone(self, interactive):
        interactive.drag_item_to_drop_zone(1)

        interactive.verify_in_drop_zone(1)

    def test_drag_multiple_items(self, interactive):
        interactive.drag_item_to_drop_zone(1)
        interactive.drag_item_to_drop_zone(2)

        interactive.verify_in_drop_zone(1)
        interactive.verify_in_drop_zone(2)

    def test_items_are_draggable(self, interactive):
        expect(interactive.drag_item(1)).to_have_attribute("draggable", "true")


class TestToast:
    def test_show_toast(self, interactive):
        interactive.show_toast()

        expect(interactive.toast_message).to_be_visible()
        assert interactive.toast_message.text_content()

    def test_toast_auto_hides(self, interactive):
        interactive.show_toast()

        expect(interactive.toast).not_to_have_class(SHOW, timeout=10000)
