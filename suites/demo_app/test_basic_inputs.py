"""Text inputs, buttons, field states and keyboard interaction."""

from playwright.sync_api import expect


TEXT = "Hello Playwright"


class TestTextInputs:
    def test_fill_text(self, basic_inputs):
        basic_inputs.text_input.fill(TEXT)

        expect(basic_inputs.text_input).to_have_value(TEXT)

    def test_clear_text(self, basic_inputs):
        basic_inputs.text_input.fill("Some text to clear")
        expect(basic_inputs.text_input).to_have_value("Some text to clear")

        basic_inputs.text_input.clear()

        expect(basic_inputs.text_input).to_have_value("")

    def test_placeholder(self, basic_inputs):
        expect(basic_inputs.text_input).to_have_attribute("placeholder", "Enter text here")

    def test_type_sequentially(self, basic_inputs):
        basic_inputs.text_input.press_sequentially("Typing slowly", delay=50)

        expect(basic_inputs.text_input).to_have_value("Typing slowly")


class TestButtons:
    def test_primary_button_shows_result(self, basic_inputs):
        basic_inputs.submit_text(TEXT)

        basic_inputs.verify_result_contains(TEXT)

    def test_secondary_button(self, basic_inputs):
        basic_inputs.text_input.fill("Test value")
        basic_inputs.click_secondary()

        basic_inputs.verify_result_contains("Secondary")

    def test_double_click(self, basic_inputs):
        basic_inputs.double_click_submit("Double click test")

        basic_inputs.verify_result_contains("Double click test")


class TestFieldStates:
    def test_disabled_field(self, basic_inputs):
        expect(basic_inputs.disabled_input).to_be_disabled()
        expect(basic_inputs.disabled_input).to_have_value("Cannot edit")

    def test_readonly_field(self, basic_inputs):
        expect(basic_inputs.readonly_input).to_have_attribute("readonly", "")
        expect(basic_inputs.readonly_input).to_have_value("Read only value")

    def test_readonly_is_not_disabled(self, basic_inputs):
        expect(basic_inputs.disabled_input).to_be_disabled()
        expect(basic_inputs.readonly_input).not_to_be_disabled()


class TestEdgeCases:
    def test_special_characters(self, basic_inputs):
        text = "!@#$%^&*()_+-=[]{}|;:,.<>?"
        basic_inputs.submit_text(text)

        basic_inputs.verify_result_contains(text)

    def test_unicode(self, basic_inputs):
        text = "日本語 émojis 🎭"
        basic_inputs.text_input.fill(text)

        expect(basic_inputs.text_input).to_have_value(text)


class TestKeyboard:
    def test_enter_submits(self, basic_inputs):
        basic_inputs.submit_with_enter("Enter key test")

        basic_inputs.verify_result_contains("Enter key test")

    def test_tab_moves_focus(self, basic_inputs, page):
        basic_inputs.text_input.focus()
        expect(basic_inputs.text_input).to_be_focused()

        page.keyboard.press("Tab")

        expect(basic_inputs.text_input).not_to_be_focused()

    def test_select_all_and_replace(self, basic_inputs):
        basic_inputs.text_input.fill("Original text")

        basic_inputs.text_input.press("ControlOrMeta+a")
        basic_inputs.text_input.press_sequentially("Replaced text")

        expect(basic_inputs.text_input).to_have_value("Replaced text")
