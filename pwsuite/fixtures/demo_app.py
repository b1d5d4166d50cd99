"""Demo app fixtures: the app shell and one fixture per opened section."""

import pytest
from playwright.sync_api import Page

from ..pages.demo_app import (
    AdvancedSection,
    AsyncSection,
    AuthSection,
    BasicInputsSection,
    DemoAppPage,
    DynamicDataSection,
    FormControlsSection,
    InteractiveSection,
    PopupsSection,
)


@pytest.fixture
def demo_app(page: Page) -> DemoAppPage:
    app = DemoAppPage(page)
    app.open()
    return app


def _section(app: DemoAppPage, section_cls):
    app.open_section(section_cls.KEY)
    return section_cls(app.page)


@pytest.fixture
def basic_inputs(demo_app: DemoAppPage) -> BasicInputsSection:
    return _section(demo_app, BasicInputsSection)


@pytest.fixture
def form_controls(demo_app: DemoAppPage) -> FormControlsSection:
    return _section(demo_app, FormControlsSection)


@pytest.fixture
def dynamic_data(demo_app: DemoAppPage) -> DynamicDataSection:
    return _section(demo_app, DynamicDataSection)


@pytest.fixture
def interactive(demo_app: DemoAppPage) -> InteractiveSection:
    return _section(demo_app, InteractiveSection)


@pytest.fixture
def popups(demo_app: DemoAppPage) -> PopupsSection:
    return _section(demo_app, PopupsSection)


@pytest.fixture
def async_section(demo_app: DemoAppPage) -> AsyncSection:
    return _section(demo_app, AsyncSection)


@pytest.fixture
def advanced(demo_app: DemoAppPage) -> AdvancedSection:
    return _section(demo_app, AdvancedSection)


@pytest.fixture
def auth_section(demo_app: DemoAppPage) -> AuthSection:
    return _section(demo_app, AuthSection)
