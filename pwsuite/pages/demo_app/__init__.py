"""Page objects for the training demo app."""

from .app_page import (
    DemoAppPage,
    SECTIONS,
    DIALOG_MESSAGES,
    VALID_CREDENTIALS,
    INVALID_CREDENTIALS,
    demo_app_url,
    file_payload,
)
from .inputs import BasicInputsSection, FormControlsSection, DynamicDataSection
from .interactive import InteractiveSection, PopupsSection, CapturedDialog
from .advanced import AsyncSection, AdvancedSection, AuthSection

__all__ = [
    "DemoAppPage",
    "SECTIONS",
    "DIALOG_MESSAGES",
    "VALID_CREDENTIALS",
    "INVALID_CREDENTIALS",
    "demo_app_url",
    "file_payload",
    "BasicInputsSection",
    "FormControlsSection",
    "DynamicDataSection",
    "InteractiveSection",
    "PopupsSection",
    "CapturedDialog",
    "AsyncSection",
    "AdvancedSection",
    "AuthSection",
]
