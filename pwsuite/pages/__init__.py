"""Page objects for the applications under test."""

from .base import BasePage

__all__ = ["BasePage"]
