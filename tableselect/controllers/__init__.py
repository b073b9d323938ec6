"""Controllers: UI-agnostic orchestration between widgets and table state."""

from tableselect.controllers.header_interaction_controller import HeaderInteractionController

__all__ = ["HeaderInteractionController"]
