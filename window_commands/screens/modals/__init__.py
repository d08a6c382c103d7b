"""Modal dialogs."""

from .help_modal import HelpModal
from .prompt_modal import PromptModal

__all__ = [
    "HelpModal",
    "PromptModal",
]
