"""Terminal UI: consent prompts and authorised-app listings."""

from .app_list import ListMode
from .app_list import format_authed_apps
from .consent import ConsentEngine
from .surface import ConsolePromptSurface
from .surface import PromptSurface

__all__ = [
    "ConsentEngine",
    "ConsolePromptSurface",
    "ListMode",
    "PromptSurface",
    "format_authed_apps",
]
