"""
Loading indicator hook.

API objects call ``Loading.show`` right before a request when the caller
asked for it, and ``Loading.clear`` once the request has finished. The
default indicator only logs. Front ends pass a callback to render it.
"""

import enum
import logging
from typing import Callable, Optional

logger = logging.getLogger(__name__)


class LoadingKind(str, enum.Enum):
    """Kind of operation the indicator is shown for."""

    GETTING = "getting"
    ADDING = "adding"
    UPDATING = "updating"
    DELETING = "deleting"
    RESTORING = "restoring"
    PURGING = "purging"
    ERASING = "erasing"
    EXPORTING = "exporting"
    IMPORTING = "importing"
    SUBMITTING = "submitting"

    @property
    def default_message(self) -> str:
        return f"{self.value.capitalize()} data..."


LoadingCallback = Callable[[LoadingKind, Optional[str]], None]


class Loading:
    """Injectable loading indicator."""

    def __init__(self, callback: Optional[LoadingCallback] = None):
        self.callback = callback
        self.active: Optional[LoadingKind] = None

    def show(self, kind: LoadingKind, message: Optional[str] = None) -> None:
        self.active = kind
        logger.debug("Loading: %s", message or kind.default_message)
        if self.callback is not None:
            self.callback(kind, message)

    def clear(self) -> None:
        self.active = None
