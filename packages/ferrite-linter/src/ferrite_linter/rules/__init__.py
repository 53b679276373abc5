from .base import BaseRule
from .collapsible_if import CollapsibleIfRule
from .needless_continue import NeedlessContinueRule

__all__ = ["BaseRule", "CollapsibleIfRule", "NeedlessContinueRule"]
