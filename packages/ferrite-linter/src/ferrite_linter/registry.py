import logging
from typing import Iterable, Protocol

from ferrite_pattern import SyntaxNode

from .context import LintContext

logger = logging.getLogger(__name__)


class LintRule(Protocol):
    """Protocol for a lint rule"""

    rule_id: str
    category: str

    def check_expr(self, cx: LintContext, node: SyntaxNode) -> None: ...


class RuleRegistry:
    """Registry for managing and loading lint rules.

    Built explicitly at startup and passed to the engine; there is no
    process-wide instance.
    """

    def __init__(self, load_builtins: bool = True):
        self._rules: list[LintRule] = []
        if load_builtins:
            self._load_builtin_rules()

    def register(self, rule: LintRule):
        if any(r.rule_id == rule.rule_id for r in self._rules):
            raise ValueError(f"rule {rule.rule_id!r} is already registered")
        self._rules.append(rule)

    def get_all_rules(self) -> list[LintRule]:
        return list(self._rules)

    def get_rule(self, rule_id: str) -> LintRule | None:
        for rule in self._rules:
            if rule.rule_id == rule_id:
                return rule
        return None

    def get_enabled_rules(
        self,
        select: Iterable[str] | None = None,
        ignore: Iterable[str] | None = None,
    ) -> list[LintRule]:
        """Rules picked by `select` and not dropped by `ignore`.

        Entries name a rule id or a category; "all" names every rule.
        """
        select = list(select) if select else ["all"]
        ignore = list(ignore or [])
        known = {"all"} | {r.rule_id for r in self._rules} | {r.category for r in self._rules}
        for entry in select + ignore:
            if entry not in known:
                logger.warning("unknown rule or category %r", entry)

        def named(rule: LintRule, entries: list[str]) -> bool:
            return any(e in ("all", rule.rule_id, rule.category) for e in entries)

        return [r for r in self._rules if named(r, select) and not named(r, ignore)]

    def _load_builtin_rules(self):
        from .rules.collapsible_if import CollapsibleIfRule
        from .rules.needless_continue import NeedlessContinueRule

        self.register(CollapsibleIfRule())
        self.register(NeedlessContinueRule())
