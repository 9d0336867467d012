"""Ordered textual substitution rules for alias fallback."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RewriteRule:
    pattern: str
    replacement: str

    def apply(self, alias: str) -> str:
        return alias.replace(self.pattern, self.replacement)


class RewriteRules:
    """A fixed sequence of replace-all rules.

    Each rule runs once, in declared order, over the output of the
    previous one.
    """

    def __init__(self, rules: list[tuple[str, str]] | None = None):
        self._rules = tuple(RewriteRule(p, r) for p, r in (rules or []))
        for rule in self._rules:
            if not rule.pattern:
                raise ValueError("Rewrite rule pattern must not be empty")

    def __len__(self) -> int:
        return len(self._rules)

    def __iter__(self):
        return iter(self._rules)

    def apply(self, alias: str) -> str:
        for rule in self._rules:
            alias = rule.apply(alias)
        return alias

    def find_cycles(self) -> list[tuple[int, int]]:
        """Return (i, j) pairs where rule j can re-introduce rule i's pattern.

        Only rules at or after i count: their output is never revisited
        by rule i during one pass, so a second pass would change it again.
        An empty result means applying the rules twice gives the same
        string as applying them once, barring patterns that straddle a
        replacement boundary.
        """
        cycles = []
        for i, earlier in enumerate(self._rules):
            for j in range(i, len(self._rules)):
                if earlier.pattern in self._rules[j].replacement:
                    cycles.append((i, j))
        return cycles
