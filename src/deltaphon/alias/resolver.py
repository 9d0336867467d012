"""Check-then-rewrite lookup against a voicebank catalog."""

from typing import Iterable

from deltaphon.alias.catalog import VoicebankCatalog
from deltaphon.language.rewrite import RewriteRules


class AliasResolver:
    """Decides which spelling of a candidate alias the voicebank has."""

    def __init__(self, catalog: VoicebankCatalog, rules: RewriteRules | None = None):
        self.catalog = catalog
        self.rules = rules if rules is not None else RewriteRules()

    def available(self, alias: str, tone: int) -> bool:
        return self.catalog.lookup(alias, tone)

    def rewrite(self, alias: str) -> str:
        return self.rules.apply(alias)

    def resolve(self, candidates: str | Iterable[str], tone: int) -> str | None:
        """Return the first available candidate or rewritten candidate.

        Candidates are tried in the given priority order; each one is
        checked as written, then in its rewritten form.
        """
        if isinstance(candidates, str):
            candidates = [candidates]
        for candidate in candidates:
            if self.available(candidate, tone):
                return candidate
            rewritten = self.rewrite(candidate)
            if rewritten != candidate and self.available(rewritten, tone):
                return rewritten
        return None
