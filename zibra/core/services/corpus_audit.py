"""Launch-readiness audit of the response template corpus."""

import logging
import re
from dataclasses import dataclass, field

from ..domain import Corpus, ResponseTemplate
from ..domain.document import DIRECTOR

logger = logging.getLogger(__name__)

LEGAL_PROMISE_WORDS = ("guarantee", "promise", "ensure")
NEGATION_PATTERN = re.compile(r"(?:cannot|no|not|does not|or)\s+$", re.IGNORECASE)
IMPERATIVE_PATTERN = re.compile(r"(?:^|\.\s*|\n\s*\d*\.?\s*|to\s+|s\s+)$")
AGGRESSIVE_PHRASES = (
    "demand",
    "threaten",
    "must immediately",
    "you will be fired",
    "punishment",
)
FINANCIAL_PATTERNS = (
    re.compile(r"\d+%\s*commission"),
    re.compile(r"\$\d+"),
    re.compile(r"NGN\s*\d+"),
    re.compile(r"exact\s+commission", re.IGNORECASE),
)


@dataclass
class CheckResult:
    """Outcome of a single audit check."""

    name: str
    passed: bool
    details: list[str] = field(default_factory=list)


@dataclass
class AuditReport:
    """All check results for one corpus."""

    checks: list[CheckResult]

    @property
    def passed(self) -> bool:
        return all(check.passed for check in self.checks)

    @property
    def failures(self) -> list[CheckResult]:
        return [check for check in self.checks if not check.passed]


class CorpusAuditor:
    """Runs integrity and content-safety checks over response templates."""

    def run(self, templates: Corpus[ResponseTemplate]) -> AuditReport:
        checks = [
            self.check_catch_all(templates),
            self.check_keywords(templates),
            self.check_legal_language(templates),
            self.check_director_tone(templates),
            self.check_financial_exposure(templates),
        ]
        report = AuditReport(checks=checks)
        logger.info(
            "Audited %d templates: %d/%d checks passed",
            len(templates),
            len(checks) - len(report.failures),
            len(checks),
        )
        return report

    def check_catch_all(self, templates: Corpus[ResponseTemplate]) -> CheckResult:
        catch_alls = templates.catch_alls
        if len(catch_alls) == 1:
            return CheckResult("Catch-all Template", True)
        if not catch_alls:
            return CheckResult("Catch-all Template", False, ["No catch-all template defined"])
        ids = ", ".join(t.id for t in catch_alls)
        return CheckResult(
            "Catch-all Template", False, [f"Multiple catch-all templates defined: {ids}"]
        )

    def check_keywords(self, templates: Corpus[ResponseTemplate]) -> CheckResult:
        details = []
        for template in templates:
            for keyword in template.keywords:
                if not keyword.strip():
                    details.append(f"Template {template.id} has a blank keyword")
                elif keyword != keyword.strip():
                    details.append(f'Template {template.id} keyword "{keyword}" has padding')
        return CheckResult("Template Keywords", not details, details)

    def check_legal_language(self, templates: Corpus[ResponseTemplate]) -> CheckResult:
        details = []
        for template in templates:
            response = template.content.lower()
            for word in LEGAL_PROMISE_WORDS:
                search_from = 0
                while True:
                    index = response.find(word, search_from)
                    if index == -1:
                        break
                    search_from = index + len(word)
                    preceding = response[max(0, index - 50) : index]
                    if NEGATION_PATTERN.search(preceding) or IMPERATIVE_PATTERN.search(preceding):
                        continue
                    details.append(
                        f'Template {template.id} contains "{word}" without proper negation'
                    )
        return CheckResult("Legal Language", not details, details)

    def check_director_tone(self, templates: Corpus[ResponseTemplate]) -> CheckResult:
        details = []
        for template in templates:
            if DIRECTOR not in template.scope:
                continue
            response = template.content.lower()
            for phrase in AGGRESSIVE_PHRASES:
                if phrase in response:
                    details.append(
                        f'Director template {template.id} contains aggressive language: "{phrase}"'
                    )
        return CheckResult("Director Tone", not details, details)

    def check_financial_exposure(self, templates: Corpus[ResponseTemplate]) -> CheckResult:
        details = []
        for template in templates:
            for pattern in FINANCIAL_PATTERNS:
                if pattern.search(template.content):
                    details.append(
                        f"Template {template.id} exposes financial data: {pattern.pattern}"
                    )
        return CheckResult("Financial Exposure", not details, details)
