"""Accessibility smoke check built on axe-core running inside the page."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Iterable, Optional

from . import constants
from .errors import AccessibilityViolationError

if TYPE_CHECKING:
    from playwright.sync_api import Page

    from .config import CheckSettings

logger = logging.getLogger(__name__)

AXE_RUN_SCRIPT = """
async (tags) => {
    const options = tags.length ? { runOnly: { type: 'tag', values: tags } } : {};
    const results = await axe.run(document, options);
    return {
        url: results.url,
        violations: results.violations,
        passes: results.passes.length,
        incomplete: results.incomplete.length,
    };
}
"""


@dataclass
class AxeResults:
    """Outcome of one axe run. Violation records are kept as axe returns them."""

    url: str
    violations: list[dict[str, Any]] = field(default_factory=list)
    passes: int = 0
    incomplete: int = 0


class AxeScanner:
    """Configure and run axe-core against the page's current document."""

    def __init__(self, page: Page, script_url: str = constants.AXE_SCRIPT_URL) -> None:
        self.page = page
        self.script_url = script_url
        self.tags: list[str] = []

    def with_tags(self, tags: Iterable[str]) -> AxeScanner:
        """Restrict the run to rules carrying any of ``tags``."""
        self.tags = list(tags)
        return self

    def inject(self) -> None:
        """Load axe-core into the page unless it is already there."""
        if self.page.evaluate("() => typeof window.axe !== 'undefined'"):
            return
        self.page.add_script_tag(url=self.script_url)

    def analyze(self) -> AxeResults:
        self.inject()
        raw = self.page.evaluate(AXE_RUN_SCRIPT, self.tags)
        results = AxeResults(
            url=raw.get("url") or self.page.url,
            violations=list(raw.get("violations") or []),
            passes=raw.get("passes", 0),
            incomplete=raw.get("incomplete", 0),
        )
        logger.info(
            f"axe scanned {results.url} with tags {self.tags}: "
            f"{len(results.violations)} violation(s), {results.passes} passing rule(s)"
        )
        return results


def run_smoke_check(
    page: Page, settings: CheckSettings, url: Optional[str] = None
) -> AxeResults:
    """Open ``url`` (the configured target by default) and scan it."""
    target = url or settings.a11y_target_url
    page.goto(target, timeout=settings.timeout_ms)
    return (
        AxeScanner(page, script_url=settings.axe_script_url)
        .with_tags(settings.a11y_tags)
        .analyze()
    )


def format_violations(violations: Iterable[dict[str, Any]]) -> str:
    """Render violations as a readable report for assertion messages."""
    lines = []
    for violation in violations:
        lines.append(
            f"[{violation.get('impact') or 'unknown'}] {violation.get('id')}: "
            f"{violation.get('help')}"
        )
        if violation.get("helpUrl"):
            lines.append(f"  {violation['helpUrl']}")
        for node in violation.get("nodes", []):
            target = ", ".join(str(t) for t in node.get("target", []))
            lines.append(f"  - {target}")
    return "\n".join(lines)


def assert_no_violations(results: AxeResults) -> None:
    if results.violations:
        report = format_violations(results.violations)
        logger.warning(f"Accessibility violations on {results.url}:\n{report}")
        raise AccessibilityViolationError(
            results.violations,
            f"{len(results.violations)} accessibility violation(s) on {results.url}:\n{report}",
        )
