# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-18
# Description: QuoteHealthService.py
# -----------------------------------------------------------------------------
from dataclasses import dataclass

from health.TestRunner import TestRunner
from api.schemas.health import CheckSummary, DeepHealthResponse


@dataclass
class QuoteHealthService:
    """
    Wraps TestRunner and returns a DeepHealthResponse for the API layer.
    """

    test_runner: TestRunner

    def deep_health(self, check_class: bool = False) -> DeepHealthResponse:
        results = self.test_runner.run_all(check_class=check_class)

        total = len(results)
        passed = sum(1 for ok in results.values() if ok)
        failed = total - passed

        return DeepHealthResponse(
            status="ok" if failed == 0 else "error",
            class_name=self.test_runner.class_name,
            checks=results,
            summary=CheckSummary(total=total, passed=passed, failed=failed),
        )
