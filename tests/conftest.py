"""
Test fixtures shared across all Gatekeeper tests.
"""

import pytest
from fastapi.testclient import TestClient

from gatekeeper.api.dependencies import get_decision_engine, get_settings
from gatekeeper.config import Settings
from gatekeeper.engine.decision import DecisionEngine
from gatekeeper.llm.enrichment import NoopEnrichment
from gatekeeper.main import app
from gatekeeper.models.analysis_models import AnalyzeRequest


class FakeEnrichment:
    """Scripted enrichment provider; records which operations were called."""

    def __init__(
        self,
        explanation=None,
        description=None,
        code=None,
        tests=None,
        spelling=None,
        available=True,
    ):
        self._explanation = explanation
        self._description = description
        self._code = code
        self._tests = tests or []
        self._spelling = spelling or []
        self._available = available
        self.calls: list[str] = []

    @property
    def available(self) -> bool:
        return self._available

    async def explain(self, decision, risk, diff, files):
        self.calls.append("explain")
        return self._explanation

    async def describe_suggestion(self, code, explanation):
        self.calls.append("describe_suggestion")
        return self._description

    async def classify_suggestion_code(self, decision, risk, diff, files):
        self.calls.append("classify_suggestion_code")
        return self._code

    async def recommend_tests(self, files, diff):
        self.calls.append("recommend_tests")
        return list(self._tests)

    async def find_spelling_errors(self, diff):
        self.calls.append("find_spelling_errors")
        return list(self._spelling)


@pytest.fixture
def fake_enrichment_factory():
    return FakeEnrichment


@pytest.fixture
def safe_java_diff():
    """Small, harmless change to a service class."""
    return """\
diff --git a/src/main/java/com/acme/OrderService.java b/src/main/java/com/acme/OrderService.java
@@ -10,6 +10,10 @@ public class OrderService {
+    public Order findOrder(String id) {
+        return repository.findById(id);
+    }
+
"""


@pytest.fixture
def dangerous_diff():
    """Change that hard-codes a credential and shells out."""
    return """\
+    String password = "hunter2";
+    Runtime.getRuntime().exec("rm -rf /tmp/cache");
"""


@pytest.fixture
def docs_request():
    return AnalyzeRequest(
        prNumber="7",
        author="docs-bot",
        changedFiles=["README.md", "docs/guide.md"],
        diff="+ Fixed a typo in the install section\n",
    )


@pytest.fixture
def noop_engine():
    return DecisionEngine(enrichment=NoopEnrichment())


@pytest.fixture
def client():
    """TestClient with an open endpoint and rule-based output only."""
    app.dependency_overrides[get_settings] = lambda: Settings(
        _env_file=None, gatekeeper_api_key=None, groq_api_key=None
    )
    app.dependency_overrides[get_decision_engine] = lambda: DecisionEngine(NoopEnrichment())
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def secured_client():
    """TestClient whose endpoint requires X-API-KEY: s3cret."""
    app.dependency_overrides[get_settings] = lambda: Settings(
        _env_file=None, gatekeeper_api_key="s3cret", groq_api_key=None
    )
    app.dependency_overrides[get_decision_engine] = lambda: DecisionEngine(NoopEnrichment())
    yield TestClient(app)
    app.dependency_overrides.clear()
