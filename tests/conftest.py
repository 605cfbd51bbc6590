import os
import tempfile
from collections.abc import Sequence

import pytest

# Keep the JSON-lines search log out of the working tree during tests.
os.environ.setdefault("REFSEARCH_LOGS_DIR", tempfile.mkdtemp(prefix="refsearch-logs-"))


def pytest_addoption(parser: pytest.Parser) -> None:
    parser.addoption(
        "--run-integration",
        action="store_true",
        default=False,
        help="Run integration tests that require a live reference-data API.",
    )


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers", "integration: requires runtime services or user configuration"
    )
    config.addinivalue_line("markers", "property: property-based deterministic tests")


def pytest_collection_modifyitems(
    config: pytest.Config,
    items: Sequence[pytest.Item],
) -> None:
    run_integration = config.getoption("--run-integration")
    skip_integration = pytest.mark.skip(
        reason="integration is opt-in; rerun with --run-integration"
    )

    for item in items:
        if item.get_closest_marker("integration") and not run_integration:
            item.add_marker(skip_integration)


@pytest.fixture
def scheduler():
    from fakes import FakeScheduler

    return FakeScheduler()
