from pathlib import Path

import pytest

from src.adapters.member_source import InMemoryMemberSource
from src.app_shell.context import ServiceContext
from src.components.members import MemberQueryService
from src.rules.loader import load_rules

PROJECT_ROOT = Path(__file__).parent.parent


@pytest.fixture
def rules_path() -> Path:
    """Path to the project's rules.yaml."""
    return PROJECT_ROOT / "rules.yaml"


@pytest.fixture
def seed_source() -> InMemoryMemberSource:
    return InMemoryMemberSource()


@pytest.fixture
def seed_service(seed_source: InMemoryMemberSource) -> MemberQueryService:
    """Query service over the full seed directory."""
    return MemberQueryService(seed_source)


@pytest.fixture
def test_ctx(rules_path: Path) -> ServiceContext:
    """
    Creates a full ServiceContext from the real rules file and the seed members.
    """
    rules = load_rules(rules_path)
    return ServiceContext.create(rules)
