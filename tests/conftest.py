import shutil
from pathlib import Path

import pytest

from src.app_shell.context import IndexContext
from src.rules.loader import load_rules
from src.rules.models import Rules

PROJECT_ROOT = Path(__file__).parent.parent
FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def rules_path() -> Path:
    return PROJECT_ROOT / "rules.yaml"


@pytest.fixture
def rules(rules_path: Path) -> Rules:
    # Load the REAL rules from project root
    return load_rules(rules_path)


@pytest.fixture
def index_root(tmp_path: Path) -> Path:
    """
    Copy of the generated implementors fixtures in a temp dir, so tests can
    add or break files freely.
    """
    root = tmp_path / "implementors"
    shutil.copytree(FIXTURES_DIR / "implementors", root)
    return root


@pytest.fixture
def index_ctx(index_root: Path, rules: Rules) -> IndexContext:
    return IndexContext.create(index_root, rules)
