"""
Pytest configuration and global fixtures.
"""
import sys
from pathlib import Path

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from core.constants import HIERARCHY_LEVELS
from core.models import NodeMetadata, Row
from data.db_models import Base
from utils.id_utils import SequentialIdGenerator

L1, L2, L3, L4, L5 = HIERARCHY_LEVELS


@pytest.fixture(scope="session")
def test_db_engine():
    """Create in-memory SQLite engine for tests."""
    engine = create_engine("sqlite:///:memory:", echo=False)
    Base.metadata.create_all(engine)
    yield engine
    Base.metadata.drop_all(engine)


@pytest.fixture
def test_db_session(test_db_engine):
    """Create fresh database session for each test."""
    Session = sessionmaker(bind=test_db_engine)
    session = Session()

    yield session

    # Rollback any uncommitted changes and close
    session.rollback()
    session.close()


@pytest.fixture
def temp_dir(tmp_path):
    """Provide temporary directory for test files."""
    return tmp_path


@pytest.fixture
def id_generator():
    """Deterministic node ids: node-0001, node-0002, ..."""
    return SequentialIdGenerator()


@pytest.fixture
def make_row():
    """Factory building a Row from level values and metadata keywords."""
    def _make_row(*values, **metadata):
        level_values = {level: value for level, value in zip(HIERARCHY_LEVELS, values)}
        return Row(values=level_values, metadata=NodeMetadata(**metadata))
    return _make_row


@pytest.fixture
def sample_records():
    """Spreadsheet records with shared prefixes, a gap and a blank row."""
    return [
        {
            L1: 'Finance', L2: 'Accounting', L3: 'General Ledger',
            'ID': 'J58', 'Business Role': 'GL Accountant', 'Materiality': 3,
            'Description': 'Post journal entries',
        },
        {
            L1: 'Finance', L2: 'Accounting', L3: 'Asset Accounting',
            'ID': '1GF', 'Materiality': 2, 'Description': 'Manage fixed assets',
        },
        {
            L1: 'Finance', L2: 'Controlling', L3: 'General Ledger',
            'ID': 'J59', 'Description': 'Overhead view',
        },
        {
            L1: 'Sourcing', L3: 'Purchase Requisition',
            'ID': '18J', 'Business stakeholders': 'Procurement',
        },
        {},
    ]


@pytest.fixture
def sample_excel_path(temp_dir, sample_records):
    """Write the sample records to an .xlsx file."""
    import pandas as pd

    columns = list(HIERARCHY_LEVELS) + [
        'ID', 'Business Role', 'Fiori app UX recommendations',
        'Insights (Indicative)', 'Business stakeholders', 'Materiality', 'Description',
    ]
    frame = pd.DataFrame(sample_records, columns=columns)
    path = temp_dir / "taxonomy.xlsx"
    frame.to_excel(path, index=False)
    return path
