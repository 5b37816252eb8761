"""
Shared test fixtures and sample data for mt940-tags tests.

Sample tag data lives here as module-level constants so that unit and
integration tests agree on what "valid data" looks like for each tag.
"""

import pytest

from mt940_tags import TagFactory

# ---------------------------------------------------------------------------
# One valid sample per registered tag id: (tag_id, sub_id, data)
# ---------------------------------------------------------------------------
VALID_SAMPLES = {
    "20": ("20", "", "STMT-2023-0123"),
    "21": ("21", "", "NONREF"),
    "25": ("25", "", "DE89370400440532013000"),
    "28": ("28", "C", "00012/001"),
    "34F": ("34", "F", "EURD250,"),
    "13D": ("13", "D", "2301231530+0100"),
    "NS": ("NS", "", "22Bank specific text"),
    "60": ("60", "F", "C230122EUR1000,00"),
    "62": ("62", "F", "C230123EUR850,00"),
    "90D": ("90", "D", "3EUR15000"),
    "90C": ("90", "C", "2EUR7500"),
    "61": ("61", "", "2301230123D150,00NTRFNONREF//B123456789\nCard payment"),
    "86": ("86", "", "?20Invoice 4711\n?32ACME GmbH"),
    "64": ("64", "", "C230123EUR850,00"),
    "65": ("65", "", "C230124EUR850,00"),
    "MB": ("MB", "", "{1:F01BANKDEFFAXXX0000000000}{2:I940BANKDEFFXXXXN}{4:"),
    "13": ("13", "", "2301231530"),
}

# Field names every record of a tag id must carry
EXPECTED_FIELDS = {
    "20": {"transactionReference"},
    "21": {"relatedReference"},
    "25": {"accountIdentification"},
    "28": {"statementNumber", "sequenceNumber", "sectionNumber"},
    "34F": {"currency", "dcMark", "amount"},
    "13D": {"dateTimestamp"},
    "NS": {"nonSwift"},
    "60": {"date", "currency", "amount"},
    "62": {"date", "currency", "amount"},
    "90D": {"number", "currency", "amount"},
    "90C": {"number", "currency", "amount"},
    "61": {
        "date", "entryDate", "fundsCode", "amount", "isReversal",
        "transactionType", "reference", "bankReference", "extraDetails",
        "creditDebitIndicator",
    },
    "86": {"transactionDetails"},
    "64": {"date", "currency", "amount"},
    "65": {"date", "currency", "amount"},
    "MB": {"1", "2", "4"},
    "13": {"dateTimestamp"},
}


@pytest.fixture(scope="session")
def factory() -> TagFactory:
    """A factory over the packaged grammar with default config."""
    return TagFactory()
