"""Shared test fixtures and utilities."""

import logging
import pytest
import pandas as pd
from pathlib import Path

from ..cli.config import Config

NAME_COLUMN = 'Name of The Deceased'

GAZETTE_TEXT = (
    "Gazette Notice No. 4521 dated 05/06/2025\n"
    "NOTICE is given that letters of administration to the estate of Jane Mary Smith, "
    "who died on 12th March 2024, have been applied for.\n"
    "Claims against the estate of Peter Otieno Odhiambo deceased\n"
    "Published by the Registrar of the High Court\n"
)

GAZETTE_CANDIDATES = {
    'jane mary smith',
    'peter otieno odhiambo',
    'the registrar of the high court',
    'gazette notice no',
    'high court',
}


@pytest.fixture
def gazette_text():
    return GAZETTE_TEXT


@pytest.fixture
def records():
    """Spreadsheet rows: two names present in the gazette and one absent."""
    return [
        {'No': 1, NAME_COLUMN: 'Jane Mary Smith', 'County': 'Nairobi'},
        {'No': 2, NAME_COLUMN: 'Zebedee Quartermain', 'County': 'Kisumu'},
        {'No': 3, NAME_COLUMN: 'PETER OTIENO ODHIAMBO alias Peter Odhiambo', 'County': 'Mombasa'},
    ]


@pytest.fixture
def config():
    return Config(approval_date='05/06/2025')


@pytest.fixture
def spreadsheet_file(tmp_path, records) -> Path:
    """Write the sample records to an .xlsx file."""
    path = tmp_path / 'deceased.xlsx'
    pd.DataFrame(records).to_excel(path, index=False, engine='openpyxl')
    return path


@pytest.fixture
def document_file(tmp_path) -> Path:
    """Write the sample gazette text to a plain text document."""
    path = tmp_path / 'gazette.txt'
    path.write_text(GAZETTE_TEXT, encoding='utf-8')
    return path


@pytest.fixture
def restore_logging():
    """Put root logger handlers back after code that reconfigures logging."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def make_pdf(text: str) -> bytes:
    """Build a one-page PDF showing ``text`` in Helvetica."""
    stream = f"BT /F1 12 Tf 72 720 Td ({text}) Tj ET".encode('latin-1')
    objects = [
        b"<< /Type /Catalog /Pages 2 0 R >>",
        b"<< /Type /Pages /Kids [3 0 R] /Count 1 >>",
        b"<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
        b"/Contents 4 0 R /Resources << /Font << /F1 5 0 R >> >> >>",
        b"<< /Length %d >>\nstream\n" % len(stream) + stream + b"\nendstream",
        b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
    ]

    out = b"%PDF-1.4\n"
    offsets = []
    for number, body in enumerate(objects, 1):
        offsets.append(len(out))
        out += b"%d 0 obj\n" % number + body + b"\nendobj\n"

    xref_offset = len(out)
    out += b"xref\n0 %d\n0000000000 65535 f \n" % (len(objects) + 1)
    for offset in offsets:
        out += b"%010d 00000 n \n" % offset
    out += b"trailer\n<< /Size %d /Root 1 0 R >>\nstartxref\n%d\n%%%%EOF\n" % (len(objects) + 1, xref_offset)
    return out


@pytest.fixture
def pdf_bytes() -> bytes:
    return make_pdf("to the estate of Jane Mary Smith, who died on 12th March 2024")
