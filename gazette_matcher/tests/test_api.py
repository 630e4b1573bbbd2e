"""Tests for the HTTP matching service."""
import logging

import pytest
from fastapi.testclient import TestClient

from ..api import create_app
from ..cli.config import Config
from ..matcher import GazetteMatcher


@pytest.fixture
def client(config):
    return TestClient(create_app(config))


@pytest.fixture
def uploads(spreadsheet_file, document_file):
    return {
        'excel': ('deceased.xlsx', spreadsheet_file.read_bytes(),
                  'application/vnd.openxmlformats-officedocument.spreadsheetml.sheet'),
        'pdf': ('gazette.txt', document_file.read_bytes(), 'text/plain'),
    }


def test_health(client):
    r = client.get('/health')
    assert r.status_code == 200
    assert r.json() == {'status': 'ok'}


def test_match_returns_matches(client, uploads):
    r = client.post('/match', files=uploads)

    assert r.status_code == 200
    body = r.json()
    assert [m['gazetteMatch'] for m in body['matched']] == ['jane mary smith', 'peter otieno odhiambo']
    assert body['summary']['candidates'] == 5


def test_match_threshold_and_mode_from_query(client, uploads):
    r = client.post('/match?threshold=90&mode=annotate', files=uploads)

    assert r.status_code == 200
    body = r.json()
    assert len(body['matched']) == 3
    assert body['summary']['threshold'] == 90
    assert body['matched'][0]['approvalDate'] == '05/06/2025'


def test_match_missing_file_returns_400(client, uploads):
    r = client.post('/match', files={'excel': uploads['excel']})
    assert r.status_code == 400
    assert r.json() == {'error': 'Both Excel and PDF files are required.'}


def test_match_bad_threshold_returns_400(client, uploads):
    r = client.post('/match?threshold=abc', files=uploads)
    assert r.status_code == 400
    assert 'threshold' in r.json()['error']


def test_match_unreadable_spreadsheet_returns_400(client, uploads):
    files = dict(uploads, excel=('names.docx', b'nope', 'application/octet-stream'))
    r = client.post('/match', files=files)
    assert r.status_code == 400
    assert 'Unsupported spreadsheet type' in r.json()['error']


def test_unexpected_error_hides_details_in_production(config, uploads, monkeypatch):
    def boom(self, *args, **kwargs):
        raise RuntimeError('disk on fire')

    monkeypatch.setattr(GazetteMatcher, 'match_files', boom)
    client = TestClient(create_app(config), raise_server_exceptions=False)

    r = client.post('/match', files=uploads)
    assert r.status_code == 500
    assert r.json() == {'error': 'Something went wrong. Please try again later.'}


def test_unexpected_error_details_in_development(uploads, monkeypatch):
    def boom(self, *args, **kwargs):
        raise RuntimeError('disk on fire')

    monkeypatch.setattr(GazetteMatcher, 'match_files', boom)
    client = TestClient(create_app(Config(app_env='development')), raise_server_exceptions=False)

    r = client.post('/match', files=uploads)
    assert r.status_code == 500
    assert r.json()['details'] == 'disk on fire'


def test_match_pdf_upload_without_extension(client, uploads, pdf_bytes):
    files = dict(uploads, pdf=('gazette', pdf_bytes, 'application/octet-stream'))
    r = client.post('/match', files=files)

    assert r.status_code == 200
    body = r.json()
    assert [m['gazetteMatch'] for m in body['matched']] == ['jane mary smith']
    assert body['summary']['candidates'] >= 1


def test_unexpected_error_is_logged_with_status(config, uploads, monkeypatch, caplog):
    def boom(self, *args, **kwargs):
        raise RuntimeError('disk on fire')

    monkeypatch.setattr(GazetteMatcher, 'match_files', boom)
    client = TestClient(create_app(config), raise_server_exceptions=False)

    with caplog.at_level(logging.INFO, logger='gazette_matcher.api'):
        r = client.post('/match', files=uploads)

    assert r.status_code == 500
    assert any(
        rec.levelno == logging.ERROR and 'POST /match status=500' in rec.getMessage()
        for rec in caplog.records
    )
