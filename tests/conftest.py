import pytest
import requests
from county_choropleth.tests import sample_data

EDUCATION_URL = 'https://example.test/for_user_education.json'
COUNTIES_URL = 'https://example.test/counties.json'

class FakeResponse:
    def __init__(self, payload=None, status_code=200, invalid_json=False):
        self.payload = payload
        self.status_code = status_code
        self.invalid_json = invalid_json

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(f"{self.status_code} Error")

    def json(self):
        if self.invalid_json:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self.payload

@pytest.fixture
def responses():
    return {
        EDUCATION_URL: FakeResponse(sample_data.education()),
        COUNTIES_URL: FakeResponse(sample_data.topology()),
    }

@pytest.fixture
def fake_get(monkeypatch, responses):
    calls = []

    def get(url, timeout=None):
        calls.append((url, timeout))
        response = responses[url]
        if isinstance(response, Exception):
            raise response
        return response

    monkeypatch.setattr('county_choropleth.loader.requests.get', get)
    return calls
