import pytest
import requests

from catalog import MINIGAMES, SKILLS


def make_response(status_code=200, text=''):
    response = requests.Response()
    response.status_code = status_code
    response._content = text.encode('utf-8')
    response.encoding = 'utf-8'
    response.url = 'https://hiscore.test/index_lite.ws'
    return response


class FakeHiscore:
    """Stands in for requests.get, returning a canned hiscore response."""

    def __init__(self):
        self.calls = []
        self.response = make_response()
        self.error = None

    def respond(self, text='', status_code=200):
        self.response = make_response(status_code, text)

    def get(self, url, **kwargs):
        self.calls.append((url, kwargs))
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def hiscore(monkeypatch):
    fake = FakeHiscore()
    monkeypatch.setattr('stats_fetcher.requests.get', fake.get)
    return fake


@pytest.fixture
def full_csv():
    """A complete hiscore response: every skill, the delimiter block, every minigame.
    Every third minigame has no data."""
    lines = [f'{i + 1},{i + 10},{i * 1000}' for i in range(len(SKILLS))]
    lines += ['-1,-1'] * 3
    for i in range(len(MINIGAMES)):
        lines.append('-1,-1' if i % 3 == 0 else f'{500 + i},{i}')
    return '\n'.join(lines) + '\n'
