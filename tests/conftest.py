import pytest
import requests

from app import create_app
from spellgate.grammar import TextGearsClient
from spellgate.settings import CookieProps, EnvironmentConfig, NodeEnv
from spellgate.symspell import SymSpellCorrector

WORDS = ["hello", "world", "spelling", "check", "quick", "brown", "fox"]


class FakeResponse:
    def __init__(self, payload=None, status_code=200, text=None):
        self._payload = payload
        self.status_code = status_code
        self.text = text

    def json(self):
        if self.text is not None:
            raise requests.JSONDecodeError("Expecting value", self.text, 0)
        return self._payload


class FakeSession:
    """Stands in for requests.Session; records every outbound POST."""

    def __init__(self, response=None, exc=None):
        self.response = response or FakeResponse(
            {"status": True, "response": {"result": True, "errors": []}}
        )
        self.exc = exc
        self.calls = []

    def post(self, url, data=None, timeout=None):
        self.calls.append({"url": url, "data": data, "timeout": timeout})
        if self.exc is not None:
            raise self.exc
        return self.response


@pytest.fixture
def config():
    return EnvironmentConfig(
        node_env=NodeEnv.TEST,
        cookie=CookieProps(key="session", secret="s3cret"),
        textgears_api_key="test-key",
    )


@pytest.fixture
def session():
    return FakeSession()


@pytest.fixture
def grammar(session):
    return TextGearsClient("test-key", timeout=2.5, session=session)


@pytest.fixture
def speller():
    s = SymSpellCorrector()
    s.train(WORDS, "en")
    return s


@pytest.fixture
def app(config, grammar, speller):
    return create_app(config, grammar=grammar, speller=speller)


@pytest.fixture
def client(app):
    return app.test_client()
