from pathlib import Path

import pytest
import requests

from beesolver.datasets import Dictionary, DictionaryError, fetch_dictionary, load_dictionary
from beesolver.datasets import dictionary as dictionary_module


RAW = ["FACT", "", "  CAFE  ", "ace", "ACE", "Fact", "FA-CT", "TACIT", "FACT", "QUIZ1"]


class _FakeResponse:
    def __init__(self, text="", status=200):
        self.text = text
        self.status_code = status

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")


def test_from_lines_filters_and_dedupes():
    d = Dictionary.from_lines(RAW)
    assert d.words == frozenset({"FACT", "CAFE", "TACIT"})
    assert len(d) == 3 and "CAFE" in d and "ACE" not in d


def test_load_dictionary(tmp_path: Path):
    p = tmp_path / "words.txt"
    p.write_text("\n".join(RAW) + "\n", encoding="utf-8")
    assert load_dictionary(p).words == frozenset({"FACT", "CAFE", "TACIT"})


def test_load_dictionary_missing_file(tmp_path: Path):
    with pytest.raises(DictionaryError) as exc:
        load_dictionary(tmp_path / "nope.txt")
    assert isinstance(exc.value.__cause__, FileNotFoundError)


def test_fetch_dictionary(monkeypatch):
    seen = {}

    def fake_get(url, timeout):
        seen["url"], seen["timeout"] = url, timeout
        return _FakeResponse("FACT\r\nCAFE\r\nact\r\n")

    monkeypatch.setattr(dictionary_module.requests, "get", fake_get)
    d = fetch_dictionary("http://example.test/words.txt", timeout=5)
    assert d.words == frozenset({"FACT", "CAFE"})
    assert seen == {"url": "http://example.test/words.txt", "timeout": 5}


def test_fetch_dictionary_http_error(monkeypatch):
    monkeypatch.setattr(dictionary_module.requests, "get",
                        lambda url, timeout: _FakeResponse(status=404))
    with pytest.raises(DictionaryError, match="failed to GET"):
        fetch_dictionary("http://example.test/missing.txt")


def test_fetch_dictionary_connection_error(monkeypatch):
    def boom(url, timeout):
        raise requests.ConnectionError("no route")

    monkeypatch.setattr(dictionary_module.requests, "get", boom)
    with pytest.raises(DictionaryError) as exc:
        fetch_dictionary("http://example.test/words.txt")
    assert isinstance(exc.value.__cause__, requests.ConnectionError)
