"""
Tests for prompt building, response parsing and the bundled producers.
"""

import io
import json
import urllib.error

import pytest

from mimbar.errors import ProducerRequestFailed
from mimbar.producer import http_producer
from mimbar.producer.base_producer import ScriptRequest, parse_producer_text, strip_code_fence
from mimbar.producer.file_producer import FileScriptProducer
from mimbar.producer.http_producer import HttpScriptProducer
from mimbar.producer.prompts import (
    DURATION_INSTRUCTIONS,
    RAMADHAN_TOPICS,
    build_user_prompt,
    length_instruction,
)


def test_static_configuration_data():
    assert len(RAMADHAN_TOPICS) == 50
    assert list(DURATION_INSTRUCTIONS) == ["3 Menit", "5 Menit", "7 Menit", "15 Menit", "20 Menit"]
    assert "±300 kata" in DURATION_INSTRUCTIONS["3 Menit"]
    assert "±2000 kata" in DURATION_INSTRUCTIONS["20 Menit"]


def test_unknown_duration_passes_through():
    assert length_instruction("10 Menit") == "10 Menit"


def test_user_prompt_contains_all_parameters():
    prompt = build_user_prompt(
        ScriptRequest(topic="Sabar", audience="Bapak-bapak", duration="7 Menit", tone="Tegas")
    )
    assert prompt.startswith("Topik: Sabar, Audience: Bapak-bapak, Durasi: 7 Menit.")
    assert "±800 kata" in prompt
    assert prompt.endswith("Tone: Tegas")


def test_parse_plain_and_fenced_json():
    assert parse_producer_text('[{"type": "opening"}]') == [{"type": "opening"}]
    fenced = '```json\n{"script": []}\n```'
    assert strip_code_fence(fenced) == '{"script": []}'
    assert parse_producer_text(fenced) == {"script": []}


def test_parse_failures_raise_request_failed():
    for raw in ("", "   ", "not json", "[{"):
        with pytest.raises(ProducerRequestFailed):
            parse_producer_text(raw)


def test_file_producer(tmp_path):
    path = tmp_path / "saved.json"
    path.write_text('[{"type": "content", "text": "Isi"}]', encoding="utf-8")
    producer = FileScriptProducer(path)
    assert producer.is_available
    assert json.loads(producer.produce(ScriptRequest())) == [{"type": "content", "text": "Isi"}]

    missing = FileScriptProducer(tmp_path / "missing.json")
    with pytest.raises(ProducerRequestFailed):
        missing.produce(ScriptRequest())

    assert not FileScriptProducer(None).is_available


class _FakeResponse(io.BytesIO):
    class _Headers:
        @staticmethod
        def get_content_charset():
            return "utf-8"

    headers = _Headers()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()
        return False


def test_http_producer_posts_prompt(monkeypatch):
    captured = {}

    def fake_urlopen(req, timeout):
        captured["url"] = req.full_url
        captured["body"] = json.loads(req.data.decode("utf-8"))
        captured["auth"] = req.get_header("Authorization")
        captured["timeout"] = timeout
        return _FakeResponse('[{"type": "opening"}]'.encode("utf-8"))

    monkeypatch.setattr(http_producer.urllib.request, "urlopen", fake_urlopen)

    producer = HttpScriptProducer("http://localhost:9/generate", api_key="k", timeout=5)
    raw = producer.produce(ScriptRequest(topic="Sabar"))

    assert raw == '[{"type": "opening"}]'
    assert captured["url"] == "http://localhost:9/generate"
    assert captured["auth"] == "Bearer k"
    assert captured["timeout"] == 5
    assert "Topik: Sabar" in captured["body"]["prompt"]
    assert "MimbarPro" in captured["body"]["system"]


def test_http_producer_wraps_transport_errors(monkeypatch):
    def fake_urlopen(req, timeout):
        raise urllib.error.URLError("connection refused")

    monkeypatch.setattr(http_producer.urllib.request, "urlopen", fake_urlopen)
    with pytest.raises(ProducerRequestFailed):
        HttpScriptProducer("http://localhost:9/generate").produce(ScriptRequest())


def test_http_producer_availability():
    assert not HttpScriptProducer(None).is_available
    assert not HttpScriptProducer("").is_available
    assert HttpScriptProducer("http://x").is_available
