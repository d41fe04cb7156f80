import json
from types import SimpleNamespace

import pytest

import config
import gemini_extractor
from models import AIResponseError, EmptyInput, Listing


class FakeModels:
    def __init__(self, text):
        self.text = text
        self.calls = []

    def generate_content(self, model, contents, config):
        self.calls.append({"model": model, "contents": contents, "config": config})
        return SimpleNamespace(text=self.text, usage_metadata=None)


class FakeClient:
    def __init__(self, text):
        self.models = FakeModels(text)


@pytest.fixture
def fake_gemini(monkeypatch):
    usage = []
    monkeypatch.setattr(gemini_extractor, "log_token_usage", lambda *args: usage.append(args))

    def install(payload):
        text = payload if isinstance(payload, str) else json.dumps(payload)
        client = FakeClient(text)
        monkeypatch.setattr(gemini_extractor, "_client", client)
        return client

    install.usage = usage
    return install


class TestScrapeProductsWithGemini:
    def test_converts_products(self, fake_gemini):
        client = fake_gemini({"products": [
            {"title": "Fortnite account 57 skins", "price": 12.5, "currency": "USD", "platform": "PC"},
            {"title": "Review derived listing", "price": 0, "currency": ""},
        ]})

        listings = gemini_extractor.scrape_products_with_gemini(
            "<html><body><script>var x = 1;</script><a class='tab1-item'>Offer</a></body></html>"
        )

        assert listings == [
            Listing("Fortnite account 57 skins", 12.5, "USD", "PC"),
            Listing("Review derived listing", 0.0, "N/A", None),
        ]
        call = client.models.calls[0]
        assert call["model"] == config.MODEL_EXTRACTION
        assert call["config"]["response_mime_type"] == "application/json"
        assert call["config"]["response_schema"] is gemini_extractor.PRODUCTS_SCHEMA
        assert "var x = 1" not in call["contents"]
        assert "tab1-item" in call["contents"]
        assert len(fake_gemini.usage) == 1

    def test_empty_response(self, fake_gemini):
        fake_gemini("")
        assert gemini_extractor.scrape_products_with_gemini("<html><body>x</body></html>") == []

    def test_wrong_shape(self, fake_gemini):
        fake_gemini({"items": []})
        with pytest.raises(AIResponseError, match="structure was incorrect"):
            gemini_extractor.scrape_products_with_gemini("<html><body>x</body></html>")

    def test_invalid_json(self, fake_gemini):
        fake_gemini("{not json")
        with pytest.raises(AIResponseError):
            gemini_extractor.scrape_products_with_gemini("<html><body>x</body></html>")

    def test_blank_html(self, fake_gemini):
        fake_gemini({"products": []})
        with pytest.raises(EmptyInput):
            gemini_extractor.scrape_products_with_gemini("  ")


class TestRewriteTitlesWithGemini:
    def test_same_length_and_order(self, fake_gemini):
        client = fake_gemini({"rewrittenTitles": ["[Full Access] ✅ A", "[Full Access] ✅ B"]})
        result = gemini_extractor.rewrite_titles_with_gemini("raw a\n\n raw b \n")
        assert result == ["[Full Access] ✅ A", "[Full Access] ✅ B"]
        assert '["raw a", " raw b "]' in client.models.calls[0]["contents"]

    def test_length_mismatch(self, fake_gemini):
        fake_gemini({"rewrittenTitles": ["only one"]})
        with pytest.raises(AIResponseError, match="Expected 2"):
            gemini_extractor.rewrite_titles_with_gemini(["raw a", "raw b"])

    def test_blank_titles(self, fake_gemini):
        fake_gemini({"rewrittenTitles": []})
        with pytest.raises(EmptyInput):
            gemini_extractor.rewrite_titles_with_gemini(["", "   "])


class TestGetClient:
    def test_missing_key(self, monkeypatch):
        monkeypatch.setattr(gemini_extractor, "_client", None)
        monkeypatch.setattr(config, "GOOGLE_API_KEY", None)
        with pytest.raises(ValueError, match="GOOGLEAISTUDIO_API_KEY"):
            gemini_extractor.get_client()
