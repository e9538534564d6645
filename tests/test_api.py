"""
API 测试
"""
import json

import pytest

from fastapi.testclient import TestClient

from api.main import app, init_services
from config import settings


@pytest.fixture
def client(dict_manager, tmp_path):
    """不走 lifespan，直接注入测试词典"""
    init_services(dict_manager, tmp_path / "custom.json")
    return TestClient(app)


class TestSegmentApi:
    """断词与分析接口"""

    def test_segment(self, client):
        response = client.post("/api/v1/segment", json={"text": "開心地，紅色"})
        assert response.status_code == 200
        assert response.json()["words"] == ["開心", "地", "，", "紅色"]

    def test_segment_without_rules(self, client):
        response = client.post("/api/v1/segment", json={"text": "開心地", "use_grammar_rules": False})
        assert response.json()["words"] == ["開", "心地"]

    def test_segment_empty(self, client):
        response = client.post("/api/v1/segment", json={"text": ""})
        assert response.status_code == 200
        assert response.json()["words"] == []

    def test_analyze(self, client):
        """测试已勾选课数的词不列入生词"""
        response = client.post("/api/v1/analyze", json={"text": "我們開心地看書。學校"})
        assert response.status_code == 200
        data = response.json()
        assert [i["word"] for i in data["items"]] == ["我們", "開心", "地", "看書"]
        assert data["new_word_count"] == 4
        assert data["char_count"] == 10

    def test_analyze_blank(self, client):
        assert client.post("/api/v1/analyze", json={"text": "   "}).status_code == 400
        assert client.post("/api/v1/analyze", json={"text": ""}).status_code == 422

    def test_merge(self, client):
        items = [{"word": "開", "level": "0"}, {"word": "心", "level": "0"}]
        response = client.post("/api/v1/analyze/merge", json={"items": items, "index": 0, "char_count": 2})
        assert response.status_code == 200
        data = response.json()
        assert data["items"] == [{"word": "開心", "level": "2"}]
        assert data["char_count"] == 2

    def test_merge_out_of_range(self, client):
        items = [{"word": "開", "level": "0"}]
        response = client.post("/api/v1/analyze/merge", json={"items": items, "index": 0})
        assert response.status_code == 404

    def test_split(self, client):
        items = [{"word": "看書", "level": "0"}]
        response = client.post("/api/v1/analyze/split", json={"items": items, "index": 0, "pieces": "看 書"})
        assert response.status_code == 200
        assert [i["word"] for i in response.json()["items"]] == ["看", "書"]

    def test_split_mismatch(self, client):
        items = [{"word": "看書", "level": "0"}]
        payload = {"items": items, "index": 0, "pieces": "看 報"}
        assert client.post("/api/v1/analyze/split", json=payload).status_code == 400
        payload["force"] = True
        assert client.post("/api/v1/analyze/split", json=payload).status_code == 200

    def test_export(self, client):
        items = [{"word": "開心", "level": "2"}]
        response = client.post("/api/v1/analyze/export", json={"items": items})
        assert response.json()["text"] == "1. 開心 (Level 2)"


class TestServiceDefaults:
    """服务预设的断词开关"""

    @pytest.fixture
    def plain_client(self, dict_manager, tmp_path, monkeypatch):
        """关闭上下文规则与分句后再初始化服务"""
        monkeypatch.setattr(settings, "use_grammar_rules", False)
        monkeypatch.setattr(settings, "split_sentence", False)
        init_services(dict_manager, tmp_path / "custom.json")
        return TestClient(app)

    def test_grammar_rules_default(self, plain_client):
        response = plain_client.post("/api/v1/segment", json={"text": "開心地"})
        assert response.json()["words"] == ["開", "心地"]

        data = plain_client.post("/api/v1/analyze", json={"text": "開心地"}).json()
        assert [i["word"] for i in data["items"]] == ["開", "心地"]

    def test_request_overrides_default(self, plain_client):
        payload = {"text": "開心地", "use_grammar_rules": True}
        assert plain_client.post("/api/v1/segment", json=payload).json()["words"] == ["開心", "地"]
        data = plain_client.post("/api/v1/analyze", json=payload).json()
        assert [i["word"] for i in data["items"]] == ["開心", "地"]

    def test_split_sentence_default(self, plain_client):
        """不分句时旧词可以跨过数字"""
        plain_client.post("/api/v1/vocab/custom", json={"text": "地3"})
        response = plain_client.post("/api/v1/segment", json={"text": "開心地3"})
        assert response.json()["words"] == ["開心", "地3"]

        payload = {"text": "開心地3", "split_sentence": True}
        assert plain_client.post("/api/v1/segment", json=payload).json()["words"] == ["開", "心地", "3"]


class TestLessonsApi:
    """课数与补充旧词接口"""

    def test_list_lessons(self, client):
        data = client.get("/api/v1/lessons").json()
        assert [b["book"] for b in data["books"]] == ["B1", "B2"]
        assert data["books"][0]["lessons"] == ["B1L1", "B1L2", "B1L10"]
        assert data["selected_count"] == 4

    def test_select_up_to(self, client):
        data = client.post("/api/v1/lessons/select-up-to/B1").json()
        assert data["books"][1]["status"] == "none"
        assert client.post("/api/v1/lessons/select-up-to/B9").status_code == 404

    def test_toggle_book_and_all(self, client):
        data = client.post("/api/v1/lessons/toggle-book/B2").json()
        assert data["books"][1]["status"] == "none"
        data = client.post("/api/v1/lessons/toggle-all", json={"checked": False}).json()
        assert data["selected_count"] == 0
        assert data["blocklist_count"] == 0

    def test_select_lessons(self, client):
        client.post("/api/v1/lessons/toggle-all", json={"checked": False})
        data = client.post("/api/v1/lessons/select", json={"lessons": ["B1L1"]}).json()
        assert data["books"][0]["selected"] == ["B1L1"]
        response = client.post("/api/v1/lessons/select", json={"lessons": ["B9L9"]})
        assert response.status_code == 404

    def test_custom_vocab(self, client):
        response = client.post("/api/v1/vocab/custom", json={"text": "開心\n看書"})
        assert response.json()["added"] == 2

        data = client.post("/api/v1/analyze", json={"text": "我們開心地看書。"}).json()
        assert [i["word"] for i in data["items"]] == ["我們", "地"]

        assert client.get("/api/v1/vocab/custom").json()["words"] == ["看書", "開心"]
        assert client.delete("/api/v1/vocab/custom").json()["count"] == 0


class TestDictionaryApi:
    """词典接口"""

    def test_stats(self, client):
        assert client.get("/api/v1/dictionary/stats").json()["levels"] == 13

    def test_level(self, client):
        data = client.get("/api/v1/dictionary/level", params={"word": "開心"}).json()
        assert data == {"word": "開心", "level": "2", "known": True}

    def test_reload(self, client):
        assert client.post("/api/v1/dictionary/reload").json()["status"] == "success"

    def test_reload_syncs_lessons(self, client, dictionary_dir):
        """重新加载后删除的课数移出、新课数预设勾选"""
        client.post("/api/v1/lessons/select", json={"lessons": ["B1L2"], "checked": False})
        lessons = {"B1L1": ["我", "們"], "B1L2": ["看"], "B3L1": ["開心"]}
        (dictionary_dir / "vocab_by_lesson.json").write_text(json.dumps(lessons, ensure_ascii=False), encoding="utf-8")
        client.post("/api/v1/dictionary/reload")

        data = client.get("/api/v1/lessons").json()
        assert data["selected_count"] == 2
        assert [(b["book"], b["status"]) for b in data["books"]] == [("B1", "partial"), ("B3", "all")]

        result = client.post("/api/v1/analyze", json={"text": "開心"}).json()
        assert result["items"] == []

    def test_health(self, client):
        data = client.get("/health").json()
        assert data["status"] == "healthy"
        assert data["dictionaries_loaded"] is True


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
