from __future__ import annotations

import sqlite3

import pytest

from blog_backend.services import post_svc


def _data(**kw):
    data = {
        "title": "Hello",
        "content": "Body text",
        "excerpt": "Short",
        "tags": "python,sqlite",
        "publish_date": "2024-04-01T09:00:00.000Z",
    }
    data.update(kw)
    return data


class TestPostService:

    @pytest.fixture(autouse=True)
    def _store(self, empty_store, clock):
        self.clock = clock

    def test_empty_store_lists_nothing(self):
        assert post_svc.get_all_posts() == []

    def test_create_then_get_round_trip(self):
        created = post_svc.create_post(_data())
        assert created["id"]
        assert created["created_at"] == created["updated_at"] == "2024-05-01T12:00:00.000Z"

        fetched = post_svc.get_post_by_id(created["id"])
        assert fetched == created

    def test_create_without_tags(self):
        data = _data()
        del data["tags"]
        created = post_svc.create_post(data)
        assert post_svc.get_post_by_id(created["id"])["tags"] is None

    def test_create_missing_field_raises(self):
        data = _data()
        del data["excerpt"]
        with pytest.raises(ValueError, match="excerpt"):
            post_svc.create_post(data)
        assert post_svc.get_all_posts() == []

    def test_ids_are_unique(self):
        ids = {post_svc.create_post(_data())["id"] for _ in range(5)}
        assert len(ids) == 5

    def test_get_unknown_returns_none(self):
        assert post_svc.get_post_by_id("nope") is None

    def test_empty_update_only_bumps_updated_at(self):
        created = post_svc.create_post(_data())
        assert post_svc.update_post(created["id"], {}) is True

        after = post_svc.get_post_by_id(created["id"])
        assert after["updated_at"] > created["updated_at"]
        assert after["updated_at"] >= after["created_at"]
        for k in ("id", "title", "content", "excerpt", "tags", "publish_date", "created_at"):
            assert after[k] == created[k]

    def test_title_only_update(self):
        created = post_svc.create_post(_data())
        assert post_svc.update_post(created["id"], {"title": "New title"}) is True

        after = post_svc.get_post_by_id(created["id"])
        assert after["title"] == "New title"
        assert after["updated_at"] != created["updated_at"]
        for k in ("content", "excerpt", "tags", "publish_date", "created_at"):
            assert after[k] == created[k]

    def test_update_can_clear_tags(self):
        created = post_svc.create_post(_data())
        post_svc.update_post(created["id"], {"tags": None})
        assert post_svc.get_post_by_id(created["id"])["tags"] is None

        post_svc.update_post(created["id"], {"tags": ""})
        assert post_svc.get_post_by_id(created["id"])["tags"] == ""

    def test_update_ignores_immutable_keys(self):
        created = post_svc.create_post(_data())
        post_svc.update_post(created["id"], {"id": "other", "created_at": "1999", "content": "c2"})
        after = post_svc.get_post_by_id(created["id"])
        assert after["content"] == "c2"
        assert after["created_at"] == created["created_at"]

    def test_update_null_required_field_fails(self):
        created = post_svc.create_post(_data())
        with pytest.raises(sqlite3.IntegrityError):
            post_svc.update_post(created["id"], {"title": None})
        assert post_svc.get_post_by_id(created["id"]) == created

    def test_unknown_id_update_and_delete_return_false(self):
        assert post_svc.update_post("unknown", {"title": "x"}) is False
        assert post_svc.delete_post("unknown") is False

    def test_delete(self):
        created = post_svc.create_post(_data())
        assert post_svc.delete_post(created["id"]) is True
        assert post_svc.get_post_by_id(created["id"]) is None
        assert post_svc.delete_post(created["id"]) is False

    def test_listing_by_publish_date_desc(self):
        p1 = post_svc.create_post(_data(title="A", publish_date="2024-01-01T00:00:00.000Z"))
        p2 = post_svc.create_post(_data(title="B", publish_date="2024-02-01T00:00:00.000Z"))
        assert [p["id"] for p in post_svc.get_all_posts()] == [p2["id"], p1["id"]]

    def test_listing_order_independent_of_insert_order(self):
        dates = ["2023-06-01", "2024-03-01", "2022-12-31", "2024-01-15", "2023-01-01"]
        for d in dates:
            post_svc.create_post(_data(title=d, publish_date=f"{d}T00:00:00.000Z"))
        listed = [p["publish_date"] for p in post_svc.get_all_posts()]
        assert listed == sorted(listed, reverse=True)
        assert len(listed) == len(dates)


def test_seeded_store_lists_three_posts(tmp_db_path):
    posts = post_svc.get_all_posts()
    assert len(posts) == 3
    assert [p["publish_date"] for p in posts] == sorted((p["publish_date"] for p in posts), reverse=True)
