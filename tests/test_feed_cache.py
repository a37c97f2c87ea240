from sfm.cache.feed import FeedCache
from sfm.models.post import Platform, Post
from tests.conftest import make_post_data


def _posts():
    return [Post.model_validate({**make_post_data(), "id": "p1"})]


def test_cache_key_ignores_order_and_case():
    first = FeedCache._generate_cache_key(["Урок", "ielts"], ["VK", "Telegram"], "m", "p")
    second = FeedCache._generate_cache_key(["IELTS", " урок "], ["Telegram", "VK"], "m", "p")
    assert first == second
    assert first.startswith("p_m_")


def test_cache_key_depends_on_model():
    assert FeedCache._generate_cache_key(["урок"], ["VK"], "m1", "p") != FeedCache._generate_cache_key(
        ["урок"], ["VK"], "m2", "p"
    )


def test_save_and_load_feed(tmp_path):
    cache = FeedCache(tmp_path)
    assert cache.get_feed(["урок"], [Platform.VK], "m", "p") is None

    cache.save_feed(_posts(), ["урок"], [Platform.VK], "m", "p")
    loaded = cache.get_feed(["урок"], [Platform.VK], "m", "p")

    assert loaded == _posts()
    assert len(cache) == 1


def test_cache_stats_and_clear(tmp_path):
    cache = FeedCache(tmp_path, ttl_hours=2)
    cache.save_feed(_posts(), ["урок"], [Platform.VK], "m", "p")

    stats = cache.get_cache_stats()
    assert stats["total_entries"] == 1
    assert stats["ttl_hours"] == 2
    assert stats["cache_path"] == str(tmp_path / "feeds")

    cache.clear()
    assert len(cache) == 0


def test_expired_feed_is_not_returned(tmp_path):
    cache = FeedCache(tmp_path, ttl_hours=-1)
    cache.save_feed(_posts(), ["урок"], [Platform.VK], "m", "p")
    assert cache.get_feed(["урок"], [Platform.VK], "m", "p") is None


def test_unreadable_entry_is_ignored(tmp_path):
    cache = FeedCache(tmp_path)
    key = FeedCache._generate_cache_key(["урок"], ["VK"], "m", "p")
    cache.set(key, {"posts": "not a list"})
    assert cache.get_feed(["урок"], [Platform.VK], "m", "p") is None
    assert key in cache
