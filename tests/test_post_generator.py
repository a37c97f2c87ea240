import pytest

from sfm.cache.feed import FeedCache
from sfm.exceptions import PostGenerationError
from sfm.models.post import Platform
from sfm.services.post_generator import PostGenerationService
from tests.conftest import FakeLLMClient, make_post_data


def test_generate_assigns_unique_ids():
    llm = FakeLLMClient(posts=[make_post_data(), make_post_data(message="Нужны уроки английского")])
    posts = PostGenerationService(llm).generate(["репетитор"], [Platform.VK])
    assert len(posts) == 2
    assert posts[0].id != posts[1].id
    assert all(post.id for post in posts)


def test_generate_sends_keywords_and_platforms():
    llm = FakeLLMClient()
    PostGenerationService(llm, min_posts=3, max_posts=4).generate(["урок"], [Platform.TELEGRAM, Platform.VK])
    user_message = llm.calls[0][1]["content"]
    assert "[урок]" in user_message
    assert "Telegram, VK" in user_message
    assert "Generate 3 to 4 posts." in user_message


@pytest.mark.parametrize(
    ("keywords", "platforms"),
    [([], [Platform.VK]), (["  ", ""], [Platform.VK]), (["урок"], [])],
)
def test_generate_with_nothing_to_search_skips_llm(keywords, platforms):
    llm = FakeLLMClient()
    assert PostGenerationService(llm).generate(keywords, platforms) == []
    assert llm.calls == []


def test_generate_drops_unselected_platforms():
    llm = FakeLLMClient(posts=[make_post_data(platform="VK"), make_post_data(platform="YouDo")])
    posts = PostGenerationService(llm).generate(["урок"], [Platform.VK])
    assert [post.platform for post in posts] == [Platform.VK]


def test_generate_defaults_to_all_platforms():
    llm = FakeLLMClient(posts=[make_post_data(platform="YouDo")])
    posts = PostGenerationService(llm).generate(["урок"])
    assert [post.platform for post in posts] == [Platform.YOUDO]


def test_llm_failure_raises_generation_error():
    llm = FakeLLMClient(error="quota exceeded")
    with pytest.raises(PostGenerationError) as exc_info:
        PostGenerationService(llm).generate(["урок"], [Platform.VK])
    assert exc_info.value.keywords == ["урок"]
    assert "quota exceeded" in str(exc_info.value)


def test_generate_uses_cache(tmp_path):
    llm = FakeLLMClient()
    service = PostGenerationService(llm, cache=FeedCache(tmp_path))

    first = service.generate(["урок"], [Platform.VK])
    assert not service.last_from_cache

    second = service.generate(["УРОК"], [Platform.VK])
    assert service.last_from_cache
    assert len(llm.calls) == 1
    assert [p.id for p in second] == [p.id for p in first]


def test_cache_is_keyed_by_platforms(tmp_path):
    llm = FakeLLMClient(posts=[make_post_data(platform="VK"), make_post_data(platform="Telegram")])
    service = PostGenerationService(llm, cache=FeedCache(tmp_path))

    service.generate(["урок"], [Platform.VK])
    service.generate(["урок"], [Platform.VK, Platform.TELEGRAM])
    assert len(llm.calls) == 2
