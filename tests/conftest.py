import os

import pytest

from sfm.llm.client import LLMError
from sfm.models.post import GeneratedPost, GeneratedPostBatch, Post


def make_post_data(**overrides):
    data = {
        "platform": "VK",
        "category": "Репетиторы",
        "postDate": "Сегодня, 17:20",
        "user": {"name": "Анна Петрова", "avatarUrl": "https://picsum.photos/40/40"},
        "message": "Ищу репетитора по английскому для сына",
        "city": "Москва",
        "postUrl": "https://vk.com/post/12345",
    }
    data.update(overrides)
    return data


class FakeLLMClient:
    """Stands in for LLMClient and returns canned posts."""

    def __init__(self, posts=None, error=None):
        self.provider = "fake"
        self.model = "fake-model"
        self.posts = posts if posts is not None else [make_post_data()]
        self.error = error
        self.calls = []

    def complete(self, messages, response_model):
        self.calls.append(messages)
        if self.error:
            raise LLMError(self.error)
        assert response_model is GeneratedPostBatch
        return GeneratedPostBatch(posts=[GeneratedPost.model_validate(p) for p in self.posts])


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    for name in list(os.environ):
        if name == "API_KEY" or name.startswith("SFM_"):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("SFM_CACHE_DIR", str(tmp_path / "cache"))


@pytest.fixture
def post_data():
    return make_post_data


@pytest.fixture
def fake_llm():
    return FakeLLMClient


@pytest.fixture
def sample_posts():
    return [
        Post.model_validate({**make_post_data(), "id": "p1"}),
        Post.model_validate(
            {
                **make_post_data(
                    platform="Telegram",
                    message="Посоветуйте учителя английского, нужны уроки",
                    city="н/д",
                    postDate="Вчера, 10:05",
                    user={"name": "Игорь Ковальчук", "avatarUrl": "https://picsum.photos/40/40"},
                ),
                "id": "p2",
            }
        ),
        Post.model_validate(
            {
                **make_post_data(
                    platform="Facebook",
                    message="Нужен преподаватель для подготовки к IELTS",
                    city="Минск",
                    user={"name": "Ольга Сидоренко", "avatarUrl": "https://picsum.photos/40/40"},
                ),
                "id": "p3",
            }
        ),
    ]
