from sfm.llm.prompts import POST_GENERATION_SYSTEM_PROMPT, create_post_generation_messages
from sfm.models.post import Platform


def test_system_prompt_forbids_tutor_ads():
    assert "DO NOT generate posts that are advertisements" in POST_GENERATION_SYSTEM_PROMPT
    assert "Репетиторы" in POST_GENERATION_SYSTEM_PROMPT
    assert "н/д" in POST_GENERATION_SYSTEM_PROMPT


def test_messages_include_keywords_and_platforms():
    messages = create_post_generation_messages(["репетитор", "ielts"], [Platform.VK, Platform.TELEGRAM])
    assert [m["role"] for m in messages] == ["system", "user"]
    assert messages[0]["content"] == POST_GENERATION_SYSTEM_PROMPT
    user = messages[1]["content"]
    assert "[репетитор, ielts]" in user
    assert "Allowed platforms: VK, Telegram." in user
    assert "Generate 5 to 10 posts." in user


def test_messages_default_to_all_platforms():
    user = create_post_generation_messages(["урок"])[1]["content"]
    assert "Allowed platforms: VK, Telegram, Facebook, YouDo." in user


def test_post_count_bounds_are_ordered():
    user = create_post_generation_messages(["урок"], min_posts=8, max_posts=3)[1]["content"]
    assert "Generate 8 to 8 posts." in user
