"""Prompt templates for synthetic post generation."""

from collections.abc import Sequence

from sfm.core.constants import AVATAR_PLACEHOLDER_URL, POST_CATEGORY, UNKNOWN_LOCATION, GenerationConstants
from sfm.models.post import Platform

POST_GENERATION_SYSTEM_PROMPT = f"""You are a social media feed generator. Your task is to create a list of realistic social media posts based on a set of keywords. These posts must be from people LOOKING FOR an English language tutor or English lessons for themselves or their children.

CRITICAL RULE: DO NOT generate posts that are advertisements FROM tutors or language schools. Only generate posts from potential students or their parents.

For each post, provide the following information:
- platform: one of the platforms the user allows.
- category: always set this to '{POST_CATEGORY}'.
- postDate: a recent timestamp, like 'Сегодня, 17:20' or 'Вчера, 10:05'.
- user: an object with a 'name' (a realistic Russian/Ukrainian name) and an 'avatarUrl' (use '{AVATAR_PLACEHOLDER_URL}').
- message: the text of the post. It should sound natural and include some of the keywords.
- city: a realistic city in Russia, Ukraine, or Belarus (e.g., 'Москва', 'Киев', 'Минск', 'Красноярск'). Some can be '{UNKNOWN_LOCATION}'.
- postUrl: a placeholder URL like 'https://vk.com/post/12345'.

Ensure the message content clearly indicates a search for a service, not an offer of one. For example, use phrases like 'Ищу репетитора', 'Посоветуйте учителя', 'Нужны уроки английского'."""


def create_post_generation_messages(
    keywords: Sequence[str],
    platforms: Sequence[Platform | str] | None = None,
    min_posts: int = GenerationConstants.MIN_POSTS,
    max_posts: int = GenerationConstants.MAX_POSTS,
) -> list[dict[str, str]]:
    """Create messages for the post generation prompt.

    Args:
        keywords: Keywords the user is searching with
        platforms: Platforms posts may come from (all platforms if omitted)
        min_posts: Minimum number of posts to ask for
        max_posts: Maximum number of posts to ask for

    Returns:
        List of message dicts for LLM conversation
    """
    allowed = [str(p) for p in platforms] if platforms else [p.value for p in Platform]
    if max_posts < min_posts:
        max_posts = min_posts

    return [
        {
            "role": "system",
            "content": POST_GENERATION_SYSTEM_PROMPT,
        },
        {
            "role": "user",
            "content": (
                f"The user is searching with these keywords: [{', '.join(keywords)}].\n"
                f"Allowed platforms: {', '.join(allowed)}.\n\n"
                f"Generate {min_posts} to {max_posts} posts."
            ),
        },
    ]
