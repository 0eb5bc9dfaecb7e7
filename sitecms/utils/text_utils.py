import math
import re

TAG_PATTERN = re.compile(r'<[^>]*>')
WORDS_PER_MINUTE = 200


def strip_html(text: str) -> str:
    """Replace HTML tags with spaces and collapse whitespace."""
    plain = TAG_PATTERN.sub(' ', text)
    return re.sub(r'\s+', ' ', plain).strip()


def estimate_read_time(text) -> str:
    """
    Estimate reading time for post content.

    Args:
        text: Post body (plain text or HTML)

    Returns:
        str: "N min read", never less than one minute
    """
    if not text or not isinstance(text, str):
        return '1 min read'

    words = len([word for word in strip_html(text).split(' ') if word])
    minutes = max(1, math.ceil(words / WORDS_PER_MINUTE))
    return f'{minutes} min read'
