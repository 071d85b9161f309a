"""HTML builders for articlepull tests."""

BASE_URL = "https://example.com/article"


def prose(length: int, commas: int = 0) -> str:
    """Build sentence-like text of exactly ``length`` characters with ``commas`` commas."""
    unit = "news text "
    chars = list((unit * (length // len(unit) + 1))[:length])
    step = length // (commas + 1)
    for i in range(1, commas + 1):
        chars[i * step] = ","
    chars[-1] = "."
    return "".join(chars)


def page(body: str) -> str:
    return f"<html><head><title>Story</title></head><body>{body}</body></html>"
