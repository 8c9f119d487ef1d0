"""Built-in sample documents used to seed the editor buffer."""

from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any


@dataclass(frozen=True)
class JsonSample:
    """A named sample document."""

    name: str
    description: str
    content: str


def _pretty(value: Any) -> str:
    return json.dumps(value, indent=2)


def _iso(moment: datetime) -> str:
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _large_sample() -> dict[str, Any]:
    users = []
    for i in range(100):
        n = i + 1
        users.append(
            {
                "id": n,
                "username": f"user{n}",
                "email": f"user{n}@example.com",
                "profile": {
                    "firstName": f"First{n}",
                    "lastName": f"Last{n}",
                    "age": 20 + (i % 50),
                    "bio": (
                        f"This is a bio for user {n}. "
                        "Lorem ipsum dolor sit amet, consectetur adipiscing elit."
                    ),
                },
                "settings": {
                    "theme": "dark" if i % 2 == 0 else "light",
                    "notifications": {"email": True, "push": i % 3 == 0, "sms": False},
                },
                "posts": [
                    {
                        "id": j + 1,
                        "title": f"Post {j + 1} by user {n}",
                        "content": f"This is the content of post {j + 1}",
                        "tags": ["tag1", "tag2", "tag3"],
                        "createdAt": _iso(datetime(2024, i % 12 + 1, j + 1, tzinfo=UTC)),
                    }
                    for j in range(5)
                ],
            }
        )
    return {
        "users": users,
        "metadata": {
            "totalUsers": 100,
            "generatedAt": _iso(datetime.now(UTC)),
            "version": "1.0.0",
        },
    }


def _deep_sample(levels: int = 10) -> dict[str, Any]:
    node: dict[str, Any] = {"data": "Deep nested value"}
    for level in range(levels, 0, -1):
        node = {f"level{level}": node}
    return node


_TRAILING_COMMA_CONTENT = """\
{
  "name": "Jane Doe",
  "age": 25,
  "skills": ["JavaScript", "TypeScript", "Angular",],
  "certified": true,
}"""

_SYNTAX_ERROR_CONTENT = """\
{
  "name": "Bob Smith,
  "role": "Developer",
  "active": true
}"""


SAMPLES: tuple[JsonSample, ...] = (
    JsonSample(
        name="Valid JSON Sample",
        description="A simple valid JSON object",
        content=_pretty(
            {
                "name": "John Doe",
                "age": 30,
                "email": "john.doe@example.com",
                "address": {"street": "123 Main St", "city": "New York", "country": "USA"},
                "hobbies": ["reading", "gaming", "coding"],
                "isActive": True,
            }
        ),
    ),
    JsonSample(
        name="Invalid JSON - Trailing Comma",
        description="JSON with a trailing comma (invalid in strict mode)",
        content=_TRAILING_COMMA_CONTENT,
    ),
    JsonSample(
        name="Large JSON Sample",
        description="A larger JSON to test size limitations",
        content=_pretty(_large_sample()),
    ),
    JsonSample(
        name="Invalid JSON - Syntax Error",
        description="JSON with a syntax error (missing quote)",
        content=_SYNTAX_ERROR_CONTENT,
    ),
    JsonSample(
        name="Deep Nesting Sample",
        description="JSON with deep nesting to test depth limits",
        content=_pretty(_deep_sample()),
    ),
)


def list_samples() -> list[JsonSample]:
    return list(SAMPLES)


def get_sample(index: int) -> JsonSample | None:
    """Return the sample at *index*, or ``None`` when out of range (negatives included)."""
    if 0 <= index < len(SAMPLES):
        return SAMPLES[index]
    return None
