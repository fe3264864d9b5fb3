"""Programming-language options offered by the UI selectors."""

from __future__ import annotations

# (value, label); value is what the chat selector submits
LANGUAGE_OPTIONS: list[tuple[str, str]] = [
    ("javascript", "JavaScript"),
    ("typescript", "TypeScript"),
    ("python", "Python"),
    ("java", "Java"),
    ("csharp", "C#"),
    ("go", "Go"),
    ("html", "HTML"),
    ("css", "CSS"),
    ("cplusplus", "C++"),
    ("ruby", "Ruby"),
    ("php", "PHP"),
    ("swift", "Swift"),
    ("kotlin", "Kotlin"),
    ("rust", "Rust"),
    ("dart", "Dart"),
]

# Languages offered by the learning path and the quiz (labels)
LEARNING_LANGUAGES: list[str] = [
    "JavaScript", "TypeScript", "Python", "Java", "C#", "Go",
    "Rust", "Ruby", "PHP", "Swift", "Kotlin", "Dart",
]

DEFAULT_CHAT_LANGUAGE = "javascript"

_LABELS = dict(LANGUAGE_OPTIONS)


def language_label(value: str) -> str:
    """Map a selector value (``"csharp"``) to its display label (``"C#"``).

    Unknown values are returned unchanged so free-form input still works.
    """
    return _LABELS.get(value.strip().lower(), value.strip())
