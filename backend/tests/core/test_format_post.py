"""Post Formatting - flattened author and wire serialization.

Invariants:
    - Author flattens to "firstName lastName"
    - A missing half leaves no stray whitespace
    - serialize_post emits exactly id, title, content, author with id as str
"""

from dataclasses import dataclass, field
from uuid import UUID, uuid4

from blog_api.core.format_post import build_author, format_author_name, serialize_post


@dataclass
class _FakePost:
    title: str
    content: str
    author: dict
    id: UUID = field(default_factory=uuid4)


def test_format_author_joins_names():
    assert format_author_name({"firstName": "F", "lastName": "L"}) == "F L"


def test_format_author_trims_missing_parts():
    assert format_author_name({"firstName": "Prince", "lastName": ""}) == "Prince"
    assert format_author_name({"firstName": "", "lastName": "Cher"}) == "Cher"


def test_build_author_uses_document_keys():
    assert build_author("Ada", "Lovelace") == {
        "firstName": "Ada", "lastName": "Lovelace",
    }


def test_serialize_post_shape():
    post = _FakePost(title="T", content="C", author=build_author("F", "L"))

    wire = serialize_post(post)

    assert wire == {
        "id": str(post.id), "title": "T", "content": "C", "author": "F L",
    }
