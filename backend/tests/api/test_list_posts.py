"""GET /posts - list and read-by-id endpoints.

Invariants:
    - List answers 200 with a JSON array, empty store included
    - Every element has exactly id, title, content, author
    - author is the flattened "firstName lastName" string
    - GET /posts/{id} returns one post or 404
"""

from uuid import UUID, uuid4


async def test_list_returns_all_seeded_posts(client, seeded_posts, open_store):
    res = await client.get("/posts")

    assert res.status_code == 200
    body = res.json()
    assert len(body) >= 1
    async with open_store() as store:
        assert len(body) == await store.count()


async def test_list_posts_have_right_fields(client, seeded_posts):
    res = await client.get("/posts")

    assert res.status_code == 200
    assert res.headers["content-type"].startswith("application/json")
    body = res.json()
    assert isinstance(body, list)
    for post in body:
        assert isinstance(post, dict)
        assert set(post) == {"id", "title", "content", "author"}


async def test_first_listed_post_matches_store(client, seeded_posts, open_store):
    res = await client.get("/posts")
    res_post = res.json()[0]

    async with open_store() as store:
        post = await store.find_by_id(UUID(res_post["id"]))

    assert res_post["id"] == str(post.id)
    assert res_post["title"] == post.title
    assert res_post["content"] == post.content
    assert res_post["author"] == post.author_name


async def test_list_empty_store_returns_empty_array(client):
    res = await client.get("/posts")
    assert res.status_code == 200
    assert res.json() == []


async def test_get_single_post(client, seeded_posts):
    post = seeded_posts[3]

    res = await client.get(f"/posts/{post.id}")

    assert res.status_code == 200
    assert res.json() == {
        "id": str(post.id),
        "title": post.title,
        "content": post.content,
        "author": f"{post.author['firstName']} {post.author['lastName']}",
    }


async def test_get_unknown_post_returns_404(client, seeded_posts):
    res = await client.get(f"/posts/{uuid4()}")

    assert res.status_code == 404
    assert res.json()["error"]["code"] == "RESOURCE_NOT_FOUND"


async def test_get_malformed_id_returns_400(client):
    res = await client.get("/posts/not-a-uuid")

    assert res.status_code == 400
    error = res.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    assert error["details"][0]["field"] == "path.post_id"
