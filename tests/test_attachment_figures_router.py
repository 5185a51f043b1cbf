"""Attachment figure routes — list and create only."""

NANNY = {
    "id": 9,
    "name": "Nanny",
    "description": "raised the children",
    "image": "",
    "birth_date": "1850",
    "death_date": None,
    "gender": "f",
}


async def test_list(client, fake_db):
    fake_db.fetch_all_results.append([NANNY])

    res = await client.get("/api/attachment_figures")

    assert res.status_code == 200
    assert res.json() == [NANNY]
    assert "generation" not in fake_db.calls[0][1]


async def test_list_empty(client):
    res = await client.get("/api/attachment_figures")
    assert res.json() == []


async def test_create(client, fake_db):
    fake_db.fetch_one_results.append({"id": 9})

    res = await client.post("/api/attachment_figures", json={"name": "Nanny", "gender": "f"})

    assert res.status_code == 201
    assert res.json() == {"id": 9}
    method, sql, args = fake_db.calls[0]
    assert sql.startswith("INSERT INTO attachment_figures")
    assert args == ("Nanny", "", "", "f", "", "")


async def test_create_without_name(client, fake_db):
    res = await client.post("/api/attachment_figures", json={"description": "x"})
    assert res.status_code == 400
    assert fake_db.calls == []


async def test_no_single_figure_routes(client):
    assert (await client.get("/api/attachment_figures/9")).status_code == 404
    assert (await client.delete("/api/attachment_figures/9")).status_code == 404
