from lms.models.copies import BranchCopies


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.get_json()["ok"] is True


def test_list_branches_and_books(client, library):
    r = client.get("/branches")
    assert r.status_code == 200
    assert [b["name"] for b in r.get_json()["data"]] == ["Central", "East Side"]

    r = client.get("/books/")
    assert r.status_code == 200
    books = r.get_json()["data"]
    assert books[0]["title"] == "Dune"
    assert books[0]["author"]["name"] == "Frank Herbert"
    assert books[1]["author"] is None


def test_get_branch_and_book(client, library):
    r = client.get(f"/branch/{library.central.id}")
    assert r.status_code == 200
    assert r.get_json()["data"]["address"] == "1 Main St"

    r = client.get(f"/book/{library.dune.id}/")
    assert r.status_code == 200
    assert r.get_json()["data"]["title"] == "Dune"


def test_missing_branch_and_book_are_404(client, library):
    r = client.get("/branch/999")
    assert r.status_code == 404
    assert r.get_json()["success"] is False

    assert client.get("/book/999").status_code == 404


def test_update_branch(client, library):
    r = client.put(f"/branch/{library.east.id}", json={"name": "Eastgate", "address": "10 East Ave"})
    assert r.status_code == 200
    assert r.get_json()["data"] == {"id": library.east.id, "name": "Eastgate", "address": "10 East Ave"}

    r = client.put(f"/branch/{library.east.id}", json={"address": "11 East Ave"})
    assert r.get_json()["data"]["name"] == "Eastgate"
    assert r.get_json()["data"]["address"] == "11 East Ave"


def test_update_branch_rejects_blank_name(client, library):
    r = client.put(f"/branch/{library.east.id}", json={"name": "  "})
    assert r.status_code == 400
    assert client.get(f"/branch/{library.east.id}").get_json()["data"]["name"] == "East Side"


def test_update_missing_branch(client, library):
    assert client.put("/branch/999", json={"name": "Nowhere"}).status_code == 404


def test_set_and_get_copies(client, library):
    url = f"/branch/{library.central.id}/book/{library.dune.id}"
    r = client.put(url, query_string={"noOfCopies": 5})
    assert r.status_code == 200
    data = r.get_json()["data"]
    assert data["copies"] == 5
    assert data["book"]["id"] == library.dune.id
    assert data["branch"]["id"] == library.central.id

    r = client.get(url)
    assert r.get_json()["data"]["copies"] == 5

    r = client.put(url, query_string={"noOfCopies": 0})
    assert r.get_json()["data"]["copies"] == 0
    assert BranchCopies.query.count() == 0


def test_copies_of_unheld_book_is_zero(client, library):
    r = client.get(f"/branch/{library.east.id}/book/{library.anon.id}")
    assert r.status_code == 200
    assert r.get_json()["data"]["copies"] == 0


def test_set_copies_bad_input(client, library):
    url = f"/branch/{library.central.id}/book/{library.dune.id}"
    assert client.put(url).status_code == 400
    assert client.put(url, query_string={"noOfCopies": "many"}).status_code == 400

    r = client.put(url, query_string={"noOfCopies": -2})
    assert r.status_code == 400
    assert "nonnegative" in r.get_json()["message"]


def test_set_copies_beyond_column_range(client, library):
    url = f"/branch/{library.central.id}/book/{library.dune.id}"
    client.put(url, query_string={"noOfCopies": 4})

    r = client.put(url, query_string={"noOfCopies": 10**20})
    assert r.status_code == 400
    assert r.get_json()["success"] is False
    assert "exceed" in r.get_json()["message"]
    assert client.get(url).get_json()["data"]["copies"] == 4


def test_set_copies_missing_entities(client, library):
    assert client.put(f"/branch/999/book/{library.dune.id}?noOfCopies=1").status_code == 404
    assert client.put(f"/branch/{library.central.id}/book/999?noOfCopies=1").status_code == 404
    assert client.get(f"/branch/{library.central.id}/book/999").status_code == 404


def test_full_ledger_dump(client, library):
    client.put(f"/branch/{library.central.id}/book/{library.dune.id}?noOfCopies=2")
    client.put(f"/branch/{library.central.id}/book/{library.anon.id}?noOfCopies=1")
    client.put(f"/branch/{library.east.id}/book/{library.dune.id}?noOfCopies=6")

    r = client.get("/branches/books/copies")
    assert r.status_code == 200
    ledger = r.get_json()["data"]
    assert [entry["branch"]["name"] for entry in ledger] == ["Central", "East Side"]
    assert [(x["book"]["title"], x["copies"]) for x in ledger[0]["books"]] == [
        ("Dune", 2), ("Anonymous Pamphlet", 1)
    ]
    assert [(x["book"]["title"], x["copies"]) for x in ledger[1]["books"]] == [("Dune", 6)]


def test_branch_and_book_holdings(client, library):
    client.put(f"/branch/{library.central.id}/book/{library.dune.id}?noOfCopies=2")
    client.put(f"/branch/{library.east.id}/book/{library.dune.id}?noOfCopies=6")

    r = client.get(f"/branch/{library.east.id}/books/copies")
    assert r.get_json()["data"] == [
        {"book": {"id": library.dune.id, "title": "Dune",
                  "author": {"id": library.dune.author.id, "name": "Frank Herbert"}},
         "copies": 6}
    ]

    r = client.get(f"/book/{library.dune.id}/branches/copies")
    assert [(x["branch"]["name"], x["copies"]) for x in r.get_json()["data"]] == [
        ("Central", 2), ("East Side", 6)
    ]

    assert client.get("/book/999/branches/copies").status_code == 404
