from aether.app.extensions import db


def test_list_products(db_app):
    with db_app.test_client() as c:
        r = c.get("/api/products")

    assert r.status_code == 200
    assert isinstance(r.json, list)
    assert len(r.json) == 8
    first = r.json[0]
    assert set(first) == {"id", "name", "designer", "price", "category", "image_url", "description", "sizes", "colors"}
    assert first["price"] == 850
    assert first["sizes"] == ["XS", "S", "M", "L"]


def test_empty_table_is_empty_array(empty_db_app):
    with empty_db_app.test_client() as c:
        r = c.get("/api/products")
    assert r.status_code == 200
    assert r.json == []


def test_database_failure_is_500(empty_db_app):
    with empty_db_app.app_context():
        db.drop_all()

    with empty_db_app.test_client() as c:
        r = c.get("/api/products")

    assert r.status_code == 500
    assert r.json == {"error": "Failed to fetch products"}


def test_seed_is_idempotent(db_app):
    result = db_app.test_cli_runner().invoke(args=["seed"])
    assert "already exist" in result.output

    with db_app.test_client() as c:
        assert len(c.get("/api/products").json) == 8


def test_cors_header_on_api(db_app):
    with db_app.test_client() as c:
        r = c.get("/api/products", headers={"Origin": "https://shop.example"})
    assert r.headers.get("Access-Control-Allow-Origin") in ("*", "https://shop.example")
