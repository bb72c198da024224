import json


def test_index_shows_example_form(flask_env):
    client = flask_env.app.test_client()
    response = client.get("/")
    assert response.status_code == 200
    html = response.get_data(as_text=True)
    assert 'id="jsonInput"' in html
    assert "1A228867F0CA" in html


def test_form_post_renders_result(flask_env, line_document):
    client = flask_env.app.test_client()
    response = client.post("/", data={"document": json.dumps(line_document), "method": "vandermonde"})
    assert response.status_code == 200
    html = response.get_data(as_text=True)
    assert "Polinomio reconstruido: f(x) = 10x^1 + 0" in html
    assert "Share 3: (x=3, y=30)" in html


def test_form_post_reports_error_kind(flask_env):
    client = flask_env.app.test_client()
    response = client.post("/", data={"document": "{roto"})
    assert response.status_code == 400
    html = response.get_data(as_text=True)
    assert "Entrada inválida." in html
    assert "malformed_input" in html


def test_api_reconstruct_returns_record(flask_env, line_document):
    client = flask_env.app.test_client()
    response = client.post("/api/reconstruct", json={"document": line_document})
    assert response.status_code == 200

    payload = response.get_json()
    assert payload["constant_term"] == 0
    assert payload["polynomial"] == [
        {"degree": 1, "coefficient": 10},
        {"degree": 0, "coefficient": 0},
    ]
    assert [share["x"] for share in payload["selected"]] == [1, 2, 3]
    assert payload["method"] == "lagrange"
    assert payload["float_exact"] is True


def test_api_accepts_document_as_text(flask_env, line_document):
    client = flask_env.app.test_client()
    response = client.post("/api/reconstruct", json={"document": json.dumps(line_document)})
    assert response.status_code == 200
    assert response.get_json()["expression"] == "10x^1 + 0"


def test_api_error_kinds(flask_env):
    client = flask_env.app.test_client()
    cases = [
        ({"keys": {"n": 1, "k": 1}, "1": {"base": "2", "value": "102"}}, "invalid_numeral"),
        ({"keys": {"n": 3, "k": 3}, "1": {"base": "10", "value": "1"}}, "insufficient_shares"),
        ({"1": {"base": "10", "value": "1"}}, "malformed_input"),
    ]
    for document, kind in cases:
        response = client.post("/api/reconstruct", json={"document": document})
        assert response.status_code == 400
        assert response.get_json()["kind"] == kind


def test_api_rejects_missing_document_and_bad_method(flask_env, line_document):
    client = flask_env.app.test_client()

    response = client.post("/api/reconstruct", json={})
    assert response.status_code == 400
    assert response.get_json()["kind"] == "malformed_input"

    response = client.post("/api/reconstruct", json={"document": line_document, "method": "newton"})
    assert response.status_code == 400
    assert response.get_json()["kind"] == "invalid_method"


def test_api_rate_limit(limited_flask_env, line_document):
    client = limited_flask_env.app.test_client()

    for _ in range(30):
        resp = client.post("/api/reconstruct", json={"document": line_document})
        assert resp.status_code == 200

    limited_response = client.post("/api/reconstruct", json={"document": line_document})
    assert limited_response.status_code == 429
    assert "error" in limited_response.get_json()


def test_api_coefficient_beyond_float_range(flask_env):
    c = 10**400 + 1
    document = {
        "keys": {"n": 3, "k": 3},
        "1": {"base": "10", "value": "0"},
        "2": {"base": "10", "value": "0"},
        "3": {"base": "10", "value": str(c)},
    }
    client = flask_env.app.test_client()
    response = client.post("/api/reconstruct", json={"document": document})
    assert response.status_code == 200

    payload = response.get_json()
    assert payload["polynomial"][0]["coefficient"] == f"{c}/2"
    assert payload["constant_term"] == c
    assert payload["float_exact"] is False

    form = client.post("/", data={"document": json.dumps(document)})
    assert form.status_code == 200
    assert f"({c}/2)x^2" in form.get_data(as_text=True)
