def test_upload_ok(client):
    resp = client.post(
        "/api/upload",
        files={"file": ("CHANGELOG.md", b"# v1.0.0\n\nHello", "text/markdown")},
    )
    assert resp.status_code == 200
    data = resp.json()
    assert data == [
        {"type": "section", "text": {"type": "mrkdwn", "text": "*v1.0.0*", "verbatim": True}},
        {"type": "divider"},
        {"type": "section", "text": {"type": "mrkdwn", "text": "\nHello\n", "verbatim": True}},
    ]


def test_upload_with_text_and_header(client):
    resp = client.post(
        "/api/upload",
        params={"text": "Check it out", "header": "New Release!"},
        files={"file": ("notes.txt", b"Hello", "text/plain")},
    )
    assert resp.status_code == 200
    data = resp.json()
    assert data["text"] == "Check it out"
    assert data["blocks"][0] == {"type": "header", "text": {"type": "plain_text", "text": "New Release!"}}
    assert data["blocks"][1]["text"]["text"] == "Hello\n"


def test_upload_replaces_invalid_utf8(client):
    resp = client.post(
        "/api/upload",
        files={"file": ("README.md", b"caf\xe9", "text/markdown")},
    )
    assert resp.status_code == 200
    assert resp.json()[0]["text"]["text"] == "caf\ufffd\n"


def test_upload_rejects_non_md_txt(client):
    resp = client.post(
        "/api/upload",
        files={"file": ("README.pdf", b"%PDF", "application/pdf")},
    )
    assert resp.status_code == 400


def test_upload_strips_byte_order_mark(client):
    resp = client.post(
        "/api/upload",
        files={"file": ("CHANGELOG.md", b"\xef\xbb\xbf## v2.0.0", "text/markdown")},
    )
    assert resp.status_code == 200
    assert resp.json()[0]["text"]["text"] == "*v2.0.0*"
    assert resp.json()[1] == {"type": "divider"}
