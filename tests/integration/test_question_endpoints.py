import uuid

from quora.db import models


def _create(client, user, content="What is the capital of France?"):
    r = client.post("/question/create", json={"content": content}, headers=user.headers)
    assert r.status_code == 201, r.text
    return r.json()["id"]


def test_create_question(make_user, client, db_session):
    alice = make_user("alice")
    r = client.post("/question/create", json={"content": "Why is the sky blue?"}, headers=alice.headers)
    assert r.status_code == 201
    body = r.json()
    assert body["status"] == "QUESTION CREATED"
    question = db_session.get(models.Question, uuid.UUID(body["id"]))
    assert question.user_id == alice.id
    assert question.content == "Why is the sky blue?"
    assert question.date is not None


def test_create_question_validation(make_user, client):
    alice = make_user("alice")
    assert client.post("/question/create", json={"content": ""}, headers=alice.headers).status_code == 422
    assert client.post("/question/create", json={"content": "x" * 501}, headers=alice.headers).status_code == 422
    assert client.post("/question/create", json={"content": "x" * 500}, headers=alice.headers).status_code == 201


def test_create_question_requires_token(client):
    r = client.post("/question/create", json={"content": "Anyone?"})
    assert r.status_code == 403
    assert r.json()["code"] == "ATHR-001"


def test_get_all_questions(make_user, client):
    alice = make_user("alice")
    bob = make_user("bob")
    first = _create(client, alice, "First?")
    second = _create(client, bob, "Second?")
    r = client.get("/question/all", headers=alice.headers)
    assert r.status_code == 200
    assert r.json() == [
        {"id": first, "content": "First?"},
        {"id": second, "content": "Second?"},
    ]


def test_get_all_questions_empty_is_no_content(make_user, client):
    alice = make_user("alice")
    r = client.get("/question/all", headers=alice.headers)
    assert r.status_code == 204
    assert r.content == b""


def test_get_all_questions_signed_out(make_user, client):
    alice = make_user("alice")
    client.post("/user/signout", headers=alice.headers)
    r = client.get("/question/all", headers=alice.headers)
    assert r.status_code == 403
    assert r.json() == {"code": "ATHR-002", "message": "User is signed out.Sign in first to get all questions"}


def test_owner_edits_question(make_user, client, db_session):
    alice = make_user("alice")
    qid = _create(client, alice)
    r = client.put(f"/question/edit/{qid}", json={"content": "Edited?"}, headers=alice.headers)
    assert r.status_code == 200, r.text
    assert r.json() == {"id": qid, "status": "QUESTION EDITED"}
    db_session.expire_all()
    assert db_session.get(models.Question, uuid.UUID(qid)).content == "Edited?"


def test_non_owner_cannot_edit_question(make_user, client):
    alice = make_user("alice")
    bob = make_user("bob")
    admin = make_user("root", admin=True)
    qid = _create(client, alice)
    for user in (bob, admin):
        r = client.put(f"/question/edit/{qid}", json={"content": "Hijacked"}, headers=user.headers)
        assert r.status_code == 403
        assert r.json() == {"code": "ATHR-003", "message": "Only the question owner can edit the question"}


def test_edit_unknown_question(make_user, client):
    alice = make_user("alice")
    for qid in (uuid.uuid4(), "nope"):
        r = client.put(f"/question/edit/{qid}", json={"content": "?"}, headers=alice.headers)
        assert r.status_code == 404
        assert r.json() == {"code": "QUES-001", "message": "Entered question uuid does not exist"}


def test_edit_signed_out_message(make_user, client):
    alice = make_user("alice")
    qid = _create(client, alice)
    client.post("/user/signout", headers=alice.headers)
    r = client.put(f"/question/edit/{qid}", json={"content": "?"}, headers=alice.headers)
    assert r.status_code == 403
    assert r.json()["message"] == "User is signed out.Sign in first to edit the question"


def test_owner_deletes_question_and_its_answers(make_user, client, db_session):
    alice = make_user("alice")
    bob = make_user("bob")
    qid = _create(client, alice)
    client.post(f"/question/{qid}/answer/create", json={"answer": "Paris"}, headers=bob.headers)

    r = client.delete(f"/question/delete/{qid}", headers=alice.headers)
    assert r.status_code == 200
    assert r.json() == {"id": qid, "status": "QUESTION DELETED"}
    db_session.expire_all()
    assert db_session.get(models.Question, uuid.UUID(qid)) is None
    assert db_session.query(models.Answer).count() == 0


def test_admin_deletes_any_question(make_user, client):
    alice = make_user("alice")
    admin = make_user("root", admin=True)
    qid = _create(client, alice)
    r = client.delete(f"/question/delete/{qid}", headers=admin.headers)
    assert r.status_code == 200
    assert client.get("/question/all", headers=alice.headers).status_code == 204


def test_stranger_cannot_delete_question(make_user, client):
    alice = make_user("alice")
    bob = make_user("bob")
    qid = _create(client, alice)
    r = client.delete(f"/question/delete/{qid}", headers=bob.headers)
    assert r.status_code == 403
    assert r.json() == {
        "code": "ATHR-003",
        "message": "Only the question owner or admin can delete the question",
    }


def test_delete_unknown_question(make_user, client):
    admin = make_user("root", admin=True)
    r = client.delete(f"/question/delete/{uuid.uuid4()}", headers=admin.headers)
    assert r.status_code == 404
    assert r.json()["code"] == "QUES-001"


def test_lookup_precedes_ownership_check(make_user, client):
    bob = make_user("bob")
    r = client.put(f"/question/edit/{uuid.uuid4()}", json={"content": "?"}, headers=bob.headers)
    assert r.status_code == 404


def test_get_all_questions_by_user(make_user, client):
    alice = make_user("alice")
    bob = make_user("bob")
    a1 = _create(client, alice, "Alice one?")
    _create(client, bob, "Bob one?")
    a2 = _create(client, alice, "Alice two?")
    r = client.get(f"/question/all/{alice.id}", headers=bob.headers)
    assert r.status_code == 200
    assert r.json() == [
        {"id": a1, "content": "Alice one?"},
        {"id": a2, "content": "Alice two?"},
    ]


def test_get_all_questions_by_user_without_questions(make_user, client):
    alice = make_user("alice")
    r = client.get(f"/question/all/{alice.id}", headers=alice.headers)
    assert r.status_code == 204


def test_get_all_questions_by_unknown_user(make_user, client):
    alice = make_user("alice")
    r = client.get(f"/question/all/{uuid.uuid4()}", headers=alice.headers)
    assert r.status_code == 404
    assert r.json() == {
        "code": "USR-001",
        "message": "User with entered uuid whose question details are to be seen does not exist",
    }
