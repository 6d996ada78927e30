from datetime import timedelta

from jose import jwt

from task_manager.database import get_session
from task_manager.models import UserToken
from task_manager.security import ALGORITHM, create_access_token, decode_access_token

from util import auth_headers


def test_gate_rejects_bad_headers(client, user_one):
    token = user_one["token"]
    bad_headers = [
        {},
        {"Authorization": ""},
        {"Authorization": "Bearer"},
        {"Authorization": token},
        {"Authorization": f"Token {token}"},
        {"Authorization": "Bearer BOGUS"},
        {"Authorization": "Bearer BOGUS BOGUS"},
    ]
    for headers in bad_headers:
        response = client.get("/users/me", headers=headers)
        assert response.status_code == 401, headers
        assert response.json() == {"detail": "Please authenticate."}


def test_gate_accepts_active_token(client, user_one):
    assert client.get("/users/me", headers=auth_headers(user_one)).status_code == 200


def test_gate_rejects_unlisted_token(client, user_one):
    # Correctly signed but never issued through the store
    token = create_access_token(user_one["id"])
    response = client.get("/users/me", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 401


def test_gate_rejects_expired_token(client, user_one):
    token = create_access_token(user_one["id"], expires_delta=timedelta(seconds=-10))
    with get_session() as db:
        db.add(UserToken(token=token, user_id=user_one["id"]))
        db.commit()

    response = client.get("/users/me", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 401
    assert response.json() == {"detail": "Please authenticate."}


def test_gate_rejects_foreign_signature(client, user_one):
    token = jwt.encode({"sub": user_one["id"]}, "some_other_secret", algorithm=ALGORITHM)
    with get_session() as db:
        db.add(UserToken(token=token, user_id=user_one["id"]))
        db.commit()

    response = client.get("/users/me", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 401


def test_gate_rejects_token_of_deleted_user(client, user_one):
    assert client.delete("/users/me", headers=auth_headers(user_one)).status_code == 200
    assert client.get("/users/me", headers=auth_headers(user_one)).status_code == 401


def test_token_of_one_user_does_not_open_another(client, user_one, user_two):
    forged = jwt.encode({"sub": user_two["id"]}, "testing_secret", algorithm=ALGORITHM)
    with get_session() as db:
        db.add(UserToken(token=forged, user_id=user_one["id"]))
        db.commit()

    response = client.get("/users/me", headers={"Authorization": f"Bearer {forged}"})
    assert response.status_code == 401


def test_tokens_are_unique_and_decodable(user_one):
    first = create_access_token(user_one["id"])
    second = create_access_token(user_one["id"])
    assert first != second
    assert decode_access_token(first) == user_one["id"]

    claims = jwt.get_unverified_claims(first)
    assert claims["exp"] - claims["iat"] == 24 * 60 * 60


def test_decode_rejects_garbage():
    assert decode_access_token("not.a.token") is None
    assert decode_access_token(jwt.encode({"foo": "bar"}, "testing_secret", algorithm=ALGORITHM)) is None
