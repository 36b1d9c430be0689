import pytest
from fastapi import HTTPException

from foodpay.oauth2 import create_access_token, verify_access_token


SECRET = "jwt-test-secret"
credentials_exception = HTTPException(status_code=401, detail="Could not validate credentials")


def test_round_trip():
    token = create_access_token({"user_id": 7, "role": "vendor"}, SECRET)

    token_data = verify_access_token(token, SECRET, "HS256", credentials_exception)
    assert token_data.id == "7"
    assert token_data.role == "vendor"


def test_wrong_secret():
    token = create_access_token({"user_id": "7"}, "other-secret")

    with pytest.raises(HTTPException) as exc_info:
        verify_access_token(token, SECRET, "HS256", credentials_exception)
    assert exc_info.value.status_code == 401


def test_expired_token():
    token = create_access_token({"user_id": "7"}, SECRET, expires_minutes=-1)

    with pytest.raises(HTTPException):
        verify_access_token(token, SECRET, "HS256", credentials_exception)


def test_missing_user_id():
    token = create_access_token({"role": "customer"}, SECRET)

    with pytest.raises(HTTPException):
        verify_access_token(token, SECRET, "HS256", credentials_exception)


def test_garbage_token():
    with pytest.raises(HTTPException):
        verify_access_token("not.a.token", SECRET, "HS256", credentials_exception)
