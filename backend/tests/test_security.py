import pytest
from jose import jwt
from jose.exceptions import JWTError

from gymtracker.security import create_access_token, decode_token, hash_password, verify_password
from gymtracker.settings import get_settings

def test_hash_and_verify():
    h = hash_password("s3cret")
    assert h != "s3cret"
    assert verify_password("s3cret", h)
    assert not verify_password("nope", h)

def test_same_password_hashes_differently():
    assert hash_password("s3cret") != hash_password("s3cret")

def test_token_carries_sub_and_nonce():
    payload = decode_token(create_access_token("user-1"))
    assert payload["sub"] == "user-1"
    assert len(payload["jti"]) == 16

def test_tokens_for_same_user_differ():
    assert create_access_token("user-1") != create_access_token("user-1")

def test_tampered_token_rejected():
    s = get_settings()
    forged = jwt.encode({"sub": "user-1", "exp": 9999999999}, "not-the-key", algorithm=s.ALGORITHM)
    with pytest.raises(JWTError):
        decode_token(forged)

def test_token_without_exp_rejected():
    s = get_settings()
    token = jwt.encode({"sub": "user-1"}, s.SECRET_KEY, algorithm=s.ALGORITHM)
    with pytest.raises(JWTError):
        decode_token(token)

def test_bytes_past_72_still_matter():
    h = hash_password("x" * 72 + "tail-one")
    assert verify_password("x" * 72 + "tail-one", h)
    assert not verify_password("x" * 72 + "tail-two", h)
