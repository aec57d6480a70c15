from types import SimpleNamespace

import jwt

from auth import AllowAllAuthorizer, JwtAuthorizer, generateToken, validateToken

SECRET = "test-secret-for-receipt-processor-tokens"
NOW = 1_700_000_000


def test_generated_token_validates():
    token = generateToken("alice", SECRET, ttlSeconds=60, now=NOW)
    assert validateToken(token, SECRET, now=NOW + 30)


def test_expired_token_is_rejected():
    token = generateToken("alice", SECRET, ttlSeconds=60, now=NOW)
    assert not validateToken(token, SECRET, now=NOW + 60)


def test_wrong_secret_is_rejected():
    token = generateToken("alice", SECRET, now=NOW)
    assert not validateToken(token, "other-secret-for-receipt-processor-tokens", now=NOW)


def test_tampered_payload_is_rejected():
    header, payload, signature = generateToken("alice", SECRET, now=NOW).split(".")
    otherPayload = generateToken("mallory", SECRET, now=NOW).split(".")[1]
    assert not validateToken(f"{header}.{otherPayload}.x{signature}", SECRET, now=NOW)
    assert not validateToken(f"{header}.{otherPayload}.{signature}", SECRET, now=NOW)


def test_malformed_tokens_are_rejected():
    for token in ["", "abc", "a.b", "a.b.c", "!!!.???.***", "a.b.c.d"]:
        assert not validateToken(token, SECRET, now=NOW)


def test_non_ascii_signature_is_rejected():
    header, payload, _ = generateToken("alice", SECRET, now=NOW).split(".")
    assert not validateToken(f"{header}.{payload}.é", SECRET, now=NOW)
    assert not validateToken(f"{header}.{payload}.é", SECRET)


def test_other_algorithms_are_rejected():
    claims = {"sub": "alice", "exp": NOW + 60}
    hs512 = jwt.encode(claims, SECRET + SECRET, algorithm="HS512")
    unsigned = jwt.encode(claims, None, algorithm="none")
    assert not validateToken(hs512, SECRET + SECRET, now=NOW)
    assert not validateToken(unsigned, SECRET, now=NOW)


def test_token_without_expiry_is_rejected():
    token = jwt.encode({"sub": "alice"}, SECRET, algorithm="HS256")
    assert not validateToken(token, SECRET, now=NOW)
    assert not validateToken(token, SECRET)


def test_expiry_checked_against_current_time():
    assert validateToken(generateToken("alice", SECRET, ttlSeconds=60), SECRET)
    assert not validateToken(generateToken("alice", SECRET, ttlSeconds=60, now=NOW), SECRET)


def _request(headers):
    return SimpleNamespace(headers=headers)


def test_jwt_authorizer_reads_bearer_header():
    authorizer = JwtAuthorizer(SECRET)
    token = generateToken("alice", SECRET)
    assert authorizer.isAuthorized(_request({"Authorization": f"Bearer {token}"}))
    assert authorizer.isAuthorized(_request({"Authorization": token}))
    assert not authorizer.isAuthorized(_request({}))
    assert not authorizer.isAuthorized(_request({"Authorization": "Bearer nope"}))


def test_allow_all_authorizer():
    assert AllowAllAuthorizer().isAuthorized(_request({}))
