"""
Tests for password hashing and bearer tokens.
"""

import base64
import json
import time
from unittest.mock import patch

from dating_admin_api.app.core.security import (
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)


class TestPasswordHashing:
    def test_roundtrip(self):
        hashed = hash_password("s3cret")
        assert verify_password("s3cret", hashed)
        assert not verify_password("S3cret", hashed)

    def test_salted(self):
        assert hash_password("same") != hash_password("same")

    def test_records_scheme_and_work_factor(self):
        hashed = hash_password("s3cret", iterations=1000)
        scheme, iterations, _, _ = hashed.split("$")
        assert (scheme, iterations) == ("pbkdf2_sha256", "1000")
        assert verify_password("s3cret", hashed)

    def test_plaintext_is_not_a_hash(self):
        assert not verify_password("admin123", "admin123")

    def test_malformed_hashes_never_match(self):
        assert not verify_password("x", None)
        assert not verify_password("x", "")
        assert not verify_password("x", "zz$not-hex")


class TestTokens:
    def test_roundtrip(self):
        token = create_access_token({"sub": "ops@loveadmin.test"})
        payload = decode_access_token(token)
        assert payload["sub"] == "ops@loveadmin.test"
        assert payload["exp"] > time.time()

    def test_header_declares_hs256(self):
        header = create_access_token({"sub": "a@b.c"}).split(".")[0]
        decoded = json.loads(base64.urlsafe_b64decode(header + "=" * (-len(header) % 4)))
        assert decoded == {"alg": "HS256", "typ": "JWT"}

    def test_tampered_payload_is_rejected(self):
        header, _, signature = create_access_token({"sub": "a@b.c"}).split(".")
        forged = create_access_token({"sub": "root@b.c"}).split(".")[1]
        assert decode_access_token(f"{header}.{forged}.{signature}") is None

    def test_garbage_is_rejected(self):
        assert decode_access_token("not-a-token") is None
        assert decode_access_token("a.b.c") is None

    def test_expired_token_is_rejected(self):
        token = create_access_token({"sub": "a@b.c"}, expires_delta=60)
        with patch("dating_admin_api.app.core.security.time.time", return_value=time.time() + 3600):
            assert decode_access_token(token) is None
