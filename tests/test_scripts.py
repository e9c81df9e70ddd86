"""
Tests for the command line helpers.
"""

import create_token
import hash_admin_password
from dating_admin_api.app.core.security import decode_access_token, hash_password


def test_hash_password_prints_env_line(capsys):
    assert hash_admin_password.main(["--password", "N3wPass!"]) == 0
    line = capsys.readouterr().out.strip()
    assert line.startswith("ADMIN_PASSWORD_HASH=")
    assert "$" in line


def test_check_password(capsys):
    hashed = hash_password("N3wPass!")
    assert hash_admin_password.main(["--password", "N3wPass!", "--check", hashed]) == 0
    assert hash_admin_password.main(["--password", "other", "--check", hashed]) == 2


def test_create_token(capsys):
    create_token.main(["--email", "ops@loveadmin.test", "--days", "1"])
    token = capsys.readouterr().out.strip().splitlines()[-1]
    assert decode_access_token(token)["sub"] == "ops@loveadmin.test"
