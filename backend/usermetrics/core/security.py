from __future__ import annotations

import bcrypt


def hash_password(plain: str) -> str:
    if not plain or len(plain) < 7:
        raise ValueError("Password too short")
    salt = bcrypt.gensalt()
    hashed = bcrypt.hashpw(plain.encode("utf-8"), salt)
    return hashed.decode("utf-8")


def verify_password(plain: str, hashed: str) -> bool:
    try:
        return bcrypt.checkpw(plain.encode("utf-8"), hashed.encode("utf-8"))
    except ValueError:
        # Malformed stored hash.
        return False


# Checked against when the email is unknown, so both failure paths pay for one bcrypt round.
_DUMMY_HASH = bcrypt.hashpw(b"usermetrics-dummy-password", bcrypt.gensalt()).decode("utf-8")


def burn_password_check(plain: str) -> None:
    verify_password(plain, _DUMMY_HASH)
