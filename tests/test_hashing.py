from utils.hashing import get_password_hash, verify_password


def test_hash_is_salted_and_not_plaintext():
    first = get_password_hash("secret1")
    second = get_password_hash("secret1")
    assert "secret1" not in first
    assert first != second


def test_verify_accepts_right_password_only():
    hashed = get_password_hash("secret1")
    assert verify_password("secret1", hashed)
    assert not verify_password("secret2", hashed)


def test_verify_rejects_malformed_hash():
    assert not verify_password("secret1", "not-a-bcrypt-hash")


def test_long_passwords_hash_and_verify():
    password = "x" * 100
    assert verify_password(password, get_password_hash(password))
