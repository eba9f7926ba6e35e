from account_service.adapter.services.bcrypt_password_hasher import BcryptPasswordHasher


def test_hash_is_salted_and_verifiable():
    hasher = BcryptPasswordHasher(rounds=4)

    first = hasher.hash("pw1")
    second = hasher.hash("pw1")

    assert first != "pw1"
    assert first != second
    assert first.startswith("$2b$04$")
    assert len(first) == 60
    assert hasher.verify("pw1", first)
    assert hasher.verify("pw1", second)


def test_verify_rejects_wrong_password():
    hasher = BcryptPasswordHasher(rounds=4)

    assert not hasher.verify("pw2", hasher.hash("pw1"))


def test_verify_malformed_hash_is_false():
    hasher = BcryptPasswordHasher(rounds=4)

    assert not hasher.verify("pw1", "not-a-hash")
    assert not hasher.verify("pw1", "")


def test_passwords_longer_than_72_bytes():
    hasher = BcryptPasswordHasher(rounds=4)
    long_password = "x" * 100

    digest = hasher.hash(long_password)

    assert hasher.verify(long_password, digest)
    assert hasher.verify("x" * 72, digest)


def test_unicode_password():
    hasher = BcryptPasswordHasher(rounds=4)

    digest = hasher.hash("pässwörd-密码")

    assert hasher.verify("pässwörd-密码", digest)
    assert not hasher.verify("passwort-密码", digest)
