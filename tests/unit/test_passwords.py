from quora.utils import passwords


def test_hash_is_salted_and_verifies():
    first = passwords.hash_password("hunter22")
    second = passwords.hash_password("hunter22")
    assert first != second
    assert passwords.verify_password("hunter22", first)
    assert passwords.verify_password("hunter22", second)


def test_wrong_password_does_not_verify():
    enc = passwords.hash_password("hunter22")
    assert passwords.verify_password("hunter23", enc) is False
    assert passwords.verify_password("", enc) is False


def test_verify_never_raises_on_bad_hash():
    assert passwords.verify_password("hunter22", "plaintext") is False
    assert passwords.verify_password("hunter22", "") is False


def test_fresh_hash_does_not_need_rehash():
    assert passwords.needs_rehash(passwords.hash_password("hunter22")) is False
