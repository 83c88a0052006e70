"""
Tests for password hashing.
"""

from jobboard.core.security import BCRYPT_ROUNDS, get_password_hash, verify_password


class TestPasswordHashing:
    """Test bcrypt hashing used for staff passwords"""

    def test_hash_is_not_plaintext(self):
        password_hash = get_password_hash("securePassword123")

        assert password_hash != "securePassword123"
        assert "securePassword123" not in password_hash

    def test_hash_uses_bcrypt_cost_factor(self):
        password_hash = get_password_hash("securePassword123")

        assert password_hash.startswith(f"$2b${BCRYPT_ROUNDS:02d}$")

    def test_verify_password(self):
        password_hash = get_password_hash("securePassword123")

        assert verify_password("securePassword123", password_hash)
        assert not verify_password("securePassword124", password_hash)

    def test_hashes_are_salted(self):
        assert get_password_hash("same") != get_password_hash("same")

    def test_long_password_is_truncated_to_72_bytes(self):
        password = "x" * 100
        password_hash = get_password_hash(password)

        assert verify_password(password, password_hash)
        assert verify_password("x" * 72, password_hash)
