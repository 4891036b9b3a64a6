from datetime import UTC, datetime, timedelta

from jose import jwt

from app.core.config import Settings, settings
from app.core.security import TokenSigner, get_password_hash, verify_password


class TestPasswordHashing:
    def test_hash_is_salted_bcrypt(self):
        first = get_password_hash("secret")
        second = get_password_hash("secret")

        assert first != second
        assert first.startswith("$2b$")
        assert verify_password("secret", first)
        assert verify_password("secret", second)

    def test_wrong_password_does_not_verify(self):
        hashed = get_password_hash("secret")

        assert not verify_password("Secret", hashed)

    def test_cost_factor_comes_from_settings(self):
        hashed = get_password_hash("secret")

        assert int(hashed.split("$")[2]) == settings.BCRYPT_ROUNDS

    def test_production_cost_factor_defaults_to_12(self):
        assert Settings.model_fields["BCRYPT_ROUNDS"].default == 12


class TestTokenSigner:
    def test_round_trip_keeps_claims(self):
        signer = TokenSigner("key")

        token = signer.create_access_token({"sub": "42", "email": "a@b.com", "role": "admin"})
        payload = signer.decode_token(token)

        assert payload is not None
        assert payload["sub"] == "42"
        assert payload["email"] == "a@b.com"
        assert payload["type"] == "access"

    def test_expired_token_is_rejected(self):
        signer = TokenSigner("key", expire_hours=24)
        issued_at = datetime.now(UTC) - timedelta(hours=25)

        token = signer.create_access_token({"sub": "42"}, issued_at=issued_at)

        assert signer.decode_token(token) is None

    def test_token_just_inside_lifetime_is_accepted(self):
        signer = TokenSigner("key", expire_hours=24)
        issued_at = datetime.now(UTC) - timedelta(hours=23, minutes=59)

        token = signer.create_access_token({"sub": "42"}, issued_at=issued_at)

        assert signer.decode_token(token) is not None

    def test_wrong_key_is_rejected(self):
        token = TokenSigner("key").create_access_token({"sub": "42"})

        assert TokenSigner("other-key").decode_token(token) is None

    def test_token_without_access_type_is_rejected(self):
        token = jwt.encode(
            {"sub": "42", "exp": datetime.now(UTC) + timedelta(hours=1)}, "key", algorithm="HS256"
        )

        assert TokenSigner("key").decode_token(token) is None
