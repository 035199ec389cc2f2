"""Tests for the HTTP API."""

import base64

import pytest
from fastapi.testclient import TestClient

from cipher_tools.core.config import Settings, get_settings
from cipher_tools.main import app

PREFIX = get_settings().api_v1_prefix


class TestCiphersEndpoint:
    """Test suite for /ciphers."""

    @pytest.fixture
    def client(self):
        return TestClient(app)

    def test_list_ciphers(self, client):
        response = client.get(f"{PREFIX}/ciphers")

        assert response.status_code == 200
        ciphers = {c["cipher_type"]: c for c in response.json()["ciphers"]}
        assert set(ciphers) == {"transposition", "substitution"}
        assert ciphers["transposition"]["uses_padding"] is True
        assert ciphers["substitution"]["uses_padding"] is False


class TestEncryptDecryptEndpoints:
    """Test suite for /encrypt and /decrypt."""

    @pytest.fixture
    def client(self):
        return TestClient(app)

    def test_encrypt_transposition(self, client):
        response = client.post(
            f"{PREFIX}/encrypt",
            json={"cipher_type": "transposition", "plaintext": "HELLOWORLD!", "key": "ZEBRA"},
        )

        assert response.status_code == 200
        data = response.json()
        assert base64.b64decode(data["ciphertext"]) == b"OD\x04LR\x04EO\x04LL\x04HW!"
        assert data["key_used"] == "ZEBRA"
        assert data["encoding"] == "base64"

    def test_decrypt_transposition(self, client):
        ciphertext = base64.b64encode(b"OD\x04LR\x04EO\x04LL\x04HW!").decode()
        response = client.post(
            f"{PREFIX}/decrypt",
            json={"cipher_type": "transposition", "ciphertext": ciphertext, "key": "ZEBRA"},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["plaintext"] == "HELLOWORLD!"
        assert data["plaintext_hex"] == "48454c4c4f574f524c4421"

    def test_substitution_roundtrip_with_generated_key(self, client):
        encrypted = client.post(
            f"{PREFIX}/encrypt",
            json={"cipher_type": "substitution", "plaintext": "Attack at dawn, 5am", "encoding": "raw"},
        ).json()

        assert len(encrypted["key_used"]) == 62
        assert encrypted["ciphertext"][6] == " "

        decrypted = client.post(
            f"{PREFIX}/decrypt",
            json={
                "cipher_type": "substitution",
                "ciphertext": encrypted["ciphertext"],
                "key": encrypted["key_used"],
                "encoding": "raw",
            },
        ).json()

        assert decrypted["plaintext"] == "Attack at dawn, 5am"

    def test_decrypt_non_utf8_plaintext(self, client):
        ciphertext = base64.b64encode(b"\xff\x01").decode()
        response = client.post(
            f"{PREFIX}/decrypt",
            json={"cipher_type": "transposition", "ciphertext": ciphertext, "key": "K"},
        )

        assert response.status_code == 200
        assert response.json()["plaintext"] is None
        assert response.json()["plaintext_hex"] == "ff"

    def test_decrypt_misaligned_ciphertext(self, client):
        ciphertext = base64.b64encode(b"x" * 15).decode()
        response = client.post(
            f"{PREFIX}/decrypt",
            json={"cipher_type": "transposition", "ciphertext": ciphertext, "key": "ABCD"},
        )

        assert response.status_code == 400
        assert response.json()["detail"] == "Encrypted message has an invalid length"

    def test_decrypt_bad_padding(self, client):
        ciphertext = base64.b64encode(b"abc\x00").decode()
        response = client.post(
            f"{PREFIX}/decrypt",
            json={"cipher_type": "transposition", "ciphertext": ciphertext, "key": "ABCD"},
        )

        assert response.status_code == 400
        assert response.json()["detail"].startswith("Padding validation failed")

    def test_decrypt_invalid_base64(self, client):
        response = client.post(
            f"{PREFIX}/decrypt",
            json={"cipher_type": "transposition", "ciphertext": "***", "key": "ABCD"},
        )

        assert response.status_code == 400

    def test_encrypt_wrong_substitution_key_size(self, client):
        response = client.post(
            f"{PREFIX}/encrypt",
            json={"cipher_type": "substitution", "plaintext": "hello", "key": "abc"},
        )

        assert response.status_code == 400
        assert response.json()["detail"] == "Key size is invalid: 3"

    def test_encrypt_empty_key(self, client):
        response = client.post(
            f"{PREFIX}/encrypt",
            json={"cipher_type": "transposition", "plaintext": "hello", "key": ""},
        )

        assert response.status_code == 400
        assert response.json()["detail"] == "Key size is invalid: 0"

    def test_unknown_cipher_type(self, client):
        response = client.post(
            f"{PREFIX}/encrypt",
            json={"cipher_type": "enigma", "plaintext": "hello", "key": "abc"},
        )

        assert response.status_code == 422

    def test_unknown_padding(self, client):
        response = client.post(
            f"{PREFIX}/encrypt",
            json={"cipher_type": "transposition", "plaintext": "hello", "key": "abc", "padding": "zero"},
        )

        assert response.status_code == 422


class TestLengthLimits:
    """Test suite for input size limits."""

    @pytest.fixture
    def client(self):
        return TestClient(app)

    @pytest.fixture
    def max_length(self):
        return get_settings().max_text_length

    def test_roundtrip_near_limit(self, client, max_length):
        """Ciphertext produced by /encrypt is always accepted by /decrypt."""
        plaintext = "a" * (max_length - 1)
        encrypted = client.post(
            f"{PREFIX}/encrypt",
            json={"cipher_type": "transposition", "plaintext": plaintext, "key": "KEY"},
        )
        assert encrypted.status_code == 200

        decrypted = client.post(
            f"{PREFIX}/decrypt",
            json={
                "cipher_type": "transposition",
                "ciphertext": encrypted.json()["ciphertext"],
                "key": "KEY",
            },
        )
        assert decrypted.status_code == 200
        assert decrypted.json()["plaintext"] == plaintext

    def test_plaintext_limit_counts_utf8_bytes(self, client, max_length):
        """Multi-byte characters count by their encoded size."""
        plaintext = "é" * (max_length // 2 + 1)
        response = client.post(
            f"{PREFIX}/encrypt",
            json={"cipher_type": "transposition", "plaintext": plaintext, "key": "KEY"},
        )

        assert response.status_code == 400
        assert response.json()["detail"] == (
            f"Input length {len(plaintext.encode())} exceeds maximum {max_length}"
        )

    def test_ciphertext_over_limit(self, client, max_length):
        ciphertext = base64.b64encode(b"x" * (max_length + 300)).decode()
        response = client.post(
            f"{PREFIX}/decrypt",
            json={"cipher_type": "substitution", "ciphertext": ciphertext, "key": "k" * 62},
        )

        assert response.status_code == 400
        assert response.json()["detail"].startswith(f"Input length {max_length + 300} exceeds maximum")


class TestSettings:
    """Test application settings."""

    def test_defaults(self):
        settings = Settings()

        assert settings.api_v1_prefix == "/api/v1"
        assert settings.max_text_length == 100_000
        assert settings.is_development is (settings.app_env == "development")

    def test_only_used_properties_exposed(self):
        properties = {name for name, value in vars(Settings).items() if isinstance(value, property)}

        assert properties == {"is_development"}
