"""Tests for key loading, chain resolution and local signing."""

from __future__ import annotations

from pathlib import Path

import pytest
from eth_account import Account

from conftest import TEST_ADDRESS, TEST_PRIVATE_KEY
from ethwire.config import get_chain_id, parse_chain_id
from ethwire.signer import LocalSigner, load_private_key
from ethwire.tx.builder import LegacyTransactionBuilder


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    # setenv first so monkeypatch restores the variables after load_dotenv touches them
    for name in ("PRIVATE_KEY", "CHAIN_ID"):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return monkeypatch


class TestLoadPrivateKey:
    def test_from_environment(self, clean_env: pytest.MonkeyPatch, tmp_path: Path) -> None:
        clean_env.setenv("PRIVATE_KEY", TEST_PRIVATE_KEY)
        assert load_private_key(tmp_path / ".env") == TEST_PRIVATE_KEY

    def test_from_env_file_adds_prefix(self, clean_env: pytest.MonkeyPatch, tmp_path: Path) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text(f"PRIVATE_KEY={TEST_PRIVATE_KEY[2:]}\n", encoding="utf-8")
        assert load_private_key(env_file) == TEST_PRIVATE_KEY

    def test_missing(self, clean_env: pytest.MonkeyPatch, tmp_path: Path) -> None:
        with pytest.raises(ValueError, match="PRIVATE_KEY not found"):
            load_private_key(tmp_path / ".env")

    def test_env_path_from_environment(self, clean_env: pytest.MonkeyPatch, tmp_path: Path) -> None:
        env_file = tmp_path / "custom.env"
        env_file.write_text(f"PRIVATE_KEY={TEST_PRIVATE_KEY}\n", encoding="utf-8")
        clean_env.setenv("ETHWIRE_ENV", str(env_file))
        assert load_private_key() == TEST_PRIVATE_KEY

    def test_missing_names_resolved_path(self, clean_env: pytest.MonkeyPatch, tmp_path: Path) -> None:
        env_file = tmp_path / "absent.env"
        clean_env.setenv("ETHWIRE_ENV", str(env_file))
        with pytest.raises(ValueError) as exc_info:
            load_private_key()
        assert str(env_file) in str(exc_info.value)


class TestChainId:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [(5, 5), ("1", 1), (" 84532 ", 84532), ("mainnet", 1), ("Sepolia", 11155111), ("base_sepolia", 84532)],
    )
    def test_parse(self, value: object, expected: int) -> None:
        assert parse_chain_id(value) == expected  # type: ignore[arg-type]

    def test_unknown_chain(self) -> None:
        with pytest.raises(ValueError, match="Unknown chain"):
            parse_chain_id("atlantis")

    def test_from_environment(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("CHAIN_ID", "goerli")
        assert get_chain_id() == 5


class TestLocalSigner:
    def test_identity(self) -> None:
        signer = LocalSigner(TEST_PRIVATE_KEY, "goerli")
        assert signer.address() == bytes.fromhex(TEST_ADDRESS[2:])
        assert signer.chain_id() == 5

    def test_from_env(self, clean_env: pytest.MonkeyPatch, tmp_path: Path) -> None:
        clean_env.setenv("PRIVATE_KEY", TEST_PRIVATE_KEY)
        clean_env.setenv("CHAIN_ID", "84532")
        signer = LocalSigner.from_env(tmp_path / ".env")
        assert signer.chain_id() == 84532
        assert signer.address() == bytes.fromhex(TEST_ADDRESS[2:])

    def test_from_env_file_named_by_environment(self, clean_env: pytest.MonkeyPatch, tmp_path: Path) -> None:
        env_file = tmp_path / "custom.env"
        env_file.write_text(f"PRIVATE_KEY={TEST_PRIVATE_KEY}\nCHAIN_ID=5\n", encoding="utf-8")
        clean_env.setenv("ETHWIRE_ENV", str(env_file))

        signer = LocalSigner.from_env()

        assert signer.chain_id() == 5
        assert signer.address() == bytes.fromhex(TEST_ADDRESS[2:])

    def test_signed_transaction_recovers_to_signer(self) -> None:
        signer = LocalSigner(TEST_PRIVATE_KEY, 5)
        builder = LegacyTransactionBuilder()
        draft = builder.draft(
            to=b"\x00" * 19 + b"\x01",
            nonce=5,
            data=b"\x01\x02",
            gas_price=50_000_000_000,
            gas_limit=None,
            value=0,
            chain_id=signer.chain_id(),
        )
        signed = builder.finalize(draft, 100_000, signer)

        assert draft.gas_limit is None
        assert signed.trx.gas_limit == 100_000
        assert Account.recover_transaction(signed.encode()) == TEST_ADDRESS

    def test_draft_without_gas_limit_cannot_sign(self) -> None:
        draft = LegacyTransactionBuilder().draft(
            to=b"\x00" * 20, nonce=0, data=b"", gas_price=1, gas_limit=None, value=0, chain_id=1
        )
        with pytest.raises(ValueError, match="gas limit"):
            draft.to_fields()
