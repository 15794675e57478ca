"""Tests for network resolution."""

import pytest
from pydantic import SecretStr

from chaincfg.errors import MissingSecret, MissingSigningAccount
from chaincfg.networks.registry import NetworkDescriptor
from chaincfg.networks.resolver import ResolvedNetworkConfig, resolve

BSC = NetworkDescriptor(
    name="bsc",
    chain_id=56,
    url_secret_name="BSC_RPC_URL",
    account_secret_names=("PRIVATE_KEY",),
)

HARDHAT = NetworkDescriptor(name="hardhat", chain_id=1337, logging_enabled=True, is_local=True)


class TestResolveLocal:
    """Local networks never need secrets."""

    def test_no_secrets(self, make_store):
        """hardhat resolves with no secrets set anywhere."""
        config = resolve(HARDHAT, make_store())

        assert config.name == "hardhat"
        assert config.chain_id == 1337
        assert config.url is None
        assert config.accounts == ()
        assert config.is_local is True
        assert config.logging_enabled is True

    def test_ignores_secrets(self, make_store):
        """Secrets present in the store do not leak into local configs."""
        config = resolve(HARDHAT, make_store(PRIVATE_KEY="0xabc", BSC_RPC_URL="https://x"))

        assert config.url is None
        assert config.accounts == ()

    def test_local_with_declared_accounts(self, make_store):
        """Declared account names on a local network are not looked up."""
        descriptor = NetworkDescriptor(
            name="dev", is_local=True, account_secret_names=("UNSET_KEY",)
        )

        config = resolve(descriptor, make_store())

        assert config.accounts == ()


class TestResolveRemote:
    """Non-local networks need a URL and signing accounts."""

    def test_bsc_scenario(self, make_store):
        """bsc resolves with URL and private key from the environment."""
        store = make_store(BSC_RPC_URL="https://rpc.example", PRIVATE_KEY="0xabc...")

        config = resolve(BSC, store)

        assert config.name == "bsc"
        assert config.chain_id == 56
        assert config.url.get_secret_value() == "https://rpc.example"
        assert [a.get_secret_value() for a in config.accounts] == ["0xabc..."]
        assert config.is_local is False

    def test_accounts_preserve_order(self, make_store):
        """Resolved accounts match the declared order and length."""
        descriptor = NetworkDescriptor(
            name="multi",
            url_secret_name="RPC",
            account_secret_names=("KEY_B", "KEY_A", "KEY_C"),
        )
        store = make_store(RPC="https://rpc", KEY_A="0xa", KEY_B="0xb", KEY_C="0xc")

        config = resolve(descriptor, store)

        assert len(config.accounts) == 3
        assert [a.get_secret_value() for a in config.accounts] == ["0xb", "0xa", "0xc"]

    def test_unset_chain_id_copied(self, make_store):
        """An unset chain_id is carried through as None."""
        descriptor = NetworkDescriptor(
            name="custom", url_secret_name="RPC", account_secret_names=("KEY",)
        )

        config = resolve(descriptor, make_store(RPC="https://rpc", KEY="0x1"))

        assert config.chain_id is None

    def test_missing_private_key(self, make_store):
        """Unset PRIVATE_KEY fails with MissingSecret naming it."""
        store = make_store(BSC_RPC_URL="https://rpc.example")

        with pytest.raises(MissingSecret) as exc_info:
            resolve(BSC, store)

        assert exc_info.value.secret_name == "PRIVATE_KEY"
        assert exc_info.value.network == "bsc"
        assert exc_info.value.empty is False

    def test_missing_url(self, make_store):
        """Unset URL fails with MissingSecret naming the URL variable."""
        store = make_store(PRIVATE_KEY="0xabc")

        with pytest.raises(MissingSecret) as exc_info:
            resolve(BSC, store)

        assert exc_info.value.secret_name == "BSC_RPC_URL"

    def test_url_checked_before_accounts(self, make_store):
        """With nothing set the URL is reported first."""
        with pytest.raises(MissingSecret) as exc_info:
            resolve(BSC, make_store())

        assert exc_info.value.secret_name == "BSC_RPC_URL"

    def test_empty_url_rejected(self, make_store):
        """An empty URL is treated as missing."""
        store = make_store(BSC_RPC_URL="", PRIVATE_KEY="0xabc")

        with pytest.raises(MissingSecret) as exc_info:
            resolve(BSC, store)

        assert exc_info.value.secret_name == "BSC_RPC_URL"
        assert exc_info.value.empty is True
        assert "is empty" in str(exc_info.value)

    def test_empty_private_key_rejected(self, make_store):
        """An empty signing key is never accepted as a signer."""
        store = make_store(BSC_RPC_URL="https://rpc.example", PRIVATE_KEY="")

        with pytest.raises(MissingSecret) as exc_info:
            resolve(BSC, store)

        assert exc_info.value.secret_name == "PRIVATE_KEY"
        assert exc_info.value.empty is True

    def test_second_account_missing(self, make_store):
        """The first missing account in order is reported."""
        descriptor = NetworkDescriptor(
            name="multi",
            url_secret_name="RPC",
            account_secret_names=("KEY_A", "KEY_B", "KEY_C"),
        )
        store = make_store(RPC="https://rpc", KEY_A="0xa")

        with pytest.raises(MissingSecret) as exc_info:
            resolve(descriptor, store)

        assert exc_info.value.secret_name == "KEY_B"

    def test_no_accounts_declared(self, make_store):
        """A non-local network without accounts fails with MissingSigningAccount."""
        descriptor = NetworkDescriptor(name="broken", chain_id=5, url_secret_name="RPC")

        with pytest.raises(MissingSigningAccount) as exc_info:
            resolve(descriptor, make_store(RPC="https://rpc"))

        assert exc_info.value.network == "broken"

    def test_error_message_excludes_values(self, make_store):
        """Error messages never contain secret values."""
        store = make_store(BSC_RPC_URL="https://secret-rpc.example/key123")

        with pytest.raises(MissingSecret) as exc_info:
            resolve(BSC, store)

        assert "key123" not in str(exc_info.value)


class TestResolvedNetworkConfig:
    """Tests for ResolvedNetworkConfig behavior."""

    def test_idempotent(self, make_store):
        """Resolving twice yields equal configs."""
        store = make_store(BSC_RPC_URL="https://rpc.example", PRIVATE_KEY="0xabc")

        assert resolve(BSC, store) == resolve(BSC, store)

    def test_idempotent_across_stores(self, make_store):
        """Identical inputs in separate stores yield equal configs."""
        first = resolve(BSC, make_store(BSC_RPC_URL="https://r", PRIVATE_KEY="0x1"))
        second = resolve(BSC, make_store(BSC_RPC_URL="https://r", PRIVATE_KEY="0x1"))

        assert first == second

    def test_repr_masks_secrets(self, make_store):
        """repr does not expose URL or keys."""
        store = make_store(BSC_RPC_URL="https://rpc.example", PRIVATE_KEY="0xabcdef")

        text = repr(resolve(BSC, store))

        assert "rpc.example" not in text
        assert "0xabcdef" not in text

    def test_to_dict_masked(self, make_store):
        """to_dict masks secrets by default."""
        store = make_store(BSC_RPC_URL="https://rpc.example", PRIVATE_KEY="0xabc")

        result = resolve(BSC, store).to_dict()

        assert result["chainId"] == 56
        assert result["url"] == "**********"
        assert result["accounts"] == ["**********"]

    def test_to_dict_revealed(self, make_store):
        """to_dict can reveal secrets for in-process handoff."""
        store = make_store(BSC_RPC_URL="https://rpc.example", PRIVATE_KEY="0xabc")

        result = resolve(BSC, store).to_dict(reveal_secrets=True)

        assert result == {"chainId": 56, "url": "https://rpc.example", "accounts": ["0xabc"]}

    def test_to_dict_local(self, make_store):
        """Local configs render chain ID and logging only."""
        assert resolve(HARDHAT, make_store()).to_dict() == {
            "chainId": 1337,
            "loggingEnabled": True,
        }

    def test_accounts_stored_as_tuple(self):
        """Accounts passed as a list are frozen into a tuple."""
        keys = [SecretStr("0x1"), SecretStr("0x2")]
        config = ResolvedNetworkConfig(
            name="bsc", chain_id=56, url=SecretStr("https://r"), accounts=keys
        )
        keys.append(SecretStr("0x3"))

        assert config.accounts == (SecretStr("0x1"), SecretStr("0x2"))
        assert isinstance(config.accounts, tuple)
