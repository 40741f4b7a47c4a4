"""Wallet loading from a private key or a mnemonic phrase."""

import logging

from eth_account import Account
from eth_account.signers.local import LocalAccount

from saturnbot.errors import ConfigurationError

logger = logging.getLogger(__name__)

Account.enable_unaudited_hdwallet_features()

# Saturn Wallet / MetaMask derivation path, indexed from 0
DERIVATION_PATH = "m/44'/60'/0'/0/{index}"


def load_wallet(
    pkey: str | None = None,
    mnemonic: str | None = None,
    wallet_id: int = 2,
) -> LocalAccount:
    """Return the signing account for exactly one of `pkey` / `mnemonic`.

    `wallet_id` is 1-based, so the default picks Account 2 of the wallet.
    """
    if not pkey and not mnemonic:
        raise ConfigurationError("At least one of [pkey], [mnemonic] must be supplied")
    if pkey and mnemonic:
        raise ConfigurationError("Only one of [pkey], [mnemonic] must be supplied")

    if mnemonic:
        if wallet_id < 1:
            raise ConfigurationError(f"Wallet id must be 1 or greater, got {wallet_id}")
        path = DERIVATION_PATH.format(index=wallet_id - 1)
        try:
            account = Account.from_mnemonic(mnemonic, account_path=path)
        except Exception as e:
            raise ConfigurationError(f"Invalid mnemonic: {e}") from e
        logger.debug("Derived wallet %s at %s", account.address, path)
        return account

    try:
        return Account.from_key(pkey)
    except Exception as e:
        raise ConfigurationError(f"Invalid private key: {e}") from e
