"""
Selects chain implementations for an asset config.

Chains are dispatched by their Driver, never by symbol, so adding a chain to
the NativeAsset registry is enough for it to get a builder.
"""
import logging
from typing import Dict, Type

from .address import AddressBuilder
from .asset import AssetConfig, Driver
from .chain.bitcoin import BitcoinAddressBuilder
from .chain.cosmos import CosmosAddressBuilder
from .chain.evm import EvmAddressBuilder
from .chain.solana import SolanaAddressBuilder
from .exceptions import ChainNotImplementedError

logger = logging.getLogger(__name__)

ADDRESS_BUILDERS: Dict[Driver, Type[AddressBuilder]] = {
    Driver.EVM: EvmAddressBuilder,
    Driver.SOLANA: SolanaAddressBuilder,
    Driver.COSMOS: CosmosAddressBuilder,
    Driver.BITCOIN: BitcoinAddressBuilder,
}


def new_address_builder(asset_config: AssetConfig) -> AddressBuilder:
    """
    Create the address builder for an asset's chain.

    Args:
        asset_config: Resolved asset config

    Returns:
        AddressBuilder for the asset's chain family

    Raises:
        ChainNotImplementedError: If the chain family has no address builder
        InvalidInputError: If the config lacks what the chain family needs
    """
    driver = asset_config.driver
    builder_cls = ADDRESS_BUILDERS.get(driver)
    if builder_cls is None:
        raise ChainNotImplementedError(
            f"no address builder for {asset_config.native_asset.value} ({driver.value})"
        )
    logger.debug("Using %s for %s", builder_cls.__name__, asset_config.id)
    return builder_cls(asset_config)
