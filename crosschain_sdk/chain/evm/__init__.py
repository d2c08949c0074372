"""EVM chains (ETH and its forks, L2s and sidechains)."""
from .address import EvmAddressBuilder

__all__ = ['EvmAddressBuilder']
