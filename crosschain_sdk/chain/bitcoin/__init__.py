"""Bitcoin and Bitcoin-derived UTXO chains."""
from .address import BitcoinAddressBuilder, NetworkParams, NETWORK_PARAMS

__all__ = ['BitcoinAddressBuilder', 'NetworkParams', 'NETWORK_PARAMS']
