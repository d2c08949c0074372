"""
Cosmos SDK chains.

This package is the worked example of plugging a chain into the transaction
contract: see ``CosmosTx``.
"""
from .address import CosmosAddressBuilder
from .tx import CosmosTx
from .types import (
    BankSend,
    CosmosTxInput,
    SignatureV2,
    SignerData,
    SignMode,
    SingleSignatureData,
    to_known_transfer,
)

__all__ = [
    'CosmosAddressBuilder',
    'CosmosTx',
    'CosmosTxInput',
    'BankSend',
    'SignatureV2',
    'SignerData',
    'SignMode',
    'SingleSignatureData',
    'to_known_transfer',
]
