"""Solana."""
from .address import SolanaAddressBuilder

__all__ = ['SolanaAddressBuilder']
