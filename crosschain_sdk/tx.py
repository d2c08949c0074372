"""
Chain-agnostic transaction contract.

A transaction is built by a chain adapter, signed exactly once by an external
signer, then serialized and hashed:

    unbuilt -> built (sighash available) -> signed -> serialized / hashed

The SDK never signs; it hands out the sighash and accepts the signature.
"""
from abc import ABC, abstractmethod
from enum import Enum
from typing import NewType

from pydantic import BaseModel, ConfigDict

from .address import Address, ContractAddress
from .amount import AmountBlockchain
from .exceptions import InvalidInputError, NotInitializedError

# TxHash is a tx hash or id
TxHash = NewType("TxHash", str)

# TxDataToSign is the payload a signer has to sign, aka sighash
TxDataToSign = NewType("TxDataToSign", bytes)

# TxSignature is a tx signature
TxSignature = NewType("TxSignature", bytes)


class TxInput(BaseModel):
    """
    Input data to a tx, e.g. nonce, recent block hash, account sequence.

    Chain adapters subclass this; the SDK only passes it through.
    """
    model_config = ConfigDict(frozen=True, extra="allow")


class TxInfo(BaseModel):
    """Unified view of common tx info across blockchains."""
    model_config = ConfigDict(frozen=True)

    tx_id: str = ""
    from_address: Address = Address("")
    to_address: Address = Address("")
    to_alt: Address = Address("")
    contract_address: ContractAddress = ContractAddress("")
    amount: AmountBlockchain = AmountBlockchain(0)
    fee: AmountBlockchain = AmountBlockchain(0)
    block_index: int = 0
    block_time: int = 0
    confirmations: int = 0


class TxState(str, Enum):
    """Lifecycle stage of a transaction; stages are only ever entered forwards."""
    UNBUILT = "unbuilt"
    BUILT = "built"
    SIGNED = "signed"

    @classmethod
    def advance(cls, current: "TxState", target: "TxState") -> "TxState":
        """
        Validate a lifecycle transition and return the new state.

        Re-entering ``signed`` is allowed: a second signature replaces the first.

        Raises:
            NotInitializedError: If the transaction has not been built yet
            InvalidInputError: If the transition would move backwards
        """
        if current is cls.UNBUILT and target is not cls.BUILT:
            raise NotInitializedError()
        order = list(cls)
        if order.index(target) < order.index(current):
            raise InvalidInputError(f"cannot move transaction from {current.value} to {target.value}")
        if current is target and target is not cls.SIGNED:
            raise InvalidInputError(f"transaction is already {current.value}")
        return target


class Tx(ABC):
    """
    Abstract base class for chain transactions.

    Instances mutate when signed and must not be shared between concurrent
    signing flows.
    """

    @property
    @abstractmethod
    def state(self) -> TxState:
        pass

    @abstractmethod
    def hash(self) -> TxHash:
        """
        Return the tx hash or id.

        Returns an empty string while the transaction cannot be serialized yet;
        callers must treat that as "not final".
        """
        pass

    @abstractmethod
    def sighash(self) -> TxDataToSign:
        """
        Return the payload to sign.

        Raises:
            NotInitializedError: If the transaction was never built
        """
        pass

    @abstractmethod
    def add_signature(self, signature: TxSignature) -> None:
        """
        Set the signature of the single signer, replacing any previous one.

        Raises:
            NotInitializedError: If the transaction was never built
        """
        pass

    @abstractmethod
    def serialize(self) -> bytes:
        """
        Encode the transaction in its wire format.

        Raises:
            NotInitializedError: If there is nothing to encode yet
        """
        pass
