"""
Types at the boundary between the Cosmos adapter and a Cosmos SDK library.

The adapter never decodes wire formats itself. It talks to the library's
transaction, builder and encoder objects through the protocols below, and
passes signatures in the structures the library's tx builder expects.
"""
import logging
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Callable, Optional, Protocol, Sequence, runtime_checkable

from ..._rate_limited_log import rate_limited_log
from ...amount import AmountBlockchain
from ...tx import TxInput

logger = logging.getLogger(__name__)

# Full protobuf name of the bank module's send message
MSG_SEND_NAME = "cosmos.bank.v1beta1.MsgSend"


class SignMode(IntEnum):
    """Cosmos SDK signing modes (cosmos.tx.signing.v1beta1.SignMode)."""
    UNSPECIFIED = 0
    DIRECT = 1
    TEXTUAL = 2
    DIRECT_AUX = 3
    LEGACY_AMINO_JSON = 127


@dataclass
class SingleSignatureData:
    """Signature data of a single signer; ``signature`` is None until signed."""
    sign_mode: SignMode
    signature: Optional[bytes] = None


@dataclass
class SignatureV2:
    """A signer's public key, signature data and account sequence."""
    pub_key: bytes
    data: SingleSignatureData
    sequence: int


@dataclass(frozen=True)
class SignerData:
    """Signer specific data that goes into the sign document."""
    chain_id: str
    account_number: int
    sequence: int


class CosmosTxInput(TxInput):
    """Pre-broadcast context for a Cosmos transaction."""
    account_number: int = 0
    sequence: int = 0
    chain_id: str = ""
    gas_limit: int = 0
    gas_price: float = 0.0


class Coin(Protocol):
    denom: str
    amount: Any


class DecodedTx(Protocol):
    """A decoded Cosmos transaction exposing its messages."""

    def get_msgs(self) -> Sequence[Any]:
        ...


@runtime_checkable
class FeeTx(Protocol):
    """A transaction that also carries a fee."""

    def get_fee(self) -> Sequence[Coin]:
        ...


class CosmosTxBuilder(Protocol):
    """The library's mutable tx builder."""

    def get_tx(self) -> Any:
        ...

    def set_signatures(self, *signatures: SignatureV2) -> None:
        ...


# Encodes a transaction into wire bytes
TxEncoder = Callable[[Any], bytes]

# Returns the bytes to sign for a sign mode, signer and transaction
SignBytesFunc = Callable[[SignMode, SignerData, Any], bytes]


@dataclass(frozen=True)
class BankSend:
    """A native token transfer, translated from the bank module's MsgSend."""
    from_address: str
    to_address: str
    amount: AmountBlockchain
    denom: str = ""


def message_name(msg: Any) -> str:
    """Full protobuf name of a chain-native message, or "" if it has none."""
    descriptor = getattr(msg, "DESCRIPTOR", None)
    return getattr(descriptor, "full_name", "") or ""


def coin_amount(coin: Any) -> AmountBlockchain:
    """
    Integer amount of a Coin.

    Coin amounts are decimal strings on the wire; an empty or malformed amount
    counts as zero so that projections never fail.
    """
    raw = getattr(coin, "amount", "")
    if raw in ("", None):
        return AmountBlockchain(0)
    try:
        return AmountBlockchain(int(raw))
    except (TypeError, ValueError):
        rate_limited_log(f"Ignoring malformed coin amount {raw!r}", logger_instance=logger)
        return AmountBlockchain(0)


def to_known_transfer(msg: Any) -> Optional[BankSend]:
    """
    Translate a chain-native message into a transfer the SDK understands.

    Only bank MsgSend is recognized; every other message kind yields None.
    """
    if message_name(msg) != MSG_SEND_NAME:
        return None
    amount = AmountBlockchain(0)
    denom = ""
    if len(msg.amount) > 0:
        amount = coin_amount(msg.amount[0])
        denom = msg.amount[0].denom
    return BankSend(
        from_address=msg.from_address,
        to_address=msg.to_address,
        amount=amount,
        denom=denom,
    )
