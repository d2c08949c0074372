"""
Pytest fixtures for the crosschain SDK tests.
"""
from typing import Any, List, Optional, Sequence

import pytest
from google.protobuf import descriptor_pb2, descriptor_pool, message_factory

from crosschain_sdk._rate_limited_log import reset_rate_limited_log
from crosschain_sdk.asset import AssetConfig
from crosschain_sdk.chain.cosmos.types import SignatureV2, SignerData, SignMode

# secp256k1 generator point, i.e. the public key of private key 1
G_X = "79BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798"
G_Y = "483ADA7726A3C4655DA4FBFC0E1108A8FD17B448A68554199C47D08FFB10D4B8"
PUBKEY_COMPRESSED = bytes.fromhex("02" + G_X)
PUBKEY_UNCOMPRESSED = bytes.fromhex("04" + G_X + G_Y)
PUBKEY_RAW = bytes.fromhex(G_X + G_Y)
PUBKEY_HASH160 = bytes.fromhex("751e76e8199196d454941c45d1b3a323f1433bd6")

TEST_CHAIN_ID = "cosmoshub-4"
FROM_ADDRESS = "cosmos1from0000000000000000000000000000000000"
TO_ADDRESS = "cosmos1to000000000000000000000000000000000000"


@pytest.fixture(autouse=True)
def _reset_log_cache():
    reset_rate_limited_log()
    yield
    reset_rate_limited_log()


# ─────────────────────────────────────────────────────────────────────────
#  COSMOS PROTOBUF MESSAGES
# ─────────────────────────────────────────────────────────────────────────

_FIELD = descriptor_pb2.FieldDescriptorProto


def _add_field(message, name, number, field_type, label=_FIELD.LABEL_OPTIONAL, type_name=None):
    field = message.field.add()
    field.name = name
    field.number = number
    field.type = field_type
    field.label = label
    if type_name:
        field.type_name = type_name


def _file(name, package, dependencies=()):
    proto = descriptor_pb2.FileDescriptorProto()
    proto.name = name
    proto.package = package
    proto.syntax = "proto3"
    proto.dependency.extend(dependencies)
    return proto


def _build_cosmos_messages():
    coin_file = _file("cosmos/base/v1beta1/coin.proto", "cosmos.base.v1beta1")
    coin = coin_file.message_type.add()
    coin.name = "Coin"
    _add_field(coin, "denom", 1, _FIELD.TYPE_STRING)
    _add_field(coin, "amount", 2, _FIELD.TYPE_STRING)

    bank_file = _file("cosmos/bank/v1beta1/tx.proto", "cosmos.bank.v1beta1", [coin_file.name])
    send = bank_file.message_type.add()
    send.name = "MsgSend"
    _add_field(send, "from_address", 1, _FIELD.TYPE_STRING)
    _add_field(send, "to_address", 2, _FIELD.TYPE_STRING)
    _add_field(send, "amount", 3, _FIELD.TYPE_MESSAGE, _FIELD.LABEL_REPEATED, ".cosmos.base.v1beta1.Coin")

    staking_file = _file("cosmos/staking/v1beta1/tx.proto", "cosmos.staking.v1beta1", [coin_file.name])
    delegate = staking_file.message_type.add()
    delegate.name = "MsgDelegate"
    _add_field(delegate, "delegator_address", 1, _FIELD.TYPE_STRING)
    _add_field(delegate, "validator_address", 2, _FIELD.TYPE_STRING)
    _add_field(delegate, "amount", 3, _FIELD.TYPE_MESSAGE, type_name=".cosmos.base.v1beta1.Coin")

    pool = descriptor_pool.DescriptorPool()
    for proto in (coin_file, bank_file, staking_file):
        pool.AddSerializedFile(proto.SerializeToString())

    def message_class(full_name):
        return message_factory.GetMessageClass(pool.FindMessageTypeByName(full_name))

    return (
        message_class("cosmos.base.v1beta1.Coin"),
        message_class("cosmos.bank.v1beta1.MsgSend"),
        message_class("cosmos.staking.v1beta1.MsgDelegate"),
    )


Coin, MsgSend, MsgDelegate = _build_cosmos_messages()


def make_msg_send(amount: str = "1000", denom: str = "uatom",
                  from_address: str = FROM_ADDRESS, to_address: str = TO_ADDRESS):
    return MsgSend(
        from_address=from_address,
        to_address=to_address,
        amount=[Coin(denom=denom, amount=amount)],
    )


def make_msg_delegate(amount: str = "500"):
    return MsgDelegate(
        delegator_address=FROM_ADDRESS,
        validator_address="cosmosvaloper1validator",
        amount=Coin(denom="uatom", amount=amount),
    )


# ─────────────────────────────────────────────────────────────────────────
#  IN-MEMORY COSMOS LIBRARY
# ─────────────────────────────────────────────────────────────────────────

class FakeCosmosTx:
    """Decoded tx without fee information."""

    def __init__(self, msgs: Sequence[Any], signatures: Sequence[Any] = ()):
        self.msgs = list(msgs)
        self.signatures = tuple(signatures)

    def get_msgs(self) -> List[Any]:
        return list(self.msgs)


class FakeFeeTx(FakeCosmosTx):
    """Decoded tx that also exposes its fee."""

    def __init__(self, msgs: Sequence[Any], fee: Sequence[Any], signatures: Sequence[Any] = ()):
        super().__init__(msgs, signatures)
        self.fee = list(fee)

    def get_fee(self) -> List[Any]:
        return list(self.fee)


class FakeTxBuilder:
    """Mutable tx builder; get_tx() snapshots the current signatures."""

    def __init__(self, msgs: Sequence[Any], fee: Sequence[Any]):
        self.msgs = list(msgs)
        self.fee = list(fee)
        self.signatures: List[SignatureV2] = []
        self.set_signatures_calls = 0

    def set_signatures(self, *signatures: SignatureV2) -> None:
        self.signatures = list(signatures)
        self.set_signatures_calls += 1

    def get_tx(self) -> FakeFeeTx:
        snapshot = [(sig.data.sign_mode, sig.data.signature) for sig in self.signatures]
        return FakeFeeTx(self.msgs, self.fee, snapshot)


def fake_encoder(tx: Any) -> bytes:
    parts = [msg.SerializeToString() for msg in tx.get_msgs()]
    if hasattr(tx, "get_fee"):
        parts.extend(coin.SerializeToString() for coin in tx.get_fee())
    for sign_mode, signature in tx.signatures:
        parts.append(bytes([int(sign_mode)]) + (signature or b""))
    return b"|".join(parts)


def fake_sign_bytes(sign_mode: SignMode, signer_data: SignerData, tx: Any) -> bytes:
    header = f"{signer_data.chain_id}/{signer_data.account_number}/{signer_data.sequence}/{int(sign_mode)}"
    return header.encode("ascii") + b"|" + fake_encoder(tx)


@pytest.fixture
def tx_builder() -> FakeTxBuilder:
    return FakeTxBuilder(
        msgs=[make_msg_send()],
        fee=[Coin(denom="uatom", amount="2500")],
    )


@pytest.fixture
def atom_config() -> AssetConfig:
    return AssetConfig(asset="ATOM", net="mainnet", chain_prefix="cosmos", url="https://rpc.example.com")


@pytest.fixture
def config_toml(tmp_path):
    """Write a TOML config file and return its path."""

    def _write(content: str, name: str = "chains.toml"):
        path = tmp_path / name
        path.write_text(content)
        return path

    return _write
