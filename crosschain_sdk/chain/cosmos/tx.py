"""
Transaction adapter for Cosmos SDK chains.

Cosmos transactions are an ordered list of typed messages signed over a sign
document. Building, encoding and sign-document generation belong to the
Cosmos library; this adapter stages their results and drives the
sighash / signature / hash lifecycle.
"""
import logging
from typing import List, Optional

from ..._rate_limited_log import rate_limited_log
from ...address import Address, ContractAddress
from ...amount import AmountBlockchain
from ...exceptions import InvalidInputError, NotInitializedError
from ...tx import Tx, TxDataToSign, TxHash, TxInfo, TxSignature, TxState
from ...utils import sha256_hex
from .types import (
    BankSend,
    CosmosTxBuilder,
    CosmosTxInput,
    DecodedTx,
    FeeTx,
    SignatureV2,
    SignBytesFunc,
    SignerData,
    SignMode,
    SingleSignatureData,
    TxEncoder,
    coin_amount,
    message_name,
    to_known_transfer,
)

logger = logging.getLogger(__name__)


class CosmosTx(Tx):
    """
    Tx for Cosmos.

    Either staged by ``build`` for signing, or wrapping a transaction queried
    from the network for ``tx_info`` projection.
    """

    def __init__(
        self,
        cosmos_tx: Optional[DecodedTx] = None,
        builder: Optional[CosmosTxBuilder] = None,
        encoder: Optional[TxEncoder] = None,
        sigs: Optional[List[SignatureV2]] = None,
        data_to_sign: Optional[bytes] = None,
    ):
        self.cosmos_tx = cosmos_tx
        self.builder = builder
        self.encoder = encoder
        self.sigs = sigs
        self.data_to_sign = data_to_sign
        self.parsed_transfer: Optional[BankSend] = None
        self._state = TxState.UNBUILT
        if data_to_sign is not None and builder is not None and sigs:
            self._state = TxState.BUILT

    @classmethod
    def build(
        cls,
        builder: CosmosTxBuilder,
        encoder: TxEncoder,
        tx_input: CosmosTxInput,
        public_key: bytes,
        sign_bytes: SignBytesFunc,
        sign_mode: SignMode = SignMode.DIRECT,
    ) -> "CosmosTx":
        """
        Stage a transaction for signing.

        Installs an empty signature for the single signer on the builder (the
        sign document commits to the signer infos) and computes the sighash.

        Args:
            builder: Library tx builder with messages, fee and gas already set
            encoder: Library tx encoder
            tx_input: Account number, sequence and chain id of the signer
            public_key: Compressed secp256k1 public key of the signer
            sign_bytes: Library sign-mode handler producing the sign document
            sign_mode: Sign mode to sign with

        Raises:
            InvalidInputError: If a collaborator is missing or the sighash is empty
        """
        if builder is None or encoder is None or sign_bytes is None:
            raise InvalidInputError("builder, encoder and sign_bytes are required to build a cosmos tx")

        sigs = [
            SignatureV2(
                pub_key=public_key,
                data=SingleSignatureData(sign_mode=sign_mode),
                sequence=tx_input.sequence,
            )
        ]
        builder.set_signatures(*sigs)

        signer_data = SignerData(
            chain_id=tx_input.chain_id,
            account_number=tx_input.account_number,
            sequence=tx_input.sequence,
        )
        data_to_sign = sign_bytes(sign_mode, signer_data, builder.get_tx())
        if not data_to_sign:
            raise InvalidInputError("sign mode handler returned an empty sign document")

        tx = cls(builder=builder, encoder=encoder, sigs=sigs, data_to_sign=bytes(data_to_sign))
        tx._state = TxState.advance(TxState.UNBUILT, TxState.BUILT)
        logger.debug("Built cosmos tx for account %s sequence %s",
                     tx_input.account_number, tx_input.sequence)
        return tx

    @property
    def state(self) -> TxState:
        return self._state

    def hash(self) -> TxHash:
        """Hex encoded SHA-256 of the serialized tx, or "" if it cannot be serialized."""
        try:
            serialized = self.serialize()
        except Exception as e:
            logger.debug("Cannot hash cosmos tx: %s", e)
            return TxHash("")
        if not serialized:
            return TxHash("")
        return TxHash(sha256_hex(serialized))

    def sighash(self) -> TxDataToSign:
        if self.data_to_sign is None:
            raise NotInitializedError()
        return TxDataToSign(self.data_to_sign)

    def add_signature(self, signature: TxSignature) -> None:
        if not self.sigs or self.builder is None:
            raise NotInitializedError()
        self._state = TxState.advance(self._state, TxState.SIGNED)

        sign_mode = self.sigs[0].data.sign_mode
        self.sigs[0].data = SingleSignatureData(sign_mode=sign_mode, signature=bytes(signature))
        self.builder.set_signatures(*self.sigs)

    def serialize(self) -> bytes:
        if self.encoder is None:
            raise NotInitializedError()

        # the builder reflects signatures added after build, the raw tx does not
        tx_to_encode = self.cosmos_tx
        if self.builder is not None:
            tx_to_encode = self.builder.get_tx()

        if tx_to_encode is None:
            raise NotInitializedError()
        return self.encoder(tx_to_encode)

    def parse_transfer(self) -> Optional[BankSend]:
        """
        Find the first transfer message of the transaction.

        Only bank MsgSend is recognized, i.e. only native tokens. Other
        message kinds are skipped and leave the transfer fields empty.
        """
        self.parsed_transfer = None
        if self.cosmos_tx is None:
            return None
        for msg in self.cosmos_tx.get_msgs():
            transfer = to_known_transfer(msg)
            if transfer is not None:
                self.parsed_transfer = transfer
                break
            rate_limited_log(
                f"Skipping unsupported cosmos message {message_name(msg) or type(msg).__name__}",
                logger_instance=logger,
            )
        return self.parsed_transfer

    def from_address(self) -> Address:
        if self.parsed_transfer is None:
            return Address("")
        return Address(self.parsed_transfer.from_address)

    def to_address(self) -> Address:
        if self.parsed_transfer is None:
            return Address("")
        return Address(self.parsed_transfer.to_address)

    def contract_address(self) -> ContractAddress:
        # token transfers are not parsed yet
        return ContractAddress("")

    def amount(self) -> AmountBlockchain:
        if self.parsed_transfer is None:
            return AmountBlockchain(0)
        return self.parsed_transfer.amount

    def fee(self) -> AmountBlockchain:
        if isinstance(self.cosmos_tx, FeeTx):
            fee = self.cosmos_tx.get_fee()
            if len(fee) > 0:
                return coin_amount(fee[0])
        return AmountBlockchain(0)

    def tx_info(
        self,
        tx_id: str = "",
        block_index: int = 0,
        block_time: int = 0,
        confirmations: int = 0,
    ) -> TxInfo:
        """Project the transaction onto the chain-agnostic TxInfo."""
        if self.parsed_transfer is None:
            self.parse_transfer()
        return TxInfo(
            tx_id=tx_id or self.hash(),
            from_address=self.from_address(),
            to_address=self.to_address(),
            contract_address=self.contract_address(),
            amount=self.amount(),
            fee=self.fee(),
            block_index=block_index,
            block_time=block_time,
            confirmations=confirmations,
        )
