"""
Amount types for the crosschain SDK.

Every value exists in two forms: the integer amount a blockchain expects in
a transaction (smallest ledger unit), and the decimal amount a human expects
to read. Conversions between them depend only on the asset's decimals and
are exact.
"""
from decimal import Decimal, InvalidOperation
from typing import Any, Union

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from .exceptions import InvalidInputError

_UINT64_MODULUS = 2 ** 64


def _check_decimals(decimals: int) -> int:
    if not isinstance(decimals, int) or isinstance(decimals, bool) or decimals < 0:
        raise InvalidInputError(f"decimals must be a non-negative integer, got {decimals!r}")
    return decimals


class AmountBlockchain(int):
    """Big integer amount as the blockchain expects it for a transaction."""

    @classmethod
    def from_uint64(cls, value: int) -> "AmountBlockchain":
        """
        Create an amount from an unsigned 64-bit integer.

        Raises:
            InvalidInputError: If value does not fit in 64 unsigned bits
        """
        if not 0 <= value < _UINT64_MODULUS:
            raise InvalidInputError(f"value out of uint64 range: {value}")
        return cls(value)

    def uint64(self) -> int:
        """Low 64 bits of the amount, as an unsigned integer."""
        return int(self) % _UINT64_MODULUS

    def to_human(self, decimals: int) -> "AmountHumanReadable":
        """
        Convert to a human readable amount.

        Args:
            decimals: Decimal precision of the asset

        Returns:
            The same value divided by 10**decimals, without rounding
        """
        _check_decimals(decimals)
        sign, digits, exponent = Decimal(int(self)).as_tuple()
        # exponent shift only, so no context precision applies
        return AmountHumanReadable(Decimal((sign, digits, exponent - decimals)))

    def __str__(self) -> str:
        # int.__str__ is object.__str__, which would call our __repr__
        return int.__repr__(self)

    def __repr__(self) -> str:
        return f"AmountBlockchain({int.__repr__(self)})"

    @classmethod
    def __get_pydantic_core_schema__(cls, source: Any, handler: GetCoreSchemaHandler) -> core_schema.CoreSchema:
        return core_schema.no_info_after_validator_function(
            cls,
            core_schema.int_schema(),
            serialization=core_schema.plain_serializer_function_ser_schema(int),
        )


class AmountHumanReadable(Decimal):
    """Decimal amount as a human expects it for readability."""

    def __new__(cls, value: Union[str, int, Decimal] = "0"):
        try:
            return super().__new__(cls, value)
        except (InvalidOperation, TypeError, ValueError) as e:
            raise InvalidInputError(f"invalid amount: {value!r}") from e

    def to_blockchain(self, decimals: int) -> AmountBlockchain:
        """
        Convert to the blockchain integer amount.

        Args:
            decimals: Decimal precision of the asset

        Returns:
            The value multiplied by 10**decimals

        Raises:
            InvalidInputError: If the value is not finite or carries more
                fractional digits than decimals allows
        """
        _check_decimals(decimals)
        if not self.is_finite():
            raise InvalidInputError(f"amount is not a finite number: {self}")
        sign, digits, exponent = self.as_tuple()
        scaled = Decimal((sign, digits, exponent + decimals))
        if scaled != scaled.to_integral_value():
            raise InvalidInputError(
                f"amount {self} has more than {decimals} decimal places"
            )
        return AmountBlockchain(int(scaled))

    def __str__(self) -> str:
        """Fixed-point form without trailing fractional zeros, e.g. "0.000000000000000001"."""
        text = format(Decimal(self), "f")
        if "." in text:
            text = text.rstrip("0").rstrip(".")
        return text

    def __repr__(self) -> str:
        return f"AmountHumanReadable('{self}')"

    @classmethod
    def __get_pydantic_core_schema__(cls, source: Any, handler: GetCoreSchemaHandler) -> core_schema.CoreSchema:
        return core_schema.no_info_after_validator_function(
            cls,
            core_schema.decimal_schema(),
            serialization=core_schema.plain_serializer_function_ser_schema(str),
        )
