"""
WOTS+ one-time-signature parameter sets (RFC 8391, Section 5.2).

Every XMSS parameter set references exactly one of these through its
`ots_oid` field. The chain counts are not tabulated: they follow from the
element size `n` and the Winternitz width `w`:

    len_1 = ceil(8n / lg(w))
    len_2 = floor(log2(len_1 * (w - 1)) / lg(w)) + 1
    len   = len_1 + len_2

For w = 16 this gives 64 + 3 = 67 chains when n = 32, and 128 + 3 = 131
chains when n = 64.
"""

from __future__ import annotations

from enum import IntEnum
from types import MappingProxyType
from typing import Mapping

from pydantic import model_validator
from typing_extensions import Final

from ._registry import check_registry, lookup_name, lookup_oid
from .types import StrictBaseModel

__all__ = [
    "WotsAlgorithm",
    "WotsParameters",
    "WOTSP_SHA2_256",
    "WOTSP_SHA2_512",
    "WOTSP_SHAKE_256",
    "WOTSP_SHAKE_512",
    "wots_id_from_string",
]

_REGISTRY_NAME: Final = "WOTS+"


class WotsAlgorithm(IntEnum):
    """
    WOTS+ parameter set identifiers.

    The values are the RFC 8391 registry codes.
    """

    WOTSP_SHA2_256 = 0x01000001
    """SHA-256, n = 32."""

    WOTSP_SHA2_512 = 0x02000002
    """SHA-512, n = 64."""

    WOTSP_SHAKE_256 = 0x03000003
    """SHAKE128 with 256-bit output, n = 32."""

    WOTSP_SHAKE_512 = 0x04000004
    """SHAKE256 with 512-bit output, n = 64."""

    @property
    def canonical_name(self) -> str:
        """The canonical name, e.g. `WOTSP-SHA2_256`."""
        return "WOTSP-" + self.name.removeprefix("WOTSP_")


class WotsParameters(StrictBaseModel):
    """An immutable WOTS+ parameter set."""

    oid: WotsAlgorithm
    """The identifier this record is bound to."""

    name: str
    """Canonical name."""

    hash_function_name: str
    """Name of the hash function used to compute the chains."""

    element_size: int
    """The hash output size `n` in bytes."""

    w: int
    """The Winternitz width. Must be a power of two greater than one."""

    strength: int
    """Nominal security strength in bits."""

    @model_validator(mode="after")
    def check_width(self) -> WotsParameters:
        """Reject widths that cannot be split into whole bits."""
        if self.w < 2 or self.w & (self.w - 1):
            raise ValueError(f"Winternitz width must be a power of two > 1, got {self.w}")
        return self

    @property
    def lg_w(self) -> int:
        """Base-2 logarithm of `w`."""
        return self.w.bit_length() - 1

    @property
    def len_1(self) -> int:
        """Number of chains encoding the message digest."""
        return -(-8 * self.element_size // self.lg_w)

    @property
    def len_2(self) -> int:
        """Number of chains encoding the checksum."""
        # floor(log2(x) / lg_w) computed on integers: log2 floor is bit_length - 1.
        max_checksum = self.len_1 * (self.w - 1)
        return (max_checksum.bit_length() - 1) // self.lg_w + 1

    @property
    def len(self) -> int:
        """Total number of chains in one WOTS+ signature."""
        return self.len_1 + self.len_2

    @classmethod
    def from_oid(cls, oid: WotsAlgorithm | int) -> WotsParameters:
        """
        Return the parameter set bound to `oid`.

        Raises:
            UnsupportedAlgorithmIdError: If `oid` is not a known identifier.
        """
        return lookup_oid(_WOTS_PARAMETERS, oid, _REGISTRY_NAME)

    @classmethod
    def from_name(cls, name: str) -> WotsParameters:
        """
        Return the parameter set with canonical name `name`.

        Raises:
            UnknownParameterSetError: If `name` is not a canonical name.
        """
        return cls.from_oid(wots_id_from_string(name))


WOTSP_SHA2_256: Final = WotsParameters(
    oid=WotsAlgorithm.WOTSP_SHA2_256,
    name="WOTSP-SHA2_256",
    hash_function_name="SHA-256",
    element_size=32,
    w=16,
    strength=256,
)

WOTSP_SHA2_512: Final = WotsParameters(
    oid=WotsAlgorithm.WOTSP_SHA2_512,
    name="WOTSP-SHA2_512",
    hash_function_name="SHA-512",
    element_size=64,
    w=16,
    strength=512,
)

WOTSP_SHAKE_256: Final = WotsParameters(
    oid=WotsAlgorithm.WOTSP_SHAKE_256,
    name="WOTSP-SHAKE_256",
    hash_function_name="SHAKE-128(256)",
    element_size=32,
    w=16,
    strength=256,
)

WOTSP_SHAKE_512: Final = WotsParameters(
    oid=WotsAlgorithm.WOTSP_SHAKE_512,
    name="WOTSP-SHAKE_512",
    hash_function_name="SHAKE-256(512)",
    element_size=64,
    w=16,
    strength=512,
)

_WOTS_PARAMETERS: Final[Mapping[WotsAlgorithm, WotsParameters]] = MappingProxyType(
    {
        params.oid: params
        for params in (WOTSP_SHA2_256, WOTSP_SHA2_512, WOTSP_SHAKE_256, WOTSP_SHAKE_512)
    }
)

_WOTS_NAME_INDEX: Final[Mapping[str, WotsAlgorithm]] = MappingProxyType(
    check_registry(_WOTS_PARAMETERS, WotsAlgorithm, _REGISTRY_NAME)
)


def wots_id_from_string(name: str) -> WotsAlgorithm:
    """
    Resolve a canonical WOTS+ parameter set name to its identifier.

    The match is exact and case-sensitive.

    Raises:
        UnknownParameterSetError: If `name` is not a canonical name.
    """
    return lookup_name(_WOTS_NAME_INDEX, name, _REGISTRY_NAME)
