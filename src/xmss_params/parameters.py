"""
XMSS parameter sets (RFC 8391, Section 5.3).

This is the registry that turns a parameter set identifier, given either as a
canonical name or as an `XmssAlgorithm` code, into the fixed `XmssParameters`
record consumed by tree construction and WOTS+ signing.

The registry is a closed enumeration of twelve sets: four hash families
(SHA2 and SHAKE, each at n = 32 and n = 64) times three tree heights
(10, 16, 20). Records are frozen and the table is a read-only mapping
checked once at import; there is no write path afterwards.

.. note::
   Canonical names are matched exactly. In particular `XMSS-SHAKE_10_256`
   resolves to the height-10 set. Some historical implementations returned
   the height-16 set for that name; persisted configurations created with
   such an implementation should be re-checked.
"""

from __future__ import annotations

from enum import IntEnum
from types import MappingProxyType
from typing import Mapping

from pydantic import model_validator
from typing_extensions import Final

from . import config
from ._registry import check_registry, lookup_name, lookup_oid
from .types import StrictBaseModel
from .wots import WotsAlgorithm, WotsParameters

__all__ = [
    "XmssAlgorithm",
    "XmssParameters",
    "all_parameter_sets",
    "default_parameters",
    "xmss_id_from_string",
]

_REGISTRY_NAME: Final = "XMSS"

OID_LENGTH: Final = 4
"""Byte length of the algorithm code prefixed to serialized public keys."""

INDEX_LENGTH: Final = 4
"""Byte length of the leaf index at the start of a serialized signature."""


class XmssAlgorithm(IntEnum):
    """
    XMSS parameter set identifiers.

    The values are the RFC 8391 registry codes, which also appear as the
    OID prefix of serialized public keys.
    """

    XMSS_SHA2_10_256 = 0x00000001
    XMSS_SHA2_16_256 = 0x00000002
    XMSS_SHA2_20_256 = 0x00000003
    XMSS_SHA2_10_512 = 0x00000004
    XMSS_SHA2_16_512 = 0x00000005
    XMSS_SHA2_20_512 = 0x00000006
    XMSS_SHAKE_10_256 = 0x00000007
    XMSS_SHAKE_16_256 = 0x00000008
    XMSS_SHAKE_20_256 = 0x00000009
    XMSS_SHAKE_10_512 = 0x0000000A
    XMSS_SHAKE_16_512 = 0x0000000B
    XMSS_SHAKE_20_512 = 0x0000000C

    @property
    def canonical_name(self) -> str:
        """The canonical name, e.g. `XMSS-SHA2_10_256`."""
        return "XMSS-" + self.name.removeprefix("XMSS_")


class XmssParameters(StrictBaseModel):
    """
    An immutable XMSS parameter set.

    Downstream components size their buffers and hash-chain iteration
    counts from these fields alone.
    """

    oid: XmssAlgorithm
    """The identifier this record is bound to."""

    element_size: int
    """The hash output size `n` in bytes."""

    w: int
    """
    The Winternitz width.

    Every defined set uses 16, but the scheme allows other widths.
    """

    len: int
    """Number of WOTS+ hash chains, including checksum chains."""

    tree_height: int
    """Number of Merkle tree levels `h`."""

    name: str
    """Canonical name."""

    hash_function_name: str
    """Name of the hash function used for tree and chain computation."""

    strength: int
    """Nominal security strength in bits."""

    ots_oid: WotsAlgorithm
    """Identifier of the matching WOTS+ parameter set."""

    @model_validator(mode="after")
    def check_consistency(self) -> XmssParameters:
        """Verify the record agrees with its WOTS+ parameter set."""
        wots = WotsParameters.from_oid(self.ots_oid)

        if self.element_size != wots.element_size:
            raise ValueError(
                f"{self.name}: element size {self.element_size} does not match "
                f"{wots.name} ({wots.element_size})"
            )
        if self.w != wots.w:
            raise ValueError(f"{self.name}: w={self.w} does not match {wots.name} (w={wots.w})")
        if self.len != wots.len:
            raise ValueError(
                f"{self.name}: len={self.len} does not match {wots.name} (len={wots.len})"
            )
        if self.hash_function_name != wots.hash_function_name:
            raise ValueError(
                f"{self.name}: hash {self.hash_function_name!r} does not match "
                f"{wots.name} ({wots.hash_function_name!r})"
            )
        if self.strength != 8 * self.element_size:
            raise ValueError(
                f"{self.name}: strength {self.strength} inconsistent with n={self.element_size}"
            )
        return self

    @property
    def wots_parameters(self) -> WotsParameters:
        """The WOTS+ parameter set referenced by `ots_oid`."""
        return WotsParameters.from_oid(self.ots_oid)

    @property
    def max_signatures(self) -> int:
        """Number of one-time key pairs, and so of signatures, under one public key."""
        return 1 << self.tree_height

    @property
    def public_key_size(self) -> int:
        """Serialized public key size in bytes: OID || root || SEED."""
        return OID_LENGTH + 2 * self.element_size

    @property
    def signature_size(self) -> int:
        """Serialized signature size in bytes: idx || r || WOTS+ signature || auth path."""
        return INDEX_LENGTH + self.element_size * (1 + self.len + self.tree_height)

    @classmethod
    def from_oid(cls, oid: XmssAlgorithm | int) -> XmssParameters:
        """
        Return the parameter set bound to `oid`.

        Args:
            oid: An `XmssAlgorithm` member or its integer code.

        Raises:
            UnsupportedAlgorithmIdError: If `oid` is outside the enumeration.
                This indicates a caller bug, not bad user input.
        """
        return lookup_oid(_XMSS_PARAMETERS, oid, _REGISTRY_NAME)

    @classmethod
    def from_name(cls, name: str) -> XmssParameters:
        """
        Return the parameter set with canonical name `name`.

        Raises:
            UnknownParameterSetError: If `name` is not a canonical name.
        """
        return cls.from_oid(xmss_id_from_string(name))


# --- SHA2, n = 32 ---

XMSS_SHA2_10_256: Final = XmssParameters(
    oid=XmssAlgorithm.XMSS_SHA2_10_256,
    element_size=32,
    w=16,
    len=67,
    tree_height=10,
    name="XMSS-SHA2_10_256",
    hash_function_name="SHA-256",
    strength=256,
    ots_oid=WotsAlgorithm.WOTSP_SHA2_256,
)

XMSS_SHA2_16_256: Final = XmssParameters(
    oid=XmssAlgorithm.XMSS_SHA2_16_256,
    element_size=32,
    w=16,
    len=67,
    tree_height=16,
    name="XMSS-SHA2_16_256",
    hash_function_name="SHA-256",
    strength=256,
    ots_oid=WotsAlgorithm.WOTSP_SHA2_256,
)

XMSS_SHA2_20_256: Final = XmssParameters(
    oid=XmssAlgorithm.XMSS_SHA2_20_256,
    element_size=32,
    w=16,
    len=67,
    tree_height=20,
    name="XMSS-SHA2_20_256",
    hash_function_name="SHA-256",
    strength=256,
    ots_oid=WotsAlgorithm.WOTSP_SHA2_256,
)

# --- SHA2, n = 64 ---

XMSS_SHA2_10_512: Final = XmssParameters(
    oid=XmssAlgorithm.XMSS_SHA2_10_512,
    element_size=64,
    w=16,
    len=131,
    tree_height=10,
    name="XMSS-SHA2_10_512",
    hash_function_name="SHA-512",
    strength=512,
    ots_oid=WotsAlgorithm.WOTSP_SHA2_512,
)

XMSS_SHA2_16_512: Final = XmssParameters(
    oid=XmssAlgorithm.XMSS_SHA2_16_512,
    element_size=64,
    w=16,
    len=131,
    tree_height=16,
    name="XMSS-SHA2_16_512",
    hash_function_name="SHA-512",
    strength=512,
    ots_oid=WotsAlgorithm.WOTSP_SHA2_512,
)

XMSS_SHA2_20_512: Final = XmssParameters(
    oid=XmssAlgorithm.XMSS_SHA2_20_512,
    element_size=64,
    w=16,
    len=131,
    tree_height=20,
    name="XMSS-SHA2_20_512",
    hash_function_name="SHA-512",
    strength=512,
    ots_oid=WotsAlgorithm.WOTSP_SHA2_512,
)

# --- SHAKE, n = 32 ---

XMSS_SHAKE_10_256: Final = XmssParameters(
    oid=XmssAlgorithm.XMSS_SHAKE_10_256,
    element_size=32,
    w=16,
    len=67,
    tree_height=10,
    name="XMSS-SHAKE_10_256",
    hash_function_name="SHAKE-128(256)",
    strength=256,
    ots_oid=WotsAlgorithm.WOTSP_SHAKE_256,
)

XMSS_SHAKE_16_256: Final = XmssParameters(
    oid=XmssAlgorithm.XMSS_SHAKE_16_256,
    element_size=32,
    w=16,
    len=67,
    tree_height=16,
    name="XMSS-SHAKE_16_256",
    hash_function_name="SHAKE-128(256)",
    strength=256,
    ots_oid=WotsAlgorithm.WOTSP_SHAKE_256,
)

XMSS_SHAKE_20_256: Final = XmssParameters(
    oid=XmssAlgorithm.XMSS_SHAKE_20_256,
    element_size=32,
    w=16,
    len=67,
    tree_height=20,
    name="XMSS-SHAKE_20_256",
    hash_function_name="SHAKE-128(256)",
    strength=256,
    ots_oid=WotsAlgorithm.WOTSP_SHAKE_256,
)

# --- SHAKE, n = 64 ---

XMSS_SHAKE_10_512: Final = XmssParameters(
    oid=XmssAlgorithm.XMSS_SHAKE_10_512,
    element_size=64,
    w=16,
    len=131,
    tree_height=10,
    name="XMSS-SHAKE_10_512",
    hash_function_name="SHAKE-256(512)",
    strength=512,
    ots_oid=WotsAlgorithm.WOTSP_SHAKE_512,
)

XMSS_SHAKE_16_512: Final = XmssParameters(
    oid=XmssAlgorithm.XMSS_SHAKE_16_512,
    element_size=64,
    w=16,
    len=131,
    tree_height=16,
    name="XMSS-SHAKE_16_512",
    hash_function_name="SHAKE-256(512)",
    strength=512,
    ots_oid=WotsAlgorithm.WOTSP_SHAKE_512,
)

XMSS_SHAKE_20_512: Final = XmssParameters(
    oid=XmssAlgorithm.XMSS_SHAKE_20_512,
    element_size=64,
    w=16,
    len=131,
    tree_height=20,
    name="XMSS-SHAKE_20_512",
    hash_function_name="SHAKE-256(512)",
    strength=512,
    ots_oid=WotsAlgorithm.WOTSP_SHAKE_512,
)

_XMSS_PARAMETERS: Final[Mapping[XmssAlgorithm, XmssParameters]] = MappingProxyType(
    {
        params.oid: params
        for params in (
            XMSS_SHA2_10_256,
            XMSS_SHA2_16_256,
            XMSS_SHA2_20_256,
            XMSS_SHA2_10_512,
            XMSS_SHA2_16_512,
            XMSS_SHA2_20_512,
            XMSS_SHAKE_10_256,
            XMSS_SHAKE_16_256,
            XMSS_SHAKE_20_256,
            XMSS_SHAKE_10_512,
            XMSS_SHAKE_16_512,
            XMSS_SHAKE_20_512,
        )
    }
)

_XMSS_NAME_INDEX: Final[Mapping[str, XmssAlgorithm]] = MappingProxyType(
    check_registry(_XMSS_PARAMETERS, XmssAlgorithm, _REGISTRY_NAME)
)


def xmss_id_from_string(name: str) -> XmssAlgorithm:
    """
    Resolve a canonical XMSS parameter set name to its identifier.

    The match is exact: case-sensitive, with no trimming or normalization.

    Raises:
        UnknownParameterSetError: If `name` is not one of the twelve canonical names.
    """
    return lookup_name(_XMSS_NAME_INDEX, name, _REGISTRY_NAME)


def all_parameter_sets() -> tuple[XmssParameters, ...]:
    """All registered parameter sets, ordered by identifier."""
    return tuple(_XMSS_PARAMETERS[oid] for oid in XmssAlgorithm)


def default_parameters() -> XmssParameters:
    """
    Return the parameter set named by the `XMSS_PARAMETER_SET` environment variable.

    Raises:
        UnknownParameterSetError: If the configured name is not canonical.
    """
    return XmssParameters.from_name(config.XMSS_PARAMETER_SET)
