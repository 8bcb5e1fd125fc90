"""Internal helpers shared by the XMSS and WOTS+ parameter registries."""

from __future__ import annotations

import logging
from enum import IntEnum
from typing import Any, Mapping

from .types import RegistryIntegrityError, UnknownParameterSetError, UnsupportedAlgorithmIdError

logger = logging.getLogger(__name__)


def lookup_oid(table: Mapping[Any, Any], oid: Any, registry: str) -> Any:
    """
    Fetch a record from a registry table by identifier.

    Booleans and non-integers are rejected before the lookup, since `True`
    would otherwise hash equal to the code `1`.

    Raises:
        UnsupportedAlgorithmIdError: If `oid` has no record in `table`.
    """
    if isinstance(oid, bool) or not isinstance(oid, int) or oid not in table:
        raise UnsupportedAlgorithmIdError(oid, registry=registry)
    return table[oid]


def lookup_name(index: Mapping[str, Any], name: str, registry: str) -> Any:
    """
    Resolve a canonical name through a name index.

    Raises:
        UnknownParameterSetError: If `name` is not in `index`.
    """
    try:
        return index[name]
    except (KeyError, TypeError):
        logger.debug("Rejected unknown %s parameter set name %r", registry, name)
        raise UnknownParameterSetError(name, registry=registry) from None


def check_registry(
    table: Mapping[Any, Any],
    algorithms: type[IntEnum],
    registry: str,
) -> dict[str, Any]:
    """
    Verify that `table` maps every member of `algorithms` to its own record.

    Each record must carry its key as `oid` and the member's canonical name
    as `name`. Canonical names are distinct per member, so the resulting
    name index is one-to-one.

    Returns:
        The name-to-identifier index built from the table.

    Raises:
        RegistryIntegrityError: On a missing, extra, or mismatched entry.
    """
    missing = [member.name for member in algorithms if member not in table]
    if missing:
        raise RegistryIntegrityError(registry, f"no record for {missing}")
    if len(table) != len(algorithms):
        raise RegistryIntegrityError(
            registry, f"expected {len(algorithms)} records, found {len(table)}"
        )

    by_name: dict[str, Any] = {}
    for oid, params in table.items():
        if params.oid is not oid:
            raise RegistryIntegrityError(
                registry, f"record for {oid.name} is bound to {params.oid!r}"
            )
        if params.name != oid.canonical_name:
            raise RegistryIntegrityError(
                registry,
                f"record for {oid.name} is named {params.name!r}, "
                f"expected {oid.canonical_name!r}",
            )
        by_name[params.name] = oid

    logger.debug("%s registry loaded with %d parameter sets", registry, len(by_name))
    return by_name
