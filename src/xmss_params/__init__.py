"""
Parameter registry for the XMSS hash-based signature scheme (RFC 8391).

Resolves a canonical parameter set name, or its numeric code, to the
immutable record that tree construction and WOTS+ signing are sized from.

Usage:
    from xmss_params import XmssParameters

    params = XmssParameters.from_name("XMSS-SHA2_10_256")
    params.tree_height  # 10
"""

from .parameters import (
    XmssAlgorithm,
    XmssParameters,
    all_parameter_sets,
    default_parameters,
    xmss_id_from_string,
)
from .types import (
    RegistryIntegrityError,
    UnknownParameterSetError,
    UnsupportedAlgorithmIdError,
    XmssParameterError,
)
from .wots import WotsAlgorithm, WotsParameters, wots_id_from_string

__version__ = "0.1.0"
__all__ = [
    # XMSS
    "XmssAlgorithm",
    "XmssParameters",
    "all_parameter_sets",
    "default_parameters",
    "xmss_id_from_string",
    # WOTS+
    "WotsAlgorithm",
    "WotsParameters",
    "wots_id_from_string",
    # Exceptions
    "XmssParameterError",
    "UnknownParameterSetError",
    "UnsupportedAlgorithmIdError",
    "RegistryIntegrityError",
]
