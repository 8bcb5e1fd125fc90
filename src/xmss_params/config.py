"""
Global configuration for the XMSS parameter registry.

Settings are read once from the environment at import.
"""

import os

DEFAULT_PARAMETER_SET_NAME: str = "XMSS-SHA2_10_256"
"""Parameter set used when `XMSS_PARAMETER_SET` is not set."""

XMSS_PARAMETER_SET = os.environ.get("XMSS_PARAMETER_SET", DEFAULT_PARAMETER_SET_NAME)
"""
Canonical name of the parameter set returned by `default_parameters()`.

Taken verbatim: no case folding or trimming, since names are matched exactly.
Resolution is deferred to the registry, so a bad value fails on first use.
"""
