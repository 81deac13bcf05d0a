"""
Query string assembly.

Requests describe their query as an ordered list of fragments: a fragment is
an already formatted ``key=value`` string, or None when the parameter is
absent. ``build_query_parameters`` is the single place that turns that list
into the final query string. It joins, it never escapes: producers emit the
percent-encoded separators Horizon expects (``%3A`` between asset code and
issuer, ``%2C`` between list items).
"""

from __future__ import annotations
from typing import Iterable, List, Optional, Sequence, TYPE_CHECKING

if TYPE_CHECKING:
    from ..models.assets import Asset

Fragment = Optional[str]

ASSET_SEPARATOR = "%3A"
LIST_SEPARATOR = "%2C"


def build_query_parameters(fragments: Iterable[Fragment]) -> str:
    """
    Join query fragments into a query string.

    Args:
        fragments: Fragments in the order they must appear

    Returns:
        ``""`` when no fragment is present, otherwise ``?`` followed by the
        present fragments joined with ``&``
    """
    present = [fragment for fragment in fragments if fragment]
    if not present:
        return ""
    return "?" + "&".join(present)


def fragment(key: str, value: object) -> Fragment:
    """Format ``key=value``, or None when the value is absent."""
    if value is None:
        return None
    return f"{key}={value}"


def format_flag(flag: bool) -> str:
    """Booleans travel as the literal strings ``true`` and ``false``."""
    return "true" if flag else "false"


def encode_asset(asset: Asset) -> str:
    """``native`` or ``CODE%3AISSUER``."""
    if asset.asset_type.value == "native":
        return "native"
    return f"{asset.code}{ASSET_SEPARATOR}{asset.issuer}"


def encode_asset_list(key: str, assets: Sequence[Asset]) -> Fragment:
    """
    Encode a list of assets as one fragment.

    The first asset is prefixed with ``key=``, every later one with ``%2C``,
    e.g. ``reserves=native%2CUSD%3AG...``.
    """
    if not assets:
        return None
    parts = []
    for i, asset in enumerate(assets):
        separator = f"{key}=" if i == 0 else LIST_SEPARATOR
        parts.append(separator + encode_asset(asset))
    return "".join(parts)


def asset_type_fragments(role: str, asset: Optional[Asset]) -> List[Fragment]:
    """
    Expand an asset into the ``{role}_asset_*`` parameter triple.

    Native assets only carry ``{role}_asset_type=native``; issued assets add
    ``{role}_asset_code`` and ``{role}_asset_issuer``.
    """
    if asset is None:
        return []
    fragments = [f"{role}_asset_type={asset.asset_type.value}"]
    if asset.asset_type.value != "native":
        fragments.append(f"{role}_asset_code={asset.code}")
        fragments.append(f"{role}_asset_issuer={asset.issuer}")
    return fragments


__all__ = [
    "Fragment",
    "build_query_parameters",
    "fragment",
    "format_flag",
    "encode_asset",
    "encode_asset_list",
    "asset_type_fragments",
]
