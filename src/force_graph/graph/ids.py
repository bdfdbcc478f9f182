"""Id conventions shared by nodes, edges, and zoom targets.

Ids are built from a variant name and the debug form (``repr``) of a primary
key, joined with ``|``. The separator is not escaped: a key whose repr contains
``|`` can produce an ambiguous id.
"""

from enum import Enum
from typing import Any

ID_SEPARATOR = "|"


def variant_name(variant: Any) -> str:
    """Return the stable category name of a variant.

    Enum members map to their value so that ``Kind.PERSON = "person"`` names
    the bucket ``"person"`` rather than ``"Kind.PERSON"``.
    """
    if isinstance(variant, Enum):
        return str(variant.value)
    return str(variant)


def pk_debug(pk: Any) -> str:
    return repr(pk)


def format_variant_id(variant: Any, pk: Any) -> str:
    """Format ``"<variant>|<pk debug form>"``."""
    return f"{variant_name(variant)}{ID_SEPARATOR}{pk_debug(pk)}"


def format_pair_edge_id(source_pk: Any, edge_variant: Any, target_pk: Any) -> str:
    """Format ``"<source pk>|<edge variant>|<target pk>"``."""
    return ID_SEPARATOR.join((pk_debug(source_pk), variant_name(edge_variant), pk_debug(target_pk)))


def is_ambiguous_pk(pk: Any) -> bool:
    return ID_SEPARATOR in pk_debug(pk)
