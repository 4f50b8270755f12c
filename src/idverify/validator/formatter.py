"""Display formatting for ID numbers."""

from __future__ import annotations

from idverify.core.types import IdNumber
from idverify.validator.format_parser import ID_LENGTH


def format_sa_id(id_number: IdNumber) -> IdNumber:
    """Group a 13-character ID as ``YYMMDD SSSS CAZ``, e.g. "900108 5012 085".

    Anything that is not 13 characters long comes back unchanged. The
    content is not validated.
    """
    if not isinstance(id_number, str) or len(id_number) != ID_LENGTH:
        return id_number
    return f"{id_number[:6]} {id_number[6:10]} {id_number[10:]}"
