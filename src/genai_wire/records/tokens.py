# genai_wire/records/tokens.py
from pydantic import Field

from ..fields import Base64Bytes, Int64
from .base import WireRecord

__all__ = ("TokensInfo",)


class TokensInfo(WireRecord):
    """Tokens info with a list of tokens and the corresponding list of token ids.

    Token ids are int64 strings on the wire; raw token bytes are base64.
    """

    wire_order = ("tokenIds", "role", "tokens")

    role: str | None = None
    token_ids: list[Int64] = Field(default_factory=list)
    tokens: list[Base64Bytes] = Field(default_factory=list)
