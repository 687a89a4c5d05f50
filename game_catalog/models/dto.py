"""Data Transfer Objects - caller-facing contracts."""

from typing import Annotated, Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictInt

# Strict float that rejects nan and +/-inf
FiniteFloat = Annotated[float, Field(strict=True, allow_inf_nan=False)]


class GameDTO(BaseModel):
    """Game payload for writes and game data in responses.

    Strings must be real, non-empty ``str`` values and ``year`` a finite
    real number; pydantic's lax coercion (``"2020"`` -> ``2020``) is disabled.
    """
    id: str = Field(..., min_length=1, strict=True)
    title: str = Field(..., min_length=1, strict=True)
    genre: str = Field(..., min_length=1, strict=True)
    year: Union[StrictInt, FiniteFloat]
    developer: str = Field(..., min_length=1, strict=True)
    description: str = Field(..., min_length=1, strict=True)

    model_config = ConfigDict(from_attributes=True, extra="ignore")


class CatalogResponse(BaseModel):
    """Structured result of a catalog operation.

    Only the fields an operation sets are part of its contract; use
    :meth:`to_dict` to get exactly those.
    """
    status: int
    data: Optional[List[GameDTO]] = None
    message: Optional[str] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)
