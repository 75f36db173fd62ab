from pydantic import BaseModel, ConfigDict


class Principal(BaseModel):
    """Authenticated caller resolved from a bearer token."""

    model_config = ConfigDict(frozen=True)

    subject: str
    authorities: list[str] = []
