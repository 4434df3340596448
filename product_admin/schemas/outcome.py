"""
Outcome of a single submit attempt.
"""
from typing import Annotated, Literal, Union
from pydantic import BaseModel, Field, ConfigDict


class Success(BaseModel):
    """The backend created the product."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["success"] = "success"


class RejectedByServer(BaseModel):
    """The backend answered but declared failure."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["rejected"] = "rejected"
    message: str


class TransportFailure(BaseModel):
    """The request did not complete. ``reason`` is for logs, never for users."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["transport_failure"] = "transport_failure"
    reason: str = ""


SubmissionOutcome = Annotated[
    Union[Success, RejectedByServer, TransportFailure],
    Field(discriminator="kind")
]
