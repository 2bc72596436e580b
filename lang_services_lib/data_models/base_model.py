"""
Base model definitions for the lang‑services library.

Every value returned by a service is an immutable snapshot of the server
state at fetch time, so the shared base freezes instances and ignores fields
the server may add in later API revisions.
"""

from pydantic import BaseModel, ConfigDict


class BaseServiceModel(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        protected_namespaces=(),
    )
