"""Pydantic request/response schemas for the Payment Factory API.

These are external contracts (anti-corruption layer), separate from
internal Protean commands.
"""

from datetime import datetime

from pydantic import BaseModel


# ---------------------------------------------------------------------------
# Request Schemas
# ---------------------------------------------------------------------------
class DeployPaymentFactoryRequest(BaseModel):
    owner_id: str | None = None
    template_version: str | None = None

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "owner_id": "0x0a11ce",
                    "template_version": "0x05f3a7c2d1e4b6a8",
                }
            ]
        }
    }


class CreatePaymentRequest(BaseModel):
    store_name: str | None = None
    store_wallet_address: str | None = None
    payment_token: str | None = None

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "store_name": "Corner Store",
                    "store_wallet_address": "0x0c0ffee",
                    "payment_token": "0x04718f5a",
                }
            ]
        }
    }


class UpdateTemplateVersionRequest(BaseModel):
    template_version: str | None = None


class TransferOwnershipRequest(BaseModel):
    new_owner_id: str | None = None


class ConfigureBackendRequest(BaseModel):
    should_succeed: bool = True
    failure_reason: str = "Template constructor reverted"


# ---------------------------------------------------------------------------
# Response Schemas
# ---------------------------------------------------------------------------
class FactoryIdResponse(BaseModel):
    factory_id: str


class FactoryResponse(BaseModel):
    factory_id: str
    owner_id: str
    template_version: str
    paused: bool
    instance_count: int


class TemplateVersionResponse(BaseModel):
    template_version: str


class InstanceHandleResponse(BaseModel):
    instance_handle: str


class ProvenanceResponse(BaseModel):
    creator_id: str
    instance_handle: str
    template_version: str


class PaymentInstanceResponse(BaseModel):
    instance_handle: str
    template_version: str
    store_name: str | None = None
    store_wallet_address: str | None = None
    payment_token: str | None = None
    created_at: datetime | None = None


class PaymentInstanceListResponse(BaseModel):
    instances: list[PaymentInstanceResponse]


class AuditEntryResponse(BaseModel):
    sequence: int
    event_type: str
    actor_id: str | None = None
    detail: str | None = None
    occurred_at: datetime


class AuditLogResponse(BaseModel):
    entries: list[AuditEntryResponse]


class StatusResponse(BaseModel):
    status: str = "ok"


class BackendConfigResponse(BaseModel):
    backend: str
    should_succeed: bool
    failure_reason: str
