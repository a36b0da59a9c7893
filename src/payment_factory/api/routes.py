"""FastAPI routes for the Payment Factory domain.

Thin adapters that translate HTTP requests into domain commands. The calling
identity travels in the ``X-Caller-Id`` header and is passed to every
command as ``caller_id``.
"""

import os

from fastapi import APIRouter, Header, HTTPException
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from payment_factory.api.schemas import (
    AuditEntryResponse,
    AuditLogResponse,
    BackendConfigResponse,
    ConfigureBackendRequest,
    CreatePaymentRequest,
    DeployPaymentFactoryRequest,
    FactoryIdResponse,
    FactoryResponse,
    InstanceHandleResponse,
    PaymentInstanceListResponse,
    PaymentInstanceResponse,
    ProvenanceResponse,
    StatusResponse,
    TemplateVersionResponse,
    TransferOwnershipRequest,
    UpdateTemplateVersionRequest,
)
from payment_factory.factory.creation import CreatePayment
from payment_factory.factory.deployment import DeployPaymentFactory
from payment_factory.factory.errors import Unauthorized
from payment_factory.factory.factory import PaymentFactory
from payment_factory.factory.ownership import TransferOwnership
from payment_factory.factory.pausing import PausePaymentFactory, UnpausePaymentFactory
from payment_factory.factory.template import UpdateTemplateVersion
from payment_factory.instantiation import get_backend
from payment_factory.instantiation.fake_adapter import FakeInstanceBackend
from payment_factory.projections.audit_log import audit_trail
from payment_factory.projections.payment_instances import instances_for_creator

factory_router = APIRouter(prefix="/payment-factories", tags=["payment-factories"])


def _load_factory(factory_id: str) -> PaymentFactory:
    try:
        return current_domain.repository_for(PaymentFactory).get(factory_id)
    except ObjectNotFoundError:
        raise HTTPException(status_code=404, detail=f"Payment factory {factory_id} not found") from None


def _process_admin(command) -> None:
    """Process an owner-only command, mapping authorization failures to 403."""
    try:
        current_domain.process(command, asynchronous=False)
    except Unauthorized as exc:
        raise HTTPException(status_code=403, detail=str(exc)) from None
    except ObjectNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from None


# ---------------------------------------------------------------------------
# Fake backend control (non-production only)
# ---------------------------------------------------------------------------
@factory_router.post("/backend/configure", response_model=BackendConfigResponse)
async def configure_backend(body: ConfigureBackendRequest) -> BackendConfigResponse:
    """Configure the FakeInstanceBackend behavior (non-production only)."""
    if os.environ.get("PROTEAN_ENV") == "production":
        raise HTTPException(status_code=403, detail="Backend configuration not available in production")

    backend = get_backend()
    if not isinstance(backend, FakeInstanceBackend):
        raise HTTPException(status_code=400, detail="Backend configuration only available for FakeInstanceBackend")

    backend.configure(
        should_succeed=body.should_succeed,
        failure_reason=body.failure_reason,
    )
    return BackendConfigResponse(
        backend=type(backend).__name__,
        should_succeed=backend.should_succeed,
        failure_reason=backend.failure_reason,
    )


# ---------------------------------------------------------------------------
# Deployment & reads
# ---------------------------------------------------------------------------
@factory_router.post("", status_code=201, response_model=FactoryIdResponse)
async def deploy_factory(body: DeployPaymentFactoryRequest) -> FactoryIdResponse:
    """Deploy a new payment factory."""
    command = DeployPaymentFactory(
        owner_id=body.owner_id,
        template_version=body.template_version,
    )
    factory_id = current_domain.process(command, asynchronous=False)
    return FactoryIdResponse(factory_id=factory_id)


@factory_router.get("/{factory_id}", response_model=FactoryResponse)
async def get_factory(factory_id: str) -> FactoryResponse:
    factory = _load_factory(factory_id)
    return FactoryResponse(
        factory_id=str(factory.id),
        owner_id=factory.owner_id,
        template_version=factory.template_version,
        paused=factory.is_paused,
        instance_count=len(factory.instances or []),
    )


@factory_router.get("/{factory_id}/template-version", response_model=TemplateVersionResponse)
async def get_template_version(factory_id: str) -> TemplateVersionResponse:
    factory = _load_factory(factory_id)
    return TemplateVersionResponse(template_version=factory.template_version)


# ---------------------------------------------------------------------------
# Administration (owner only)
# ---------------------------------------------------------------------------
@factory_router.put("/{factory_id}/template-version", response_model=StatusResponse)
async def update_template_version(
    factory_id: str,
    body: UpdateTemplateVersionRequest,
    x_caller_id: str = Header(),
) -> StatusResponse:
    """Point future creations at a new template version."""
    _process_admin(
        UpdateTemplateVersion(
            factory_id=factory_id,
            caller_id=x_caller_id,
            template_version=body.template_version,
        )
    )
    return StatusResponse(status="template_updated")


@factory_router.post("/{factory_id}/pause", response_model=StatusResponse)
async def pause_factory(factory_id: str, x_caller_id: str = Header()) -> StatusResponse:
    _process_admin(PausePaymentFactory(factory_id=factory_id, caller_id=x_caller_id))
    return StatusResponse(status="paused")


@factory_router.post("/{factory_id}/unpause", response_model=StatusResponse)
async def unpause_factory(factory_id: str, x_caller_id: str = Header()) -> StatusResponse:
    _process_admin(UnpausePaymentFactory(factory_id=factory_id, caller_id=x_caller_id))
    return StatusResponse(status="unpaused")


@factory_router.put("/{factory_id}/owner", response_model=StatusResponse)
async def transfer_ownership(
    factory_id: str,
    body: TransferOwnershipRequest,
    x_caller_id: str = Header(),
) -> StatusResponse:
    _process_admin(
        TransferOwnership(
            factory_id=factory_id,
            caller_id=x_caller_id,
            new_owner_id=body.new_owner_id,
        )
    )
    return StatusResponse(status="ownership_transferred")


# ---------------------------------------------------------------------------
# Payment instances
# ---------------------------------------------------------------------------
@factory_router.post("/{factory_id}/payments", status_code=201, response_model=InstanceHandleResponse)
async def create_payment(
    factory_id: str,
    body: CreatePaymentRequest,
    x_caller_id: str = Header(),
) -> InstanceHandleResponse:
    """Deploy a new payment instance from the factory's current template."""
    _load_factory(factory_id)
    command = CreatePayment(
        factory_id=factory_id,
        caller_id=x_caller_id,
        store_name=body.store_name,
        store_wallet_address=body.store_wallet_address,
        payment_token=body.payment_token,
    )
    instance_handle = current_domain.process(command, asynchronous=False)
    return InstanceHandleResponse(instance_handle=instance_handle)


@factory_router.get(
    "/{factory_id}/payments/{creator_id}/{instance_handle}",
    response_model=ProvenanceResponse,
)
async def get_provenance(factory_id: str, creator_id: str, instance_handle: str) -> ProvenanceResponse:
    """Template version a creator's payment instance was deployed with."""
    factory = _load_factory(factory_id)
    try:
        template_version = factory.provenance_of(creator_id, instance_handle)
    except ObjectNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from None
    return ProvenanceResponse(
        creator_id=creator_id,
        instance_handle=instance_handle,
        template_version=template_version,
    )


@factory_router.get(
    "/{factory_id}/creators/{creator_id}/payments",
    response_model=PaymentInstanceListResponse,
)
async def list_creator_payments(factory_id: str, creator_id: str) -> PaymentInstanceListResponse:
    _load_factory(factory_id)
    return PaymentInstanceListResponse(
        instances=[
            PaymentInstanceResponse(
                instance_handle=view.instance_handle,
                template_version=view.template_version,
                store_name=view.store_name,
                store_wallet_address=view.store_wallet_address,
                payment_token=view.payment_token,
                created_at=view.created_at,
            )
            for view in instances_for_creator(factory_id, creator_id)
        ]
    )


@factory_router.get("/{factory_id}/audit-log", response_model=AuditLogResponse)
async def get_audit_log(factory_id: str) -> AuditLogResponse:
    _load_factory(factory_id)
    return AuditLogResponse(
        entries=[
            AuditEntryResponse(
                sequence=entry.sequence,
                event_type=entry.event_type,
                actor_id=str(entry.actor_id) if entry.actor_id else None,
                detail=entry.detail,
                occurred_at=entry.occurred_at,
            )
            for entry in audit_trail(factory_id)
        ]
    )
