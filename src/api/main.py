"""
FastAPI backend: REST API over the contact list.
Run with uvicorn: uvicorn api.main:app --reload
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request, Response
from pydantic import BaseModel, ConfigDict, Field

from contatos import config
from contatos.application import (
    INVALID_NAME,
    INVALID_PHONE,
    ContactSaved,
    ContactService,
    ContactSummary,
    Invalid,
    NotFound,
)
from contatos.domain import format_phone, is_valid_phone
from contatos.infrastructure import JsonContactStore, phone_to_e164

config.load_env()
config.configure_logging()
logger = logging.getLogger(__name__)

INVALID_REASONS = {
    INVALID_PHONE: "Invalid phone number. Use (XX) XXXXX-XXXX.",
    INVALID_NAME: "Full name is not valid text.",
}
MISSING_FIELDS_DETAIL = "Full name and phone number are required."


def get_service(app: FastAPI) -> ContactService:
    """Service for this app, created on first use and loaded from the configured store."""
    if getattr(app.state, "service", None) is None:
        store = JsonContactStore(config.store_path())
        service = ContactService(store)
        service.load()
        app.state.service = service
        logger.info("Contact store: %s", store.path)
    return app.state.service


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.service = None
    get_service(app)
    yield


app = FastAPI(title="Lista de Contatos API", lifespan=lifespan)


# --- REST: health ---


@app.get("/health")
def health():
    return {"status": "ok"}


# --- REST: contacts ---


class ContactBody(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    full_name: str = Field(alias="fullName")
    phone_number: str = Field(alias="phoneNumber")


class ContactItem(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    index: int
    full_name: str = Field(alias="fullName")
    phone_number: str = Field(alias="phoneNumber")
    phone_e164: str | None = Field(default=None, alias="phoneE164")


def _item(s: ContactSummary | ContactSaved) -> ContactItem:
    return ContactItem(
        index=s.index,
        full_name=s.full_name,
        phone_number=s.phone_number,
        phone_e164=phone_to_e164(s.phone_number),
    )


def _raise_invalid(result: Invalid) -> None:
    detail = INVALID_REASONS.get(result.reason, MISSING_FIELDS_DETAIL)
    raise HTTPException(status_code=400, detail=detail)


def _raise_not_found(result: NotFound) -> None:
    raise HTTPException(status_code=404, detail=f"No contact at index {result.index}")


@app.get("/contacts", response_model=list[ContactItem])
def list_contacts(request: Request):
    service = get_service(request.app)
    return [_item(s) for s in service.list_contacts()]


@app.get("/contacts/{index}", response_model=ContactItem)
def get_contact(index: int, request: Request):
    service = get_service(request.app)
    summary = service.get_contact(index)
    if summary is None:
        _raise_not_found(NotFound(index=index))
    return _item(summary)


@app.post("/contacts", response_model=ContactItem, status_code=201)
def create_contact(body: ContactBody, request: Request):
    service = get_service(request.app)
    result = service.add_contact(body.full_name, body.phone_number)
    if isinstance(result, Invalid):
        _raise_invalid(result)
    logger.info("Added contact at index %d", result.index)
    return _item(result)


@app.put("/contacts/{index}", response_model=ContactItem)
def update_contact(index: int, body: ContactBody, request: Request):
    service = get_service(request.app)
    result = service.update_contact(index, body.full_name, body.phone_number)
    if isinstance(result, NotFound):
        _raise_not_found(result)
    if isinstance(result, Invalid):
        _raise_invalid(result)
    logger.info("Edited contact at index %d", result.index)
    return _item(result)


@app.delete("/contacts/{index}", status_code=204)
def delete_contact(index: int, request: Request):
    service = get_service(request.app)
    result = service.delete_contact(index)
    if isinstance(result, NotFound):
        _raise_not_found(result)
    logger.info("Deleted contact at index %d", index)
    return Response(status_code=204)


# --- REST: live phone formatting ---


@app.get("/phone/format")
def format_phone_value(value: str = ""):
    formatted = format_phone(value)
    return {"formatted": formatted, "valid": is_valid_phone(formatted)}
