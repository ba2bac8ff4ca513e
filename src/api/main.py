"""
FastAPI backend: REST dispatch layer over AddressBookService.
Run with uvicorn: uvicorn api.main:app --reload
"""

import logging
from pathlib import Path

from dotenv import load_dotenv

# Load .env from repo root (when run from repo root or from Docker)
for path in (
    Path(__file__).resolve().parent.parent.parent / ".env",
    Path.cwd() / ".env",
):
    if path.exists():
        load_dotenv(path)
        break

from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from connectify.application import (
    AddressBookService,
    CompanyCardData,
    DuplicateCompany,
    DuplicatePerson,
    EditCompanyDescriptor,
    EditPersonDescriptor,
    EditRequest,
    ElementNotFound,
    IndexOutOfRange,
    Invalid,
    InvalidCompanyIndex,
    InvalidIndex,
    MissingCompanyReference,
    MissingEditFields,
    Model,
    NothingListed,
    PersonCardData,
    Ranked,
)
from connectify.domain import Company, Person
from connectify.infrastructure import (
    CompanyPhoneNormalizer,
    InMemoryAddressBookStorage,
    Settings,
    get_sample_address_book,
)

settings = Settings.from_env()

logging.basicConfig(
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    level=getattr(logging, settings.log_level, logging.INFO),
)
logger = logging.getLogger(__name__)


def build_service(settings: Settings) -> AddressBookService:
    storage = InMemoryAddressBookStorage(
        get_sample_address_book() if settings.sample_data else None
    )
    model = Model(storage.read_address_book())
    return AddressBookService(
        model,
        storage=storage,
        normalize_phone=CompanyPhoneNormalizer(settings.default_region),
    )


def get_service(app: FastAPI) -> AddressBookService:
    if getattr(app.state, "service", None) is None:
        app.state.service = build_service(settings)
    return app.state.service


@asynccontextmanager
async def lifespan(app: FastAPI):
    service = get_service(app)
    logger.info(
        "Address book ready: %d persons, %d companies",
        len(service.address_book.get_person_list()),
        len(service.address_book.get_company_list()),
    )
    yield


app = FastAPI(title="Connectify API", lifespan=lifespan)


# --- result -> HTTP ---


def _raise_for_failure(result) -> None:
    if isinstance(result, Invalid):
        raise HTTPException(status_code=400, detail=f"{result.field}: {result.reason}")
    if isinstance(result, MissingEditFields):
        raise HTTPException(status_code=400, detail="At least one field to edit must be provided.")
    if isinstance(result, InvalidIndex):
        raise HTTPException(status_code=400, detail="The index provided is invalid.")
    if isinstance(result, MissingCompanyReference):
        raise HTTPException(status_code=400, detail="A company index is required.")
    if isinstance(result, InvalidCompanyIndex):
        raise HTTPException(status_code=400, detail="The company index provided is invalid.")
    if isinstance(result, IndexOutOfRange):
        raise HTTPException(
            status_code=404,
            detail=f"Index {result.index} is out of range (displayed: {result.size}).",
        )
    if isinstance(result, ElementNotFound):
        raise HTTPException(status_code=404, detail=result.reason)
    if isinstance(result, DuplicatePerson):
        raise HTTPException(status_code=409, detail="This person already exists.")
    if isinstance(result, DuplicateCompany):
        raise HTTPException(status_code=409, detail="This company already exists.")


# --- bodies and views ---


class PersonBody(BaseModel):
    name: str
    email: str
    phone: str | None = None
    address: str | None = None
    tags: list[str] = []
    priority: int | None = None


class PersonPatch(BaseModel):
    name: str | None = None
    email: str | None = None
    phone: str | None = None
    address: str | None = None
    tags: list[str] | None = None
    priority: int | None = None


class CompanyBody(BaseModel):
    name: str
    industry: str = ""
    location: str = ""
    description: str = ""
    website: str = ""
    email: str = ""
    phone: str = ""
    address: str = ""


class CompanyPatch(BaseModel):
    name: str | None = None
    industry: str | None = None
    location: str | None = None
    description: str | None = None
    website: str | None = None
    email: str | None = None
    phone: str | None = None
    address: str | None = None


def _person_view(p: Person) -> dict:
    return {
        "name": p.name.value,
        "email": p.email.value,
        "phone": p.phone.value if p.phone else None,
        "address": p.address.value if p.address else None,
        "tags": sorted(t.name for t in p.tags),
        "priority": p.priority.value,
    }


def _company_view(c: Company) -> dict:
    return {
        "name": c.name,
        "industry": c.industry,
        "location": c.location,
        "description": c.description,
        "website": c.website,
        "email": c.email,
        "phone": c.phone,
        "address": c.address,
        "persons": [_person_view(p) for p in c.persons],
    }


def _person_descriptor(body: PersonPatch) -> EditPersonDescriptor:
    return EditPersonDescriptor(
        name=body.name,
        email=body.email,
        phone=body.phone,
        address=body.address,
        tags=tuple(body.tags) if body.tags is not None else None,
        priority=body.priority,
    )


# --- REST: health ---


@app.get("/health")
def health():
    return {"status": "ok"}


# --- REST: listing ---


def _listing(result) -> dict:
    if isinstance(result, NothingListed):
        return {"kind": result.kind, "count": 0}
    return {"kind": result.kind, "count": result.count}


@app.get("/entities")
def list_entities(request: Request):
    service = get_service(request.app)
    out = _listing(service.list_all())
    out["persons"] = [_person_view(p) for p in service.model.displayed_persons()]
    out["companies"] = [_company_view(c) for c in service.model.displayed_companies()]
    return out


@app.get("/persons")
def list_persons(request: Request):
    service = get_service(request.app)
    out = _listing(service.list_people())
    out["persons"] = [_person_view(p) for p in service.model.displayed_persons()]
    return out


@app.get("/companies")
def list_companies(request: Request):
    service = get_service(request.app)
    out = _listing(service.list_companies())
    out["companies"] = [_company_view(c) for c in service.model.displayed_companies()]
    return out


# --- REST: persons ---


@app.post("/persons")
def add_person(body: PersonBody, request: Request):
    service = get_service(request.app)
    result = service.add_person(
        PersonCardData(
            name=body.name,
            email=body.email,
            phone=body.phone,
            address=body.address,
            tags=tuple(body.tags),
            priority=body.priority,
        )
    )
    _raise_for_failure(result)
    return JSONResponse(content=_person_view(result.person), status_code=201)


@app.delete("/persons/{index}")
def delete_person(index: int, request: Request):
    result = get_service(request.app).delete_person(index)
    _raise_for_failure(result)
    return _person_view(result.person)


@app.patch("/persons/{index}")
def edit_person(index: int, body: PersonPatch, request: Request):
    result = get_service(request.app).edit(
        EditRequest(index=index, descriptor=_person_descriptor(body))
    )
    _raise_for_failure(result)
    return _person_view(result.person)


# --- REST: companies ---


@app.post("/companies")
def add_company(body: CompanyBody, request: Request):
    result = get_service(request.app).add_company(CompanyCardData(**body.model_dump()))
    _raise_for_failure(result)
    return JSONResponse(content=_company_view(result.company), status_code=201)


@app.delete("/companies/{index}")
def delete_company(index: int, request: Request):
    result = get_service(request.app).delete_company(index)
    _raise_for_failure(result)
    return _company_view(result.company)


@app.patch("/companies/{index}")
def edit_company(index: int, body: CompanyPatch, request: Request):
    result = get_service(request.app).edit(
        EditRequest(index=index, descriptor=EditCompanyDescriptor(**body.model_dump()))
    )
    _raise_for_failure(result)
    return _company_view(result.company)


@app.patch("/companies/{company_index}/persons/{index}")
def edit_company_person(company_index: int, index: int, body: PersonPatch, request: Request):
    result = get_service(request.app).edit(
        EditRequest(
            index=index,
            descriptor=_person_descriptor(body),
            company_index=company_index,
            within_company=True,
        )
    )
    _raise_for_failure(result)
    return _person_view(result.person)


@app.post("/companies/{company_index}/persons/{person_index}")
def link_person(company_index: int, person_index: int, request: Request):
    result = get_service(request.app).add_person_to_company(person_index, company_index)
    _raise_for_failure(result)
    return _company_view(result.company)


@app.post("/rank")
def rank(request: Request):
    result: Ranked = get_service(request.app).rank()
    return {"persons": result.persons, "companies": result.companies}
