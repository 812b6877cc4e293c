import json
import sys
from contextlib import asynccontextmanager

from fastapi import Body, Depends, FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from pymongo.errors import PyMongoError

from frontdesk_db.connect_db import check_connection, get_database
from frontdesk_db.create_collections import create_collections

from .exceptions import RecordNotFound, RecordValidationError
from .store import customer_store, staff_store, total_guests


@asynccontextmanager
async def lifespan(app: FastAPI):
    # a database that is down at startup is reported but does not stop the server
    if check_connection():
        create_collections(get_database())
    yield


app = FastAPI(title="Hotel Front Desk API", version="1.0.0", lifespan=lifespan)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


def db_conn():
    return get_database()


async def update_body(request: Request):
    """Decode an update payload without rejecting it.

    Updates look the record up before validating, so a missing or malformed
    body is handed to the store as is (None or the raw text) and rejected
    there, after the not-found check.
    """
    raw = await request.body()
    if not raw:
        return None
    try:
        return json.loads(raw)
    except ValueError:
        return raw.decode("utf-8", errors="replace")


def _log_error(message: str, error: Exception):
    print(f"{message}: {error}", file=sys.stderr)


def _client_error(prefix: str, error: Exception) -> PlainTextResponse:
    _log_error(prefix, error)
    if isinstance(error, RecordNotFound):
        return PlainTextResponse(str(error), status_code=status.HTTP_404_NOT_FOUND)
    if isinstance(error, RecordValidationError):
        return PlainTextResponse(f"{prefix}: {error}", status_code=status.HTTP_400_BAD_REQUEST)
    return PlainTextResponse(f"{prefix}: {error}", status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


def _internal_error(prefix: str, error: Exception) -> JSONResponse:
    _log_error(prefix, error)
    return JSONResponse({"error": "Internal Server Error"}, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


@app.exception_handler(RequestValidationError)
async def invalid_body_handler(request, exc: RequestValidationError):
    messages = "; ".join(str(err.get("msg")) for err in exc.errors())
    _log_error("Invalid request body", exc)
    return PlainTextResponse(f"Invalid request body: {messages}", status_code=status.HTTP_400_BAD_REQUEST)


# ======== Health ========
@app.get("/", tags=["Health"])
def root():
    return {"message": "Server is running"}


# ======== Customers ========
@app.post("/api/customers", status_code=status.HTTP_201_CREATED, tags=["Customers"])
def create_customer(payload: dict = Body(...), db=Depends(db_conn)):
    try:
        customer_store(db).create(payload)
    except (RecordValidationError, PyMongoError) as e:
        return _client_error("Error saving customer profile", e)
    return PlainTextResponse("Customer profile saved successfully", status_code=status.HTTP_201_CREATED)


@app.get("/api/customers", tags=["Customers"])
def list_customers(db=Depends(db_conn)):
    try:
        return customer_store(db).list_all()
    except PyMongoError as e:
        return _internal_error("Error fetching customers", e)


@app.put("/api/customers/{id}", tags=["Customers"])
def update_customer(id: str, payload=Depends(update_body), db=Depends(db_conn)):
    try:
        return customer_store(db).update(id, payload)
    except (RecordNotFound, RecordValidationError, PyMongoError) as e:
        return _client_error("Error updating customer profile", e)


# ======== Bookings ========
@app.post("/api/bookings", status_code=status.HTTP_201_CREATED, tags=["Bookings"])
def book_room(payload: dict = Body(...), db=Depends(db_conn)):
    # a booking is stored as a customer record
    try:
        customer_store(db).create(payload)
    except (RecordValidationError, PyMongoError) as e:
        return _client_error("Error booking room", e)
    return PlainTextResponse("Room booked successfully", status_code=status.HTTP_201_CREATED)


# ======== Staff ========
@app.post("/api/staff", status_code=status.HTTP_201_CREATED, tags=["Staff"])
def create_staff(payload: dict = Body(...), db=Depends(db_conn)):
    try:
        staff_store(db).create(payload)
    except (RecordValidationError, PyMongoError) as e:
        return _client_error("Error saving staff profile", e)
    return PlainTextResponse("Staff profile saved successfully", status_code=status.HTTP_201_CREATED)


@app.get("/api/staff", tags=["Staff"])
def list_staff(db=Depends(db_conn)):
    try:
        return staff_store(db).list_all()
    except PyMongoError as e:
        _log_error("Error fetching staff data", e)
        return PlainTextResponse(
            f"Error fetching staff data: {e}", status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
        )


@app.put("/api/staff/{id}", tags=["Staff"])
def update_staff(id: str, payload=Depends(update_body), db=Depends(db_conn)):
    try:
        return staff_store(db).update(id, payload)
    except (RecordNotFound, RecordValidationError, PyMongoError) as e:
        return _client_error("Error updating staff profile", e)


@app.delete("/api/staff/{id}", tags=["Staff"])
def delete_staff(id: str, db=Depends(db_conn)):
    try:
        staff_store(db).delete(id)
    except (RecordNotFound, RecordValidationError, PyMongoError) as e:
        return _client_error("Error deleting staff profile", e)
    return {"message": "Staff profile deleted successfully"}


# ======== Aggregates ========
@app.get("/api/totalGuests", tags=["Aggregates"])
def get_total_guests(db=Depends(db_conn)):
    try:
        return {"totalGuests": total_guests(db)}
    except PyMongoError as e:
        return _internal_error("Error fetching total guests", e)
