import logging
from typing import List

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlmodel import Session
from ...db.session import get_session
from ...db.models import Entry
from ...db import crud
from ...schemas.entries import EntryIn, EntryOut, EntryPatch, Message

router = APIRouter(tags=["entries"])
logger = logging.getLogger(__name__)

CREATE_ERROR = "Error creating entry"
LIST_ERROR = "Error fetching entries"
GET_ERROR = "Error fetching entry"
UPDATE_ERROR = "Error updating"
DELETE_ERROR = "Error deleting entry"


def _failure(msg: str) -> JSONResponse:
    return JSONResponse(status_code=500, content={"msg": msg})


@router.post("/create/", response_model=EntryOut)
def create(body: EntryIn, session: Session = Depends(get_session)):
    try:
        return crud.create_entry(session, Entry(**body.model_dump()))
    except Exception:
        logger.exception("Failed to create entry")
        return _failure(CREATE_ERROR)

@router.get("/get/", response_model=List[EntryOut])
def list_all(session: Session = Depends(get_session)):
    try:
        return crud.list_entries(session)
    except Exception:
        logger.exception("Failed to list entries")
        return _failure(LIST_ERROR)

@router.get("/get/{entry_id}", response_model=EntryOut)
def get_one(entry_id: int, session: Session = Depends(get_session)):
    # not-found is reported like any other failure
    try:
        return crud.get_entry(session, entry_id)
    except Exception:
        logger.exception("Failed to fetch entry %s", entry_id)
        return _failure(GET_ERROR)

@router.put("/update/{entry_id}", response_model=Message)
def update(entry_id: int, body: EntryPatch, session: Session = Depends(get_session)):
    try:
        crud.update_entry(session, entry_id, body.model_dump(exclude_unset=True))
    except Exception:
        logger.exception("Failed to update entry %s", entry_id)
        return _failure(UPDATE_ERROR)
    return Message(msg="Updated successfully")

@router.delete("/delete/{entry_id}", response_model=Message)
def delete(entry_id: int, session: Session = Depends(get_session)):
    try:
        crud.delete_entry(session, entry_id)
    except Exception:
        logger.exception("Failed to delete entry %s", entry_id)
        return _failure(DELETE_ERROR)
    return Message(msg="Deleted successfully")
