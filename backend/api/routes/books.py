"""
Books API routes.
"""
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field

from db import get_store
from domain.errors import BookAlreadyExistsError, BookNotFoundError
from domain.models import Book
from repositories import BooksRepository

router = APIRouter()
logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Book with the given id was not found"


class BookCreate(BaseModel):
    """Payload for a new book. Unknown fields are kept on the record."""
    model_config = ConfigDict(
        extra="allow",
        json_schema_extra={"example": {"name": "The New Turing Omnibus"}},
    )

    name: str = Field(..., min_length=1, description="The book title")
    id: Optional[str] = Field(
        default=None,
        description=(
            "Never used as the new id; must be a string, and is rejected "
            "if it matches an existing book"
        ),
    )


class BookUpdate(BaseModel):
    name: str = Field(..., min_length=1, description="The new book title")


class BookResponse(BaseModel):
    model_config = ConfigDict(
        extra="allow",
        json_schema_extra={"example": {"id": "d5fE_asz", "name": "The New Turing Omnibus"}},
    )

    id: str = Field(..., description="The auto-generated id of the book")
    name: str = Field(..., description="The book title")


class MessageResponse(BaseModel):
    message: str


def book_to_response(book: Book) -> BookResponse:
    """Convert domain Book to API response."""
    return BookResponse(**book.to_dict())


def _message(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message})


@router.get(
    "",
    response_model=List[BookResponse],
    summary="Returns the list of all books",
)
def list_books(store: BooksRepository = Depends(get_store)):
    """List all books in insertion order."""
    return [book_to_response(b) for b in store.list_books()]


@router.get(
    "/{book_id}",
    response_model=BookResponse,
    summary="Get the book by id",
    responses={404: {"model": MessageResponse, "description": "The book was not found"}},
)
def get_book(book_id: str, store: BooksRepository = Depends(get_store)):
    """Get a book by ID."""
    book = store.get_book(book_id)
    if book is None:
        return _message(404, NOT_FOUND_MESSAGE)
    return book_to_response(book)


@router.post(
    "",
    response_model=BookResponse,
    summary="Create a new book",
    responses={
        400: {"model": MessageResponse, "description": "A book with this name or id already exists"},
        500: {"model": MessageResponse, "description": "Some server error"},
    },
)
def create_book(data: BookCreate, store: BooksRepository = Depends(get_store)):
    """Create a new book. The id is generated by the server."""
    try:
        book = store.create_book(data.model_dump(exclude_unset=True))
    except BookAlreadyExistsError:
        logger.info("Rejected duplicate book %r", data.name)
        return _message(400, "Book already exists")
    return book_to_response(book)


@router.put(
    "/{book_id}",
    response_model=MessageResponse,
    summary="Update the book by the id",
    responses={
        404: {"model": MessageResponse, "description": "The book was not found"},
        500: {"model": MessageResponse, "description": "Some error happened"},
    },
)
def update_book(book_id: str, data: BookUpdate, store: BooksRepository = Depends(get_store)):
    """Rename a book. Only `name` is applied."""
    try:
        store.update_book_name(book_id, data.name)
    except BookNotFoundError:
        return _message(404, NOT_FOUND_MESSAGE)
    return MessageResponse(message="Book updated successfully")


@router.delete(
    "/{book_id}",
    response_model=MessageResponse,
    summary="Remove the book by id",
    responses={404: {"model": MessageResponse, "description": "The book was not found"}},
)
def delete_book(book_id: str, store: BooksRepository = Depends(get_store)):
    """Delete a book."""
    try:
        store.delete_book(book_id)
    except BookNotFoundError:
        return _message(404, NOT_FOUND_MESSAGE)
    return MessageResponse(message="Book Deleted successfully")
