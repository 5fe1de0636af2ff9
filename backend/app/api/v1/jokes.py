"""
Jokes API Endpoints

Endpoints:
- GET /jokes - All jokes with author, category, rate and comments
- GET /jokes/random - One random joke
- GET /jokes/{id} - A single joke
- PUT /jokes/{id} - Update own joke
- DELETE /jokes/{id} - Delete own joke
- POST /jokes - Add a joke
- POST /jokes/{id}/rate - Rate someone else's joke
- POST /jokes/{id}/comment - Comment on a joke

Read endpoints are public; the others need a bearer token. Responses come
straight from the JokeController result: a view or {"message": ...} on
success, {"error": ...} otherwise.
"""

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from app.api.v1.deps import get_joke_controller, get_requester
from app.schemas.joke import (
    CommentRequest,
    ErrorResponse,
    JokeCreate,
    JokeListItem,
    JokeUpdate,
    JokeView,
    MessageResponse,
    RateRequest,
)
from app.services.joke_controller import ControllerResult, JokeController
from app.services.joke_permissions import Requester


router = APIRouter(prefix="/jokes", tags=["Jokes"])

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    403: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


def to_response(result: ControllerResult) -> JSONResponse:
    return JSONResponse(status_code=result.status_code, content=result.body)


@router.get("", response_model=list[JokeListItem], responses=ERROR_RESPONSES)
def list_jokes(controller: JokeController = Depends(get_joke_controller)):
    """
    Get all jokes.
    Each joke includes its author's name.
    """
    return to_response(controller.list_all())


@router.get("/random", response_model=JokeView, responses=ERROR_RESPONSES)
def get_random_joke(controller: JokeController = Depends(get_joke_controller)):
    """
    Get one joke picked at random.
    Unlike the listing, the author is not included.
    """
    return to_response(controller.random())


@router.get("/{joke_id}", response_model=JokeView, responses=ERROR_RESPONSES)
def get_joke(joke_id: int, controller: JokeController = Depends(get_joke_controller)):
    return to_response(controller.get(joke_id))


@router.put("/{joke_id}", response_model=MessageResponse, responses=ERROR_RESPONSES)
def update_joke(
    joke_id: int,
    data: JokeUpdate,
    requester: Requester = Depends(get_requester),
    controller: JokeController = Depends(get_joke_controller)
):
    """
    Update the content and/or category of a joke.
    Only the author can update it.
    """
    return to_response(controller.update(
        joke_id,
        requester,
        content=data.content,
        category_id=data.category_id,
    ))


@router.delete("/{joke_id}", response_model=MessageResponse, responses=ERROR_RESPONSES)
def delete_joke(
    joke_id: int,
    requester: Requester = Depends(get_requester),
    controller: JokeController = Depends(get_joke_controller)
):
    """
    Delete a joke together with its ratings and comments.
    Only the author can delete it.
    """
    return to_response(controller.delete(joke_id, requester))


@router.post(
    "",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
    responses=ERROR_RESPONSES
)
def create_joke(
    data: JokeCreate,
    requester: Requester = Depends(get_requester),
    controller: JokeController = Depends(get_joke_controller)
):
    return to_response(controller.create(requester, data.content, data.category_id))


@router.post(
    "/{joke_id}/rate",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
    responses=ERROR_RESPONSES
)
def rate_joke(
    joke_id: int,
    data: RateRequest,
    requester: Requester = Depends(get_requester),
    controller: JokeController = Depends(get_joke_controller)
):
    """
    Rate a joke.
    Authors cannot rate their own jokes.
    """
    return to_response(controller.rate(joke_id, requester, rate=data.rate))


@router.post(
    "/{joke_id}/comment",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
    responses=ERROR_RESPONSES
)
def comment_joke(
    joke_id: int,
    data: CommentRequest,
    requester: Requester = Depends(get_requester),
    controller: JokeController = Depends(get_joke_controller)
):
    return to_response(controller.comment(joke_id, requester, comment=data.comment))
