"""Post CRUD endpoints.

Reads are open to everyone (drafts only to admins); writes require Admin.
"""

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from blog_api.application.schemas import PostCreate, PostResponse, PostUpdate
from blog_api.application.services import PostService
from blog_api.domain.entities import Identity
from blog_api.domain.exceptions import EntityNotFoundError, ValidationError
from blog_api.infrastructure.dependencies import get_post_service
from blog_api.presentation.api.security import get_current_identity, require_admin

router = APIRouter(prefix="/posts", tags=["Posts"])


@router.get("", response_model=list[PostResponse])
async def list_posts(
    identity: Identity = Depends(get_current_identity),
    service: PostService = Depends(get_post_service),
) -> list[PostResponse]:
    """List posts — everything for admins, published posts for everyone else."""
    posts = await service.list_posts(identity)
    return [PostResponse.model_validate(p, from_attributes=True) for p in posts]


@router.get("/{post_id}", response_model=PostResponse)
async def get_post(
    post_id: int,
    identity: Identity = Depends(get_current_identity),
    service: PostService = Depends(get_post_service),
) -> PostResponse:
    """Retrieve a single post by ID."""
    try:
        post = await service.get_post(post_id, identity)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return PostResponse.model_validate(post, from_attributes=True)


@router.post("", response_model=PostResponse, status_code=status.HTTP_201_CREATED)
async def create_post(
    data: PostCreate,
    request: Request,
    response: Response,
    _: Identity = Depends(require_admin),
    service: PostService = Depends(get_post_service),
) -> PostResponse:
    """Create a new post."""
    post = await service.create_post(data)
    response.headers["Location"] = request.app.url_path_for("get_post", post_id=str(post.id))
    return PostResponse.model_validate(post, from_attributes=True)


@router.put("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_post(
    post_id: int,
    data: PostUpdate,
    _: Identity = Depends(require_admin),
    service: PostService = Depends(get_post_service),
) -> None:
    """Replace a post's title, content and draft flag."""
    try:
        await service.update_post(post_id, data)
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_post(
    post_id: int,
    _: Identity = Depends(require_admin),
    service: PostService = Depends(get_post_service),
) -> None:
    """Delete a post by ID."""
    try:
        await service.delete_post(post_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
