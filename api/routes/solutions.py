"""
Solution promo endpoints.

- GET /api/solutions - List solutions
- POST /api/solutions - Create solution
"""

from fastapi import APIRouter, Depends, status

from api.dependencies import get_repository
from api.schemas import SolutionCreateRequest, SolutionResponse
from core.logging import get_logger
from core.storage import BaseCatalogRepository


logger = get_logger(__name__)
router = APIRouter(prefix="/api/solutions", tags=["Solutions"])


@router.get("", response_model=list[SolutionResponse])
async def list_solutions(
    repository: BaseCatalogRepository = Depends(get_repository),
) -> list[SolutionResponse]:
    solutions = await repository.get_solutions()
    return [SolutionResponse.model_validate(solution) for solution in solutions]


@router.post("", response_model=SolutionResponse, status_code=status.HTTP_201_CREATED)
async def create_solution(
    request: SolutionCreateRequest,
    repository: BaseCatalogRepository = Depends(get_repository),
) -> SolutionResponse:
    logger.info("Creating solution", title=request.title)

    solution = await repository.create_solution(
        title=request.title,
        description=request.description,
        link=request.link,
        link_text=request.link_text,
        image_url=request.image_url,
    )
    return SolutionResponse.model_validate(solution)
