"""Reveal Routes — host-only management of real beer identities."""

from fastapi import APIRouter, Depends, Path, status
from sqlalchemy.ext.asyncio import AsyncSession

from blindbeer.api.deps import get_tasting_session, require_admin
from blindbeer.core.domain_types import MAX_BEER_COUNT
from blindbeer.infrastructure.database import get_db
from blindbeer.models.session import TastingSession
from blindbeer.schemas.reveal import RevealResponse, RevealUpsert
from blindbeer.services.handle_reveals import RevealHandlers

router = APIRouter(
    prefix="/api/v1/sessions", tags=["reveals"],
    dependencies=[Depends(require_admin)],
)


@router.get("/{code}/reveals", response_model=list[RevealResponse])
async def list_reveals(
    session: TastingSession = Depends(get_tasting_session),
    db: AsyncSession = Depends(get_db),
):
    reveals = await RevealHandlers(db).list_reveals(session)
    return [RevealResponse.model_validate(r) for r in reveals]


@router.put("/{code}/reveals/{beer_number}", response_model=RevealResponse)
async def upsert_reveal(
    body: RevealUpsert,
    beer_number: int = Path(ge=1, le=MAX_BEER_COUNT),
    session: TastingSession = Depends(get_tasting_session),
    db: AsyncSession = Depends(get_db),
):
    reveal = await RevealHandlers(db).upsert_reveal(session, beer_number, body)
    return RevealResponse.model_validate(reveal)


@router.delete(
    "/{code}/reveals/{beer_number}", status_code=status.HTTP_204_NO_CONTENT,
)
async def delete_reveal(
    beer_number: int = Path(ge=1, le=MAX_BEER_COUNT),
    session: TastingSession = Depends(get_tasting_session),
    db: AsyncSession = Depends(get_db),
):
    await RevealHandlers(db).delete_reveal(session, beer_number)
