import re
from typing import List, Optional
import json
import pydantic
from fastapi import APIRouter, Depends, Request
from ..core.dependencies import authorize, get_db
from ..database import DatabaseError
from ..errors import DecodeError, MissingFieldError, StoreError
from ..models.score import Score
from ..logger import get_logger

logger = get_logger(__name__)
router = APIRouter(dependencies=[Depends(authorize)])

DEFAULT_SCORE_COUNT = 10
MAX_SCORE_COUNT = 2 ** 63 - 1

_COUNT_PATTERN = re.compile(r'\+?[0-9]+')
_JSON_WHITESPACE = re.compile(r'[ \t\n\r]*')
_decoder = json.JSONDecoder()

def parse_count(raw: Optional[str]) -> int:
    """Parse the requested count, falling back to the default when it is not a valid non-negative integer"""
    if raw is None or not _COUNT_PATTERN.fullmatch(raw):
        return DEFAULT_SCORE_COUNT
    count = int(raw)
    if count > MAX_SCORE_COUNT:
        return DEFAULT_SCORE_COUNT
    return count

def decode_first_value(body: bytes):
    """Decode the leading JSON value of a request body; anything after it is ignored"""
    text = body.decode('utf-8', errors='replace')
    start = _JSON_WHITESPACE.match(text).end()
    value, _ = _decoder.raw_decode(text, start)
    return value

async def _top_scores(db, count: int) -> List[Score]:
    try:
        return await db.get_top_scores(count)
    except DatabaseError as e:
        logger.error(f"Error getting scores: {e}")
        raise StoreError("Failed to get scores") from e

@router.get("/scores", response_model=List[Score])
async def get_default_scores(db=Depends(get_db)):
    """Get the top scores using the default count"""
    return await _top_scores(db, DEFAULT_SCORE_COUNT)

@router.get("/scores/{count}", response_model=List[Score])
async def get_scores(count: str, db=Depends(get_db)):
    """
    Get the highest scores, best first.

    - **count**: number of scores to return; anything that is not a
      non-negative integer falls back to 10
    """
    return await _top_scores(db, parse_count(count))

@router.post("/scores", response_model=Score, status_code=201)
async def post_score(request: Request, db=Depends(get_db)):
    """
    Submit a single score and echo it back.

    - **name**: player name, must be non-empty
    - **score**: positive integer; zero counts as missing
    """
    body = await request.body()
    try:
        score = Score.from_body(decode_first_value(body))
    except (json.JSONDecodeError, pydantic.ValidationError) as e:
        logger.error(f"Error decoding score: {e}")
        raise DecodeError("Failed to upload score") from e

    if not score.name:
        raise MissingFieldError("Missing field name")

    if score.score == 0:
        raise MissingFieldError("Missing field score")

    try:
        await db.insert_score(score)
    except DatabaseError as e:
        logger.error(f"Error uploading score: {e}")
        raise StoreError("Failed to upload score") from e

    logger.info(f"Stored score {score.score} for {score.name!r}")
    return score
