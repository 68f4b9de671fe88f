"""
Pydantic schemas for request validation and the published API document.

Field aliases match the camelCase JSON contract the browser client speaks.
"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr
from pydantic import ValidationError as PydanticValidationError

from trivia.errors import ValidationError

# Largest value a 32-bit INTEGER column holds
MAX_ID = 2**31 - 1


class RequestSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def parse(cls, data):
        """Validate a decoded JSON body, raising the API's ValidationError."""
        try:
            return cls.model_validate(data if data is not None else {})
        except PydanticValidationError as exc:
            err = exc.errors()[0]
            field = '.'.join(str(part) for part in err['loc'])
            message = f"{field}: {err['msg']}" if field else err['msg']
            raise ValidationError(message)


# ── Request Schemas ──────────────────────────────────────────────

class Credentials(RequestSchema):
    """Body for register: username 3 to 64 chars, password at least 6."""

    username: StrictStr = Field(..., min_length=3, max_length=64)
    password: StrictStr = Field(..., min_length=6)


class LoginCredentials(RequestSchema):
    username: StrictStr = Field(..., min_length=1)
    password: StrictStr = Field(..., min_length=1)


class StartGameRequest(RequestSchema):
    category_id: StrictInt = Field(..., alias='categoryId', ge=1, le=MAX_ID)
    wager: StrictInt = Field(..., ge=1, le=MAX_ID)


class AnswerRequest(RequestSchema):
    round_id: StrictInt = Field(..., alias='roundId', ge=1, le=MAX_ID)
    answer_index: StrictInt = Field(..., alias='answerIndex', ge=0, le=3)


# ── Response Schemas ─────────────────────────────────────────────

class ErrorResponse(BaseModel):
    error: str


class UserOut(BaseModel):
    id: int
    username: str
    points: int


class UserResponse(BaseModel):
    user: UserOut


class OkResponse(BaseModel):
    ok: bool


class CategoryOut(BaseModel):
    id: int
    name: str
    question_count: int = Field(..., alias='questionCount')


class CategoriesResponse(BaseModel):
    categories: List[CategoryOut]


class RoundOut(BaseModel):
    id: int
    question: str
    options: List[str]


class RoundResponse(BaseModel):
    round: RoundOut


class AnswerResponse(BaseModel):
    correct: bool
    correct_index: int = Field(..., alias='correctIndex')
    points_delta: int = Field(..., alias='pointsDelta')
    new_balance: int = Field(..., alias='newBalance')


class StatsResponse(BaseModel):
    points: int
    games_played: int = Field(..., alias='gamesPlayed')
    correct: int
    incorrect: int
    accuracy: float


class LeaderOut(BaseModel):
    username: str
    points: int


class LeaderboardResponse(BaseModel):
    leaders: List[LeaderOut]
