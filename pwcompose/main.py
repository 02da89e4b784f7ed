import logging
from typing import Any, List, Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field, field_validator

from . import settings
from .generators import CharacterClass, CompositeGenerator, ConfigurationError

logger = logging.getLogger("pwcompose.api")


class CharacterClassSummary(BaseModel):
    name: CharacterClass
    alphabet: str


class ClassLength(BaseModel):
    name: CharacterClass
    length: int = Field(ge=0)


class PasswordRequest(BaseModel):
    classes: Optional[List[ClassLength]] = None
    count: int = Field(default=1, ge=1)

    # Ceilings are read from settings on each request.
    @field_validator("classes", mode="before")
    @classmethod
    def limit_classes(cls, value: Any) -> Any:
        if isinstance(value, list) and len(value) > settings.MAX_CLASSES:
            raise ValueError(
                f"At most {settings.MAX_CLASSES} class entries are allowed"
            )
        return value

    @field_validator("count")
    @classmethod
    def limit_count(cls, value: int) -> int:
        if value > settings.MAX_COUNT:
            raise ValueError(f"At most {settings.MAX_COUNT} passwords per request")
        return value


class PasswordResponse(BaseModel):
    passwords: List[str]
    length: int


def _build_generator(request: PasswordRequest) -> CompositeGenerator:
    if request.classes is None:
        pairs = settings.default_lengths()
    else:
        pairs = [(item.name, item.length) for item in request.classes]
    return CompositeGenerator.from_lengths(pairs)


app = FastAPI(title="Composite Password Generator")

if settings.ALLOWED_ORIGINS:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


@app.get("/api/classes", response_model=list[CharacterClassSummary])
async def list_classes() -> list[CharacterClassSummary]:
    return [
        CharacterClassSummary(name=member, alphabet=member.alphabet)
        for member in CharacterClass
    ]


@app.post("/api/passwords", response_model=PasswordResponse)
def create_passwords(request: PasswordRequest) -> PasswordResponse:
    # Sync handler runs in the threadpool; each request gets its own generator.
    try:
        generator = _build_generator(request)
    except ConfigurationError as exc:
        logger.warning("Rejected password configuration: %s", exc)
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    if generator.length > settings.MAX_LENGTH:
        raise HTTPException(
            status_code=422,
            detail=f"Total length {generator.length} exceeds the limit of {settings.MAX_LENGTH}",
        )
    return PasswordResponse(
        passwords=generator.generate_many(request.count),
        length=generator.length,
    )
