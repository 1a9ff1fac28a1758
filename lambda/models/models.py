from pydantic import BaseModel, field_validator
from typing import Optional


class TranslationRequest(BaseModel):
    germanWord: Optional[str] = None

    # Non-string words become None so they get the 400 body, not FastAPI's 422
    @field_validator("germanWord", mode="before")
    @classmethod
    def drop_non_strings(cls, value):
        return value if isinstance(value, str) else None

class TranslationResult(BaseModel):
    germanWord: str
    englishTranslation: str
    details: str

    def to_response(self) -> "TranslationResponse":
        return TranslationResponse(
            german=f"{self.germanWord}\n\n({self.details})",
            english=self.englishTranslation,
            raw=self,
        )

class TranslationResponse(BaseModel):
    german: str
    english: str
    raw: TranslationResult

class ErrorResponse(BaseModel):
    error: str
    status: Optional[int] = None
    details: Optional[str] = None
    raw: Optional[str] = None

class HealthResponse(BaseModel):
    status: str = "ok"
