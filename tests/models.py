"""Context schema fragments shared across test modules."""

from pydantic import BaseModel, Field, field_validator, model_validator


class ApiKeyContext(BaseModel):
    api_key: str


class TextA(BaseModel):
    a: str


class NumberA(BaseModel):
    a: int


class AgeContext(BaseModel):
    age: int = Field(ge=0)


class TokenContext(BaseModel):
    token: str

    @field_validator("token")
    @classmethod
    def token_has_prefix(cls, value: str) -> str:
        if not value.startswith("sk-"):
            raise ValueError("token must start with 'sk-'")
        return value


class RegionContext(BaseModel):
    region: str = "eu"


class WindowContext(BaseModel):
    start: int
    end: int

    @model_validator(mode="after")
    def start_before_end(self):
        if self.start > self.end:
            raise ValueError("start must not be after end")
        return self
