"""Pydantic models for ranked word counts."""

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class WordCount(BaseModel):
    """A token and the number of times it occurred."""

    model_config = ConfigDict(frozen=True)

    word: str
    count: int = Field(ge=1)


# Serializes a ranked list as a single JSON array
WordCountList = TypeAdapter(list[WordCount])
