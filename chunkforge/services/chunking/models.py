"""Chunk and sentence records shared by the chunkers."""

from pydantic import BaseModel, ConfigDict, Field


class Chunk(BaseModel):
    """One emitted fragment. Ids increase from 0 within a single split call."""

    model_config = ConfigDict(frozen=True)

    id: int = Field(..., ge=0)
    content: str

    @classmethod
    def of(cls, id: int, content: str) -> "Chunk":
        return cls(id=id, content=content)


class Sentence(BaseModel):
    """
    A sentence inside one semantic split call. `combined` holds the context window
    and defaults to the sentence itself; `embedding` stays empty until embedded.
    """

    index: int
    content: str
    combined: str = ""
    embedding: list[float] = Field(default_factory=list)

    def model_post_init(self, __context) -> None:
        if not self.combined:
            self.combined = self.content

    @classmethod
    def of(cls, index: int, content: str) -> "Sentence":
        return cls(index=index, content=content)
