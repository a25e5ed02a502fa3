from pydantic import BaseModel, ConfigDict, NonNegativeInt, model_validator


class Occurrence(BaseModel):
    """One maximal run of word characters in an indexed text."""

    model_config = ConfigDict(frozen=True)

    ordinal: NonNegativeInt  # position among all occurrences, text order
    start_offset: NonNegativeInt
    end_offset: int  # exclusive

    @model_validator(mode="after")
    def _check_span(self) -> "Occurrence":
        if self.end_offset <= self.start_offset:
            raise ValueError(
                f"Empty or inverted span: [{self.start_offset}, {self.end_offset})"
            )
        return self

    @property
    def span(self) -> tuple[int, int]:
        return self.start_offset, self.end_offset
