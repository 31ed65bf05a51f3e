from pydantic import BaseModel, Field, field_validator


class GenerationRequest(BaseModel):
    image_payload: str = Field(..., description="Data-URI encoded image")
    style: str = Field(..., min_length=1, description="Poem style, e.g. haiku or sonnet")

    @field_validator("image_payload")
    @classmethod
    def _must_be_image_data_uri(cls, value: str) -> str:
        if not value.startswith("data:image/") or ";base64," not in value:
            raise ValueError("image_payload must be a base64 image data URI")
        return value


class GeneratedPoem(BaseModel):
    poem: str = Field(..., min_length=1, description="The generated poem")


class AdjustmentRequest(BaseModel):
    poem: str = Field(..., min_length=1, description="The poem to be adjusted")
    style: str = Field(..., min_length=1, description="The desired style of the poem")


class AdjustedPoem(BaseModel):
    adjusted_poem: str = Field(..., min_length=1, description="The poem adjusted to the requested style")
