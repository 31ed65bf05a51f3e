from typing import Protocol

from ..schemas import GeneratedPoem, AdjustedPoem


class PoemGenerationService(Protocol):
    """Protocol for the image-to-poem service."""
    async def generate(self, image_payload: str, style: str) -> GeneratedPoem:
        ...


class PoemAdjustmentService(Protocol):
    """Protocol for the poem restyle service."""
    async def adjust(self, poem: str, style: str) -> AdjustedPoem:
        ...
