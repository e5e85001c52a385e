import asyncio
from typing import List, Optional


class StubTextGenerator:
    """Returns canned text, raises, or hangs; records every prompt it was given."""

    def __init__(self, response: str = "", error: Optional[Exception] = None, delay: float = 0):
        self.response = response
        self.error = error
        self.delay = delay
        self.prompts: List[str] = []
        self.images: List[Optional[str]] = []

    async def generate(self, prompt, image=None, mime_type="image/jpeg"):
        self.prompts.append(prompt)
        self.images.append(image)
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return self.response
