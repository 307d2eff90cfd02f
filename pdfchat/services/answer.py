"""
Answer generation service using Claude
"""

import logging

from anthropic import AsyncAnthropic

from pdfchat.config import settings
from pdfchat.errors import ModelFailure

logger = logging.getLogger(__name__)


class AnswerService:
    def __init__(self, client: AsyncAnthropic = None, model: str = None):
        # No retries: a failed call is reported and the client resubmits
        self.client = client or AsyncAnthropic(
            api_key=settings.anthropic_api_key, max_retries=0
        )
        self.model = model or settings.claude_model

    async def generate_answer(self, prompt: str) -> str:
        """Send a prompt to Claude and return the answer text verbatim"""
        try:
            response = await self.client.messages.create(
                model=self.model,
                max_tokens=settings.max_tokens,
                messages=[{"role": "user", "content": prompt}],
            )
        except Exception as e:
            logger.error(f"Error querying Claude API: {e}", exc_info=True)
            raise ModelFailure() from e

        return "".join(block.text for block in response.content if block.type == "text")

    async def close(self):
        await self.client.close()
