from __future__ import annotations
from dataclasses import dataclass, field
import httpx
from lambda_migrator.core.config import settings

CONVERSION_INSTRUCTION = (
    "Convert this AWS Lambda handler code into a pure Express route handler. "
    "Replace event/context usages with req.body, req.params, req.query as appropriate. "
    "Only output valid JS code."
)


def build_conversion_prompt(source: str) -> str:
    return f"{CONVERSION_INSTRUCTION}\n\n{source}"


def first_completion_text(payload: dict) -> str | None:
    """Pull choices[0].message.content out of a chat-completions response."""
    choices = payload.get("choices") or []
    if not choices:
        return None
    message = choices[0].get("message") or {}
    return message.get("content")


@dataclass
class LLMClient:
    token: str
    api_base: str = settings.openai_api_base
    model: str = settings.openai_model
    timeout: float = settings.http_timeout
    transport: httpx.BaseTransport | None = field(default=None, repr=False)

    def _headers(self) -> dict:
        return {
            "Authorization": f"Bearer {self.token}",
            "Content-Type": "application/json",
        }

    def chat(self, content: str) -> dict:
        url = f"{self.api_base.rstrip('/')}/chat/completions"
        with httpx.Client(timeout=self.timeout, transport=self.transport) as client:
            r = client.post(
                url,
                headers=self._headers(),
                json={"model": self.model, "messages": [{"role": "user", "content": content}]},
            )
            r.raise_for_status()
            return r.json()

    def convert_handler(self, source: str) -> str | None:
        return first_completion_text(self.chat(build_conversion_prompt(source)))


def build_llm_client(model: str | None = None) -> LLMClient:
    if not settings.openai_api_key:
        raise RuntimeError("OPENAI_API_KEY is not set")
    return LLMClient(token=settings.openai_api_key, model=model or settings.openai_model)
