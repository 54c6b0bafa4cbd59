"""
Live matcher backed by the Anthropic Messages API.

One synchronous call per request: the profile and the candidate pool go out
with a fixed system prompt, and a single JSON object is expected back. Anything
that cannot be parsed or validated is raised as MatcherError so the caller can
switch to the deterministic fallback.
"""

from __future__ import annotations

import json
import logging
import re
import time
from typing import Any, Sequence

import anthropic
from pydantic import ValidationError

from ..config import ANTHROPIC_API_KEY, MATCH_MAX_TOKENS, MATCH_MODEL, MATCH_TIMEOUT_SECONDS
from ..schemas import RESULT_MODELS, Candidate, MatchResult, MatchShape, MultiMatchResult, ProfileCreate

logger = logging.getLogger(__name__)


class MatcherError(Exception):
    """The live matcher could not produce a valid result."""


class MatcherUnavailable(MatcherError):
    """The live matcher is not configured."""


_MEMBER_SHAPE = '{"id": string, "name": string, "age": number, "neighborhood": string, "matchReason": string}'
_EVENT_SHAPE = (
    '{"title": string, "type": string, "description": string, "venue": string, "address": string, '
    '"suggestedDate": string, "suggestedTime": string, "conversationStarters": [string], "whyThisEvent": string}'
)

_BASE_PROMPT = """You are the matchmaker for Third Place, a community that brings small groups of compatible people together at real-world gatherings.

You will receive a JSON object with "profile" (the person asking for a match) and "candidates" (people who can be matched).

Rules:
- Only pick members from "candidates", and copy their id, name, age and neighborhood exactly.
- Respect interestedIn on both sides: the person and every member should be open to each other's gender.
- Each group has between 3 and 5 members.
- Each member gets a one-sentence matchReason addressed to the person, grounded in their profile.
- Plan a specific, public event in the candidates' city that fits the person's Friday-night preference, values and dietary preferences.
- Give 2 to 4 conversation starters per event.

Respond with a single JSON object and nothing else."""

SYSTEM_PROMPTS: dict[str, str] = {
    "single": _BASE_PROMPT + f"\n\nShape:\n{{\"group\": [{_MEMBER_SHAPE}], \"event\": {_EVENT_SHAPE}}}",
    "multi": _BASE_PROMPT
    + "\n\nBuild exactly 3 different gatherings, each with its own group and event, score each from 0 to 100, "
    "and set recommendedIndex to the best one.\n\nShape:\n"
    + f"{{\"gatherings\": [{{\"group\": [{_MEMBER_SHAPE}], \"event\": {_EVENT_SHAPE}, \"compatibilityScore\": number}}], "
    "\"recommendedIndex\": number}",
}

_FENCE_RE = re.compile(r"```(?:json)?\s*(.*?)```", re.DOTALL)


def extract_json_object(text: str) -> dict[str, Any]:
    fenced = _FENCE_RE.search(text)
    body = fenced.group(1) if fenced else text
    start = body.find("{")
    end = body.rfind("}")
    if start < 0 or end <= start:
        raise MatcherError("No JSON object in matcher reply")
    try:
        data = json.loads(body[start : end + 1])
    except json.JSONDecodeError as exc:
        raise MatcherError(f"Matcher reply is not valid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise MatcherError("Matcher reply must be a JSON object")
    return data


def validate_result(data: dict[str, Any], shape: MatchShape, pool: Sequence[Candidate]) -> MatchResult:
    try:
        result = RESULT_MODELS[shape].model_validate(data)
    except ValidationError as exc:
        raise MatcherError(f"Matcher reply failed {shape} schema: {exc.error_count()} error(s)") from exc

    known = {c.id for c in pool}
    groups = [g.group for g in result.gatherings] if isinstance(result, MultiMatchResult) else [result.group]
    unknown = sorted({m.id for group in groups for m in group if m.id not in known})
    if unknown:
        raise MatcherError(f"Matcher reply references unknown candidates: {', '.join(unknown)}")
    return result


def build_request_payload(profile: ProfileCreate, pool: Sequence[Candidate]) -> str:
    return json.dumps(
        {
            "profile": profile.model_dump(by_alias=True, exclude={"id"}),
            "candidates": [c.model_dump(by_alias=True) for c in pool],
        }
    )


class AnthropicMatcher:
    def __init__(
        self,
        api_key: str = ANTHROPIC_API_KEY,
        model: str = MATCH_MODEL,
        max_tokens: int = MATCH_MAX_TOKENS,
        timeout: float = MATCH_TIMEOUT_SECONDS,
        client: Any = None,
    ) -> None:
        self._model = model
        self._max_tokens = max_tokens
        if client is not None:
            self._client = client
        elif api_key:
            self._client = anthropic.Anthropic(api_key=api_key, max_retries=0, timeout=timeout)
        else:
            self._client = None

    @property
    def configured(self) -> bool:
        return self._client is not None

    def match(self, profile: ProfileCreate, pool: Sequence[Candidate], shape: MatchShape) -> MatchResult:
        if self._client is None:
            raise MatcherUnavailable("ANTHROPIC_API_KEY is not set")

        logger.info("[MATCH] LLM call START | model=%s | shape=%s | candidates=%d", self._model, shape, len(pool))
        t0 = time.monotonic()
        try:
            response = self._client.messages.create(
                model=self._model,
                max_tokens=self._max_tokens,
                system=SYSTEM_PROMPTS[shape],
                messages=[{"role": "user", "content": build_request_payload(profile, pool)}],
            )
        except anthropic.APIError as exc:
            raise MatcherError(f"Matcher call failed: {exc}") from exc
        elapsed_ms = (time.monotonic() - t0) * 1000

        text = "".join(block.text for block in response.content if getattr(block, "type", None) == "text")
        if not text.strip():
            raise MatcherError("Matcher reply had no text content")
        logger.info("[MATCH] LLM call OK    | %.0fms | stop=%s | text_len=%d", elapsed_ms, response.stop_reason, len(text))
        return validate_result(extract_json_object(text), shape, pool)
