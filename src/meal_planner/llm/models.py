"""LLM client data models.

This module defines request/response models for the OpenAI and Gemini
HTTP APIs and the shape of the meals the providers are asked to generate.
"""

from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


# =============================================================================
# OpenAI API Models (chat completions)
# =============================================================================


class OpenAIMessage(BaseModel):
    """Single message in OpenAI chat format."""

    role: str = Field(..., description="Message role: system, user, or assistant")
    content: str | None = Field(default=None, description="Message content")


class OpenAIChatRequest(BaseModel):
    """Request body for OpenAI /chat/completions endpoint."""

    model: str = Field(..., description="Model name (e.g., 'gpt-4o')")
    messages: list[OpenAIMessage] = Field(..., description="Chat messages")
    response_format: dict[str, str] | None = Field(
        default=None,
        description="Response format: {'type': 'json_object'} for JSON mode",
    )
    temperature: float = Field(default=0.7, description="Sampling temperature")
    max_tokens: int | None = Field(default=None, description="Maximum tokens to generate")


class OpenAIChoice(BaseModel):
    """Single choice in OpenAI response."""

    index: int = Field(default=0, description="Choice index")
    message: OpenAIMessage = Field(..., description="Generated message")
    finish_reason: str | None = Field(default=None, description="Reason for completion")


class OpenAIUsage(BaseModel):
    """Token usage from OpenAI response."""

    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0


class OpenAIChatResponse(BaseModel):
    """Response from OpenAI /chat/completions endpoint."""

    id: str | None = Field(default=None, description="Unique response ID")
    model: str | None = Field(default=None, description="Model that generated response")
    choices: list[OpenAIChoice] = Field(default_factory=list)
    usage: OpenAIUsage | None = None

    @property
    def content(self) -> str:
        """Text of the first choice, or an empty string."""
        if not self.choices:
            return ""
        return self.choices[0].message.content or ""


# =============================================================================
# Gemini API Models (generateContent)
# =============================================================================


class GeminiPart(BaseModel):
    """A text part of Gemini content."""

    text: str = ""


class GeminiContent(BaseModel):
    """Content block of a Gemini request or candidate."""

    role: str | None = None
    parts: list[GeminiPart] = Field(default_factory=list)


class GeminiGenerationConfig(BaseModel):
    """Sampling configuration for Gemini (camelCase on the wire)."""

    model_config = ConfigDict(populate_by_name=True)

    temperature: float = 0.7
    top_p: float = Field(default=0.9, alias="topP")
    top_k: int = Field(default=40, alias="topK")
    max_output_tokens: int = Field(default=1400, alias="maxOutputTokens")


class GeminiGenerateRequest(BaseModel):
    """Request body for Gemini :generateContent endpoint."""

    model_config = ConfigDict(populate_by_name=True)

    contents: list[GeminiContent]
    generation_config: GeminiGenerationConfig = Field(
        default_factory=GeminiGenerationConfig,
        alias="generationConfig",
    )


class GeminiCandidate(BaseModel):
    """Single candidate in Gemini response."""

    content: GeminiContent = Field(default_factory=GeminiContent)
    finish_reason: str | None = Field(default=None, alias="finishReason")


class GeminiGenerateResponse(BaseModel):
    """Response from Gemini :generateContent endpoint."""

    candidates: list[GeminiCandidate] = Field(default_factory=list)

    @property
    def content(self) -> str:
        """Text of the first part of the first candidate, or empty."""
        if not self.candidates or not self.candidates[0].content.parts:
            return ""
        return self.candidates[0].content.parts[0].text


# =============================================================================
# Generated meal payloads
# =============================================================================


class GeneratedIngredient(BaseModel):
    """Ingredient of an AI generated meal."""

    model_config = ConfigDict(extra="ignore")

    name: str = ""
    amount: float = 0.0
    unit: str = ""
    category: str = "other"


class GeneratedMeal(BaseModel):
    """A meal as returned by the AI provider.

    Accepts both snake_case and the camelCase keys providers tend to emit.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: str | None = None
    name: str = Field(..., min_length=2)
    ingredients: list[GeneratedIngredient] = Field(..., min_length=1)
    instructions: list[str] = Field(..., min_length=1)
    calories: float = Field(default=0.0, ge=0)
    protein: float = Field(default=0.0, ge=0)
    carbs: float = Field(default=0.0, ge=0)
    fat: float = Field(default=0.0, ge=0)
    fiber: float = Field(default=0.0, ge=0)
    prep_time: int | None = Field(
        default=None, ge=0, validation_alias=AliasChoices("prep_time", "prepTime")
    )
    cook_time: int | None = Field(
        default=None, ge=0, validation_alias=AliasChoices("cook_time", "cookTime")
    )
    servings: int = 1
    category: str | None = None
    tags: list[str] = Field(default_factory=list)
    match_percentage: int = Field(
        default=0,
        ge=0,
        le=100,
        validation_alias=AliasChoices("match_percentage", "matchPercentage"),
    )
    missing_ingredients: list[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("missing_ingredients", "missingIngredients"),
    )


class GeneratedMealList(BaseModel):
    """Envelope for several generated meals."""

    meals: list[GeneratedMeal] = Field(..., min_length=1)


class GeneratedMealPlanDay(BaseModel):
    """One day of a generated meal plan."""

    day: str
    meals: list[GeneratedMeal] = Field(..., min_length=1)


class GeneratedMealPlan(BaseModel):
    """A generated meal plan."""

    days: list[GeneratedMealPlanDay] = Field(..., min_length=1)

    @classmethod
    def from_payload(cls, payload: Any) -> GeneratedMealPlan:
        """Validate a decoded plan; a single day object is accepted too."""
        if isinstance(payload, dict) and "days" not in payload and "meals" in payload:
            payload = {"days": [{"day": payload.get("day", "day"), **payload}]}
        return cls.model_validate(payload)
