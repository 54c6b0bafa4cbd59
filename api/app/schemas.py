from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, field_validator
from pydantic.alias_generators import to_camel

from .options import (
    COMMUNICATION_STYLE_OPTIONS,
    CONFLICT_STYLE_OPTIONS,
    DIETARY_OPTIONS,
    FRIDAY_NIGHT_OPTIONS,
    GENDER_IDENTITY_OPTIONS,
    INTERESTED_IN_OPTIONS,
    LOOKING_FOR_OPTIONS,
    LOVE_LANGUAGE_OPTIONS,
    NON_NEGOTIABLES_OPTIONS,
    PRONOUNS_OPTIONS,
    VALUES_OPTIONS,
)

MatchShape = Literal["single", "multi"]


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def _one_of(value: str, options: tuple[str, ...], label: str) -> str:
    if value not in options:
        raise ValueError(f"{label} must be one of: {', '.join(options)}")
    return value


def _all_of(values: list[str], options: tuple[str, ...], label: str) -> list[str]:
    unknown = [v for v in values if v not in options]
    if unknown:
        raise ValueError(f"Unknown {label}: {', '.join(unknown)}")
    if len(set(values)) != len(values):
        raise ValueError(f"{label} must not repeat")
    return values


class ProfileCreate(CamelModel):
    first_name: str
    age: StrictInt
    neighborhood: str
    gender_identity: str
    gender_self_describe: str = ""
    pronouns: str
    pronouns_other: str = ""
    interested_in: list[str] = Field(min_length=1)
    values: list[str] = Field(min_length=1, max_length=3)
    friday_night: str
    relationship_vision: str = ""
    past_lesson: str = ""
    love_language: str = ""
    conflict_style: str = ""
    looking_for: str
    communication_style: str
    non_negotiables: list[str] = Field(min_length=1, max_length=2)
    unexpected_thing: str
    dietary_preferences: list[str] = Field(min_length=1)
    ready_to_show_up: StrictBool

    @field_validator("first_name")
    @classmethod
    def _first_name_required(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("First name is required")
        return v

    @field_validator("age")
    @classmethod
    def _age_bounds(cls, v: int) -> int:
        if v < 25:
            raise ValueError("Must be at least 25")
        if v > 120:
            raise ValueError("Must be at most 120")
        return v

    @field_validator("neighborhood")
    @classmethod
    def _neighborhood_required(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Neighborhood is required")
        return v

    @field_validator("gender_identity")
    @classmethod
    def _gender_identity(cls, v: str) -> str:
        return _one_of(v, GENDER_IDENTITY_OPTIONS, "genderIdentity")

    @field_validator("pronouns")
    @classmethod
    def _pronouns(cls, v: str) -> str:
        return _one_of(v, PRONOUNS_OPTIONS, "pronouns")

    @field_validator("interested_in")
    @classmethod
    def _interested_in(cls, v: list[str]) -> list[str]:
        return _all_of(v, INTERESTED_IN_OPTIONS, "interestedIn")

    @field_validator("values")
    @classmethod
    def _values(cls, v: list[str]) -> list[str]:
        return _all_of(v, VALUES_OPTIONS, "values")

    @field_validator("friday_night")
    @classmethod
    def _friday_night(cls, v: str) -> str:
        return _one_of(v, FRIDAY_NIGHT_OPTIONS, "fridayNight")

    @field_validator("love_language")
    @classmethod
    def _love_language(cls, v: str) -> str:
        return v if v == "" else _one_of(v, LOVE_LANGUAGE_OPTIONS, "loveLanguage")

    @field_validator("conflict_style")
    @classmethod
    def _conflict_style(cls, v: str) -> str:
        return v if v == "" else _one_of(v, CONFLICT_STYLE_OPTIONS, "conflictStyle")

    @field_validator("looking_for")
    @classmethod
    def _looking_for(cls, v: str) -> str:
        return _one_of(v, LOOKING_FOR_OPTIONS, "lookingFor")

    @field_validator("communication_style")
    @classmethod
    def _communication_style(cls, v: str) -> str:
        return _one_of(v, COMMUNICATION_STYLE_OPTIONS, "communicationStyle")

    @field_validator("non_negotiables")
    @classmethod
    def _non_negotiables(cls, v: list[str]) -> list[str]:
        return _all_of(v, NON_NEGOTIABLES_OPTIONS, "nonNegotiables")

    @field_validator("unexpected_thing")
    @classmethod
    def _unexpected_thing(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Tell us something unexpected")
        return v

    @field_validator("dietary_preferences")
    @classmethod
    def _dietary_preferences(cls, v: list[str]) -> list[str]:
        return _all_of(v, DIETARY_OPTIONS, "dietaryPreferences")

    @field_validator("ready_to_show_up")
    @classmethod
    def _ready_to_show_up(cls, v: bool) -> bool:
        if v is not True:
            raise ValueError("You must be ready to show up")
        return v


class Profile(ProfileCreate):
    id: str


class Candidate(CamelModel):
    id: str
    name: str
    age: int
    neighborhood: str
    gender_identity: str
    interested_in: list[str] = Field(default_factory=list)


class MatchMember(CamelModel):
    id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    age: int
    neighborhood: str
    match_reason: str = Field(min_length=1)


class MatchEvent(CamelModel):
    title: str = Field(min_length=1)
    type: str = Field(min_length=1)
    description: str = Field(min_length=1)
    venue: str = Field(min_length=1)
    address: str = Field(min_length=1)
    suggested_date: str = Field(min_length=1)
    suggested_time: str = Field(min_length=1)
    conversation_starters: list[str] = Field(min_length=1)
    why_this_event: str = Field(min_length=1)


class SingleMatchResult(CamelModel):
    group: list[MatchMember] = Field(min_length=3, max_length=5)
    event: MatchEvent


class Gathering(CamelModel):
    group: list[MatchMember] = Field(min_length=3, max_length=5)
    event: MatchEvent
    compatibility_score: int = Field(ge=0, le=100)


class MultiMatchResult(CamelModel):
    gatherings: list[Gathering] = Field(min_length=3, max_length=3)
    recommended_index: int = Field(ge=0, le=2)


MatchResult = SingleMatchResult | MultiMatchResult

RESULT_MODELS: dict[str, type[CamelModel]] = {
    "single": SingleMatchResult,
    "multi": MultiMatchResult,
}
