"""Fixed onboarding vocabularies and the identity-to-orientation label mapping."""

GENDER_IDENTITY_OPTIONS = (
    "Woman",
    "Man",
    "Nonbinary",
    "Genderqueer",
    "Prefer to self-describe",
    "Prefer not to say",
)

PRONOUNS_OPTIONS = ("She/her", "He/him", "They/them", "Other")

INTERESTED_IN_OPTIONS = ("Women", "Men", "Nonbinary folks", "All genders")

VALUES_OPTIONS = (
    "Authenticity",
    "Growth",
    "Family",
    "Adventure",
    "Stability",
    "Humor",
    "Ambition",
    "Spirituality",
    "Creativity",
    "Kindness",
    "Independence",
    "Community",
)

FRIDAY_NIGHT_OPTIONS = (
    "Cook dinner and deep conversation",
    "Try a new restaurant",
    "Live music or comedy show",
    "Outdoor adventure",
    "Game night with friends",
    "Cozy night with a book",
)

LOVE_LANGUAGE_OPTIONS = (
    "Words of Affirmation",
    "Quality Time",
    "Acts of Service",
    "Physical Touch",
    "Receiving Gifts",
)

CONFLICT_STYLE_OPTIONS = (
    "Talk it through immediately",
    "Need space first then talk",
    "Write my feelings down",
    "Use humor to defuse",
)

LOOKING_FOR_OPTIONS = (
    "A life partner",
    "A serious relationship",
    "Exploring with intention",
    "Building my community first",
)

COMMUNICATION_STYLE_OPTIONS = (
    "Direct and honest",
    "Warm and nurturing",
    "Playful and witty",
    "Thoughtful and reserved",
)

NON_NEGOTIABLES_OPTIONS = (
    "Emotional availability",
    "Shared life goals",
    "Intellectual connection",
    "Physical chemistry",
    "Financial stability",
    "Same page on kids",
    "Sense of humor",
    "Aligned values",
)

DIETARY_OPTIONS = ("No restrictions", "Vegetarian", "Vegan", "Gluten-free", "Halal", "Kosher")

# Identities not listed here are treated as satisfying every label.
# Policy-sensitive: override with ORIENTATION_LABELS_JSON rather than editing in place.
DEFAULT_ORIENTATION_LABELS: dict[str, list[str]] = {
    "Woman": ["Women", "All genders"],
    "Man": ["Men", "All genders"],
    "Nonbinary": ["Nonbinary folks", "All genders"],
    "Genderqueer": ["Nonbinary folks", "All genders"],
}
