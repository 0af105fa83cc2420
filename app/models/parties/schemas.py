"""Party input schema - validates raw party records."""

from collections.abc import Iterable

from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from app.errors import InvalidInputError
from app.models.parties.entities import Party


class PartySchema(BaseModel):
    """Raw party record (camelCase keys accepted)."""

    name: str
    abbreviation: str = Field(min_length=1)
    leader: str | None = None
    economic: float = Field(alias="economicPosition", default=0.0, ge=-10, le=10)
    social: float = Field(alias="socialPosition", default=0.0, ge=-10, le=10)
    european: float = Field(alias="europeanPosition", default=0.0, ge=-10, le=10)
    immigration: float = Field(alias="immigrationPosition", default=0.0, ge=-10, le=10)
    flexibility: float = Field(alias="coalitionFlexibility", default=50.0, ge=0, le=100)
    expertise: float = Field(alias="campaignExpertise", default=50.0, ge=0, le=100)
    preferred: list[str] = Field(alias="preferredCoalitionPartners", default=[])
    excluded: list[str] = Field(alias="excludedCoalitionPartners", default=[])
    seats: int = Field(default=0, ge=0)
    votes: int = Field(default=0, ge=0)

    class Config:
        populate_by_name = True

    def to_party(self) -> Party:
        return Party(
            name=self.name,
            abbreviation=self.abbreviation,
            leader=self.leader,
            economic=self.economic,
            social=self.social,
            european=self.european,
            immigration=self.immigration,
            flexibility=self.flexibility,
            expertise=self.expertise,
            preferred=frozenset(self.preferred),
            excluded=frozenset(self.excluded),
            seats=self.seats,
            votes=self.votes,
        )


def parse_parties(records: Iterable[dict]) -> list[Party]:
    """Validate raw records into parties."""
    parties = []
    for i, record in enumerate(records):
        try:
            parties.append(PartySchema.model_validate(record).to_party())
        except PydanticValidationError as e:
            raise InvalidInputError(f"Invalid party record #{i}: {e.errors()[0]['msg']}") from e
    return parties
