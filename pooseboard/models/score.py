# --- Pydantic Models ---
from pydantic import BaseModel, Field, StrictInt, StrictStr

UINT64_MAX = 2 ** 64 - 1

class Score(BaseModel):
    """A leaderboard entry.

    Fields default to their zero values so a body that leaves one out still
    decodes; presence is checked by the submit handler, not here.
    """
    name: StrictStr = ''
    score: StrictInt = Field(0, ge=0, le=UINT64_MAX)

    @classmethod
    def from_body(cls, payload) -> 'Score':
        """Build a Score from a decoded request body.

        Keys match field names case-insensitively, the last match wins, and a
        null value leaves the field at its zero value.
        """
        if payload is None:
            return cls()
        if not isinstance(payload, dict):
            return cls.model_validate(payload)

        fields = {}
        for key, value in payload.items():
            field = key.lower()
            if field in cls.model_fields and value is not None:
                fields[field] = value
        return cls.model_validate(fields)
