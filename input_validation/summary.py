"""Form summary: collects described errors from several fields into one report.

Usage:
    summary = summarize([
        ("Password", password_validator.validate(password)),
        ("Segment Control", segment_validator.validate(index)),
    ])
    label.text = summary.text
"""

from typing import Iterable, Optional

from pydantic import BaseModel, Field

from input_validation.validators.models import ErrorKind, describe_errors

READY_MESSAGE = "Ready to Submit!"


class Summary(BaseModel):
    """Rendered validation state for a whole form."""

    ready: bool = Field(description="True if no field reported a described error")
    messages: list[str] = Field(default_factory=list)
    text: str = Field(default=READY_MESSAGE, description="Messages joined by newlines")

    @classmethod
    def build(cls, messages: list[str]) -> "Summary":
        if not messages:
            return cls(ready=True, messages=[], text=READY_MESSAGE)
        return cls(ready=False, messages=messages, text="\n".join(messages))


def summarize(fields: Iterable[tuple[str, Optional[list[ErrorKind]]]]) -> Summary:
    """Describe every field's errors, in field order then rule order."""
    messages: list[str] = []
    for field_name, errors in fields:
        messages.extend(describe_errors(errors, field_name))
    return Summary.build(messages)
