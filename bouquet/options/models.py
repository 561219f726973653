from __future__ import annotations

from pydantic import BaseModel


class Option(BaseModel):
    value: str
    label: str


class OptionResponse(BaseModel):
    occasions: list[Option]
    recipients: list[Option]
    moods: list[Option]
    sizes: list[Option]


OPTIONS = OptionResponse(
    occasions=[
        Option(value="LOVE", label="사랑"),
        Option(value="THANKS", label="감사"),
        Option(value="BIRTHDAY", label="생일"),
    ],
    recipients=[
        Option(value="PARTNER", label="연인"),
        Option(value="PARENTS", label="부모님"),
        Option(value="FRIEND", label="친구"),
    ],
    moods=[
        Option(value="BRIGHT", label="화사하게"),
        Option(value="CALM", label="차분하게"),
        Option(value="LUXURIOUS", label="고급스럽게"),
    ],
    sizes=[
        Option(value="S", label="Small"),
        Option(value="M", label="Medium"),
        Option(value="L", label="Large"),
    ],
)
