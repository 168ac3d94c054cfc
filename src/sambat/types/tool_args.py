from pydantic import BaseModel, Field


class BSDateArgs(BaseModel):
    year: int = Field(..., description="Bikram Sambat year, e.g. 2081")
    month: int = Field(..., ge=1, le=12, description="BS month number, 1 (Baishakh) to 12 (Chaitra)")
    day: int = Field(..., ge=1, le=32, description="Day of the BS month")


class ADDateArgs(BaseModel):
    year: int = Field(..., ge=1, le=9999, description="Gregorian year")
    month: int = Field(..., ge=1, le=12, description="Gregorian month number")
    day: int = Field(..., ge=1, le=31, description="Day of the Gregorian month")


class ConvertArgs(BaseModel):
    source_calendar: str = Field(..., description="Calendar of the input date: 'ad' or 'bs'")
    target_calendar: str = Field(..., description="Calendar to convert into: 'ad' or 'bs'")
    date: str = Field(..., description="Date as YYYY-MM-DD in the source calendar")
