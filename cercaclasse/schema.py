"""Normalized class record schema and search response types."""

from dataclasses import dataclass, field
from enum import Enum


@dataclass(frozen=True)
class ClassRecord:
    school_code: str = ""
    institution_code: str = ""
    school_name: str = ""
    institution_name: str = ""
    municipality: str = ""
    province: str = ""
    class_label: str = ""


class SearchMode(str, Enum):
    EMPTY = "EMPTY"
    BY_SCHOOL_CODE = "BY_SCHOOL_CODE"
    BY_INSTITUTION_CODE = "BY_INSTITUTION_CODE"
    RANKED = "RANKED"


@dataclass
class ResultView:
    """Display projection of a record; ``score`` is set only for ranked results."""

    municipality: str
    province: str
    school_name: str
    class_label: str
    institution_code: str
    school_code: str
    score: int | None = None

    @classmethod
    def from_record(cls, record: ClassRecord, score: int | None = None) -> "ResultView":
        return cls(
            municipality=record.municipality,
            province=record.province,
            school_name=record.school_name,
            class_label=record.class_label,
            institution_code=record.institution_code,
            school_code=record.school_code,
            score=score,
        )

    def to_dict(self) -> dict:
        data = {
            "comune": self.municipality,
            "provincia": self.province,
            "scuola": self.school_name,
            "classe": self.class_label,
            "codiceIstituto": self.institution_code,
            "codiceScuola": self.school_code,
        }
        if self.score is not None:
            data["score"] = self.score
        return data


@dataclass
class SearchResponse:
    mode: SearchMode
    results: list[ResultView] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "results": [r.to_dict() for r in self.results],
            "mode": self.mode.value,
        }
