from dataclasses import dataclass, field


@dataclass
class FormatSlot:
    index: int
    raw: str = ""

    @property
    def selector(self) -> str:
        if self.raw:
            return f"{{{self.index}:{self.raw}}}"
        return f"{{{self.index}}}"


@dataclass
class Category:
    phrase: str = ""
    slots: list[FormatSlot | None] = field(default_factory=list)

    @property
    def has_slots(self) -> bool:
        return any(slot is not None for slot in self.slots)


@dataclass
class LanguageReport:
    langid: str
    name: str
    missing: list[str] = field(default_factory=list)
    mismatched: list[str] = field(default_factory=list)

    @property
    def has_issues(self) -> bool:
        return bool(self.missing or self.mismatched)
