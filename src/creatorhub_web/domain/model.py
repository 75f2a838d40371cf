from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Mapping, Union

# =========================
# Value Objects
# =========================
class FootageId(str):
    """Value Object for a footage identifier: non-empty and never a `.`/`..` path segment."""
    def __new__(cls, value: str) -> "FootageId":
        value = str(value).strip()
        if not value:
            raise ValueError("empty FootageId")
        if value in (".", ".."):
            raise ValueError("FootageId cannot be a path segment alias")
        return str.__new__(cls, value)

@dataclass(frozen=True)
class AntiForgeryToken:
    """Anti-forgery token issued by /user/state. Valid for a single mutation."""
    token: str
    state: str = ""

    def __bool__(self) -> bool:
        return bool(self.token)

    def __repr__(self) -> str:
        # never print the value
        return f"AntiForgeryToken(state={self.state!r}, token=<{len(self.token)} chars>)"

@dataclass(frozen=True)
class CookieSpec:
    name: str
    value: str
    domain: str | None = None
    path: str = "/"

    def __repr__(self) -> str:
        return f"CookieSpec(name={self.name!r}, domain={self.domain!r}, path={self.path!r})"

# =========================
# Entities
# =========================
@dataclass(frozen=True)
class Tag:
    id: str
    name: str

@dataclass(frozen=True)
class Download:
    name: str
    url: str

@dataclass(frozen=True)
class Footage:
    id: FootageId
    name: str
    marked: bool
    preview: str
    tags: tuple[Tag, ...] = ()
    downloads: tuple[Download, ...] = ()
    use_cases: tuple[str, ...] = ()

    @classmethod
    def from_payload(cls, data: Mapping[str, Any]) -> "Footage":
        """Builds a Footage from the API JSON body.

        Raises KeyError/TypeError/ValueError when the body is not a footage record.
        """
        return cls(
            id=FootageId(data["id"]),
            name=str(data["name"]),
            marked=bool(data.get("marked", False)),
            preview=str(data.get("preview") or ""),
            tags=tuple(Tag(id=str(t["id"]), name=str(t["name"])) for t in data.get("tags") or ()),
            downloads=tuple(Download(name=str(d["name"]), url=str(d["url"])) for d in data.get("downloads") or ()),
            use_cases=tuple(str(u) for u in data.get("useCases") or ()),
        )

    def to_payload(self) -> dict[str, Any]:
        return {
            "id": str(self.id),
            "name": self.name,
            "marked": self.marked,
            "preview": self.preview,
            "tags": [{"id": t.id, "name": t.name} for t in self.tags],
            "downloads": [{"name": d.name, "url": d.url} for d in self.downloads],
            "useCases": list(self.use_cases),
        }

# =========================
# Mutation outcomes
# =========================
@dataclass(frozen=True)
class MutationSucceeded:
    marked: bool
    next_token: str = field(repr=False)

@dataclass(frozen=True)
class MutationFailed:
    message: str

MutationOutcome = Union[MutationSucceeded, MutationFailed]

# =========================
# Client-side mutation state
# =========================
@dataclass(frozen=True)
class Idle:
    pass

@dataclass(frozen=True)
class Pending:
    generation: int
    was_marked: bool

@dataclass(frozen=True)
class Succeeded:
    marked: bool
    token: str = field(repr=False)

@dataclass(frozen=True)
class Failed:
    message: str

MutationState = Union[Idle, Pending, Succeeded, Failed]

MUTATION_FALLBACK_ERROR = "Unknown error, please try again later."
