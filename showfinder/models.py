from dataclasses import asdict, dataclass
from typing import Any

from showfinder.config import MISSING_IMAGE_URL


@dataclass
class Show:
    id: int
    name: str
    summary: str
    image: str = MISSING_IMAGE_URL
    network: str = "Unknown"

    # raw is the nested "show" object of a search/shows result
    @classmethod
    def from_api(cls, raw: dict) -> "Show":
        image = raw.get("image") or {}
        network = raw.get("network") or {}
        return cls(
            id=raw.get("id"),
            name=raw.get("name"),
            summary=raw.get("summary"),
            image=image.get("medium") or MISSING_IMAGE_URL,
            network=network.get("name") or "Unknown",
        )

    def as_dict(self) -> dict:
        return asdict(self)


@dataclass
class Episode:
    id: int
    name: str
    # season and number are kept exactly as the API sends them
    season: Any
    number: Any

    @classmethod
    def from_api(cls, raw: dict) -> "Episode":
        return cls(
            id=raw.get("id"),
            name=raw.get("name"),
            season=raw.get("season"),
            number=raw.get("number"),
        )

    def as_dict(self) -> dict:
        return asdict(self)
