"""
Profile records for Addlee - the creator and hotel entries being matched.

Handles coercion of loosely shaped mappings into immutable Profile records
and loading profile collections from JSON files.
"""

import json
import logging
from collections import abc
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple, Union

logger = logging.getLogger(__name__)

# Fields that only feed explanations and display, never scoring
AUXILIARY_FIELDS = ("niche", "location", "type", "engagement", "rating", "collabs", "followers")


class ProfileLoadError(ValueError):
    """Raised when a profile file cannot be read or has the wrong shape."""
    pass


@dataclass(frozen=True)
class Profile:
    """
    A creator or hotel profile.

    Construction normalizes the fields: name and description are always
    strings, tags a tuple of strings, and set auxiliary fields strings.
    """
    name: str = ""
    description: str = ""
    tags: Tuple[str, ...] = field(default_factory=tuple)
    id: Optional[str] = None
    niche: Optional[str] = None
    location: Optional[str] = None
    type: Optional[str] = None
    engagement: Optional[str] = None
    rating: Optional[str] = None
    collabs: Optional[str] = None
    followers: Optional[str] = None

    def __post_init__(self):
        # Frozen, so normalized values go in through object.__setattr__
        object.__setattr__(self, "name", _text(self.name))
        object.__setattr__(self, "description", _text(self.description))
        object.__setattr__(self, "tags", _tags(self.tags))
        for key in ("id",) + AUXILIARY_FIELDS:
            value = getattr(self, key)
            if value is not None and not isinstance(value, str):
                object.__setattr__(self, key, str(value))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Profile":
        """
        Build a profile from a loose mapping.

        Missing or null text fields become empty strings and missing tags an
        empty tuple. Unknown keys (avatar colours and the like) are ignored.
        """
        return cls(**{f.name: data.get(f.name) for f in fields(cls)})

    def to_dict(self) -> Dict[str, Any]:
        """Plain dict form with tags as a list, dropping unset optional fields."""
        data = asdict(self)
        data["tags"] = list(self.tags)
        return {k: v for k, v in data.items() if v is not None}


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


def _tags(value: Any) -> Tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        return (value,) if value else ()
    if not isinstance(value, abc.Iterable):
        return (str(value),)
    return tuple(str(tag) for tag in value if tag is not None)


def as_profile(item: Union[Profile, Mapping[str, Any], None]) -> Profile:
    """Coerce a Profile, a mapping or None into a Profile."""
    if isinstance(item, Profile):
        return item
    if item is None:
        return Profile()
    if isinstance(item, Mapping):
        return Profile.from_dict(item)
    raise TypeError(f"Cannot build a profile from {type(item).__name__}")


def as_profiles(items: Optional[Iterable[Any]]) -> List[Profile]:
    """Coerce a collection of profile-like items, keeping input order."""
    if items is None:
        return []
    return [as_profile(item) for item in items]


def load_profiles(file_path: Union[str, Path]) -> List[Profile]:
    """
    Load a profile collection from a JSON file.

    The document may be a list of profile objects or an object with a
    "profiles" list.

    Args:
        file_path: Path to the JSON file

    Returns:
        Profiles in file order

    Raises:
        ProfileLoadError: If the file is missing, not valid JSON or not a
            list of objects
    """
    path = Path(file_path)
    try:
        with open(path, 'r', encoding='utf-8') as f:
            document = json.load(f)
    except FileNotFoundError as e:
        raise ProfileLoadError(f"Profile file not found: {path}") from e
    except json.JSONDecodeError as e:
        raise ProfileLoadError(f"Invalid JSON in {path}: {e}") from e

    if isinstance(document, dict):
        document = document.get("profiles")
    if not isinstance(document, list):
        raise ProfileLoadError(f"{path} must contain a list of profiles or a 'profiles' list")

    profiles = []
    for index, entry in enumerate(document):
        if not isinstance(entry, dict):
            raise ProfileLoadError(f"Entry {index} in {path} is not an object")
        profiles.append(Profile.from_dict(entry))

    logger.debug("Loaded %d profiles from %s", len(profiles), path)
    return profiles
