"""
Collapse repeated harvests of the same photograph.

The same image often appears on several gallery pages, sometimes with a
full ``data-title`` caption and sometimes with only an alt text. Records
with a rich caption are matched exactly on species, common name and
thumbnail; weaker records are matched on the thumbnail alone, and the merge
keeps whichever copy knows more.
"""

from __future__ import annotations

from collections.abc import Iterable

from butterfly_gallery.schemas import Observation

IdentityKey = tuple[str, ...]


def identity_key(observation: Observation) -> IdentityKey:
    """
    Key under which two records count as the same photograph.

    Strict and relaxed keys are tagged so they never collide with each other.
    """
    if observation.has_data_title:
        return ("strict", observation.species, observation.common_name, observation.thumbnail_url)
    return ("relaxed", observation.thumbnail_url)


def is_better(incoming: Observation, kept: Observation) -> bool:
    """Whether ``incoming`` should replace ``kept`` for the same identity key."""
    if incoming.has_valid_date and not kept.has_valid_date:
        return True
    if incoming.has_data_title:
        return False
    if incoming.is_identified and not kept.is_identified:
        return True
    return incoming.has_common_name and not kept.has_common_name


def remove_duplicates(observations: Iterable[Observation]) -> list[Observation]:
    """
    Drop duplicate records, keeping the best copy of each photograph.

    Order follows the first occurrence of each key; a replacement takes the
    slot of the record it replaces.
    """
    unique: list[Observation] = []
    index_by_key: dict[IdentityKey, int] = {}

    for obs in observations:
        key = identity_key(obs)
        existing = index_by_key.get(key)
        if existing is None:
            index_by_key[key] = len(unique)
            unique.append(obs)
        elif is_better(obs, unique[existing]):
            unique[existing] = obs

    return unique
