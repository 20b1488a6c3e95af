"""Duplicate detection over the corpus index."""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List

from filescout.index.corpus import CorpusIndex
from filescout.index.mutations import MutationGateway
from filescout.models import DuplicateGroup, FileRecord

LOGGER = logging.getLogger(__name__)


def find_duplicates(records: Iterable[FileRecord]) -> List[DuplicateGroup]:
    """Group records by fingerprint, keeping groups of two or more.

    Groups come out in order of first appearance; names inside a group
    are sorted, so the survivor is the lexicographically smallest name.
    """
    buckets: Dict[bytes, List[str]] = {}
    for record in records:
        buckets.setdefault(record.fingerprint, []).append(record.name)

    return [
        DuplicateGroup(fingerprint=fingerprint, names=tuple(sorted(names)))
        for fingerprint, names in buckets.items()
        if len(names) > 1
    ]


def delete_duplicates(index: CorpusIndex, gateway: MutationGateway) -> List[str]:
    """Delete every duplicate except each group's survivor.

    Returns the deleted names. Runs as a single writer, so the groups
    cannot change underneath it.
    """
    deleted: List[str] = []
    with index.writer():
        for group in find_duplicates(index.snapshot()):
            for name in group.redundant:
                gateway.delete(name)
                deleted.append(name)
            LOGGER.debug("Kept %s, removed %s", group.survivor, ", ".join(group.redundant))

    if deleted:
        LOGGER.info("Deleted %d duplicate files", len(deleted))
    return deleted
