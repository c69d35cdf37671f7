# Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
# All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
# See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
# Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.

"""
In-process directory catalog of subjects and documents.

The catalog is where directory data enters SEMS, so it is also where
malformed data is rejected: unknown roles, departments, classification
levels or employment statuses, bad hour windows, missing fields and
duplicate ids all raise here rather than inside the engine.
"""

from typing import Any, Dict, Iterable, List, Mapping
import logging

from ..authz.types import Resource, Subject
from ..errors import CatalogError, ValidationError, NOT_FOUND, VALIDATION_FAILED
from ..util.config import load_config_file


logger = logging.getLogger(__name__)


class Catalog:
    """Read-only lookup of subjects and resources by id."""

    def __init__(self, subjects: Iterable[Subject] = (), resources: Iterable[Resource] = ()):
        self._subjects: Dict[str, Subject] = {}
        self._resources: Dict[str, Resource] = {}

        for subject in subjects:
            if subject.id in self._subjects:
                raise CatalogError(f"Duplicate subject id: {subject.id}", VALIDATION_FAILED, entity_id=subject.id)
            self._subjects[subject.id] = subject

        for resource in resources:
            if resource.id in self._resources:
                raise CatalogError(f"Duplicate resource id: {resource.id}", VALIDATION_FAILED, entity_id=resource.id)
            self._resources[resource.id] = resource

    @property
    def subjects(self) -> List[Subject]:
        return list(self._subjects.values())

    @property
    def resources(self) -> List[Resource]:
        return list(self._resources.values())

    def get_subject(self, subject_id: str) -> Subject:
        """Look up a subject; raises CatalogError if unknown."""
        try:
            return self._subjects[subject_id]
        except KeyError:
            raise CatalogError(f"Subject not found: {subject_id}", NOT_FOUND, entity_id=subject_id) from None

    def get_resource(self, resource_id: str) -> Resource:
        """Look up a resource; raises CatalogError if unknown."""
        try:
            return self._resources[resource_id]
        except KeyError:
            raise CatalogError(f"Resource not found: {resource_id}", NOT_FOUND, entity_id=resource_id) from None

    def __len__(self) -> int:
        return len(self._subjects) + len(self._resources)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            'subjects': [s.to_dict() for s in self._subjects.values()],
            'resources': [r.to_dict() for r in self._resources.values()]
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'Catalog':
        """
        Build a catalog from ``{"subjects": [...], "resources": [...]}``.

        Raises:
            CatalogError: If any entry is malformed or an id is repeated
        """
        subjects = [_load_entry(Subject, entry, 'subjects', i) for i, entry in enumerate(data.get('subjects') or [])]
        resources = [_load_entry(Resource, entry, 'resources', i) for i, entry in enumerate(data.get('resources') or [])]

        catalog = cls(subjects, resources)
        logger.info("Loaded catalog with %d subjects and %d resources", len(subjects), len(resources))
        return catalog

    @classmethod
    def from_file(cls, file_path: str) -> 'Catalog':
        """Load a catalog from a JSON or YAML file."""
        try:
            data = load_config_file(file_path)
        except (OSError, ValueError) as e:
            raise CatalogError(f"Unable to read catalog file {file_path}", cause=e) from e
        return cls.from_dict(data)


def _load_entry(kind, entry: Any, section: str, index: int):
    if not isinstance(entry, Mapping):
        raise CatalogError(f"{section}[{index}] must be a mapping", VALIDATION_FAILED)
    try:
        return kind.from_dict(dict(entry))
    except ValidationError as e:
        raise CatalogError(
            f"Invalid entry {section}[{index}]: {e.message}",
            VALIDATION_FAILED,
            entity_id=str(entry.get('id')) if entry.get('id') is not None else None,
            details=dict(e.details),
            cause=e
        ) from e
